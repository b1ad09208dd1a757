"""Tests for application bootstrapping."""

from __future__ import annotations

from pathlib import Path

import pytest

from bolt_installer.app_loader import ApplicationLoader, LowlevelError, bootstrap_path, get_app, load_application


def _write_bootstrap(vendor: Path, body: str) -> Path:
    path = bootstrap_path(vendor)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


BOOTSTRAP = """\
import builtins

builtins.bolt_bootstrap_count = getattr(builtins, "bolt_bootstrap_count", 0) + 1


class Resources:
    def get_path(self, name):
        return "/srv/app/" + name


class App:
    resources = Resources()


app = App()
"""


@pytest.fixture
def bootstrap_counter():
    import builtins

    builtins.bolt_bootstrap_count = 0
    yield builtins
    del builtins.bolt_bootstrap_count


def test_bootstrap_path(tmp_path: Path) -> None:
    assert bootstrap_path(tmp_path) == tmp_path / "bolt" / "bolt" / "app" / "bootstrap.py"


def test_load_application_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LowlevelError, match="not found"):
        load_application(tmp_path)


def test_load_application_without_app(tmp_path: Path) -> None:
    _write_bootstrap(tmp_path, "value = 1\n")

    with pytest.raises(LowlevelError, match="did not define"):
        load_application(tmp_path)


def test_load_application_syntax_error_propagates(tmp_path: Path) -> None:
    _write_bootstrap(tmp_path, "app = (\n")

    with pytest.raises(SyntaxError):
        load_application(tmp_path)


def test_get_app_evaluates_bootstrap_once(make_event, tmp_path: Path, bootstrap_counter) -> None:
    vendor = tmp_path / "vendor"
    _write_bootstrap(vendor, BOOTSTRAP)
    event = make_event(vendor_dir=vendor)

    first = get_app(event)
    second = get_app(event)

    assert first is second
    assert bootstrap_counter.bolt_bootstrap_count == 1
    assert first.resources.get_path("web") == "/srv/app/web"


def test_get_app_returns_injected_handle(make_event) -> None:
    handle = object()
    event = make_event(app=handle)

    assert get_app(event) is handle
    assert event.app_loader.attempts == 0


def test_loader_remembers_failure(tmp_path: Path) -> None:
    calls = []

    def load(vendor_dir):
        calls.append(vendor_dir)
        raise LowlevelError("boom")

    loader = ApplicationLoader(load=load)
    for _ in range(2):
        with pytest.raises(LowlevelError):
            loader.get(tmp_path)

    assert calls == [tmp_path]
    assert loader.attempts == 1
