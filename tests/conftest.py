from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict, Optional

import pytest

from bolt_installer.app_loader import LowlevelError
from bolt_installer.events import EventIO, PackageConfig, ScriptEvent


class FakeResources:
    def __init__(self, paths: Dict[str, str]) -> None:
        self.paths = paths
        self.calls: list[str] = []

    def get_path(self, name: str) -> str:
        self.calls.append(name)
        if name not in self.paths:
            raise LowlevelError(f"Unknown path {name}")
        return self.paths[name]


class FakeApp:
    def __init__(self, paths: Dict[str, str]) -> None:
        self.resources = FakeResources(paths)


@pytest.fixture(autouse=True)
def _clean_bolt_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BOLT_WEB_DIR", "BOLT_FILES_DIR", "BOLT_THEMEBASE_DIR", "BOLT_DIR_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_root(tmp_path: Path) -> Path:
    """A bundled tree with assets, files and a theme."""
    root = tmp_path / "package"
    for name in ("css", "fonts", "img", "js"):
        d = root / "app" / "view" / name
        d.mkdir(parents=True)
        (d / f"bolt.{name}").write_text(name, encoding="utf-8")
    (root / "files" / "nested").mkdir(parents=True)
    (root / "files" / "index.html").write_text("files", encoding="utf-8")
    (root / "files" / "nested" / "a.txt").write_text("a", encoding="utf-8")
    (root / "theme" / "base-2016").mkdir(parents=True)
    (root / "theme" / "base-2016" / "theme.yml").write_text("name: base", encoding="utf-8")
    return root


@pytest.fixture
def make_event(tmp_path: Path, package_root: Path):
    """Build a ScriptEvent with captured output and no vendor tree."""

    def _make(
        name: str = "post-autoload-dump",
        extra: Optional[Dict[str, Any]] = None,
        app: Any = None,
        vendor_dir: Optional[Path] = None,
        dry_run: bool = False,
    ) -> ScriptEvent:
        out, err = io.StringIO(), io.StringIO()
        event = ScriptEvent(
            name=name,
            package=PackageConfig(vendor_dir=str(vendor_dir or tmp_path / "vendor"), extra=extra or {}),
            io=EventIO(out=out, err=err),
            package_root=package_root,
            app=app,
            dry_run=dry_run,
        )
        event.out = out  # type: ignore[attr-defined]
        event.err = err  # type: ignore[attr-defined]
        return event

    return _make
