from __future__ import annotations

import logging
import runpy
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional

from .lib.env import LAYOUT

if TYPE_CHECKING:
    from .events import ScriptEvent

logger = logging.getLogger(__name__)


class LowlevelError(RuntimeError):
    """The application could not be bootstrapped, or does not know a resource."""


def bootstrap_path(vendor_dir: str | Path) -> Path:
    return Path(vendor_dir) / LAYOUT.bootstrap


def load_application(vendor_dir: str | Path) -> Any:
    """Evaluate the bootstrap file and return the `app` it defines.

    The bootstrap file is generated by the autoload step, so this only works
    once the vendor tree has been dumped.
    """

    path = bootstrap_path(vendor_dir)
    if not path.is_file():
        raise LowlevelError(f"Bootstrap file not found: {path}")

    logger.info("Bootstrapping application from %s", path)
    namespace = runpy.run_path(str(path), run_name="bolt_bootstrap")

    app = namespace.get("app")
    if app is None:
        raise LowlevelError(f"Bootstrap file did not define an application: {path}")
    return app


class ApplicationLoader:
    """Loads the application at most once.

    A failed attempt is remembered and re-raised; the bootstrap file is never
    evaluated twice.
    """

    def __init__(self, load: Callable[[str | Path], Any] = load_application) -> None:
        self._load = load
        self._app: Any = None
        self._error: Optional[LowlevelError] = None
        self.attempts = 0

    def get(self, vendor_dir: str | Path) -> Any:
        if self._app is not None:
            return self._app
        if self._error is not None:
            raise self._error

        self.attempts += 1
        try:
            self._app = self._load(vendor_dir)
        except LowlevelError as e:
            self._error = e
            raise
        return self._app


def get_app(event: "ScriptEvent") -> Any:
    if event.app is not None:
        return event.app
    return event.app_loader.get(event.package.vendor_dir)
