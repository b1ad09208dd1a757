from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .app_loader import ApplicationLoader
from .lib.env import LAYOUT

POST_AUTOLOAD_DUMP = "post-autoload-dump"
POST_CREATE_PROJECT_CMD = "post-create-project-cmd"


class EventIO:
    """Line-oriented output for hook status messages.

    Streams default to the current sys.stdout / sys.stderr at write time.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err

    def write(self, message: str) -> None:
        stream = self._out or sys.stdout
        stream.write(message + "\n")
        stream.flush()

    def write_error(self, message: str) -> None:
        stream = self._err or sys.stderr
        stream.write(message + "\n")
        stream.flush()


@dataclass(frozen=True)
class PackageConfig:
    vendor_dir: str = LAYOUT.vendor_default
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ScriptEvent:
    """Context handed to every hook.

    `app` may carry an already resolved application handle; otherwise one is
    loaded lazily through `app_loader` and reused for the life of the event.
    """

    name: str
    package: PackageConfig = field(default_factory=PackageConfig)
    io: EventIO = field(default_factory=EventIO)
    package_root: Optional[Path] = None
    app: Any = None
    dry_run: bool = False
    app_loader: ApplicationLoader = field(default_factory=ApplicationLoader, repr=False)

    @property
    def source_root(self) -> Path:
        """Directory holding app/view, files and theme; the installed Bolt package by default."""
        if self.package_root is not None:
            return Path(self.package_root)
        return Path(self.package.vendor_dir) / LAYOUT.package_dir
