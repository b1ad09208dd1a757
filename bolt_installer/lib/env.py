from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Layout:
    # Bundled trees, relative to the package root.
    asset_origin: str = "app/view"
    files_origin: str = "files"
    theme_origin: str = "theme"
    asset_dirs: Tuple[str, ...] = ("css", "fonts", "img", "js")

    # Installed trees, relative to the web root.
    asset_target: str = "bolt-public/view"

    web_default: str = "public"
    vendor_default: str = "vendor"
    package_dir: str = "bolt/bolt"
    bootstrap: str = "bolt/bolt/app/bootstrap.py"

    option_prefix: str = "bolt-"
    dir_mode_default: int = 0o777


LAYOUT = Layout()
