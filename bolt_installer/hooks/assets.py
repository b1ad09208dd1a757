from __future__ import annotations

import logging
from pathlib import Path

from ..directories import get_web_dir
from ..events import POST_AUTOLOAD_DUMP, ScriptEvent
from ..lib.assets import mirror
from ..lib.env import LAYOUT

logger = logging.getLogger(__name__)


def install_assets(event: ScriptEvent) -> None:
    """Install Bolt's assets into <web>/bolt-public/view."""

    web_dir = get_web_dir(event)
    if web_dir is None:
        return

    origin_dir = event.source_root / LAYOUT.asset_origin
    target_dir = Path(web_dir) / LAYOUT.asset_target

    event.io.write_error(f"Installing assets to {target_dir}")
    for name in LAYOUT.asset_dirs:
        mirror(
            origin_dir / name,
            target_dir / name,
            override=True,
            delete=True,
            dry_run=event.dry_run,
        )

    logger.info("Assets installed to %s", target_dir)


class InstallAssetsHook:
    hook_id = "install_assets"
    event_name = POST_AUTOLOAD_DUMP

    def run(self, event: ScriptEvent) -> None:
        install_assets(event)
