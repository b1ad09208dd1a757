from __future__ import annotations

import logging

from ..directories import get_web_dir, require_dir
from ..events import POST_CREATE_PROJECT_CMD, ScriptEvent
from ..lib.assets import mirror
from ..lib.env import LAYOUT
from ..options import configure_dir_mode

logger = logging.getLogger(__name__)


def install_themes_and_files(event: ScriptEvent) -> None:
    """Install Bolt's default themes and files."""

    dir_mode = configure_dir_mode(event)

    web_dir = get_web_dir(event)
    if web_dir is None:
        return

    root = event.source_root

    target = require_dir(event, "files")
    event.io.write_error(f"Installing files to {target}")
    mirror(root / LAYOUT.files_origin, target, override=True, dir_mode=dir_mode, dry_run=event.dry_run)

    # No default: a missing theme base is a configuration error.
    target = require_dir(event, "themebase")
    event.io.write_error(f"Installing themes to {target}")
    mirror(root / LAYOUT.theme_origin, target, override=True, dir_mode=dir_mode, dry_run=event.dry_run)

    logger.info("Files and themes installed (mode %o)", dir_mode)


class InstallThemesAndFilesHook:
    hook_id = "install_themes_and_files"
    event_name = POST_CREATE_PROJECT_CMD

    def run(self, event: ScriptEvent) -> None:
        install_themes_and_files(event)
