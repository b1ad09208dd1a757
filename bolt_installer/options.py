from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from .lib.env import LAYOUT

if TYPE_CHECKING:
    from .events import ScriptEvent

logger = logging.getLogger(__name__)


def env_var_name(key: str) -> str:
    """`bolt-dir-mode` -> `BOLT_DIR_MODE`."""
    return key.replace("-", "_").upper()


def get_option(event: "ScriptEvent", key: str, default: Any = None) -> Any:
    """Get an option from the environment or the manifest's extra section.

    With key "dir-mode" this checks the BOLT_DIR_MODE environment variable,
    then "bolt-dir-mode" in the extra section, then returns `default`.
    """

    key = LAYOUT.option_prefix + key

    value = os.environ.get(env_var_name(key))
    if value:
        logger.debug("Option %s from environment (%s)", key, env_var_name(key))
        return value

    extra = event.package.extra or {}
    if key in extra:
        logger.debug("Option %s from extra section", key)
        return extra[key]
    return default


def configure_dir_mode(event: "ScriptEvent") -> int:
    """Resolve the directory creation mode; strings are read as octal."""

    mode = get_option(event, "dir-mode", LAYOUT.dir_mode_default)
    if isinstance(mode, str):
        mode = int(mode, 8)
    mode = int(mode)
    logger.info("Directory mode %o (umask %03o)", mode, umask_for(mode))
    return mode


def umask_for(mode: int) -> int:
    return LAYOUT.dir_mode_default - mode
