"""Target directory resolution.

Paths come from the live application when it can be bootstrapped, and from
environment variables / the manifest's extra section otherwise (for example
at project creation, before the application is configured).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .app_loader import LowlevelError, get_app
from .lib.env import LAYOUT
from .options import env_var_name, get_option

if TYPE_CHECKING:
    from .events import ScriptEvent

logger = logging.getLogger(__name__)


class MissingDirectoryError(RuntimeError):
    pass


@dataclass(frozen=True)
class Found:
    path: str


@dataclass(frozen=True)
class Unavailable:
    reason: str


PathLookup = Union[Found, Unavailable]


def lookup_app_path(event: "ScriptEvent", name: str) -> PathLookup:
    """Ask the application for resource path `name`.

    Only LowlevelError maps to Unavailable; anything else propagates.
    """

    try:
        app = get_app(event)
        path = app.resources.get_path(name)
    except LowlevelError as e:
        logger.debug("Application lookup for %r unavailable: %s", name, e)
        return Unavailable(reason=str(e))
    return Found(path=str(path))


def get_dir(event: "ScriptEvent", name: str, default: Optional[str] = None) -> Optional[str]:
    lookup = lookup_app_path(event, name)
    if isinstance(lookup, Found):
        logger.debug("Directory %r from application: %s", name, lookup.path)
        value = lookup.path
    else:
        value = get_option(event, f"{name}-dir", default)

    if value is None:
        return None
    return str(value).rstrip("/")


def require_dir(event: "ScriptEvent", name: str) -> str:
    target = get_dir(event, name)
    if not target:
        key = f"{LAYOUT.option_prefix}{name}-dir"
        raise MissingDirectoryError(
            f"No {name} directory configured: set {env_var_name(key)} or extra.{key}"
        )
    return target


def get_web_dir(event: "ScriptEvent") -> Optional[str]:
    """Resolve the web root; None (with a warning line) when it does not exist."""

    web_dir = get_dir(event, "web", LAYOUT.web_default)

    if web_dir is None or not os.path.isdir(web_dir):
        event.io.write(
            f"The web directory ({web_dir}) was not found in {os.getcwd()}, can not install assets."
        )
        logger.warning("Web directory %s not found", web_dir)
        return None

    return web_dir
