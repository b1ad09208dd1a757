from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .dispatch import DispatchResult, dispatch
from .events import POST_AUTOLOAD_DUMP, POST_CREATE_PROJECT_CMD, PackageConfig, ScriptEvent
from .logging_utils import configure_logging
from .manifest import load_manifest

logger = logging.getLogger(__name__)


DEFAULT_MANIFEST_PATH = "composer.json"


def run(
    event_name: str,
    *,
    manifest_path: str = DEFAULT_MANIFEST_PATH,
    vendor_dir: Optional[str] = None,
    package_root: Optional[str] = None,
    log_path: Optional[str] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> DispatchResult:
    """Run the hooks registered for `event_name` against the project manifest."""

    configure_logging(log_path=log_path, level=logging.DEBUG if verbose else logging.INFO)

    try:
        package = load_manifest(manifest_path)
        if vendor_dir:
            package = PackageConfig(vendor_dir=vendor_dir, extra=package.extra)

        event = ScriptEvent(
            name=event_name,
            package=package,
            package_root=Path(package_root) if package_root else None,
            dry_run=dry_run,
        )
        return dispatch(event)
    except Exception:
        logger.exception("Hook %s failed", event_name)
        raise


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="bolt-installer")
    p.add_argument("event", choices=[POST_AUTOLOAD_DUMP, POST_CREATE_PROJECT_CMD], help="Lifecycle event to run")
    p.add_argument("--manifest", default=DEFAULT_MANIFEST_PATH, help="Project manifest (json|yaml)")
    p.add_argument("--vendor-dir", default=None, help="Override config.vendor-dir from the manifest")
    p.add_argument("--package-root", default=None, help="Directory holding app/view, files and theme (default: <vendor-dir>/bolt/bolt)")
    p.add_argument("--log", default=None, help="Also log to this file")
    p.add_argument("--dry-run", action="store_true", help="Log mirror actions without copying")
    p.add_argument("--verbose", action="store_true", help="Debug logging")

    args = p.parse_args(argv)

    run(
        args.event,
        manifest_path=args.manifest,
        vendor_dir=args.vendor_dir,
        package_root=args.package_root,
        log_path=args.log,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
