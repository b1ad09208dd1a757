from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def make_dir(path: str | Path, mode: Optional[int] = None) -> None:
    """Create `path` and any missing parents, with exactly `mode` when given.

    os.mkdir() masks its mode with the process umask; the explicit chmod keeps
    the requested mode regardless of it.
    """

    p = Path(path)
    if p.is_dir():
        return
    if p.parent != p:
        make_dir(p.parent, mode)
    p.mkdir()
    if mode is not None:
        os.chmod(p, mode)


def file_mode_for(dir_mode: int, src_mode: int) -> int:
    """Mode of a copied file when directories are created with `dir_mode`.

    Same as creating the file under umask `0o777 - dir_mode`, keeping the
    source's exec bits.
    """
    return (0o666 & dir_mode) | (src_mode & 0o111)


def _remove(p: Path) -> None:
    if p.is_dir() and not p.is_symlink():
        shutil.rmtree(p)
    else:
        p.unlink()


def _delete_orphans(s: Path, d: Path) -> int:
    removed = 0
    for root, dirs, files in os.walk(d):
        rel = Path(root).relative_to(d)
        for name in list(dirs):
            if not (s / rel / name).is_dir():
                logger.debug("Removing %s", Path(root) / name)
                _remove(Path(root) / name)
                dirs.remove(name)
                removed += 1
        for name in files:
            if not (s / rel / name).is_file():
                logger.debug("Removing %s", Path(root) / name)
                _remove(Path(root) / name)
                removed += 1
    return removed


def _should_copy(src: Path, dst: Path, override: bool) -> bool:
    if override or not dst.exists():
        return True
    return src.stat().st_mtime > dst.stat().st_mtime


def mirror(
    src: str | Path,
    dst: str | Path,
    *,
    override: bool = False,
    delete: bool = False,
    dir_mode: Optional[int] = None,
    dry_run: bool = False,
) -> int:
    """Mirror the tree at `src` onto `dst`.

    - override: copy every file, even when the target is newer.
    - delete: remove target entries that are not present in the source.
    - dir_mode: permissions of directories created under `dst`, and the mask
      for copied files (umask and source modes when None).
    - dry_run logs but does not touch the filesystem.

    Returns the number of files copied.
    """

    s = Path(src)
    d = Path(dst)
    if not s.is_dir():
        raise FileNotFoundError(str(src))

    if dry_run:
        logger.info(
            "Would mirror %s -> %s (override=%s, delete=%s, mode=%s)",
            str(s),
            str(d),
            override,
            delete,
            "umask" if dir_mode is None else oct(dir_mode),
        )
        return 0

    if delete and d.is_dir():
        removed = _delete_orphans(s, d)
        if removed:
            logger.info("Removed %d stale entries from %s", removed, str(d))

    make_dir(d, dir_mode)
    copied = 0
    for item in sorted(s.rglob("*")):
        out = d / item.relative_to(s)
        if item.is_dir():
            make_dir(out, dir_mode)
        else:
            make_dir(out.parent, dir_mode)
            if _should_copy(item, out, override):
                shutil.copy2(item, out)
                if dir_mode is not None:
                    os.chmod(out, file_mode_for(dir_mode, item.stat().st_mode))
                copied += 1

    logger.info("Mirrored %s -> %s (%d files copied)", str(s), str(d), copied)
    return copied
