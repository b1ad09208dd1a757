from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .events import PackageConfig
from .lib.env import LAYOUT

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    # composer.json and anything unknown.
    return "json"


def read_manifest(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        logger.info("Manifest %s not found; using defaults", path)
        return {}

    text = p.read_text(encoding="utf-8")
    if _detect_format(p) == "yaml":
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be an object/dict, got {type(data)}")
    return data


def load_manifest(path: str) -> PackageConfig:
    """Read `extra` and `config.vendor-dir` from a project manifest.

    A relative vendor-dir is taken relative to the manifest's directory.
    """

    data = read_manifest(path)

    extra = data.get("extra") or {}
    if not isinstance(extra, dict):
        raise ValueError("Manifest 'extra' section must be an object/dict")

    vendor_dir = Path(str((data.get("config") or {}).get("vendor-dir") or LAYOUT.vendor_default))
    if not vendor_dir.is_absolute():
        vendor_dir = Path(path).parent / vendor_dir

    return PackageConfig(vendor_dir=str(vendor_dir), extra=dict(extra))
