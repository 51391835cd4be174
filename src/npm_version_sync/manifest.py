"""Load, update and write npm package manifests."""

import json
import logging
import pathlib
from typing import Any, Dict

from .errors import ManifestParseError

logger = logging.getLogger(__name__)

OPTIONAL_DEPENDENCIES = "optionalDependencies"


def _parse(path: pathlib.Path, text: str) -> Dict[str, Any]:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(path, str(e)) from e


def load_manifest(path: pathlib.Path) -> Dict[str, Any]:
    """Parse a package.json file."""
    path = pathlib.Path(path)
    return _parse(path, path.read_text(encoding="utf-8"))


def apply_version(record: Dict[str, Any], version: str) -> Dict[str, Any]:
    """Stamp ``version`` into a manifest record in place.

    The top-level ``version`` is always set. If the record has an
    ``optionalDependencies`` mapping, every pin in it is forced to ``version``;
    its keys are left alone. Returns the same record.
    """
    record["version"] = version

    optional = record.get(OPTIONAL_DEPENDENCIES)
    if isinstance(optional, dict):
        for name in optional:
            optional[name] = version

    return record


def render_manifest(record: Dict[str, Any]) -> str:
    """Serialize a record with two-space indentation and a trailing newline.

    Non-ASCII text is written as-is rather than as ``\\uXXXX`` escapes.
    """
    return json.dumps(record, indent=2, ensure_ascii=False) + "\n"


def sync_manifest(path: pathlib.Path, version: str) -> None:
    """Rewrite the manifest at ``path`` so it carries ``version``."""
    path = pathlib.Path(path)
    record = apply_version(load_manifest(path), version)
    path.write_text(render_manifest(record), encoding="utf-8")
    logger.debug(f"Wrote {path}")


def manifest_is_current(path: pathlib.Path, version: str) -> bool:
    """Check whether syncing ``path`` would leave its bytes unchanged."""
    path = pathlib.Path(path)
    current = path.read_text(encoding="utf-8")
    record = _parse(path, current)
    return render_manifest(apply_version(record, version)) == current
