"""Keep npm package manifests in step with the version in Cargo.toml."""

from .config import DEFAULT_SOURCE, DEFAULT_TARGETS, SyncConfig
from .errors import ConfigurationError, ManifestParseError, SyncError
from .manifest import (
    apply_version,
    load_manifest,
    manifest_is_current,
    render_manifest,
    sync_manifest,
)
from .sync import SyncResult, check_versions, sync_versions
from .version import VERSION_PATTERN, find_version, read_canonical_version

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DEFAULT_SOURCE",
    "DEFAULT_TARGETS",
    "SyncConfig",
    # Errors
    "ConfigurationError",
    "ManifestParseError",
    "SyncError",
    # Canonical version
    "VERSION_PATTERN",
    "find_version",
    "read_canonical_version",
    # Target manifests
    "apply_version",
    "load_manifest",
    "manifest_is_current",
    "render_manifest",
    "sync_manifest",
    # Orchestration
    "SyncResult",
    "check_versions",
    "sync_versions",
]
