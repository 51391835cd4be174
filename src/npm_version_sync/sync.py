"""Propagate the canonical version to every target manifest."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import click

from .config import SyncConfig
from .manifest import manifest_is_current, sync_manifest
from .version import read_canonical_version

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


@dataclass
class SyncResult:
    """Outcome of a sync or check run."""

    version: str
    updated: List[str] = field(default_factory=list)
    stale: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.stale


def sync_versions(
    config: SyncConfig,
    echo: Echo = click.echo,
    version: Optional[str] = None,
) -> SyncResult:
    """
    Stamp the canonical version into each target manifest, in order.

    The version is read before any target is opened, so a missing version
    leaves every manifest untouched. Targets are processed one at a time and
    the first failure stops the run; manifests already written stay written.

    Args:
        config: Root, source and target list for the run
        echo: Sink for progress lines
        version: Use this version instead of reading the source manifest

    Returns:
        SyncResult listing the updated targets

    Raises:
        ConfigurationError: if the source manifest has no version line
        ManifestParseError: if a target is not valid JSON
    """
    if version is None:
        version = read_canonical_version(config.source_path)
    echo(f"Syncing npm packages to version {version}")

    result = SyncResult(version=version)
    for target, path in zip(config.targets, config.target_paths):
        sync_manifest(path, version)
        result.updated.append(target)
        echo(f"  Updated {target}")

    logger.info(f"Synced {len(result.updated)} manifests to {version}")
    echo("Done.")
    return result


def check_versions(config: SyncConfig, echo: Echo = click.echo) -> SyncResult:
    """Report which targets are out of date without writing anything."""
    version = read_canonical_version(config.source_path)
    echo(f"Checking npm packages against version {version}")

    result = SyncResult(version=version)
    for target, path in zip(config.targets, config.target_paths):
        if manifest_is_current(path, version):
            echo(f"  OK {target}")
        else:
            result.stale.append(target)
            echo(f"  Out of date {target}")

    if result.ok:
        echo("All packages in sync.")
    else:
        echo(f"{len(result.stale)} package(s) out of date.")
    return result
