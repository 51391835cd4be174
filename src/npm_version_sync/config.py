"""Configuration for a version sync run."""

import pathlib
from dataclasses import dataclass
from typing import List, Tuple

DEFAULT_SOURCE = "Cargo.toml"

# Umbrella package first, then one package per platform binary.
DEFAULT_TARGETS: Tuple[str, ...] = (
    "npm/cli/package.json",
    "npm/cli-darwin-arm64/package.json",
    "npm/cli-darwin-x64/package.json",
    "npm/cli-linux-x64/package.json",
    "npm/cli-linux-arm64/package.json",
    "npm/cli-win32-x64/package.json",
)


@dataclass
class SyncConfig:
    """Where to read the version from and which manifests to stamp."""

    root: pathlib.Path
    source: str = DEFAULT_SOURCE
    targets: Tuple[str, ...] = DEFAULT_TARGETS
    check: bool = False
    confirm: bool = False
    verbose: bool = False

    def __post_init__(self):
        self.root = pathlib.Path(self.root)
        self.targets = tuple(self.targets)

    @property
    def source_path(self) -> pathlib.Path:
        return self.root / self.source

    @property
    def target_paths(self) -> List[pathlib.Path]:
        """Target manifests resolved against the root, in order."""
        return [self.root / target for target in self.targets]


def script_root(script: pathlib.Path) -> pathlib.Path:
    """Return the repository root for an entry script under ``npm/scripts/``."""
    return pathlib.Path(script).resolve().parent.parent.parent
