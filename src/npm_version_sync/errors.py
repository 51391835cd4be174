"""Errors raised while syncing versions."""

import pathlib
from typing import Union


class SyncError(Exception):
    """Base class for version sync failures."""


class ConfigurationError(SyncError):
    """The canonical version could not be found in the root manifest."""


class ManifestParseError(SyncError, ValueError):
    """A target manifest is not valid JSON."""

    def __init__(self, path: Union[str, pathlib.Path], reason: str):
        self.path = pathlib.Path(path)
        self.reason = reason
        super().__init__(f"Could not parse {self.path}: {reason}")
