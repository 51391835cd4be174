#!/usr/bin/env python3
"""Read the version from Cargo.toml and update all npm package.json files to match."""

import pathlib

from npm_version_sync.cli import entrypoint
from npm_version_sync.config import script_root

if __name__ == "__main__":
    entrypoint(script_root(pathlib.Path(__file__)))
