import json
import pathlib

import pytest

from npm_version_sync import DEFAULT_TARGETS

PLATFORMS = [
    ("darwin-arm64", "darwin", "arm64"),
    ("darwin-x64", "darwin", "x64"),
    ("linux-x64", "linux", "x64"),
    ("linux-arm64", "linux", "arm64"),
    ("win32-x64", "win32", "x64"),
]

CARGO_TOML = """\
[package]
name = "ratchet"
version = "{version}"
edition = "2021"

[dependencies]
serde = {{ version = "1", features = ["derive"] }}
"""


def write_json(path: pathlib.Path, data) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n")
    return path


def snapshot(root: pathlib.Path) -> dict:
    """Bytes of every target manifest under ``root``."""
    return {target: (root / target).read_bytes() for target in DEFAULT_TARGETS}


@pytest.fixture
def repo(tmp_path):
    """A repository laid out like the npm distribution of a Rust CLI."""
    (tmp_path / "Cargo.toml").write_text(CARGO_TOML.format(version="1.2.3"))

    write_json(
        tmp_path / "npm" / "cli" / "package.json",
        {
            "name": "@ratchet/cli",
            "version": "0.0.1",
            "bin": {"ratchet": "bin/ratchet"},
            "optionalDependencies": {
                f"@ratchet/cli-{suffix}": "0.0.1" for suffix, _, _ in PLATFORMS
            },
        },
    )
    for suffix, os_name, cpu in PLATFORMS:
        write_json(
            tmp_path / "npm" / f"cli-{suffix}" / "package.json",
            {
                "name": f"@ratchet/cli-{suffix}",
                "version": "0.0.1",
                "os": [os_name],
                "cpu": [cpu],
            },
        )
    return tmp_path


@pytest.fixture
def target_bytes():
    return snapshot
