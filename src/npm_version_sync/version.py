"""Read the canonical version from the root Cargo.toml.

Only a single line of the form ``version = "X.Y.Z"`` is recognised. The key
must start the line and the value must be double-quoted; whitespace around
``=`` is optional. The first matching line wins, which for a Cargo manifest is
the ``[package]`` version. The value is returned verbatim, with no semver
validation.
"""

import logging
import pathlib
import re
from typing import Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r'^version\s*=\s*"([^"]+)"', re.MULTILINE)


def find_version(text: str) -> Optional[str]:
    """Return the first line-anchored version value in ``text``, or None."""
    match = VERSION_PATTERN.search(text)
    if match is None:
        return None
    return match.group(1)


def read_canonical_version(path: pathlib.Path) -> str:
    """Read ``path`` and return its version.

    Raises:
        ConfigurationError: if no version line is present.
    """
    path = pathlib.Path(path)
    logger.debug(f"Reading canonical version from {path}")
    version = find_version(path.read_text(encoding="utf-8"))
    if version is None:
        raise ConfigurationError(f"Could not find version in {path.name}")
    logger.debug(f"Found version {version} in {path}")
    return version
