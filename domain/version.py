"""Version parsing for prerequisite gates."""
from __future__ import annotations

import re
from typing import Optional, Tuple

_VERSION_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")

Version = Tuple[int, int, int]


def parse_version(text: str) -> Optional[Version]:
    """
    Extract the first dotted version from free-form tool output.

    "v20.11.1" -> (20, 11, 1)
    "Docker version 24.0.7, build afdd53b" -> (24, 0, 7)
    "git version 2.43" -> (2, 43, 0)
    """
    if not text:
        return None
    m = _VERSION_RE.search(text)
    if m is None:
        return None
    major, minor, patch = m.group(1), m.group(2), m.group(3) or "0"
    return int(major), int(minor), int(patch)


def format_version(version: Version) -> str:
    return ".".join(str(part) for part in version)


def meets_minimum(detected: str, minimum: str) -> bool:
    found = parse_version(detected)
    required = parse_version(minimum)
    if required is None:
        raise ValueError(f"Invalid minimum version: {minimum}")
    if found is None:
        return False
    return found >= required
