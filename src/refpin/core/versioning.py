"""Version ordering for tag names.

A tag's sort key is the sequence of integers found in it, read left to
right. Everything that is not a digit is skipped, so ``v1.10.0`` sorts
above ``v1.9.0`` and ``nightly`` (no digits) sorts below every numbered tag.
"""

from __future__ import annotations

import re

_DIGIT_RUN_RE = re.compile(r"[0-9]+")

VersionKey = tuple[int, ...]


def version_key(tag_name: str | None) -> VersionKey:
    """Return the integer value of every maximal digit run in ``tag_name``."""
    if not tag_name:
        return ()
    return tuple(int(run) for run in _DIGIT_RUN_RE.findall(tag_name))


__all__ = ["VersionKey", "version_key"]
