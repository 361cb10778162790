"""Guess pin specs from the URLs already present in a file."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .constants import DEFAULT_GUESS_PREFIXES
from .selectors import ExplicitRef, LatestTagRef
from .spec import Spec

logger = logging.getLogger(__name__)

# Loose on purpose: 32+ alphanumerics at the start of the ref segment.
_PINNED_COMMIT_RE = re.compile(r"^[0-9A-Za-z]{32}")


def _reference_pattern(prefixes: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(prefix) for prefix in prefixes)
    return re.compile(rf"(?:{alternatives})(?P<repo>[^/\s]+/[^/\s]+)/(?P<ref>[^/\s]+)/")


def looks_like_commit(ref: str) -> bool:
    return _PINNED_COMMIT_RE.match(ref) is not None


def guess_specs(text: str, prefixes: Iterable[str] = DEFAULT_GUESS_PREFIXES) -> list[Spec]:
    """Build one spec per repository URL found in ``text``.

    A ref that looks like a commit id is re-pinned against the current
    ``HEAD``; anything else follows the latest tag. Duplicates are kept.
    """
    prefixes = tuple(prefixes)
    if not prefixes:
        return []

    specs: list[Spec] = []
    for match in _reference_pattern(prefixes).finditer(text):
        repository = match.group("repo")
        if looks_like_commit(match.group("ref")):
            specs.append(Spec(repository, ExplicitRef("HEAD")))
        else:
            specs.append(Spec(repository, LatestTagRef()))

    if specs:
        logger.info("Guessed specs: %s", ", ".join(str(spec) for spec in specs))
    return specs


__all__ = ["guess_specs", "looks_like_commit"]
