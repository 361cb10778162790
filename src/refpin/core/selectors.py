"""Strategies for turning a remote listing into one pinned value.

``RefSelector`` is a closed union of two frozen dataclasses. Each variant
declares the ref arguments its query needs and an ``extract`` that picks
the value from the listings returned for that query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .exceptions import AmbiguousRefError, NoResolvableRefError
from .listing import ReferenceListing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExplicitRef:
    """Pin to exactly one named ref (branch, tag or ``HEAD``)."""

    ref: str

    @property
    def ref_args(self) -> tuple[str, ...]:
        return (self.ref,)

    def extract(self, listings: Sequence[ReferenceListing]) -> str:
        if len(listings) != 1:
            raise AmbiguousRefError(self.ref, listings)
        return listings[0].immutable_value

    def __str__(self) -> str:
        return self.ref


@dataclass(frozen=True)
class LatestTagRef:
    """Pin to the tag with the highest version key, falling back to HEAD."""

    @property
    def ref_args(self) -> tuple[str, ...]:
        return ()

    def extract(self, listings: Sequence[ReferenceListing]) -> str:
        # Stable sort: among equal keys the one listed last wins.
        tagged = sorted(
            (item for item in listings if item.tag_name is not None),
            key=lambda item: item.version_key,
        )
        if tagged:
            return tagged[-1].tag_name

        logger.info("No tags found, falling back to HEAD")
        head = next((item for item in listings if item.is_head), None)
        if head is None:
            raise NoResolvableRefError("Remote listing has neither tags nor a HEAD entry")
        return head.immutable_value

    def __str__(self) -> str:
        return "latest"


RefSelector = Union[ExplicitRef, LatestTagRef]


__all__ = ["ExplicitRef", "LatestTagRef", "RefSelector"]
