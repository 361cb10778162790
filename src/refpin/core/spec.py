"""Repository pin requests and their compute-once resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from .exceptions import SpecFormatError
from .remote import RemoteLister
from .selectors import ExplicitRef, LatestTagRef, RefSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unresolved:
    """Resolution has not been attempted yet."""


@dataclass(frozen=True)
class Resolved:
    value: str


ResolutionState = Union[Unresolved, Resolved]

UNRESOLVED = Unresolved()


@dataclass(eq=False)
class Spec:
    """A request to pin ``repository`` according to ``selector``.

    The resolved value is computed on first use and never changes after
    that. Each instance queries the remote at most once; two specs for the
    same repository resolve independently.
    """

    repository: str
    selector: RefSelector
    _state: ResolutionState = field(default=UNRESOLVED, init=False, repr=False)

    @property
    def is_resolved(self) -> bool:
        return isinstance(self._state, Resolved)

    @property
    def unresolved(self) -> bool:
        return not self.is_resolved

    def resolved(self, lister: RemoteLister) -> str:
        """Return the pinned value, querying ``lister`` on the first call only."""
        state = self._state
        if isinstance(state, Resolved):
            return state.value

        logger.info("Resolving %s", self)
        listings = lister.list_refs(self.repository, self.selector.ref_args)
        value = self.selector.extract(listings)
        self._state = Resolved(value)
        logger.info("Resolved %s => %s", self, value)
        return value

    def __str__(self) -> str:
        if isinstance(self.selector, ExplicitRef):
            return f"{self.repository}:{self.selector.ref}"
        return self.repository


def parse_spec(text: str) -> Spec:
    """Parse ``owner/repo`` or ``owner/repo:ref``.

    A missing or empty ref means "latest tag".
    """
    parts = text.split(":")
    if len(parts) not in (1, 2):
        raise SpecFormatError(f"Invalid spec '{text}': expected REPO or REPO:REF")

    repository = parts[0].strip()
    if not repository:
        raise SpecFormatError(f"Invalid spec '{text}': repository is empty")

    ref = parts[1].strip() if len(parts) == 2 else ""
    if not ref:
        return Spec(repository, LatestTagRef())
    return Spec(repository, ExplicitRef(ref))


__all__ = ["Spec", "Resolved", "Unresolved", "parse_spec"]
