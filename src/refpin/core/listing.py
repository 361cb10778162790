"""Parsed lines of ``git ls-remote`` output."""

from __future__ import annotations

from dataclasses import dataclass

from .versioning import VersionKey, version_key

TAG_PREFIX = "refs/tags/"
PEELED_SUFFIX = "^{}"
HEAD_REF = "HEAD"


@dataclass(frozen=True)
class ReferenceListing:
    """One ``<id>\\t<symbolic ref>`` pair reported by the remote."""

    id: str
    symbolic_ref: str

    @property
    def tag_name(self) -> str | None:
        if not self.symbolic_ref.startswith(TAG_PREFIX):
            return None
        name = self.symbolic_ref[len(TAG_PREFIX):]
        # Annotated tags are listed twice; the peeled line names the same tag.
        if name.endswith(PEELED_SUFFIX):
            name = name[: -len(PEELED_SUFFIX)]
        return name

    @property
    def is_head(self) -> bool:
        return self.symbolic_ref == HEAD_REF

    @property
    def version_key(self) -> VersionKey:
        return version_key(self.tag_name)

    @property
    def immutable_value(self) -> str:
        """Tag name when this is a tag, otherwise the content id."""
        tag = self.tag_name
        return tag if tag is not None else self.id


def parse_listing_line(line: str) -> ReferenceListing:
    """Split a listing line on its first tab.

    Lines without a tab produce an empty ``symbolic_ref`` so they never
    match as a tag or as HEAD.
    """
    ident, _, ref = line.strip().partition("\t")
    return ReferenceListing(id=ident.strip(), symbolic_ref=ref.strip())


def parse_listing_output(text: str) -> list[ReferenceListing]:
    return [parse_listing_line(line) for line in text.splitlines() if line.strip()]


__all__ = [
    "HEAD_REF",
    "TAG_PREFIX",
    "ReferenceListing",
    "parse_listing_line",
    "parse_listing_output",
]
