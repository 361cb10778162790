from __future__ import annotations

from typing import Callable, Sequence

import pytest

from refpin.core.listing import ReferenceListing, parse_listing_output

SHA_A = "a" * 40
SHA_B = "b" * 40
SHA_C = "c" * 40
SHA_HEAD = "f" * 40


class FakeLister:
    """In-memory RemoteLister that records every query."""

    def __init__(self, responses: dict[tuple[str, tuple[str, ...]], str]):
        self.responses = responses
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def list_refs(self, repository: str, ref_args: Sequence[str]) -> list[ReferenceListing]:
        key = (repository, tuple(ref_args))
        self.calls.append(key)
        return parse_listing_output(self.responses.get(key, ""))


@pytest.fixture()
def make_lister() -> Callable[..., FakeLister]:
    def _make(responses: dict[tuple[str, tuple[str, ...]], str] | None = None) -> FakeLister:
        return FakeLister(responses or {})

    return _make


@pytest.fixture()
def tagged_listing() -> str:
    return (
        f"{SHA_HEAD}\tHEAD\n"
        f"{SHA_HEAD}\trefs/heads/main\n"
        f"{SHA_A}\trefs/tags/v1.0.0\n"
        f"{SHA_B}\trefs/tags/v1.2.0\n"
    )
