"""Tests for guessing specs from file content."""

from __future__ import annotations

import logging

from refpin.core.guesser import guess_specs, looks_like_commit
from refpin.core.selectors import ExplicitRef, LatestTagRef

PINNED = "0123456789abcdef0123456789abcdef01234567"


def test_tagged_url_guesses_latest_tag() -> None:
    text = 'import x from "https://raw.githubusercontent.com/owner/repo/v1.0.0/mod.ts";\n'

    specs = guess_specs(text)

    assert [(spec.repository, spec.selector) for spec in specs] == [("owner/repo", LatestTagRef())]


def test_commit_url_guesses_head() -> None:
    text = f"https://raw.githubusercontent.com/owner/repo/{PINNED}/mod.ts\n"

    specs = guess_specs(text)

    assert [(spec.repository, spec.selector) for spec in specs] == [("owner/repo", ExplicitRef("HEAD"))]


def test_commit_check_is_loose() -> None:
    assert looks_like_commit("z" * 32)
    assert looks_like_commit(PINNED + "-suffix")
    assert not looks_like_commit("a" * 31)
    assert not looks_like_commit("v1.2.3")


def test_duplicates_are_kept_in_order() -> None:
    text = (
        "https://raw.githubusercontent.com/owner/repo/v1/a.ts\n"
        "https://raw.githubusercontent.com/other/lib/main/b.ts\n"
        "https://raw.githubusercontent.com/owner/repo/v1/c.ts\n"
    )

    specs = guess_specs(text)

    assert [spec.repository for spec in specs] == ["owner/repo", "other/lib", "owner/repo"]
    assert specs[0] is not specs[2]


def test_unrelated_urls_are_ignored() -> None:
    text = "https://github.com/owner/repo/blob/main/README.md\nhttps://deno.land/x/mod@1.0/mod.ts\n"

    assert guess_specs(text) == []


def test_custom_prefixes() -> None:
    text = "https://cdn.example.com/gh/owner/repo/v2/mod.ts\n"

    specs = guess_specs(text, prefixes=["https://cdn.example.com/gh/"])

    assert [spec.repository for spec in specs] == ["owner/repo"]


def test_empty_prefixes_guess_nothing() -> None:
    assert guess_specs("https://raw.githubusercontent.com/o/r/v1/x", prefixes=[]) == []


def test_guessed_specs_are_logged(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="refpin"):
        guess_specs("https://raw.githubusercontent.com/owner/repo/v1/mod.ts")

    assert "Guessed specs: owner/repo" in caplog.text
