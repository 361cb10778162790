"""Tests for parsing ls-remote lines into listings."""

from __future__ import annotations

from refpin.core.listing import ReferenceListing, parse_listing_line, parse_listing_output

SHA = "0123456789abcdef0123456789abcdef01234567"


def test_parse_tag_line() -> None:
    listing = parse_listing_line(f"{SHA}\trefs/tags/v1.2.3\n")

    assert listing == ReferenceListing(id=SHA, symbolic_ref="refs/tags/v1.2.3")
    assert listing.tag_name == "v1.2.3"
    assert listing.version_key == (1, 2, 3)
    assert listing.immutable_value == "v1.2.3"


def test_branch_line_has_no_tag_and_pins_to_id() -> None:
    listing = parse_listing_line(f"{SHA}\trefs/heads/main")

    assert listing.tag_name is None
    assert listing.version_key == ()
    assert listing.immutable_value == SHA


def test_head_line() -> None:
    listing = parse_listing_line(f"{SHA}\tHEAD")

    assert listing.is_head
    assert listing.immutable_value == SHA


def test_line_without_tab_matches_nothing() -> None:
    listing = parse_listing_line("garbage-without-tab")

    assert listing.id == "garbage-without-tab"
    assert listing.symbolic_ref == ""
    assert listing.tag_name is None
    assert not listing.is_head


def test_peeled_tag_names_the_same_tag() -> None:
    listing = parse_listing_line(f"{SHA}\trefs/tags/v2.0.0^{{}}")

    assert listing.tag_name == "v2.0.0"
    assert listing.immutable_value == "v2.0.0"


def test_parse_output_skips_blank_lines() -> None:
    text = f"{SHA}\tHEAD\n\n{SHA}\trefs/tags/v1\n   \n"

    listings = parse_listing_output(text)

    assert [item.symbolic_ref for item in listings] == ["HEAD", "refs/tags/v1"]
