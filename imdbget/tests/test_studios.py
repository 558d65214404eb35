"""Tests for studio name resolution."""
from __future__ import annotations

import pytest

from imdbget.catalog.studios import KNOWN_STUDIOS, STUDIO_IDENTIFIERS, resolve_identifiers


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("sony", ["columbia", "co0086397"]),
        ("lionsgate", ["co0026995", "co0179392"]),
        ("nbcu", ["co0095173", "co0022762", "co0005073", "co0022548"]),
        ("lfp", ["co0035870", "co0042788", "co0044807"]),
        ("cbs", ["co0274041"]),
        ("pbs", ["co0039462"]),
    ],
)
def test_known_studios_resolve_in_documented_order(name: str, expected: list[str]) -> None:
    """Table entries should resolve to every identifier in table order."""

    assert resolve_identifiers(name) == expected


def test_every_table_entry_resolves_to_its_identifiers() -> None:
    for name, identifiers in STUDIO_IDENTIFIERS.items():
        assert resolve_identifiers(name) == list(identifiers)


def test_lookup_ignores_case_and_surrounding_whitespace() -> None:
    assert resolve_identifiers("  Sony ") == ["columbia", "co0086397"]


def test_company_id_passes_through_unchanged() -> None:
    assert resolve_identifiers("co0123456") == ["co0123456"]


@pytest.mark.parametrize("name", ["warner", "disney", "somethingelse"])
def test_unknown_names_pass_through_as_literal_identifier(name: str) -> None:
    assert resolve_identifiers(name) == [name]


def test_explicit_identifier_list_is_split_in_order() -> None:
    """A comma separated list ending with END should yield each id once, in order."""

    assert resolve_identifiers("co0000002,co0000001,END") == ["co0000002", "co0000001"]


def test_explicit_identifier_list_without_terminator() -> None:
    assert resolve_identifiers("co0000002,,co0000003") == ["co0000002", "co0000003"]


def test_resolution_is_never_empty() -> None:
    assert resolve_identifiers(",END") == [",end"]
    assert resolve_identifiers("") == [""]


def test_known_studios_cover_table_and_passthrough_names() -> None:
    assert "sony" in KNOWN_STUDIOS
    assert "warner" in KNOWN_STUDIOS
    assert list(KNOWN_STUDIOS) == sorted(KNOWN_STUDIOS)
