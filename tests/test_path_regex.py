"""
Tests for path template -> route regex translation.
"""

from __future__ import annotations

import re

from packages.profiles.paths import path_to_regex, quote_meta


def test_literal_path_is_unchanged():
    assert path_to_regex("/ping") == "/ping"
    assert path_to_regex("/api/v1/user-info") == "/api/v1/user-info"


def test_literal_metacharacters_escaped():
    assert path_to_regex("/files/report.json") == r"/files/report\.json"
    assert path_to_regex("/a+b/(c)|d$") == r"/a\+b/\(c\)\|d\$"


def test_quote_meta_matches_go_set_only():
    # '-', '#', '&', '~' and spaces are left alone, like regexp.QuoteMeta
    assert quote_meta("a-b#c&d~e f") == "a-b#c&d~e f"
    assert quote_meta(r"\.+*?()|[]{}^$") == r"\\\.\+\*\?\(\)\|\[\]\{\}\^\$"


def test_placeholder_becomes_segment_wildcard():
    assert path_to_regex("/books/{id}") == "/books/[^/]*"
    assert path_to_regex("/books/{id}.json") == r"/books/[^/]*\.json"


def test_placeholder_does_not_cross_segments():
    pat = re.compile(path_to_regex("/books/{id}.json"))
    assert pat.fullmatch("/books/123.json")
    assert not pat.fullmatch("/books/123/extra.json")


def test_adjacent_placeholders_stay_independent():
    assert path_to_regex("/x/{a}{b}") == "/x/[^/]*[^/]*"
    assert path_to_regex("/{a}/{b}") == "/[^/]*/[^/]*"


def test_placeholder_with_special_chars_is_replaced_whole():
    assert path_to_regex("/users/{user.id}") == "/users/[^/]*"


def test_unbalanced_braces_stay_literal():
    assert path_to_regex("/a{b") == r"/a\{b"
    assert path_to_regex("/a}b") == r"/a\}b"


def test_translation_is_deterministic():
    t = "/stores/{store}/items/{item}.xml"
    assert path_to_regex(t) == path_to_regex(t)
