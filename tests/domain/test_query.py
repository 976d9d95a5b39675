from __future__ import annotations

from urlprefill.domain.query import parse_location_query


def test_single_values_are_strings() -> None:
    assert parse_location_query("status=draft&program.abbreviation=ABC") == {
        "status": "draft",
        "program.abbreviation": "ABC",
    }


def test_repeated_keys_become_lists() -> None:
    assert parse_location_query("tags=a&tags=b&title=x") == {"tags": ["a", "b"], "title": "x"}


def test_leading_question_mark_and_blank_values() -> None:
    assert parse_location_query("?title=&priority=5") == {"title": "", "priority": "5"}


def test_percent_encoding_is_decoded() -> None:
    assert parse_location_query("author.email=test%40example.com&title=Hello+World") == {
        "author.email": "test@example.com",
        "title": "Hello World",
    }


def test_empty_query() -> None:
    assert parse_location_query("") == {}
