"""Query grammar tests."""

from __future__ import annotations

import pytest

from docsearch_core.errors import QueryParseError
from docsearch_core.query import Clause, Presence, QueryParser, Wildcard, query_to_string


@pytest.fixture
def parser() -> QueryParser:
    return QueryParser(fields=["title", "text", "keyword"])


def test_parse_single_term(parser: QueryParser) -> None:
    assert parser.parse("Qui") == [Clause(term="qui")]


def test_parse_presence(parser: QueryParser) -> None:
    clauses = parser.parse("+foo -bar baz")
    assert [c.presence for c in clauses] == [
        Presence.REQUIRED,
        Presence.PROHIBITED,
        Presence.OPTIONAL,
    ]
    assert [c.term for c in clauses] == ["foo", "bar", "baz"]


def test_parse_field(parser: QueryParser) -> None:
    [clause] = parser.parse("title:Foo")
    assert clause.fields == ("title",)
    assert clause.term == "foo"


def test_parse_wildcards(parser: QueryParser) -> None:
    trailing, both = parser.parse("foo* *bar*")
    assert trailing.wildcard == Wildcard.TRAILING
    assert trailing.use_pipeline is False
    assert both.wildcard == Wildcard.LEADING | Wildcard.TRAILING


def test_parse_modifiers(parser: QueryParser) -> None:
    [clause] = parser.parse("foo^10~1")
    assert clause.boost == 10
    assert clause.edit_distance == 1


def test_hyphen_separates_terms(parser: QueryParser) -> None:
    assert [c.term for c in parser.parse("foo-bar")] == ["foo", "bar"]


def test_empty_query_has_no_clauses(parser: QueryParser) -> None:
    assert parser.parse("") == []
    assert parser.parse("   ") == []


def test_clauses_render_back(parser: QueryParser) -> None:
    assert query_to_string(parser.parse("+title:foo^2 -bar")) == "+title:foo^2 -bar"


@pytest.mark.parametrize("query", ["+", "-", "title:", "bogus:foo", "foo^x", "foo~", ":foo"])
def test_malformed_queries_raise(parser: QueryParser, query: str) -> None:
    with pytest.raises(QueryParseError):
        parser.parse(query)


def test_parse_error_carries_position(parser: QueryParser) -> None:
    with pytest.raises(QueryParseError) as exc_info:
        parser.parse("foo bogus:bar")
    assert exc_info.value.position == 4
    assert exc_info.value.query == "foo bogus:bar"
    assert "bogus" in str(exc_info.value)


def test_any_field_allowed_without_field_list() -> None:
    [clause] = QueryParser().parse("anything:foo")
    assert clause.fields == ("anything",)
