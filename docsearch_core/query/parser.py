"""DocSearch Query Parser - Native Query Grammar.

Parses query strings into flat clause lists.

Query Syntax:
- term: Optional term, matched in every field
- +term: Required term
- -term: Prohibited term
- field:term: Search in one field only
- te*, *rm, *er*: Wildcards
- term^10: Boost
- term~1: Fuzzy match within an edit distance

Clauses are separated by whitespace; a hyphen inside a word also
separates terms, the same way the index tokenizer splits text.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from docsearch_core.errors import QueryParseError
from docsearch_core.query.clause import (
    Clause,
    Presence,
    WILDCARD_CHAR,
    wildcard_of,
)

logger = logging.getLogger(__name__)


class Token:
    """Lexer token."""

    def __init__(
        self,
        token_type: str,
        value: str,
        position: int,
    ):
        """Initialize token.

        Args:
            token_type: Token type
            value: Token value
            position: Position in input
        """
        self.type = token_type
        self.value = value
        self.position = position

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r})"


class QueryLexer:
    """Lexer for query strings."""

    # Token patterns, tried in order
    PATTERNS = [
        ("WHITESPACE", r"\s+"),
        ("PRESENCE", r"[+\-]"),
        ("FIELD", r"[^\s:^~\-]+(?=:)"),
        ("COLON", r":"),
        ("BOOST", r"\^[^\s:^~\-]*"),
        ("EDIT_DISTANCE", r"~[^\s:^~\-]*"),
        ("HYPHEN", r"-"),
        ("TERM", r"[^\s:^~\-]+"),
    ]

    # Only recognised at the start of a clause
    CLAUSE_START_ONLY = frozenset(["PRESENCE"])

    # Consumed but not emitted
    SKIPPED = frozenset(["WHITESPACE", "HYPHEN"])

    def __init__(self):
        """Initialize lexer."""
        self._patterns = [
            (name, re.compile(pattern))
            for name, pattern in self.PATTERNS
        ]

    def tokenize(self, query: str) -> List[Token]:
        """Tokenize query string.

        Args:
            query: Query string

        Returns:
            List of tokens
        """
        tokens = []
        position = 0
        at_clause_start = True

        while position < len(query):
            for token_type, pattern in self._patterns:
                if token_type in self.CLAUSE_START_ONLY and not at_clause_start:
                    continue
                match = pattern.match(query, position)
                if match:
                    break
            else:
                raise QueryParseError(
                    f"unexpected character '{query[position]}'", query, position
                )

            value = match.group(0)
            if token_type not in self.SKIPPED:
                if token_type in ("BOOST", "EDIT_DISTANCE"):
                    value = value[1:]
                tokens.append(Token(token_type, value, position))
            at_clause_start = token_type == "WHITESPACE"
            position = match.end()

        return tokens


class QueryParser:
    """Parser for the index query grammar.

    Malformed input raises ``QueryParseError``; the parser never guesses
    at a repair.
    """

    def __init__(self, fields: Optional[Iterable[str]] = None):
        """Initialize parser.

        Args:
            fields: Field names allowed in ``field:term`` clauses;
                ``None`` accepts any field
        """
        self.fields: Optional[Tuple[str, ...]] = tuple(fields) if fields is not None else None

        self._lexer = QueryLexer()
        self._query = ""
        self._tokens: List[Token] = []
        self._position = 0

    def parse(self, query: str) -> List[Clause]:
        """Parse query string.

        Args:
            query: Query string

        Returns:
            Clauses in query order

        Raises:
            QueryParseError: If the query is not valid
        """
        self._query = query
        self._tokens = self._lexer.tokenize(query)
        self._position = 0

        clauses = []
        while self._current_token():
            clauses.append(self._parse_clause())

        logger.debug(f"Parsed query {query!r} into {len(clauses)} clauses")
        return clauses

    def _current_token(self) -> Optional[Token]:
        """Get current token."""
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _advance(self) -> Optional[Token]:
        """Advance to next token."""
        token = self._current_token()
        self._position += 1
        return token

    def _error(self, message: str, token: Optional[Token] = None) -> QueryParseError:
        position = token.position if token else len(self._query)
        return QueryParseError(message, self._query, position)

    def _expect(self, *token_types: str) -> Token:
        """Expect one of the given token types."""
        token = self._current_token()
        if not token:
            raise self._error(f"expecting {' or '.join(token_types).lower()}, found nothing")
        if token.type not in token_types:
            raise self._error(
                f"expecting {' or '.join(token_types).lower()}, "
                f"found {token.type.lower()} with value '{token.value}'",
                token,
            )
        return self._advance()

    def _parse_clause(self) -> Clause:
        """Parse a single clause with its modifiers."""
        presence = Presence.OPTIONAL
        fields = None

        token = self._expect("PRESENCE", "FIELD", "TERM")
        if token.type == "PRESENCE":
            presence = Presence.PROHIBITED if token.value == "-" else Presence.REQUIRED
            token = self._expect("FIELD", "TERM")

        if token.type == "FIELD":
            fields = (self._parse_field(token),)
            self._expect("COLON")
            token = self._expect("TERM")

        term = token.value.lower()
        boost = 1
        edit_distance = 0

        while self._current_token() and self._current_token().type in ("BOOST", "EDIT_DISTANCE"):
            modifier = self._advance()
            value = self._parse_int(modifier)
            if modifier.type == "BOOST":
                boost = value
            else:
                edit_distance = value

        return Clause(
            term=term,
            fields=fields,
            presence=presence,
            wildcard=wildcard_of(term),
            use_pipeline=WILDCARD_CHAR not in term,
            boost=boost,
            edit_distance=edit_distance,
        )

    def _parse_field(self, token: Token) -> str:
        if self.fields is not None and token.value not in self.fields:
            raise self._error(
                f"unrecognised field '{token.value}', "
                f"possible fields: {', '.join(self.fields)}",
                token,
            )
        return token.value

    def _parse_int(self, token: Token) -> int:
        try:
            return int(token.value)
        except ValueError:
            raise self._error(
                f"{token.type.lower().replace('_', ' ')} must be numeric",
                token,
            ) from None


__all__ = [
    "QueryLexer",
    "QueryParser",
    "Token",
]
