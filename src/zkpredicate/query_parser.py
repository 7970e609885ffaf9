"""Text query parser for predicate queries.

Translates conjunctive text queries into fixed-length Query objects.
"""

from __future__ import annotations

import re
from typing import List

from zkpredicate.constants import (
    DATE_OF_BIRTH,
    EQ,
    GT,
    KIND_SYMBOLS,
    LEQ,
    MAX_QUERY_SIZE,
    attribute_code,
    attribute_name,
)
from zkpredicate.models import Operation, Query

CLAUSE_RE = re.compile(r"^([a-z_][a-z0-9_ ]*?)\s*(==|=|<=|>=|<|>)\s*(-?\d+)$")
BORN_RE = re.compile(r"^born\s+(in|after|before|on or after|on or before)\s+(-?\d+)$")


class QueryParser:
    """Parse text queries into Query objects."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _operation(self, attribute: int, symbol: str, value: int) -> Operation:
        # EQ: attr == value, LEQ: attr <= value, GT: attr > value
        if symbol in ("==", "="):
            return Operation(kind=EQ, attribute=attribute, value=value)
        if symbol == "<=":
            return Operation(kind=LEQ, attribute=attribute, value=value)
        if symbol == ">":
            return Operation(kind=GT, attribute=attribute, value=value)
        if symbol == ">=":
            # attr >= v  <=>  attr > v - 1
            return Operation(kind=GT, attribute=attribute, value=value - 1)
        if symbol == "<":
            # attr < v  <=>  attr <= v - 1
            return Operation(kind=LEQ, attribute=attribute, value=value - 1)
        raise ValueError(f"unsupported operator: {symbol}")

    def parse_clause(self, clause: str) -> Operation:
        """
        Parse a single clause.

        Supported patterns:
        - "date_of_birth == 1990"
        - "date of birth >= 1980"
        - "born in 1990" / "born after 1980" / "born before 2000"
        """
        text = clause.strip().lower()

        match = BORN_RE.match(text)
        if match:
            word, value = match.group(1), int(match.group(2))
            symbol = {
                "in": "==",
                "after": ">",
                "before": "<",
                "on or after": ">=",
                "on or before": "<=",
            }[word]
            return self._operation(DATE_OF_BIRTH, symbol, value)

        match = CLAUSE_RE.match(text)
        if match:
            attribute = attribute_code(match.group(1))
            return self._operation(attribute, match.group(2), int(match.group(3)))

        raise ValueError(f"cannot parse clause: '{clause}'")

    def parse(self, query: str) -> Query:
        """
        Parse a conjunctive text query.

        Clauses are joined by "and"; "or" and "not" are rejected.

        Raises:
            ValueError if the query cannot be parsed
        """
        text = query.lower().strip()

        if self.verbose:
            print(f"[QueryParser] parsing: '{query}'")

        if not text:
            raise ValueError("empty query")
        if re.search(r"\b(or|not)\b", re.sub(r"\bon or (after|before)\b", "", text)):
            raise ValueError("only conjunctive (and) queries are supported")

        clauses = re.split(r"\band\b|&&", text)
        if len(clauses) > MAX_QUERY_SIZE:
            raise ValueError(f"query has {len(clauses)} clauses, at most {MAX_QUERY_SIZE} supported")

        operations: List[Operation] = [self.parse_clause(c) for c in clauses]
        if self.verbose:
            print(f"[QueryParser] parsed {len(operations)} operations")
        return Query.of(*operations)


def describe(query: Query) -> str:
    """render a query back to text, stopping at the first STOP"""
    parts = []
    for op in query.active():
        symbol = KIND_SYMBOLS.get(op.kind, f"?{op.kind}")
        parts.append(f"{attribute_name(op.attribute)} {symbol} {op.value}")
    return " and ".join(parts) if parts else "true"
