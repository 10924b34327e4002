"""Query compilation.

A raw query argument is turned into one of two variants at the API boundary:

  - PredicateQuery: wraps a callable, matches when it returns a truthy value
  - ShapeQuery: wraps a partial record, matches when every key in the shape is
    present on the record with a deeply equal value

Matching never hands out live records: predicates receive a deep copy.
"""
from __future__ import annotations
import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Tuple, Union

from .validation import deep_equal, is_predicate, validate_query

Record = Dict[str, Any]


@dataclass(frozen=True)
class PredicateQuery:
    fn: Callable[[Record], Any]

    def matches(self, record: Record) -> bool:
        return bool(self.fn(copy.deepcopy(record)))


@dataclass(frozen=True)
class ShapeQuery:
    shape: Record

    @property
    def matches_everything(self) -> bool:
        return not self.shape

    def matches(self, record: Record) -> bool:
        for key, expected in self.shape.items():
            if key not in record or not deep_equal(record[key], expected):
                return False
        return True


Query = Union[PredicateQuery, ShapeQuery]


def compile_query(raw: Any, method: str, table: str | None = None) -> Query:
    validate_query(raw, method, table)
    if is_predicate(raw):
        return PredicateQuery(raw)
    return ShapeQuery(copy.deepcopy(raw))


def iter_matches(query: Query, rows: List[Record]) -> Iterator[Tuple[int, Record]]:
    """Yield (position, live record) pairs in table order."""
    if isinstance(query, ShapeQuery) and query.matches_everything:
        yield from enumerate(rows)
        return
    for pos, row in enumerate(rows):
        if query.matches(row):
            yield pos, row


def first_match(query: Query, rows: List[Record]) -> Tuple[int, Record] | None:
    return next(iter_matches(query, rows), None)
