"""Argument validation and structural equality shared by the store.

Records are plain dicts. Queries and changes are either a plain dict or a
predicate (any callable that is not a class).
"""
from __future__ import annotations
import math
from collections.abc import Mapping
from typing import Any, Sequence

from .errors import InvalidArgument


class _Missing:
    """Marks an argument the caller did not supply (None is a real value)."""
    def __repr__(self):
        return "<missing>"

MISSING: Any = _Missing()


def is_plain_record(value: Any) -> bool:
    # dict subclasses (defaultdict, Counter, user classes) are class instances, not records
    return type(value) is dict

def is_predicate(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def validate_number_of_arguments(args: Sequence[Any], expected: int, method: str, table: str | None = None) -> None:
    """Raise unless at least ``expected`` leading arguments were supplied."""
    received = sum(1 for a in args if a is not MISSING)
    if received < expected:
        plural = "s" if expected > 1 else ""
        raise InvalidArgument(
            f"{method}() was called with the incorrect number of arguments. "
            f"Expected {expected} argument{plural} but received {received}.",
            method=method, table=table,
        )

def validate_query(query: Any, method: str, table: str | None = None) -> None:
    if not is_plain_record(query) and not is_predicate(query):
        raise InvalidArgument(
            f"Incorrect query argument given to {method}(): {query!r}. "
            f"The {method} method either takes a dict or a function as a query.",
            method=method, table=table,
        )

def validate_update_arguments(query: Any, changes: Any, method: str, table: str | None = None) -> None:
    validate_number_of_arguments((query, changes), 2, method, table)
    validate_query(query, method, table)
    if not is_plain_record(changes) and not is_predicate(changes):
        raise InvalidArgument(
            f"Incorrect 2nd argument given to {method}(), expected a dict or a function. "
            f"You passed {changes!r} after having selected '{table}'.",
            method=method, table=table,
        )


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality over nested dicts/lists/tuples.

    Stricter than ``==`` in two places: ``True`` never equals ``1`` and a list
    never equals a tuple. NaN equals NaN.
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)) or isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    return a == b
