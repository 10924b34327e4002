"""Error taxonomy.

Every failure is raised synchronously to the immediate caller. ``code`` gives
callers a stable value to branch on; the message is for humans and names the
method and the offending value.
"""
from __future__ import annotations
from typing import Optional


class StoreError(Exception):
    code = "store_error"

    def __init__(self, message: str, *, method: Optional[str] = None, table: Optional[str] = None):
        super().__init__(message)
        self.method = method
        self.table = table


class InvalidArgument(StoreError, TypeError):
    """Wrong argument count, bad query/changes type, or a non-record given to add()."""
    code = "invalid_argument"


class NotFound(StoreError, LookupError):
    """update() matched nothing, or an undeclared table was used."""
    code = "not_found"
