"""In-memory table store.

Store owns every record. Collection is a (table name, store) handle that reads
the store's list fresh on each call, so all handles over one table see each
other's writes immediately.

Isolation: records are deep-copied on the way in (add, update changes) and on
the way out (every read, update, delete and dump). Callers never hold a live
reference into store-owned memory.

Validation always runs before mutation, so a call that raises leaves the table
as it was.
"""
from __future__ import annotations
import copy
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .config import StoreConfig
from .errors import InvalidArgument, NotFound
from .logging_util import debug
from .query import Query, Record, compile_query, first_match, iter_matches
from .validation import (
    MISSING, deep_equal, is_plain_record, is_predicate,
    validate_number_of_arguments, validate_update_arguments,
)


class Collection:
    """Handle bound to one table of a Store."""

    def __init__(self, name: str, store: "Store"):
        self._name = name
        self._store = store

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._rows())

    def __repr__(self) -> str:
        return f"Collection({self._name!r})"

    # --- Internal -------------------------------------------------------------------
    def _rows(self) -> List[Record]:
        return self._store._rows(self._name)

    def _query(self, raw: Any, method: str) -> Query:
        return compile_query(raw, method, self._name)

    def _apply_changes(self, record: Record, changes: Any, method: str) -> Record:
        """Return the record as it should look after ``changes``; does not write."""
        if is_predicate(changes):
            result = changes(copy.deepcopy(record))
            if not is_plain_record(result):
                raise InvalidArgument(
                    f"The function passed to {method}() must return a dict, got {result!r} "
                    f"while updating '{self._name}'.",
                    method=method, table=self._name,
                )
            return copy.deepcopy(result)
        merged = dict(record)
        merged.update(copy.deepcopy(changes))
        return merged

    def _remove(self, matched: List[Tuple[int, Record]]) -> None:
        rows = self._rows()
        if self._store.config.delete_mode == "equality":
            doomed = [rec for _, rec in matched]
            rows[:] = [r for r in rows if not any(deep_equal(r, d) for d in doomed)]
        else:
            positions = {pos for pos, _ in matched}
            rows[:] = [r for i, r in enumerate(rows) if i not in positions]

    # --- Public API -----------------------------------------------------------------
    def add(self, data: Any = MISSING) -> Any:
        """Append a record or a list of records; returns ``data`` as given.

        Every element is checked before anything is inserted.
        """
        validate_number_of_arguments((data,), 1, "add", self._name)
        items = list(data) if isinstance(data, (list, tuple)) else [data]
        for item in items:
            if not is_plain_record(item):
                raise InvalidArgument(
                    f"You can only add plain dicts or a list of plain dicts. "
                    f"Errored whilst trying to add {item!r} to '{self._name}'.",
                    method="add", table=self._name,
                )
        if self._name not in self._store:
            raise NotFound(f"Cannot add to undeclared table '{self._name}'.", method="add", table=self._name)
        self._rows().extend(copy.deepcopy(item) for item in items)
        debug("records_added", table=self._name, count=len(items))
        return data

    def find(self, query: Any = MISSING) -> Optional[Record]:
        validate_number_of_arguments((query,), 1, "find", self._name)
        hit = first_match(self._query(query, "find"), self._rows())
        return copy.deepcopy(hit[1]) if hit else None

    def find_all(self, query: Any = MISSING) -> List[Record]:
        """All matches in table order. No query (or ``{}``) returns every record."""
        if query is MISSING:
            query = {}
        q = self._query(query, "findAll")
        return [copy.deepcopy(rec) for _, rec in iter_matches(q, self._rows())]

    def update(self, query: Any = MISSING, changes: Any = MISSING) -> Record:
        """Apply ``changes`` to the first match and return a copy of the result.

        Raises NotFound when nothing matches, unlike delete() which returns None.
        """
        validate_update_arguments(query, changes, "update", self._name)
        hit = first_match(self._query(query, "update"), self._rows())
        if hit is None:
            raise NotFound(
                f"No object found to update in '{self._name}' for query {query!r}.",
                method="update", table=self._name,
            )
        _, record = hit
        new = self._apply_changes(record, changes, "update")
        record.clear()
        record.update(new)
        debug("record_updated", table=self._name)
        return copy.deepcopy(record)

    def update_all(self, query: Any = MISSING, changes: Any = MISSING) -> List[Record]:
        """Apply ``changes`` to every match; an empty match returns ``[]``."""
        validate_update_arguments(query, changes, "updateAll", self._name)
        matched = [rec for _, rec in iter_matches(self._query(query, "updateAll"), self._rows())]
        # compute everything first so a failing changes function writes nothing
        updates = [(rec, self._apply_changes(rec, changes, "updateAll")) for rec in matched]
        for record, new in updates:
            record.clear()
            record.update(new)
        if updates:
            debug("records_updated", table=self._name, count=len(updates))
        return [copy.deepcopy(record) for record, _ in updates]

    def delete(self, query: Any = MISSING) -> Optional[Record]:
        """Remove the first match and return its copy, or None if nothing matched."""
        validate_number_of_arguments((query,), 1, "delete", self._name)
        hit = first_match(self._query(query, "delete"), self._rows())
        if hit is None:
            return None
        removed = copy.deepcopy(hit[1])
        self._remove([hit])
        debug("record_deleted", table=self._name, mode=self._store.config.delete_mode)
        return removed

    def delete_all(self, query: Any = MISSING) -> List[Record]:
        """Remove every match and return copies. No query (or ``{}``) empties the table."""
        if query is MISSING:
            query = {}
        matched = list(iter_matches(self._query(query, "deleteAll"), self._rows()))
        removed = [copy.deepcopy(rec) for _, rec in matched]
        if matched:
            self._remove(matched)
            debug("records_deleted", table=self._name, count=len(removed), mode=self._store.config.delete_mode)
        return removed

    # camelCase aliases
    findAll = find_all
    updateAll = update_all
    deleteAll = delete_all


class Store:
    """Owner of a fixed set of named tables.

    Tables are declared at construction and live as long as the store.
    """

    def __init__(self, table_names: Iterable[str], config: Optional[StoreConfig] = None):
        if isinstance(table_names, (str, bytes)) or not hasattr(table_names, "__iter__"):
            raise InvalidArgument(
                f"Store() expects an iterable of table names, got {table_names!r}.", method="Store"
            )
        self.config = config or StoreConfig.from_env()
        self._tables: Dict[str, List[Record]] = {}
        for name in table_names:
            if not isinstance(name, str):
                raise InvalidArgument(f"Table names must be strings, got {name!r}.", method="Store")
            self._tables.setdefault(name, [])
        debug("store_created", tables=list(self._tables), config=self.config.as_dict())

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    @property
    def table_names(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    def select(self, table_name: str) -> Collection:
        if not isinstance(table_name, str):
            raise InvalidArgument(f"Table names must be strings, got {table_name!r}.", method="select")
        if self.config.strict_select and table_name not in self._tables:
            raise NotFound(
                f"Table '{table_name}' was not declared. Declared tables: {list(self._tables)}",
                method="select", table=table_name,
            )
        return Collection(table_name, self)

    def dump(self) -> Dict[str, List[Record]]:
        """Deep-copied snapshot of every table."""
        return {name: copy.deepcopy(rows) for name, rows in self._tables.items()}

    def _rows(self, name: str) -> List[Record]:
        # undeclared tables (lax select) read as empty; add() refuses to write to them
        rows = self._tables.get(name)
        return rows if rows is not None else []
