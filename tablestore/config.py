"""Store configuration.

Environment driven with sanity logging, same approach for every knob:
unparseable values are reported through the structured logger and replaced
by the default.

  TABLESTORE_STRICT_SELECT  "1" (default) raise NotFound when selecting an
                            undeclared table; "0" hand back a handle that
                            reads the table as empty
  TABLESTORE_DELETE_MODE    "position" (default) delete removes exactly the
                            located records; "equality" removes every record
                            deeply equal to a located one
"""
from __future__ import annotations
import os
from dataclasses import dataclass, asdict

from .errors import InvalidArgument
from .logging_util import warn

DELETE_MODES = ("position", "equality")
DEFAULT_DELETE_MODE = "position"
DEFAULT_STRICT_SELECT = True

@dataclass
class StoreConfig:
    strict_select: bool = DEFAULT_STRICT_SELECT
    delete_mode: str = DEFAULT_DELETE_MODE

    def __post_init__(self):
        if self.delete_mode not in DELETE_MODES:
            raise InvalidArgument(
                f"Unknown delete_mode {self.delete_mode!r}; expected one of {list(DELETE_MODES)}"
            )

    @classmethod
    def from_env(cls) -> "StoreConfig":
        def _bool(name: str, default: bool) -> bool:
            raw = os.environ.get(name)
            if raw is None:
                return default
            if raw in ("1", "0"):
                return raw == "1"
            warn("invalid_env_bool", key=name, value=raw, default=default)
            return default
        def _choice(name: str, choices: tuple, default: str) -> str:
            raw = os.environ.get(name)
            if raw is None:
                return default
            val = raw.strip().lower()
            if val not in choices:
                warn("invalid_env_choice", key=name, value=raw, choices=list(choices), default=default)
                return default
            return val
        strict = _bool("TABLESTORE_STRICT_SELECT", DEFAULT_STRICT_SELECT)
        mode = _choice("TABLESTORE_DELETE_MODE", DELETE_MODES, DEFAULT_DELETE_MODE)
        return cls(strict_select=strict, delete_mode=mode)

    def as_dict(self) -> dict:
        return asdict(self)


def cli_dump_config():  # pragma: no cover - thin CLI wrapper
    """CLI helper: print the resolved StoreConfig as JSON."""
    import argparse, json
    ap = argparse.ArgumentParser(description='Dump resolved tablestore config')
    ap.parse_args()
    print(json.dumps({'config': StoreConfig.from_env().as_dict()}, indent=2))

if __name__ == '__main__':  # pragma: no cover
    cli_dump_config()
