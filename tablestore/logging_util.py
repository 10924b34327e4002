"""Lightweight structured logging helper.

Avoids external deps; emits JSON lines to stderr.

Events:
  DEBUG  store_created, records_added, record_updated, records_updated,
         record_deleted, records_deleted (table, count, delete mode)
  WARN   invalid_env_bool, invalid_env_choice (StoreConfig.from_env)

Mutations are DEBUG only, so nothing is written at the default INFO level.
"""
from __future__ import annotations
import os, sys, json, time, threading

_lock = threading.Lock()
LEVEL_ORDER = ["DEBUG","INFO","WARN","ERROR"]

def _threshold() -> str:
    # Read per call so LOG_LEVEL changes (e.g. monkeypatch in tests) apply immediately
    return os.environ.get("LOG_LEVEL", "INFO").upper()

def _should(level: str) -> bool:
    try:
        return LEVEL_ORDER.index(level) >= LEVEL_ORDER.index(_threshold())
    except ValueError:
        return True

def log(level: str, event: str, **fields):
    if not _should(level.upper()):
        return
    record = {
        "ts": time.strftime('%Y-%m-%dT%H:%M:%SZ', time.gmtime()),
        "level": level.upper(),
        "event": event,
    }
    record.update(fields)
    line = json.dumps(record, separators=(',',':'), default=repr)
    with _lock:
        sys.stderr.write(line + "\n")
        sys.stderr.flush()

def debug(event: str, **fields): log("DEBUG", event, **fields)
def info(event: str, **fields): log("INFO", event, **fields)
def warn(event: str, **fields): log("WARN", event, **fields)
def error(event: str, **fields): log("ERROR", event, **fields)
