"""Structured JSONL trace log shared by the scanner and the CLI.

Records land in ``unused_keys.jsonl`` inside the first directory that can be
created, starting with ``$UNUSED_KEYS_BASE_PATH/logs`` (default
``~/.cache/unused-keys/logs``).  Logging never interferes with a run: any
failure to write a record is dropped.
"""

from __future__ import annotations

import datetime as _dt
import json
import os

LOG_NAME = "unused_keys.jsonl"
LOG_DIRS: list[str] | None = None
LOG_PATH: str | None = None

LEVELS = {"TRACE": 10, "INFO": 20, "WARN": 30, "ERROR": 40, "NONE": 100}
LOG_LEVEL = os.environ.get("UNUSED_KEYS_LOG_LEVEL", "INFO").upper()


def default_log_dir() -> str:
    base = os.environ.get("UNUSED_KEYS_BASE_PATH") or "~/.cache/unused-keys"
    return os.path.join(os.path.abspath(os.path.expanduser(base)), "logs")


def _candidate_dirs() -> list[str]:
    if LOG_DIRS:
        return [os.path.expanduser(d) for d in LOG_DIRS]
    return [default_log_dir(), "/tmp/unused-keys-logs"]


def resolve_log_path() -> str | None:
    """Return the active log file, creating its directory on first use."""

    global LOG_PATH
    if LOG_PATH is None:
        for d in _candidate_dirs():
            try:
                os.makedirs(d, exist_ok=True)
            except OSError:
                continue
            LOG_PATH = os.path.join(d, LOG_NAME)
            break
    return LOG_PATH


def append_jsonl(path: str, obj: dict):
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(obj, ensure_ascii=False, default=str) + "\n")
    except Exception:
        pass


def enabled(level: str) -> bool:
    return LEVELS.get(level.upper(), 100) >= LEVELS.get(LOG_LEVEL, 100)


def log(level: str, event: str, **fields):
    if not enabled(level):
        return
    path = resolve_log_path()
    if not path:
        return
    rec = {
        "ts": _dt.datetime.now(_dt.timezone.utc).isoformat(),
        "level": level.upper(),
        "event": event,
        **fields,
    }
    append_jsonl(path, rec)


def trace(event: str, **fields):
    log("TRACE", event, **fields)


def info(event: str, **fields):
    log("INFO", event, **fields)


def warn(event: str, **fields):
    log("WARN", event, **fields)
