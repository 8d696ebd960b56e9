"""Load, prune and rewrite the key table JSON file."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .errors import KeyTableParseError, KeyTableReadError, KeyTableWriteError


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def load_key_table(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as exc:
        raise KeyTableReadError(f"Failed to read JSON: {path}") from exc
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise KeyTableParseError(f"File is not valid JSON: {path}") from exc
    if not isinstance(data, dict):
        raise KeyTableParseError(f"Top-level JSON value is not an object: {path}")
    return data


def string_keys(table: Dict[str, Any]) -> List[str]:
    """Keys whose values are strings; everything else is left out of the scan."""

    return [k for k, v in table.items() if isinstance(v, str)]


def prune_keys(table: Dict[str, Any], unused: Iterable[str]) -> Dict[str, Any]:
    drop = set(unused)
    return {k: v for k, v in table.items() if k not in drop}


def dump_key_table(table: Dict[str, Any]) -> str:
    # out-of-range numbers (1e400 loads as inf) must not come back out as Infinity
    return json.dumps(table, indent=2, ensure_ascii=False, allow_nan=False) + "\n"


def write_key_table(path: str, table: Dict[str, Any]) -> None:
    try:
        text = dump_key_table(table)
    except ValueError as exc:
        raise KeyTableWriteError(f"Cannot serialize updated JSON for {path}: {exc}") from exc
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise KeyTableWriteError(f"Failed to write updated JSON: {path}") from exc
