"""CLI entrypoint for the unused fallback key finder."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .errors import (
    KeyTableParseError,
    KeyTableReadError,
    KeyTableWriteError,
    RootDirError,
    UnusedKeysError,
)
from .keytable import load_key_table, prune_keys, string_keys, write_key_table
from .logutil import LOG_NAME, append_jsonl, default_log_dir, info, resolve_log_path
from .model import Options
from .options import resolve_options
from .report import format_summary
from .scanner import find_unused

RESULT_CODES: Dict[str, int] = {
    "SCAN_OK": 0,
    "NOTHING_TO_DO_OK": 0,
    "FAIL_USAGE": 1,
    "FAIL_READ_JSON": 1,
    "FAIL_PARSE_JSON": 1,
    "FAIL_ROOT_DIR": 1,
    "FAIL_WRITE_JSON": 1,
    "FAIL_UNHANDLED": 1,
    "FAIL_UNUSED_KEYS": 2,
}

_ERROR_RESULTS: Dict[type, str] = {
    KeyTableReadError: "FAIL_READ_JSON",
    KeyTableParseError: "FAIL_PARSE_JSON",
    KeyTableWriteError: "FAIL_WRITE_JSON",
    RootDirError: "FAIL_ROOT_DIR",
}

RESULT_LOG_PATH: Optional[str] = None


def _result_log_path() -> str:
    global RESULT_LOG_PATH
    if RESULT_LOG_PATH:
        return RESULT_LOG_PATH
    path = resolve_log_path()
    if not path:
        path = os.path.join(default_log_dir(), LOG_NAME)
    RESULT_LOG_PATH = path
    return path


def _record_result(kind: str, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"result": kind, "ts": int(time.time())}
    if extra:
        payload.update(extra)
    append_jsonl(_result_log_path(), payload)
    return payload


def _emit_result(
        kind: str,
        extra: Optional[Dict[str, Any]] = None,
        exit_code: Optional[int] = None,
) -> None:
    _record_result(kind, extra)
    code = RESULT_CODES.get(kind, 1) if exit_code is None else exit_code
    raise SystemExit(code)


def _report_error(exc: BaseException) -> None:
    print(str(exc), file=sys.stderr)
    cause = exc.__cause__
    if cause is not None:
        print(cause, file=sys.stderr)


def _remove_unused(opts: Options, table: Dict[str, Any], unused: List[str]) -> None:
    print("\n--remove flag detected. Removing unused keys from JSON...")
    write_key_table(opts.json_path, prune_keys(table, unused))
    print(f"Removed {len(unused)} keys and updated {opts.json_path}")


def _main_impl(argv: Optional[List[str]] = None) -> int:
    try:
        opts = resolve_options(argv)
    except SystemExit as exc:
        if exc.code:
            _emit_result("FAIL_USAGE", exit_code=exc.code)
        raise

    info("cli.args", **asdict(opts))

    table = load_key_table(opts.json_path)
    keys = string_keys(table)
    if not keys:
        print("No string values found in the provided JSON. Nothing to do.", file=sys.stderr)
        _emit_result("NOTHING_TO_DO_OK", {"json_path": opts.json_path})

    result = find_unused(opts, keys)
    for line in format_summary(opts, result):
        print(line)

    unused = result.unused
    payload: Dict[str, Any] = {
        "json_path": opts.json_path,
        "root_dir": opts.root_dir,
        "files_scanned": result.files_scanned,
        "keys": len(keys),
        "unused": unused,
        "removed": 0,
    }
    if unused and opts.remove:
        _remove_unused(opts, table, unused)
        payload["removed"] = len(unused)

    if unused and opts.fail_on_unused:
        _emit_result("FAIL_UNUSED_KEYS", payload)
    _emit_result("SCAN_OK", payload)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        return _main_impl(argv)
    except SystemExit:
        raise
    except UnusedKeysError as exc:
        _report_error(exc)
        _emit_result(_ERROR_RESULTS.get(type(exc), "FAIL_UNHANDLED"), extra={"error": str(exc)})
    except Exception as exc:  # noqa: BLE001
        print(f"Unexpected error: {exc}", file=sys.stderr)
        _emit_result("FAIL_UNHANDLED", extra={"error": str(exc)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
