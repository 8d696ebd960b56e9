"""Command-line option parsing and default resolution."""

from __future__ import annotations

import argparse
import math
import os
import sys
from typing import List, Optional

from .logutil import warn
from .model import DEFAULT_EXTS, DEFAULT_IGNORE_DIRS, DEFAULT_MAX_FILE_BYTES, Options

PROG = "find-unused-fallback-keys"
SWITCHES = ("--remove", "--fail-on-unused")

USAGE = (
    f"{PROG} <path/to/fallbackTexts.json> <path/to/folder> [--remove] "
    '[--ext ".ts,.tsx,.js,.jsx"] [--ignore "node_modules,dist,.git"] '
    "[--case-sensitive=false] [--max-bytes N] [--fail-on-unused]"
)


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str):
        print(f"Usage: {USAGE}", file=sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, usage=USAGE, allow_abbrev=False, add_help=True)
    parser.add_argument("json_path")
    parser.add_argument("root_dir")
    parser.add_argument("--remove", action="store_true")
    parser.add_argument("--ext", default=None)
    parser.add_argument("--ignore", default=None)
    parser.add_argument("--case-sensitive", dest="case_sensitive", nargs="?", default=None, const=None)
    parser.add_argument("--max-bytes", dest="max_bytes", default=None)
    parser.add_argument("--fail-on-unused", action="store_true")
    return parser


def _strip_switch_value(arg: str) -> str:
    """``--remove=<anything>`` means ``--remove``; the value itself is ignored."""

    flag = arg.split("=", 1)[0]
    if flag in SWITCHES:
        return flag
    return arg


def split_list(value: Optional[str], default: List[str]) -> List[str]:
    """Split a comma list; a missing or empty value keeps ``default``."""

    if not value:
        return list(default)
    return [s.strip() for s in value.split(",") if s.strip()]


def parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value in ("true", "1")


def parse_max_bytes(value: Optional[str], default: int) -> int:
    """Parse a byte cap; hex/octal/binary prefixes are accepted and Infinity lifts the cap."""

    if not value:
        return default
    text = value.strip()
    try:
        parsed = int(text, 0)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            return default
        if math.isnan(number):
            return default
        if math.isinf(number) and number > 0:
            return sys.maxsize
        parsed = int(number) if math.isfinite(number) else 0
    if parsed < 1:
        return default
    return parsed


def resolve_options(argv: Optional[List[str]] = None) -> Options:
    """Parse ``argv`` into a fully-resolved :class:`Options`.

    Unknown flags are reported on stderr and otherwise ignored.
    """

    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args, unknown = parser.parse_known_args([_strip_switch_value(a) for a in argv])
    for extra in unknown:
        if extra.startswith("-"):
            flag = extra.split("=", 1)[0]
            print(f"Unknown flag: {flag}", file=sys.stderr)
            warn("options.unknown_flag", flag=flag)
        else:
            print(f"Ignoring extra argument: {extra}", file=sys.stderr)
            warn("options.extra_argument", value=extra)

    return Options(
        json_path=os.path.abspath(args.json_path),
        root_dir=os.path.abspath(args.root_dir),
        exts=split_list(args.ext, DEFAULT_EXTS),
        ignore_dirs=split_list(args.ignore, DEFAULT_IGNORE_DIRS),
        case_sensitive=parse_bool(args.case_sensitive, True),
        max_file_bytes=parse_max_bytes(args.max_bytes, DEFAULT_MAX_FILE_BYTES),
        remove=bool(args.remove),
        fail_on_unused=bool(args.fail_on_unused),
    )
