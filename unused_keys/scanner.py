"""Key usage detection over a stream of candidate files."""

from __future__ import annotations

import os
from typing import Iterable, List, Optional

from .logutil import trace
from .model import Options, ScanResult
from .patterns import build_key_patterns, key_matches
from .walker import should_scan_file, walk


def _read_text(path: str, max_bytes: int) -> Optional[str]:
    try:
        size = os.stat(path).st_size
    except OSError as exc:
        trace("scan.skip", path=path, reason="stat", error=str(exc))
        return None
    if size > max_bytes:
        trace("scan.skip", path=path, reason="size", size=size)
        return None
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as exc:
        trace("scan.skip", path=path, reason="read", error=str(exc))
        return None


def scan(files: Iterable[str], keys: List[str], options: Options) -> ScanResult:
    """Mark every key in ``keys`` that is referenced by at least one file.

    Once a key is found it is never tested again; the remaining keys are
    still tested against the same file.
    """

    found = {k: False for k in keys}
    patterns = {k: build_key_patterns(k, options.case_sensitive) for k in keys}
    needles = {k: (k if options.case_sensitive else k.lower()) for k in keys}
    result = ScanResult(found=found)

    for path in files:
        if not should_scan_file(path, options.exts):
            continue
        content = _read_text(path, options.max_file_bytes)
        if content is None:
            continue
        result.files_scanned += 1

        haystack = content if options.case_sensitive else content.lower()
        for key, was_found in found.items():
            if was_found:
                continue
            # substring fast-path before any regex work
            if needles[key] not in haystack:
                continue
            if key_matches(content, patterns[key]):
                found[key] = True
                trace("scan.found", key=key, path=path)

    return result


def find_unused(options: Options, keys: List[str]) -> ScanResult:
    return scan(walk(options.root_dir, options.ignore_dirs), keys, options)
