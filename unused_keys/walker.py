from __future__ import annotations

import os
from typing import Iterable, Iterator

from .errors import RootDirError
from .logutil import trace


def walk(root: str, ignore_dirs: Iterable[str]) -> Iterator[str]:
    """Yield regular files under ``root`` depth-first, in directory-entry order.

    Directories named in ``ignore_dirs`` (hidden ones included) are never
    entered.  Symlinks are neither followed nor reported.
    """

    ignored = set(ignore_dirs)
    try:
        entries = list(os.scandir(root))
    except OSError as exc:
        raise RootDirError(f"Cannot read root directory: {root} ({exc})") from exc
    yield from _walk_entries(entries, ignored)


def _walk_entries(entries: list[os.DirEntry], ignored: set[str]) -> Iterator[str]:
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            if entry.name in ignored:
                continue
            try:
                children = list(os.scandir(entry.path))
            except OSError as exc:
                trace("walk.skip_dir", path=entry.path, error=str(exc))
                continue
            yield from _walk_entries(children, ignored)
        elif is_file:
            yield entry.path


def should_scan_file(path: str, exts: list[str]) -> bool:
    ext = os.path.splitext(path)[1]
    return not exts or ext in exts
