from __future__ import annotations

from typing import List

from .model import Options, ScanResult


def format_summary(options: Options, result: ScanResult) -> List[str]:
    lines = [
        "",
        "—— Scan Summary ——",
        f"Root dir:       {options.root_dir}",
        f"JSON file:      {options.json_path}",
        f"Extensions:     {', '.join(options.exts)}",
        f"Ignored dirs:   {', '.join(options.ignore_dirs)}",
        f"Case-sensitive: {'true' if options.case_sensitive else 'false'}",
        f"Files scanned:  {result.files_scanned}",
    ]
    unused = result.unused
    if not unused:
        lines.extend(["", "No unused keys found. Nice!"])
        return lines
    lines.extend(["", f"Unused keys ({len(unused)}):"])
    lines.extend(f"- {k}" for k in unused)
    return lines
