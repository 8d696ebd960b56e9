from dataclasses import dataclass, field
from typing import Dict, List

DEFAULT_EXTS = [".ts", ".tsx", ".js", ".jsx"]
DEFAULT_IGNORE_DIRS = ["node_modules", ".git", "dist", "build", ".next", "out"]
DEFAULT_MAX_FILE_BYTES = 2 * 1024 * 1024


@dataclass
class Options:
    json_path: str
    root_dir: str
    exts: List[str] = field(default_factory=lambda: list(DEFAULT_EXTS))
    ignore_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_DIRS))
    case_sensitive: bool = True
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    remove: bool = False
    fail_on_unused: bool = False


@dataclass
class ScanResult:
    found: Dict[str, bool]
    files_scanned: int = 0

    @property
    def unused(self) -> List[str]:
        # case-insensitive order, code point order breaks ties
        return sorted((k for k, used in self.found.items() if not used), key=lambda k: (k.casefold(), k))
