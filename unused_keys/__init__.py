"""
Find keys of a flat JSON string table that no source file references.
"""

__all__ = ["Options",
           "ScanResult",
           "build_key_patterns",
           "find_unused",
           "scan",
           "walk"]

from .model import Options, ScanResult
from .patterns import build_key_patterns
from .scanner import find_unused, scan
from .walker import walk
