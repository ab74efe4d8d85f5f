"""
Some utils for sitesmith
"""

import math
import re
import sys
import unicodedata
from pathlib import Path
from typing import Optional

import psutil

# ----------------------
#
#  Memory
#
# ----------------------

_MEMORY_UNITS = ["b", "kb", "mb", "gb", "tb", "pb"]


def memory_usage() -> int:
    """Resident set size of the current process, in bytes."""
    return psutil.Process().memory_info().rss


def convert_memory(size: int) -> str:
    """
    Format a byte count as a human readable string, e.g. `1.5 mb`.
    Negative values (memory released during a build) keep their sign.
    """
    if size == 0:
        return "0 b"
    sign = "-" if size < 0 else ""
    size = abs(size)
    i = min(int(math.floor(math.log(size, 1024))), len(_MEMORY_UNITS) - 1)
    return f"{sign}{round(size / math.pow(1024, i), 2)} {_MEMORY_UNITS[i]}"

# ----------------------
#
#  Names and Paths
#
# ----------------------

_slug_strip = re.compile(r"[^\w\s/-]")
_slug_dash = re.compile(r"[\s_-]+")


def slugify(value: str) -> str:
    """
    Convert `value` to a lowercase, dash separated slug. Slashes are kept
    so nested paths stay nested.
    """
    value = unicodedata.normalize("NFKD", str(value)).encode("ascii", "ignore").decode("ascii")
    value = _slug_strip.sub("", value.lower())
    parts = [_slug_dash.sub("-", part).strip("-") for part in value.split("/")]
    return "/".join(part for part in parts if part)


def is_frozen() -> bool:
    """Whether we run from a frozen bundle (PyInstaller and friends)."""
    return bool(getattr(sys, "frozen", False))


def bundle_dir() -> Optional[Path]:
    """Directory holding the bundle's data files, None outside a frozen bundle."""
    if not is_frozen():
        return None
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return Path(meipass)
    return Path(sys.executable).parent
