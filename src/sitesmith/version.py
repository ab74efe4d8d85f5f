"""
sitesmith Version

Process-wide, lazily computed application version. The VERSION file is read
at most once per process; any problem reading it yields the fallback
`constants.VERSION`.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from . import constants
from .utils import bundle_dir

logger = logging.getLogger(__name__)

Reader = Callable[[Path], Optional[str]]


def read_version_file(path: Path) -> Optional[str]:
    """Trimmed content of `path`, or None when it is missing, unreadable or empty."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"[Version] Can't read '{path}': {e}")
        return None
    return content.strip() or None


def version_file_path() -> Path:
    """Location of the VERSION file: inside a frozen bundle, or at the checkout root."""
    root = bundle_dir()
    if root is not None:
        return root / constants.VERSION_FILENAME
    # src/sitesmith/version.py -> repository root
    return Path(__file__).resolve().parents[2] / constants.VERSION_FILENAME


class VersionResolver:
    """Computes the version once and caches it until `reset()`."""

    def __init__(self, reader: Reader = read_version_file, locate: Callable[[], Path] = version_file_path):
        self._reader = reader
        self._locate = locate
        self._version: Optional[str] = None

    def get_version(self) -> str:
        if self._version is None:
            path = self._locate()
            version = self._reader(path)
            if version is None:
                logger.debug(f"[Version] Using fallback version '{constants.VERSION}'")
                version = constants.VERSION
            self._version = version
        return self._version

    def reset(self) -> None:
        """Forget the cached version; the next call reads the file again."""
        self._version = None


resolver = VersionResolver()


def get_version() -> str:
    return resolver.get_version()


def reset() -> None:
    resolver.reset()
