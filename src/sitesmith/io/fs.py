from abc import ABC, abstractmethod
from functools import wraps
from pathlib import Path
from typing import List
import logging

import fsspec

from ..exceptions import (
    PathExistsError,
    PathNotFoundError,
    NotAFileError,
    NotADirError,
)

logger = logging.getLogger(__name__)


def wrap_io_error(func):
    """Decorator to wrap IO errors into sitesmith exceptions."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FileExistsError as e:
            raise PathExistsError(e) from e
        except FileNotFoundError as e:
            raise PathNotFoundError(e) from e
        except IsADirectoryError as e:
            raise NotAFileError(e) from e
        except NotADirectoryError as e:
            raise NotADirError(e) from e

    return wrapper

# --------------------
#
# Abstract FileSystem
#
# --------------------

class FileSystem(ABC):
    """sitesmith File System Abstract Base Class"""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read text from a file"""
        pass

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Read bytes from a file"""
        pass

    @abstractmethod
    def write_text(self, path: Path, content: str):
        """Write text to a file, creating parent directories"""
        pass

    @abstractmethod
    def write_bytes(self, path: Path, content: bytes):
        """Write bytes to a file, creating parent directories"""
        pass

    @abstractmethod
    def copy(self, src: Path, dst: Path):
        """Copy a file from src to dst"""
        pass

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a path exists"""
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory"""
        pass

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check if a path is a file"""
        pass

    @abstractmethod
    def mkdir(self, path: Path, exist_ok: bool = True):
        """Create a directory and its parents"""
        pass

    @abstractmethod
    def rmtree(self, path: Path):
        """Remove a directory recursively"""
        pass

    @abstractmethod
    def files(self, path: Path) -> List[Path]:
        """List every file below a directory, recursively and sorted"""
        pass

    @abstractmethod
    def size(self, path: Path) -> int:
        """Size of a file in bytes"""
        pass

# --------------------
#
# Generic FileSystem
#
# --------------------

class GenericFileSystem(FileSystem):
    """Generic File System backed by an fsspec implementation"""

    def __init__(self, protocol: str = "file"):
        self.fs = fsspec.filesystem(protocol)
        self.protocol = protocol
        self.name = f"{protocol}FS"

    def path2str(self, path: Path) -> str:
        """Convert a path to the string form the fsspec backend expects"""
        return Path(path).as_posix()

    @wrap_io_error
    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        logger.debug(f"[{self.name}] Reading from: {path}")
        with self.fs.open(self.path2str(path), "r", encoding=encoding) as f:
            return f.read()

    @wrap_io_error
    def read_bytes(self, path: Path) -> bytes:
        logger.debug(f"[{self.name}] Reading bytes from: {path}")
        with self.fs.open(self.path2str(path), "rb") as f:
            return f.read()

    @wrap_io_error
    def write_text(self, path: Path, content: str, encoding: str = "utf-8"):
        logger.debug(f"[{self.name}] Writing to: {path}")
        self.fs.mkdirs(self.path2str(Path(path).parent), exist_ok=True)
        with self.fs.open(self.path2str(path), "w", encoding=encoding) as f:
            f.write(content)

    @wrap_io_error
    def write_bytes(self, path: Path, content: bytes):
        logger.debug(f"[{self.name}] Writing bytes to: {path}")
        self.fs.mkdirs(self.path2str(Path(path).parent), exist_ok=True)
        with self.fs.open(self.path2str(path), "wb") as f:
            f.write(content)

    @wrap_io_error
    def copy(self, src: Path, dst: Path):
        logger.debug(f"[{self.name}] Copying path '{src}' to '{dst}'")
        self.fs.mkdirs(self.path2str(Path(dst).parent), exist_ok=True)
        self.fs.copy(self.path2str(src), self.path2str(dst))

    def exists(self, path: Path) -> bool:
        return self.fs.exists(self.path2str(path))

    def is_dir(self, path: Path) -> bool:
        return self.fs.isdir(self.path2str(path))

    def is_file(self, path: Path) -> bool:
        return self.fs.isfile(self.path2str(path))

    @wrap_io_error
    def mkdir(self, path: Path, exist_ok: bool = True):
        self.fs.mkdirs(self.path2str(path), exist_ok=exist_ok)

    @wrap_io_error
    def rmtree(self, path: Path):
        if self.fs.exists(self.path2str(path)):
            self.fs.rm(self.path2str(path), recursive=True)
        else:
            logger.debug(f"Path {path} does not exist, skipping rmtree.")

    @wrap_io_error
    def files(self, path: Path) -> List[Path]:
        if not self.is_dir(path):
            return []
        return sorted(Path(p) for p in self.fs.find(self.path2str(path)))

    @wrap_io_error
    def size(self, path: Path) -> int:
        return int(self.fs.size(self.path2str(path)))


class DiskFileSystem(GenericFileSystem):
    """Local disk file system using fsspec"""

    def __init__(self):
        super().__init__(protocol="file")

    def path2str(self, path: Path) -> str:
        return Path(path).absolute().as_posix()


def create_fs() -> FileSystem:
    """Create the default file system used by builds."""
    return DiskFileSystem()
