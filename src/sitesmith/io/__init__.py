"""
sitesmith IO Module

- FileSystem: Abstract file system interface used by every step
- GenericFileSystem: fsspec-backed implementation
- DiskFileSystem: Local disk file system

Usage:
    from sitesmith.io import create_fs

    fs = create_fs()
    content = fs.read_text(Path("pages/index.md"))
"""

from .fs import (
    FileSystem,
    GenericFileSystem,
    DiskFileSystem,
    create_fs,
    wrap_io_error,
)

__all__ = [
    'FileSystem',
    'GenericFileSystem',
    'DiskFileSystem',
    'create_fs',
    'wrap_io_error',
]
