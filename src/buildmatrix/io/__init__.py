"""
Build Matrix IO Module

- FileSystem: Abstract file system interface
- FsspecFileSystem: fsspec-backed implementation
- DiskFileSystem: Local disk file system

Usage:
    from buildmatrix.io import create_fs

    fs = create_fs()
    content = fs.read_text("containers/openami/nginx/tags.txt")
"""

from .fs import (
    FileSystem,
    FsspecFileSystem,
    DiskFileSystem,
    PathLike,
    create_fs,
    wrap_io_error,
)

__all__ = [
    'FileSystem',
    'FsspecFileSystem',
    'DiskFileSystem',
    'PathLike',
    'create_fs',
    'wrap_io_error',
]
