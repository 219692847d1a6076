from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import List, Union
import functools
import logging
import posixpath

import fsspec

from ..utils.typing_compat import override
from ..exceptions import (
    BMPathNotFoundError,
    BMNotAFileError,
    BMNotADirectoryError,
    BMPermissionError,
    BMDecodeError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, PurePosixPath]


def wrap_io_error(func):
    """Decorator to wrap IO errors into Build Matrix exceptions."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            raise BMPathNotFoundError(e) from e
        except IsADirectoryError as e:
            raise BMNotAFileError(e) from e
        except NotADirectoryError as e:
            raise BMNotADirectoryError(e) from e
        except PermissionError as e:
            raise BMPermissionError(e) from e
        except UnicodeDecodeError as e:
            raise BMDecodeError(e) from e

    return wrapper

# --------------------------------------------------------
#
# Abstract Base FileSystem Interface
#
# --------------------------------------------------------

class FileSystem(ABC):
    """Build Matrix File System Abstract Base Class

    Only the read-mostly operations discovery needs, plus appending
    to the CI output file.
    """

    @abstractmethod
    def read_text(self, path: PathLike, errors: str = "strict") -> str:
        """Read text from a file; `errors` is the codec error handler"""
        pass

    @abstractmethod
    def append_text(self, path: PathLike, content: str):
        """Append text to a file"""
        pass

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check if a path exists"""
        pass

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory"""
        pass

    @abstractmethod
    def is_file(self, path: PathLike) -> bool:
        """Check if a path is a regular file"""
        pass

    @abstractmethod
    def listdir(self, path: PathLike) -> List[str]:
        """List the names of the direct children of a directory"""
        pass

    @abstractmethod
    def find(self, path: PathLike) -> List[str]:
        """List all files below a directory, recursively"""
        pass


# --------------------
#
# fsspec FileSystem
#
# --------------------

class FsspecFileSystem(FileSystem):
    """fsspec-based File System"""

    def __init__(self, protocol="file"):
        self.fs = fsspec.filesystem(protocol)
        self.protocol = protocol
        self.name = f"{protocol}FS"

    def path2str(self, path: PathLike) -> str:
        """Convert a path to the string fsspec expects"""
        return str(path)

    @override
    @wrap_io_error
    def read_text(self, path: PathLike, errors: str = "strict", encoding: str = "utf-8") -> str:
        logger.debug(f"[{self.name}] Reading from: {path}")
        with self.fs.open(self.path2str(path), "r", encoding=encoding, errors=errors) as f:
            return f.read()

    @override
    @wrap_io_error
    def append_text(self, path: PathLike, content: str, encoding: str = "utf-8"):
        logger.debug(f"[{self.name}] Appending to: {path}")
        parent = posixpath.dirname(self.path2str(path))
        if parent and parent not in (".", "/"):
            self.fs.mkdirs(parent, exist_ok=True)
        with self.fs.open(self.path2str(path), "a", encoding=encoding) as f:
            f.write(content)

    @override
    def exists(self, path: PathLike) -> bool:
        return self.fs.exists(self.path2str(path))

    @override
    def is_dir(self, path: PathLike) -> bool:
        return self.fs.isdir(self.path2str(path))

    @override
    def is_file(self, path: PathLike) -> bool:
        return self.fs.isfile(self.path2str(path))

    @override
    @wrap_io_error
    def listdir(self, path: PathLike) -> List[str]:
        entries = self.fs.ls(self.path2str(path), detail=False)
        return [posixpath.basename(p.rstrip("/")) for p in entries]

    @override
    @wrap_io_error
    def find(self, path: PathLike) -> List[str]:
        return list(self.fs.find(self.path2str(path)))


class DiskFileSystem(FsspecFileSystem):
    """Local disk file system"""

    def __init__(self):
        super().__init__(protocol="file")


# --------------------
#
# Helper Functions
#
# --------------------

def create_fs(protocol: str = "file") -> FileSystem:
    """
    Create the file system discovery runs against.
    """
    if protocol == "file":
        return DiskFileSystem()
    return FsspecFileSystem(protocol=protocol)
