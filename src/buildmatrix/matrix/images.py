"""
Directory Enumerator: one immediate subdirectory of the root per image.
"""

import logging
import posixpath
from pathlib import PurePosixPath
from typing import List

from .. import constants
from ..io import FileSystem, PathLike
from ..exceptions import RootNotFoundError

logger = logging.getLogger(__name__)


def join_path(base: PathLike, *parts: str) -> str:
    """POSIX join with normalization, so ('.', 'foo') gives 'foo'."""
    return str(PurePosixPath(str(base), *parts))


def list_images(root: PathLike, fs: FileSystem) -> List[str]:
    """Return the sorted names of the immediate subdirectories of `root`."""
    if not fs.is_dir(root):
        raise RootNotFoundError(f"Image root not found: {root}")

    names = sorted(
        name for name in fs.listdir(root)
        if fs.is_dir(join_path(root, name))
    )
    logger.debug(f"Found {len(names)} image directories under '{root}': {names}")
    return names


def has_dockerfile(image_dir: PathLike, fs: FileSystem) -> bool:
    """True if a file named Dockerfile exists anywhere below `image_dir`."""
    for path in fs.find(image_dir):
        if posixpath.basename(path) == constants.DOCKERFILE_NAME:
            return True
    return False


def manifest_path(image_dir: PathLike) -> str:
    return join_path(image_dir, constants.MANIFEST_FILENAME)
