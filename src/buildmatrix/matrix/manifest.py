"""
Tag Manifest Parser.

Manifest format, one entry per line:

    # comment
    TAG [RELATIVE_CONTEXT]

Blank lines, comment lines and lines without a tag are dropped silently.
Each of those drops is its own predicate below.
"""

import logging
from typing import List, Optional, Tuple

from .. import constants
from ..io import FileSystem, PathLike
from ..datacls import TagEntry

logger = logging.getLogger(__name__)


def is_blank(line: str) -> bool:
    return not line.strip()


def is_comment(line: str) -> bool:
    return line.strip().startswith(constants.COMMENT_PREFIX)


def has_tag(tag: str) -> bool:
    return bool(tag)


def split_line(line: str) -> Tuple[str, Optional[str]]:
    """
    Split a manifest line into (tag, relative_context).

    Only the first two whitespace-separated tokens count. The second one
    is taken as written, even when it starts with '#'.
    """
    tokens = line.split()
    tag = tokens[0] if tokens else ""
    relative_context = tokens[1] if len(tokens) > 1 else None
    return tag, relative_context


def parse_manifest(text: str, source: str = "<manifest>") -> List[TagEntry]:
    """Parse manifest text into ordered TagEntry objects."""
    entries: List[TagEntry] = []
    for lineno, raw in enumerate(text.split("\n"), start=1):
        if is_blank(raw) or is_comment(raw):
            continue
        tag, relative_context = split_line(raw)
        if not has_tag(tag):
            logger.debug(f"{source}:{lineno}: no tag, skipping")
            continue
        entries.append(TagEntry(tag=tag, relative_context=relative_context, line=lineno))

    logger.debug(f"Parsed {len(entries)} tag entries from {source}")
    return entries


def read_manifest(path: PathLike, fs: FileSystem) -> List[TagEntry]:
    # Undecodable bytes decode to U+FFFD instead of failing the run
    text = fs.read_text(path, errors="replace")
    return parse_manifest(text, source=str(path))
