"""
Heuristic inference of a `<version>/<distro>` build context from a tag.

Both halves are priority-ordered rule lists: the first rule that applies
wins. New distros are supported by inserting a rule ahead of the fallback.
"""

import logging
from typing import Optional, Sequence

from .. import constants
from .rule import Rule, ContainsRule, PatternRule, FallbackRule, first_match

logger = logging.getLogger(__name__)

# MAJOR.MINOR at the very start of the tag, e.g. 1.29 from 1.29.1-debian-12-r0
VERSION_RULES: Sequence[Rule] = (
    PatternRule(r"^([0-9]+)\.([0-9]+)", "{0}.{1}"),
    FallbackRule(constants.LATEST_VERSION),
)

DISTRO_RULES: Sequence[Rule] = (
    ContainsRule("-debian-12", "debian-12"),
    ContainsRule("-ubuntu-22.04", "ubuntu-22.04"),
    PatternRule(r"-alpine-([0-9]+\.[0-9]+)", "alpine-{0}"),
    ContainsRule("-alpine", "alpine"),
    FallbackRule(constants.DEFAULT_DISTRO),
)


def infer_version(tag: str, rules: Optional[Sequence[Rule]] = None) -> str:
    version = first_match(VERSION_RULES if rules is None else rules, tag)
    return version if version is not None else constants.LATEST_VERSION


def infer_distro(tag: str, rules: Optional[Sequence[Rule]] = None) -> str:
    distro = first_match(DISTRO_RULES if rules is None else rules, tag)
    return distro if distro is not None else constants.DEFAULT_DISTRO


def infer_context(
    tag: str,
    version_rules: Optional[Sequence[Rule]] = None,
    distro_rules: Optional[Sequence[Rule]] = None,
) -> str:
    """
    Infer the relative build context for a tag.

    >>> infer_context("1.29.1-debian-12-r0")
    '1.29/debian-12'
    >>> infer_context("nightly")
    'latest/debian-12'
    """
    context = f"{infer_version(tag, version_rules)}/{infer_distro(tag, distro_rules)}"
    logger.debug(f"Inferred context '{context}' from tag '{tag}'")
    return context
