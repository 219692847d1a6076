"""
Build Matrix Rules Module

- Rule: Maps a tag to a path segment (ContainsRule, PatternRule, FallbackRule)
- infer_context: Ordered-rule inference of `<version>/<distro>` from a tag

Usage:
    from buildmatrix.rules import infer_context, DISTRO_RULES
"""

from .rule import Rule, ContainsRule, PatternRule, FallbackRule, first_match
from .context import (
    VERSION_RULES,
    DISTRO_RULES,
    infer_version,
    infer_distro,
    infer_context,
)

__all__ = [
    'Rule',
    'ContainsRule',
    'PatternRule',
    'FallbackRule',
    'first_match',
    'VERSION_RULES',
    'DISTRO_RULES',
    'infer_version',
    'infer_distro',
    'infer_context',
]
