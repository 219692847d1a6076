"""
Build Matrix Data Classes

- TagEntry: One parsed manifest line
- ResolvedBuildTarget: One matrix entry
- ImageState: Per-image discovery state
- Diagnostics: The missing_* lists
- MatrixReport: Matrix plus diagnostics
"""

from .targets import TagEntry, ResolvedBuildTarget, ImageState, Diagnostics, MatrixReport

__all__ = [
    'TagEntry',
    'ResolvedBuildTarget',
    'ImageState',
    'Diagnostics',
    'MatrixReport',
]
