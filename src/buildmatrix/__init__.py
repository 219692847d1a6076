"""
Build Matrix

Discovers a CI build matrix for container images from a directory convention.

Main modules:
- matrix: Directory enumeration, manifest parsing, context resolution, aggregation and output
- rules: Ordered tag-to-context inference rules
- config: Settings from YAML, environment and CLI
- datacls: Type-safe data classes and models
- io: File system access
- utils: Logging setup

Quick start example:
```python
from buildmatrix import discover, emit, create_fs

fs = create_fs()
report = discover("containers/openami", fs=fs)
emit(report)
```
"""

__version__ = "0.3.0"

from .config import Config, ConfigModel
from .datacls import TagEntry, ResolvedBuildTarget, Diagnostics, MatrixReport
from .io import FileSystem, DiskFileSystem, create_fs
from .matrix import ContextResolver, MatrixAccumulator, discover, emit, enforce_strict
from .rules import infer_context
from .exceptions import (
    BuildMatrixError,
    ConfigurationError,
    RootNotFoundError,
    ConfigValidationError,
    OutputError,
    StrictModeError,
)

__all__ = [
    # Version
    '__version__',
    # Config
    'Config',
    'ConfigModel',
    # Data classes
    'TagEntry',
    'ResolvedBuildTarget',
    'Diagnostics',
    'MatrixReport',
    # IO
    'FileSystem',
    'DiskFileSystem',
    'create_fs',
    # Discovery
    'ContextResolver',
    'MatrixAccumulator',
    'discover',
    'emit',
    'enforce_strict',
    'infer_context',
    # Exceptions
    'BuildMatrixError',
    'ConfigurationError',
    'RootNotFoundError',
    'ConfigValidationError',
    'OutputError',
    'StrictModeError',
]
