"""
Build Matrix Discovery Module

- images: Directory enumeration and Dockerfile presence
- manifest: tags.txt parsing
- resolve: ContextResolver (explicit or inferred context)
- aggregate: MatrixAccumulator and the discover() pipeline
- emit: CI outputs and the strict-mode gate

Usage:
    from buildmatrix.matrix import discover, emit

    report = discover("containers/openami")
    emit(report)
"""

from .images import list_images, has_dockerfile, manifest_path, join_path
from .manifest import is_blank, is_comment, has_tag, split_line, parse_manifest, read_manifest
from .resolve import ContextResolver
from .aggregate import MatrixAccumulator, scan_image, collect_image, discover
from .emit import encode, format_outputs, emit, strict_failure_message, enforce_strict

__all__ = [
    'list_images',
    'has_dockerfile',
    'manifest_path',
    'join_path',
    'is_blank',
    'is_comment',
    'has_tag',
    'split_line',
    'parse_manifest',
    'read_manifest',
    'ContextResolver',
    'MatrixAccumulator',
    'scan_image',
    'collect_image',
    'discover',
    'encode',
    'format_outputs',
    'emit',
    'strict_failure_message',
    'enforce_strict',
]
