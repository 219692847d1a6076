"""
Aggregator and the discovery pass that feeds it.

One linear pass per image directory, in sorted order:

    no Dockerfile anywhere  -> skipped (or missing_dockerfile when reported)
    no tags.txt             -> missing_tags
    otherwise               -> every entry resolved, in manifest order;
                               unresolved ones go to missing_context
"""

import logging
from typing import Optional

from ..io import FileSystem, PathLike, create_fs
from ..datacls import (
    Diagnostics,
    ImageState,
    MatrixReport,
    ResolvedBuildTarget,
)
from .images import list_images, has_dockerfile, join_path, manifest_path
from .manifest import read_manifest
from .resolve import ContextResolver

logger = logging.getLogger(__name__)


class MatrixAccumulator:
    """Ordered matrix entries plus the three diagnostic lists for one run."""

    def __init__(self):
        self.include = []
        self.diagnostics = Diagnostics()

    def add_target(self, target: ResolvedBuildTarget):
        self.include.append(target)

    def record_missing_dockerfile(self, name: str):
        logger.warning(f"[{name}] No Dockerfile found in image directory")
        self.diagnostics.missing_dockerfile.append(name)

    def record_missing_tags(self, name: str):
        logger.warning(f"[{name}] Dockerfile present but tags manifest is missing")
        self.diagnostics.missing_tags.append(name)

    def record_missing_context(self, name: str, tag: str):
        logger.warning(f"[{name}] No Dockerfile for tag '{tag}'")
        self.diagnostics.missing_context.append(f"{name}:{tag}")

    def report(self) -> MatrixReport:
        return MatrixReport(
            include=list(self.include),
            diagnostics=self.diagnostics.model_copy(deep=True),
        )


def scan_image(root: PathLike, name: str, fs: FileSystem) -> ImageState:
    """Collect per-image state; the manifest is only read when it matters."""
    state = ImageState(name=name, path=join_path(root, name))
    state.has_dockerfile = has_dockerfile(state.path, fs)
    if not state.has_dockerfile:
        return state

    manifest = manifest_path(state.path)
    state.has_manifest = fs.is_file(manifest)
    if state.has_manifest:
        state.entries = read_manifest(manifest, fs)
    return state


def collect_image(
    state: ImageState,
    resolver: ContextResolver,
    accumulator: MatrixAccumulator,
    report_missing_dockerfile: bool = False,
):
    """Classify one image into the accumulator."""
    if not state.has_dockerfile:
        if report_missing_dockerfile:
            accumulator.record_missing_dockerfile(state.name)
        else:
            logger.debug(f"[{state.name}] No Dockerfile, skipping")
        return

    if not state.has_manifest:
        accumulator.record_missing_tags(state.name)
        return

    for entry in state.entries:
        target = resolver.resolve(state.name, state.path, entry)
        if target is None:
            accumulator.record_missing_context(state.name, entry.tag)
        else:
            accumulator.add_target(target)


def discover(
    root: PathLike,
    fs: Optional[FileSystem] = None,
    report_missing_dockerfile: bool = False,
    resolver: Optional[ContextResolver] = None,
) -> MatrixReport:
    """
    Run the whole discovery pipeline over `root`.

    Raises RootNotFoundError if `root` is not a directory. Everything else
    ends up in the returned report.
    """
    fs = fs or create_fs()
    resolver = resolver or ContextResolver(fs)
    accumulator = MatrixAccumulator()

    logger.info(f"Discovering images under '{root}'...")
    for name in list_images(root, fs):
        state = scan_image(root, name, fs)
        collect_image(state, resolver, accumulator, report_missing_dockerfile)

    report = accumulator.report()
    diag = report.diagnostics
    logger.info(
        f"Discovered {len(report.include)} build target(s); "
        f"missing: {len(diag.missing_dockerfile)} dockerfile, "
        f"{len(diag.missing_tags)} tags, {len(diag.missing_context)} context"
    )
    return report
