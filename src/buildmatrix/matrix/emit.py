"""
Emitting a MatrixReport as CI step outputs, and the strict-mode gate.

Outputs are `key=value` lines with compact JSON values, appended to the
CI output file when one is configured and printed to stdout otherwise.
"""

import json
import logging
from typing import Any, Optional

import click

from .. import constants
from ..io import FileSystem, create_fs
from ..datacls import Diagnostics, MatrixReport
from ..exceptions import BMIOError, OutputError, StrictModeError

logger = logging.getLogger(__name__)


def encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def format_outputs(report: MatrixReport) -> str:
    outputs = report.outputs()
    return "".join(f"{key}={encode(outputs[key])}\n" for key in constants.OUTPUT_KEYS)


def emit(report: MatrixReport, output: Optional[str] = None, fs: Optional[FileSystem] = None):
    """Write the outputs to `output` (appending) or to stdout."""
    text = format_outputs(report)
    if not output:
        click.echo(text, nl=False)
        return

    fs = fs or create_fs()
    try:
        fs.append_text(output, text)
    except (BMIOError, OSError) as e:
        raise OutputError(f"Failed to write outputs to '{output}': {e}") from e
    logger.info(f"Wrote {len(constants.OUTPUT_KEYS)} outputs to '{output}'")


def strict_failure_message(diagnostics: Diagnostics) -> str:
    lines = ["Missing build metadata detected."]
    if diagnostics.missing_tags:
        lines.append(
            f" - Missing or empty {constants.MANIFEST_FILENAME} for images: "
            f"{', '.join(diagnostics.missing_tags)}"
        )
    if diagnostics.missing_context:
        lines.append(
            f" - Missing context/Dockerfile for image:tag: "
            f"{', '.join(diagnostics.missing_context)}"
        )
    return "\n".join(lines)


def enforce_strict(report: MatrixReport, strict: bool):
    """Raise StrictModeError if strict mode is on and tags or contexts are missing."""
    diagnostics = report.diagnostics
    if not strict or not diagnostics.blocks_strict:
        return
    raise StrictModeError(
        strict_failure_message(diagnostics),
        missing_tags=diagnostics.missing_tags,
        missing_context=diagnostics.missing_context,
    )
