"""Turn a javap report into a header file on disk."""

import logging
from collections.abc import Iterable
from pathlib import Path

from jni_headers.header_emitter import render_header
from jni_headers.header_writer import write_header
from jni_headers.models import GenerationResult, HeaderConfig
from jni_headers.report_parser import collect_records

logger = logging.getLogger(__name__)


def generate_header_file(
    lines: Iterable[str], config: HeaderConfig, output_path: Path
) -> GenerationResult:
    """Generate the header for ``config.class_name`` and write it.

    Nothing is written when the report cannot be parsed; an existing
    header at ``output_path`` is left as it was.

    Args:
        lines: Report lines, in order
        config: Class name and report patterns
        output_path: Where to write the header

    Returns:
        GenerationResult with the output path and number of methods
    """
    records = collect_records(lines, config)
    write_header(output_path, render_header(config.class_name, records))
    logger.info(f"Wrote {len(records)} methods for {config.class_name}")
    return GenerationResult(output_path=Path(output_path), method_count=len(records))
