"""Skip regeneration when the Java source has not changed."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def source_file_for(class_name: str, source_dir: Path) -> Path:
    """Path of the .java file declaring ``class_name`` under ``source_dir``."""
    return Path(source_dir) / (class_name.replace(".", "/") + ".java")


def is_up_to_date(source_file: Path, output_file: Path) -> bool:
    """Check whether ``output_file`` is at least as new as ``source_file``.

    Returns False when either file is missing, so generation runs.
    """
    source_file = Path(source_file)
    output_file = Path(output_file)
    if not (source_file.is_file() and output_file.is_file()):
        return False
    up_to_date = source_file.stat().st_mtime <= output_file.stat().st_mtime
    if up_to_date:
        logger.info(f"Source file: [{source_file}] is not modified")
    return up_to_date
