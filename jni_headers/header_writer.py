"""Write generated headers to disk."""

import logging
import os
import stat
import tempfile
from pathlib import Path

from jni_headers.errors import HeaderWriteError

logger = logging.getLogger(__name__)


def _target_mode(path: Path) -> int:
    """Mode the header should end up with: the existing one, else umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_header(path: Path, text: str) -> None:
    """Replace the file at ``path`` with ``text``.

    The content goes to a temporary file next to the target which is then
    renamed over it, so other processes see either the old header or the
    new one. Missing parent directories are created. An existing header
    keeps its permissions; a new one gets the umask default.

    Raises:
        HeaderWriteError: If the file cannot be written
    """
    path = Path(path)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        logger.error(f"Failed to write header {path}: {e}")
        raise HeaderWriteError(path, e) from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.info(f"Header written to {path}")
