"""Locate JDK command line tools."""

import logging
import os
import shutil
from collections.abc import Mapping
from pathlib import Path

from jni_headers.errors import JdkNotFoundError, ToolNotFoundError

logger = logging.getLogger(__name__)

JDK_HOME_VARIABLES = ("JAVA_HOME", "JDK_HOME")


def _has_tool(home: Path, tool: str) -> bool:
    return (home / "bin" / tool).is_file()


def _candidates(environ: Mapping[str, str], tool: str):
    for variable in JDK_HOME_VARIABLES:
        value = environ.get(variable)
        if value:
            yield Path(value)

    # tools on PATH live in <jdk>/bin
    on_path = shutil.which(tool, path=environ.get("PATH"))
    if on_path:
        yield Path(on_path).resolve().parent.parent


def find_jdk_home(
    tool: str = "javap", environ: Mapping[str, str] | None = None
) -> Path:
    """Find a JDK directory containing ``bin/<tool>``.

    JAVA_HOME is checked first, then JDK_HOME, then the JDK owning the
    tool found on PATH. For each candidate its parent is tried too,
    which covers a JRE nested inside a JDK.

    Args:
        tool: Executable name that must exist under ``bin/``
        environ: Environment to read, defaults to ``os.environ``

    Returns:
        The JDK home directory

    Raises:
        JdkNotFoundError: If no candidate contains the tool
    """
    if environ is None:
        environ = os.environ

    for home in _candidates(environ, tool):
        for candidate in (home, home.parent):
            if _has_tool(candidate, tool):
                logger.info(f"Using JDK at {candidate}")
                return candidate
        logger.debug(f"No {tool} under {home}")

    raise JdkNotFoundError(
        f"Cannot find JDK home directory with bin/{tool}, check JAVA_HOME or JDK_HOME"
    )


def resolve_tool(
    tool: str,
    explicit_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the executable to run for ``tool``.

    Raises:
        ToolNotFoundError: If ``explicit_path`` is given but is not a file
        JdkNotFoundError: If no JDK with the tool can be found
    """
    if explicit_path is not None:
        explicit_path = Path(explicit_path)
        if not explicit_path.is_file():
            raise ToolNotFoundError(
                f"Cannot find {tool} at {explicit_path}, check --{tool}-path"
            )
        return explicit_path
    return find_jdk_home(tool, environ) / "bin" / tool
