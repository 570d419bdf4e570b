"""Run javap and javah as subprocesses."""

import asyncio
import logging
import os
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jni_headers.errors import ToolFailedError

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Exit code and combined stdout/stderr of a finished tool."""

    command: list[str]
    exit_code: int
    output: str


def _classpath_args(classpath: Sequence[str | Path]) -> list[str]:
    if not classpath:
        return []
    return ["-classpath", os.pathsep.join(str(Path(p).resolve()) for p in classpath)]


async def run_tool(command: list[str], cwd: Path | None = None) -> ToolResult:
    """Run ``command`` to completion and capture everything it printed.

    stderr is merged into stdout. Output is decoded as UTF-8 once the
    process has exited.
    """
    logger.info(f"Running: {command}")
    try:
        proc = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
            cwd=cwd,
        )
    except OSError as e:
        logger.error(f"Failed to start {command[0]}: {e}")
        raise ToolFailedError(command, -1, str(e)) from e

    stdout, _ = await proc.communicate()
    output = stdout.decode("utf-8", errors="replace")
    logger.debug(f"{command[0]} exited with {proc.returncode}")
    return ToolResult(command=command, exit_code=proc.returncode, output=output)


async def run_javap(
    class_name: str,
    javap: Path,
    classpath: Sequence[str | Path] = (),
    cwd: Path | None = None,
) -> str:
    """Run ``javap -s`` on a class.

    Args:
        class_name: Fully qualified class name
        javap: Path to the javap executable
        classpath: Entries joined into a single ``-classpath`` argument
        cwd: Working directory, usually the compiled classes directory

    Returns:
        The complete javap output

    Raises:
        ToolFailedError: If javap cannot be started or exits non-zero
    """
    command = [str(javap), "-s", *_classpath_args(classpath), class_name]
    result = await run_tool(command, cwd=cwd)
    if result.exit_code != 0:
        raise ToolFailedError(command, result.exit_code, result.output)
    return result.output


async def run_javah(
    class_name: str,
    output_path: Path,
    javah: Path,
    classpath: Sequence[str | Path] = (),
    cwd: Path | None = None,
    verbose: bool = False,
) -> ToolResult:
    """Run ``javah`` to write the JNI header for a class.

    javah leaves an unchanged header alone, so after a successful run the
    output is touched if it is older than the start of the run.

    Raises:
        ToolFailedError: If javah cannot be started or exits non-zero
    """
    started = time.time()
    output_path = Path(output_path)
    command = [str(javah)]
    if verbose:
        command.append("-verbose")
    command += ["-o", str(output_path.resolve())]
    command += _classpath_args(classpath)
    command.append(class_name)

    result = await run_tool(command, cwd=cwd)
    for line in result.output.splitlines():
        logger.info(f"javah: {line}")
    if result.exit_code != 0:
        raise ToolFailedError(command, result.exit_code, result.output)

    if output_path.is_file() and output_path.stat().st_mtime < started:
        output_path.touch()
    return result
