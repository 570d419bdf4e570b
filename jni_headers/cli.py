"""Command-line interface for jni-headers."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from jni_headers.errors import JniHeadersError
from jni_headers.freshness import is_up_to_date, source_file_for
from jni_headers.generator import generate_header_file
from jni_headers.jdk_locator import resolve_tool
from jni_headers.models import (
    DEFAULT_ERROR_PATTERN,
    DEFAULT_NAME_PATTERN,
    DEFAULT_SIGNATURE_PATTERN,
    HeaderConfig,
)
from jni_headers.report_parser import split_report
from jni_headers.tool_runner import run_javah, run_javap

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _add_pattern_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--error-regex",
        default=DEFAULT_ERROR_PATTERN,
        help=f"Regex matching javap error lines (default: {DEFAULT_ERROR_PATTERN})",
    )
    parser.add_argument(
        "--name-regex",
        default=DEFAULT_NAME_PATTERN,
        help="Regex matching method declarations, group 1 is the name",
    )
    parser.add_argument(
        "--signature-regex",
        default=DEFAULT_SIGNATURE_PATTERN,
        help="Regex matching signature lines, group 1 is the signature",
    )


def _add_tool_arguments(parser: argparse.ArgumentParser, tool: str):
    parser.add_argument(
        "--classpath",
        "-cp",
        action="append",
        default=[],
        help="Classpath entry passed to the tool (repeatable)",
    )
    parser.add_argument(
        "--classes-dir",
        type=Path,
        help="Compiled classes directory, used as the tool's working directory",
    )
    parser.add_argument(
        "--source-dir",
        type=Path,
        help="Java source root; when the source is older than the output, "
        f"{tool} is not run",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Regenerate even if the output is up to date",
    )
    parser.add_argument(
        f"--{tool}-path",
        type=Path,
        help=f"Path to the {tool} executable (default: found in JAVA_HOME/JDK_HOME)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="jni-headers",
        description="Generate C headers exposing JNI method names and signatures",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # javap subcommand
    javap_parser = subparsers.add_parser(
        "javap",
        help="Run javap -s on a class and write name/signature macros",
    )
    javap_parser.add_argument("class_name", help="Fully qualified class name")
    javap_parser.add_argument(
        "--output", "-o", type=Path, required=True, help="Header file to write"
    )
    _add_tool_arguments(javap_parser, "javap")
    _add_pattern_arguments(javap_parser)

    # javah subcommand
    javah_parser = subparsers.add_parser(
        "javah",
        help="Run javah on a class to write its JNI function header",
    )
    javah_parser.add_argument("class_name", help="Fully qualified class name")
    javah_parser.add_argument(
        "--output", "-o", type=Path, required=True, help="Header file to write"
    )
    _add_tool_arguments(javah_parser, "javah")
    javah_parser.add_argument(
        "--javah-verbose",
        action="store_true",
        help="Pass -verbose to javah",
    )

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Write name/signature macros from already captured javap output",
    )
    parse_parser.add_argument("class_name", help="Fully qualified class name")
    parse_parser.add_argument(
        "--output", "-o", type=Path, required=True, help="Header file to write"
    )
    parse_parser.add_argument(
        "--input",
        "-i",
        type=Path,
        help="File holding javap -s output (default: stdin)",
    )
    _add_pattern_arguments(parse_parser)

    return parser


def _config_from_args(parsed: argparse.Namespace) -> HeaderConfig:
    return HeaderConfig(
        class_name=parsed.class_name,
        error_pattern=parsed.error_regex,
        name_pattern=parsed.name_regex,
        signature_pattern=parsed.signature_regex,
    )


def _is_skippable(parsed: argparse.Namespace, tool: str) -> bool:
    if parsed.force or parsed.source_dir is None:
        return False
    source_file = source_file_for(parsed.class_name, parsed.source_dir)
    if is_up_to_date(source_file, parsed.output):
        print(
            f"Source file: [{source_file}] is not modified, skipping '{tool}' execution",
            file=sys.stderr,
        )
        return True
    return False


async def run_javap_command(parsed: argparse.Namespace) -> int:
    """Run the javap command."""
    if _is_skippable(parsed, "javap"):
        return 0

    javap = resolve_tool("javap", parsed.javap_path)
    output = await run_javap(
        parsed.class_name, javap, parsed.classpath, cwd=parsed.classes_dir
    )
    result = generate_header_file(
        split_report(output), _config_from_args(parsed), parsed.output
    )
    print(
        f"Wrote {result.method_count} methods to: {result.output_path}",
        file=sys.stderr,
    )
    return 0


async def run_javah_command(parsed: argparse.Namespace) -> int:
    """Run the javah command."""
    if _is_skippable(parsed, "javah"):
        return 0

    javah = resolve_tool("javah", parsed.javah_path)
    await run_javah(
        parsed.class_name,
        parsed.output,
        javah,
        parsed.classpath,
        cwd=parsed.classes_dir,
        verbose=parsed.javah_verbose,
    )
    print(f"Header written to: {parsed.output}", file=sys.stderr)
    return 0


def run_parse_command(parsed: argparse.Namespace) -> int:
    """Run the parse command."""
    if parsed.input is None:
        text = sys.stdin.read()
    else:
        try:
            text = parsed.input.read_text(encoding="utf-8")
        except OSError as e:
            raise JniHeadersError(f"Cannot read {parsed.input}: {e}") from e

    result = generate_header_file(
        split_report(text), _config_from_args(parsed), parsed.output
    )
    print(
        f"Wrote {result.method_count} methods to: {result.output_path}",
        file=sys.stderr,
    )
    return 0


async def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        parsed = create_parser().parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 0

    setup_logging(parsed.verbose)

    if parsed.command is None:
        # No command - show help
        create_parser().print_help(sys.stderr)
        return 1

    try:
        if parsed.command == "javap":
            return await run_javap_command(parsed)
        elif parsed.command == "javah":
            return await run_javah_command(parsed)
        elif parsed.command == "parse":
            return run_parse_command(parsed)
    except JniHeadersError as e:
        logger.error(f"{parsed.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


def main():
    """Entry point for the CLI."""
    exit_code = asyncio.run(run_cli(sys.argv[1:]))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
