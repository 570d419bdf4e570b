"""Extract method names and JNI signatures from ``javap -s`` output."""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from jni_headers.errors import (
    InvalidPatternError,
    OrphanSignatureError,
    ToolReportedError,
)
from jni_headers.models import HeaderConfig, MethodRecord
from jni_headers.naming import to_macro_stem

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ReportPatterns:
    """Compiled patterns classifying report lines."""

    error: re.Pattern
    name: re.Pattern
    signature: re.Pattern

    @classmethod
    def from_config(cls, config: HeaderConfig) -> "ReportPatterns":
        return cls(
            error=_compile("error", config.error_pattern),
            name=_compile("name", config.name_pattern, capturing=True),
            signature=_compile("signature", config.signature_pattern, capturing=True),
        )


def _compile(kind: str, pattern: str, capturing: bool = False) -> re.Pattern:
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(kind, pattern, str(e)) from e
    if capturing and compiled.groups < 1:
        raise InvalidPatternError(kind, pattern, "needs a capturing group")
    return compiled


def split_report(text: str) -> list[str]:
    """Split captured tool output into lines without line terminators.

    Only ``\\r\\n``, ``\\r`` and ``\\n`` end a line; other Unicode line
    separators stay inside the line text.
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_report(
    lines: Iterable[str], patterns: ReportPatterns
) -> Iterator[MethodRecord]:
    """Pair each method declaration with the signature line following it.

    Every line is checked against the error, name and signature patterns
    in that order; a line matching both of the latter is handled as a
    declaration first. When two declarations arrive without a signature
    between them the later one wins. A declaration still waiting for its
    signature at the end of the report is dropped.

    Args:
        lines: Report lines in the order the tool printed them
        patterns: Compiled classification patterns

    Yields:
        Complete MethodRecord objects, in report order

    Raises:
        ToolReportedError: If a line matches the error pattern
        OrphanSignatureError: If a signature arrives with no pending name
    """
    pending: MethodRecord | None = None

    for line in lines:
        if patterns.error.fullmatch(line):
            logger.error(f"Error line in report: {line}")
            raise ToolReportedError(line)

        name_match = patterns.name.fullmatch(line)
        if name_match:
            name = name_match.group(1)
            if pending is not None:
                logger.debug(
                    f"Discarding {pending.name}: no signature before {name}"
                )
            pending = MethodRecord(
                declaration_line=line,
                name=name,
                macro_stem=to_macro_stem(name),
            )

        signature_match = patterns.signature.fullmatch(line)
        if signature_match:
            if pending is None:
                raise OrphanSignatureError(line)
            pending.signature = signature_match.group(1)
            pending.signature_line = line
            logger.debug(f"Parsed method: {pending.name} {pending.signature}")
            yield pending
            pending = None

    if pending is not None:
        logger.debug(f"Dropping {pending.name}: report ended before its signature")


def collect_records(
    lines: Iterable[str], config: HeaderConfig
) -> list[MethodRecord]:
    """Compile the configured patterns and parse the whole report.

    Raises:
        InvalidPatternError: If a configured pattern does not compile
        ToolReportedError: If the report contains an error line
        OrphanSignatureError: If a signature has no preceding method name
    """
    return list(parse_report(lines, ReportPatterns.from_config(config)))
