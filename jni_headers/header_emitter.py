"""Render C headers with name and signature macros for Java methods."""

import logging
from collections.abc import Iterable

from jni_headers.models import HeaderConfig, MethodRecord
from jni_headers.naming import guard_token
from jni_headers.report_parser import collect_records

logger = logging.getLogger(__name__)

BANNER = "/* DO NOT EDIT THIS FILE - it is machine generated */"
GUARD_PREFIX = "_Callbacks_"


def _method_block(record: MethodRecord) -> list[str]:
    return [
        f"/* {record.declaration_line} */",
        f'#define {record.macro_stem}_NAME "{record.name}"',
        f"/* {record.signature_line} */",
        f'#define {record.macro_stem}_SIGNATURE "{record.signature}"',
        "",
    ]


def render_header(class_name: str, records: Iterable[MethodRecord]) -> str:
    """Render the header text for a class.

    Args:
        class_name: Fully qualified Java class name, e.g. "com.example.Foo"
        records: Complete method records in report order

    Returns:
        Header file content, every line terminated by a newline
    """
    guard = GUARD_PREFIX + guard_token(class_name)
    lines = [
        BANNER,
        f"/* Header for class {guard_token(class_name)} */",
        "",
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
    ]

    count = 0
    for record in records:
        lines.extend(_method_block(record))
        count += 1

    lines.append(f"#endif //{guard}")
    lines.append("")

    logger.info(f"Rendered header for {class_name} with {count} methods")
    return "\n".join(lines)


def generate_header(lines: Iterable[str], config: HeaderConfig) -> str:
    """Generate a header from a captured javap report.

    The whole report is parsed before any text is rendered, so a parse
    error never produces a truncated header.

    Args:
        lines: Report lines, in order
        config: Class name and report patterns

    Returns:
        Header file content

    Raises:
        InvalidPatternError: If a configured pattern does not compile
        ToolReportedError: If the report contains an error line
        OrphanSignatureError: If a signature has no preceding method name
    """
    records = collect_records(lines, config)
    return render_header(config.class_name, records)
