"""Generate C headers exposing JNI method names and signatures from javap output."""

from jni_headers.errors import (
    HeaderWriteError,
    JniHeadersError,
    OrphanSignatureError,
    ToolReportedError,
)
from jni_headers.generator import generate_header_file
from jni_headers.header_emitter import generate_header, render_header
from jni_headers.models import GenerationResult, HeaderConfig, MethodRecord
from jni_headers.naming import guard_token, to_macro_stem
from jni_headers.report_parser import (
    ReportPatterns,
    collect_records,
    parse_report,
    split_report,
)

__all__ = [
    # Models
    "HeaderConfig",
    "MethodRecord",
    "GenerationResult",
    # Errors
    "JniHeadersError",
    "ToolReportedError",
    "OrphanSignatureError",
    "HeaderWriteError",
    # Parsing
    "ReportPatterns",
    "parse_report",
    "collect_records",
    "split_report",
    # Naming
    "to_macro_stem",
    "guard_token",
    # Header generation
    "render_header",
    "generate_header",
    "generate_header_file",
]
