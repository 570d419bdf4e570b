"""Data models for header generation."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_ERROR_PATTERN = r"^ERROR:.*$"
DEFAULT_NAME_PATTERN = r"^.*\s+([^.\s(]+)\(.*\)[^()]*;$"
DEFAULT_SIGNATURE_PATTERN = r"^\s*Signature:\s+(.+)$"


@dataclass
class HeaderConfig:
    """Everything the generator needs besides the report itself.

    Patterns are matched against whole lines. The name and signature
    patterns must capture the method name and the signature in group 1.
    """

    class_name: str  # fully qualified, e.g. "com.example.Callbacks"
    error_pattern: str = DEFAULT_ERROR_PATTERN
    name_pattern: str = DEFAULT_NAME_PATTERN
    signature_pattern: str = DEFAULT_SIGNATURE_PATTERN


@dataclass
class MethodRecord:
    """A method name paired with its JNI signature."""

    declaration_line: str
    name: str
    macro_stem: str
    signature: str | None = None
    signature_line: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.signature is not None


@dataclass
class GenerationResult:
    """Outcome of writing a header file."""

    output_path: Path
    method_count: int
