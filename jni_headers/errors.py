"""Exceptions raised while generating JNI callback headers."""


class JniHeadersError(Exception):
    """Base class for all header generation failures."""


class ToolReportedError(JniHeadersError):
    """A report line matched the error pattern."""

    def __init__(self, line: str):
        super().__init__(f"javap reported an error: {line}")
        self.line = line


class OrphanSignatureError(JniHeadersError):
    """A signature line appeared with no method name pending."""

    def __init__(self, line: str):
        super().__init__(f"Cannot parse signature - no name parsed, line: [{line}]")
        self.line = line


class InvalidPatternError(JniHeadersError):
    """One of the configured report patterns is not a valid regex."""

    def __init__(self, kind: str, pattern: str, reason: str):
        super().__init__(f"Invalid {kind} pattern {pattern!r}: {reason}")
        self.kind = kind
        self.pattern = pattern


class HeaderWriteError(JniHeadersError):
    """The header file could not be written."""

    def __init__(self, path, cause: OSError):
        super().__init__(f"Cannot write header {path}: {cause}")
        self.path = path
        self.cause = cause


class JdkNotFoundError(JniHeadersError):
    """No JDK installation containing the requested tool was found."""


class ToolNotFoundError(JniHeadersError):
    """An explicitly configured tool path does not point to a file."""


class ToolFailedError(JniHeadersError):
    """An external JDK tool exited with a non-zero code."""

    def __init__(self, command: list[str], exit_code: int, output: str):
        super().__init__(
            f"{command[0]} exited with code: [{exit_code}], output: [{output}]"
        )
        self.command = command
        self.exit_code = exit_code
        self.output = output
