"""Identifier conversions used for macro and guard names."""


def _is_lower(ch: str) -> bool:
    # Cased characters that change when upper-cased, e.g. "a", "ä", "ß"
    return ch != ch.upper()


def to_macro_stem(name: str) -> str:
    """Convert a lowerCamelCase method name to an UPPER_SNAKE_CASE stem.

    An underscore goes before every uppercase letter that follows a
    lowercase letter, possibly with digits between (``value2X`` becomes
    ``VALUE2_X``). Non-ASCII letters count too, so ``getÄpfel`` becomes
    ``GET_ÄPFEL``. The result has no lowercase letters left, so converting
    it again changes nothing.

    Args:
        name: A Java identifier, e.g. "doSomethingNative"

    Returns:
        The macro stem, e.g. "DO_SOMETHING_NATIVE"
    """
    parts = []
    after_lower = False
    for ch in name:
        if ch.isupper() and after_lower:
            parts.append("_")
        parts.append(ch)
        if _is_lower(ch):
            after_lower = True
        elif not ch.isdigit():
            after_lower = False
    return "".join(parts).upper()


def guard_token(class_name: str) -> str:
    """Turn a fully qualified class name into an include guard token."""
    return class_name.replace(".", "_")
