import re
from typing import Any

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9\s]")


def sanitize(value: Any) -> str:
    """Reduce a value to letters, digits and single spaces.

    Every other character is dropped, runs of whitespace collapse into one
    space and the result is stripped, so ``sanitize`` is idempotent.

    Examples:
        >>> sanitize("My Action!")
        'My Action'
        >>> sanitize("  Deploy to\\n  k8s (beta)  ")
        'Deploy to k8s beta'
    """
    text = _UNSAFE_CHARS.sub("", str(value))
    return " ".join(text.split())
