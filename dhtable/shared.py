from sys import stderr
from typing import Any

_QUOTE_MAX = 32


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=stderr)


def quote(s: str) -> str:
    """repr() of s, shortened for one-line debug output."""
    if len(s) > _QUOTE_MAX:
        s = s[: _QUOTE_MAX - 3] + "..."
    return repr(s)
