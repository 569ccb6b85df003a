"""setcookie exception hierarchy.

Shared across the parser, the header helpers, and the CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class SetCookieError(Exception):
    """Base for all setcookie-specific errors."""


@dataclass(frozen=True, slots=True)
class CookieDecodeError(SetCookieError, ValueError):
    """A cookie value could not be percent-decoded.

    Raised by ``percent_decode``. ``parse_one`` always catches it, keeps the
    raw value, and reports the error as a diagnostic instead.
    """

    value: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"cannot decode {self.value!r}: {self.reason}"
        return f"cannot decode {self.value!r}"
