"""Parse configuration.

ParseOptions is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Callable
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from setcookie.errors import CookieDecodeError


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options shared by ``parse_one`` and ``parse_all``. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        options = ParseOptions(decode_values=False, as_map=True)
    """

    # Percent-decode cookie values (attribute values are never decoded)
    decode_values: bool = True

    # parse_all output shape: dict keyed by cookie name instead of a list
    as_map: bool = False

    # Diagnostics
    silent: bool = False  # Drop decode failure diagnostics entirely
    on_decode_error: "Callable[[CookieDecodeError], None] | None" = None  # Replaces the log warning


DEFAULT_OPTIONS = ParseOptions()

_FIELD_NAMES = frozenset(f.name for f in fields(ParseOptions))


def resolve_options(options: ParseOptions | None = None, **overrides: Any) -> ParseOptions:
    """Merge keyword *overrides* into *options* (or the defaults).

    Raises ``TypeError`` for keywords that are not ``ParseOptions`` fields.
    """
    base = options if options is not None else DEFAULT_OPTIONS
    unknown = set(overrides) - _FIELD_NAMES
    if unknown:
        msg = f"Unknown parse option(s): {', '.join(sorted(unknown))}"
        raise TypeError(msg)
    if not overrides:
        return base
    return replace(base, **overrides)
