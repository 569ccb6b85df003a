"""Single ``Set-Cookie`` value parsing.

``parse_one`` turns ``name=value; Attr=Val; Flag`` into a ``SetCookie``.
Parsing never fails on string input: undecodable values are kept raw,
unparseable ``Expires`` / ``Max-Age`` attributes become ``INVALID``.
"""

import logging
import re
from typing import Any
from urllib.parse import unquote

from setcookie.config import ParseOptions, resolve_options
from setcookie.cookie import INVALID, Invalid, SetCookie
from setcookie.dates import parse_expires
from setcookie.errors import CookieDecodeError

logger = logging.getLogger("setcookie.parser")

# A '%' that does not start a two-digit hex escape.
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Leading integer, the way JavaScript's parseInt(value, 10) reads it.
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def percent_decode(value: str) -> str:
    """Decode ``%XX`` escapes in *value* as UTF-8.

    Stricter than ``urllib.parse.unquote``: a stray ``%`` or an escape
    sequence that is not valid UTF-8 raises ``CookieDecodeError`` instead
    of being passed through or replaced. ``+`` is left alone.
    """
    if "%" not in value:
        return value
    if _MALFORMED_ESCAPE.search(value):
        raise CookieDecodeError(value, "malformed percent escape")
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError as exc:
        raise CookieDecodeError(value, "escapes are not valid UTF-8") from exc


def parse_max_age(text: str) -> int | Invalid:
    """Read the leading base-10 integer of *text*, or return ``INVALID``."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return INVALID
    return int(match.group(1))


def parse_one(cookie_string: str, options: ParseOptions | None = None, **overrides: Any) -> SetCookie:
    """Parse one ``Set-Cookie`` header value.

    Keyword *overrides* are ``ParseOptions`` fields::

        parse_one("id=a%20b; Path=/; HttpOnly")
        parse_one("id=a%20b", decode_values=False)

    Only ``decode_values``, ``silent`` and ``on_decode_error`` matter here;
    ``as_map`` is a ``parse_all`` concern.
    """
    opts = resolve_options(options, **overrides)

    parts = [part for part in cookie_string.split(";") if part.strip()]
    name, value = _split_name_value(parts[0] if parts else "")

    if opts.decode_values:
        try:
            value = percent_decode(value)
        except CookieDecodeError as exc:
            _report_decode_error(exc, opts)

    attrs: dict[str, Any] = {}
    extras: dict[str, str] = {}
    for part in parts[1:]:
        key, _, raw = part.partition("=")
        key = key.lstrip().lower()
        match key:
            case "expires":
                attrs["expires"] = parse_expires(raw)
            case "max-age":
                attrs["max_age"] = parse_max_age(raw)
            case "secure":
                attrs["secure"] = True
            case "httponly":
                attrs["http_only"] = True
            case "samesite":
                attrs["same_site"] = raw
            case "domain" | "path":
                attrs[key] = raw
            case _:
                extras[key] = raw

    return SetCookie(name=name, value=value, extras=extras, **attrs)


def _split_name_value(pair: str) -> tuple[str, str]:
    """Split the leading name-value pair on its first ``=``.

    Without any ``=`` the whole pair is the value and the name is empty.
    """
    name, sep, value = pair.partition("=")
    if not sep:
        return "", pair
    return name, value


def _report_decode_error(exc: CookieDecodeError, opts: ParseOptions) -> None:
    if opts.silent:
        return
    if opts.on_decode_error is not None:
        opts.on_decode_error(exc)
        return
    logger.warning(
        "Failed to decode value %r. Set decode_values=False to disable this feature.",
        exc.value,
    )
