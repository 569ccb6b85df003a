"""Batch parsing: many ``Set-Cookie`` values into a list or a name-keyed dict."""

from typing import Any, Literal, overload

from setcookie.config import ParseOptions, resolve_options
from setcookie.cookie import SetCookie
from setcookie.headers import set_cookie_values
from setcookie.parser import parse_one


@overload
def parse_all(
    source: Any, options: ParseOptions | None = None, *, as_map: Literal[False] = ..., **overrides: Any
) -> list[SetCookie]: ...


@overload
def parse_all(
    source: Any, options: ParseOptions | None = None, *, as_map: Literal[True], **overrides: Any
) -> dict[str, SetCookie]: ...


def parse_all(
    source: Any, options: ParseOptions | None = None, **overrides: Any
) -> list[SetCookie] | dict[str, SetCookie]:
    """Parse every ``Set-Cookie`` value in *source*.

    *source* is anything ``set_cookie_values`` accepts: ``None``, a string,
    a list of strings, a header mapping, or a response object. Values are
    not comma-split; run ``split_cookies_string`` first when one string may
    hold several cookies.

    Blank values are skipped. With ``as_map=True`` the result is keyed by
    cookie name, the last cookie for a name wins, and unnamed cookies are
    dropped.
    """
    opts = resolve_options(options, **overrides)
    values = set_cookie_values(source) if source else []

    if not opts.as_map:
        return [parse_one(value, opts) for value in values if value.strip()]

    cookies: dict[str, SetCookie] = {}
    for value in values:
        if not value.strip():
            continue
        cookie = parse_one(value, opts)
        if cookie.name:
            cookies[cookie.name] = cookie
    return cookies
