"""setcookie: decode HTTP ``Set-Cookie`` headers into structured records.

Basic usage::

    from setcookie import parse_all, parse_one, split_cookies_string

    cookie = parse_one("id=a3fWa; Max-Age=2592000; Secure; HttpOnly")
    cookie.max_age  # 2592000

    # One string holding several comma-joined Set-Cookie values
    parse_all(split_cookies_string(combined), as_map=True)

Header containers and responses work too::

    response = httpx.get("https://example.com/login")
    parse_all(response)
"""

__version__ = "0.1.0"
__all__ = [
    "INVALID",
    "CookieDecodeError",
    "Headers",
    "ParseOptions",
    "SetCookie",
    "SetCookieError",
    "parse_all",
    "parse_one",
    "set_cookie_values",
    "split_cookies_string",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "INVALID": "setcookie.cookie",
    "SetCookie": "setcookie.cookie",
    "CookieDecodeError": "setcookie.errors",
    "SetCookieError": "setcookie.errors",
    "Headers": "setcookie.headers",
    "set_cookie_values": "setcookie.headers",
    "ParseOptions": "setcookie.config",
    "parse_all": "setcookie.collect",
    "parse_one": "setcookie.parser",
    "split_cookies_string": "setcookie.split",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import setcookie`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
