"""Split comma-joined ``Set-Cookie`` values.

Some transport layers fold every ``Set-Cookie`` header of a response into a
single comma-separated string. Commas also occur inside attribute values,
most often in ``Expires`` dates, so a plain ``str.split(",")`` is wrong.

A comma counts as a separator only when the token after it is followed by
``=``, i.e. when it starts a new ``name=value`` pair::

    >>> split_cookies_string("a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT, b=2")
    ['a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT', 'b=2']

This is a heuristic, not a grammar. Its segmenting is kept exactly as is:
segments are not stripped, and a trailing comma stays on the last segment.
"""

_SPECIAL = frozenset("=;,")


def split_cookies_string(cookies_string: str) -> list[str]:
    """Split *cookies_string* into individual ``Set-Cookie`` values.

    Never fails. An empty string yields an empty list; a string with no
    separator yields a one-element list holding the whole input.
    """
    cookies: list[str] = []
    length = len(cookies_string)
    pos = 0

    def skip_whitespace() -> bool:
        nonlocal pos
        while pos < length and cookies_string[pos].isspace():
            pos += 1
        return pos < length

    while pos < length:
        start = pos
        separator_found = False

        while skip_whitespace():
            if cookies_string[pos] != ",":
                pos += 1
                continue

            last_comma = pos
            pos += 1
            skip_whitespace()
            next_start = pos

            # Consume what would be the name of a following cookie.
            while pos < length and cookies_string[pos] not in _SPECIAL:
                pos += 1

            if pos < length and cookies_string[pos] == "=":
                separator_found = True
                cookies.append(cookies_string[start:last_comma])
                pos = next_start
                start = pos
            else:
                # Comma inside an attribute value; keep scanning this cookie.
                pos = last_comma + 1

        if not separator_found or pos >= length:
            cookies.append(cookies_string[start:])

    return cookies
