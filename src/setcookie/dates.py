"""``Expires`` attribute parsing.

Date handling is pinned to a fixed set of formats so results do not depend
on the host platform:

1. RFC 5322 style dates (``Wed, 09 Jun 2021 10:18:14 GMT``), which also
   covers the RFC 850 (``Wednesday, 09-Jun-21 ...``) and asctime forms,
   via ``email.utils.parsedate_to_datetime``.
2. ISO 8601 via ``datetime.fromisoformat``.

Anything else yields ``INVALID``. Times without an offset are taken as UTC,
so every returned datetime is timezone-aware.
"""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from setcookie.cookie import INVALID, Invalid


def parse_expires(text: str) -> datetime | Invalid:
    """Parse an ``Expires`` attribute value, or return ``INVALID``."""
    text = text.strip()
    if not text:
        return INVALID
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return INVALID
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
