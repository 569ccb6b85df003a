"""JSON rendering of parsed cookies."""

import json
from datetime import datetime
from typing import Any, TextIO

from setcookie.cookie import Invalid, SetCookie


def _to_serializable(obj: Any) -> Any:
    if isinstance(obj, SetCookie):
        return {key: _to_serializable(value) for key, value in obj.to_dict().items()}
    if isinstance(obj, dict):
        return {key: _to_serializable(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_to_serializable(item) for item in obj]
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Invalid):
        return None
    return obj


def dump_cookies(cookies: list[SetCookie] | dict[str, SetCookie], file: TextIO, indent: int = 2) -> None:
    """Write *cookies* as JSON: datetimes in ISO 8601, ``INVALID`` as ``null``."""
    json.dump(_to_serializable(cookies), file, indent=indent, ensure_ascii=False)
    print(file=file)
