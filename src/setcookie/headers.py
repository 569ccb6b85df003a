"""Collecting ``Set-Cookie`` values from header containers.

``Headers`` is an immutable, case-insensitive view over raw ASGI header
byte pairs (e.g. the ``headers`` of an ``http.response.start`` message).
``set_cookie_values`` pulls every ``Set-Cookie`` value out of whatever the
caller has at hand: a string, a list, a header mapping, or a response.
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from setcookie._internal.multimap import MultiValueMapping

SET_COOKIE = "set-cookie"


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Sequence[tuple[bytes, bytes]] = ()) -> None:
        object.__setattr__(self, "_raw", tuple(raw))

    @classmethod
    def from_pairs(cls, pairs: Sequence[tuple[str, str]]) -> "Headers":
        """Build from ``(name, value)`` string pairs, encoding as latin-1."""
        return cls(tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Headers is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower().encode("latin-1")
        for name, value in self._raw:
            if name.lower() == key_lower:
                return value.decode("latin-1")
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower().encode("latin-1")
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = name.decode("latin-1").lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = key.lower().encode("latin-1")
        return [value.decode("latin-1") for name, value in self._raw if name.lower() == key_lower]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Access raw header byte pairs for ASGI compatibility."""
        return self._raw


def set_cookie_values(source: Any) -> list[str]:
    """Return the raw ``Set-Cookie`` values held by *source*.

    Accepted sources, checked in this order:

    - ``None`` -> ``[]``
    - ``str`` -> a one-element list (no comma splitting)
    - anything with ``get_list`` (``Headers``, ``httpx.Headers``) -> all
      ``Set-Cookie`` values
    - any other ``Mapping`` -> the ``set-cookie`` entry, looked up
      case-insensitively; a string or a list of strings
    - a sequence of strings -> a list copy
    - an object with a ``headers`` attribute (``httpx.Response``) -> its headers

    Raises ``TypeError`` for anything else.
    """
    if source is None:
        return []
    if isinstance(source, str):
        return [source]
    if isinstance(source, MultiValueMapping):
        return list(source.get_list(SET_COOKIE))
    if isinstance(source, Mapping):
        return _from_plain_mapping(source)
    if isinstance(source, Sequence) and not isinstance(source, (bytes, bytearray)):
        return [_require_str(item) for item in source]
    headers = getattr(source, "headers", None)
    if headers is not None:
        return set_cookie_values(headers)
    msg = f"Cannot read Set-Cookie values from {type(source).__name__!r}"
    raise TypeError(msg)


def _from_plain_mapping(source: Mapping[Any, Any]) -> list[str]:
    values: list[str] = []
    for key, value in source.items():
        if not isinstance(key, str) or key.lower() != SET_COOKIE:
            continue
        if isinstance(value, str):
            values.append(value)
        else:
            values.extend(_require_str(item) for item in value)
    return values


def _require_str(item: object) -> str:
    if not isinstance(item, str):
        msg = f"Set-Cookie values must be str, got {type(item).__name__!r}"
        raise TypeError(msg)
    return item
