"""The parsed ``Set-Cookie`` record.

``SetCookie`` holds the well-known attributes as typed fields and keeps
every unrecognized attribute in a separate read-only ``extras`` mapping.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Final, final


@final
class Invalid:
    """Marker for an attribute that was present but could not be coerced.

    Plays the role of an invalid date or a not-a-number max-age. Falsy, so
    ``if cookie.max_age:`` treats it like a missing value, while
    ``cookie.max_age is INVALID`` still tells the two apart.
    """

    __slots__ = ()
    _instance: "Invalid | None" = None

    def __new__(cls) -> "Invalid":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INVALID"

    def __reduce__(self) -> str:
        return "INVALID"


INVALID: Final = Invalid()


@dataclass(frozen=True, slots=True)
class SetCookie:
    """One decoded ``Set-Cookie`` header value.

    ``None`` means the attribute was absent; ``INVALID`` means it was present
    but unparseable. Boolean flags are ``True`` only when the attribute
    appeared.
    """

    value: str
    name: str = ""
    domain: str | None = None
    path: str | None = None
    expires: datetime | Invalid | None = None
    max_age: int | Invalid | None = None
    http_only: bool = False
    secure: bool = False
    same_site: str | None = None
    extras: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.extras, MappingProxyType):
            object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping of the attributes that were present.

        A bare ``name=value`` cookie yields exactly ``{"name": ..., "value": ...}``.
        """
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.domain is not None:
            data["domain"] = self.domain
        if self.path is not None:
            data["path"] = self.path
        if self.expires is not None:
            data["expires"] = self.expires
        if self.max_age is not None:
            data["maxAge"] = self.max_age
        if self.http_only:
            data["httpOnly"] = True
        if self.secure:
            data["secure"] = True
        if self.same_site is not None:
            data["sameSite"] = self.same_site
        for key, raw in self.extras.items():
            data.setdefault(key, raw)
        return data
