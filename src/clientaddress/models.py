"""Core address model.

An :class:`AddressRecord` mirrors one entry of the ``data`` array returned by
the address endpoint.  Records are immutable; an address set is simply an
ordered tuple of records built fresh for every lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from clientaddress.utils.errors import InvalidResponseError

AddressSet = tuple["AddressRecord", ...]


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


@dataclass(slots=True, frozen=True)
class AddressRecord:
    """A single client address.

    Attributes
    ----------
    is_default:
        ``True`` when the upstream source flags this address as the default.
    types:
        Address types such as ``"billing"`` or ``"shipping"`` in source order.
    rendered_html:
        The full address formatted as an HTML fragment.
    fields:
        Individual address components keyed by lower-cased field name.
    """

    is_default: bool = False
    types: tuple[str, ...] = ()
    rendered_html: str = ""
    fields: Mapping[str, str | None] = field(default_factory=lambda: MappingProxyType({}))

    def has_type(self, address_type: str) -> bool:
        """Return ``True`` if ``address_type`` matches one of ``types`` ignoring case."""

        wanted = address_type.lower()
        return any(t.lower() == wanted for t in self.types)

    @classmethod
    def from_api(cls, payload: Any) -> "AddressRecord":
        """Build a record from one address object of the API payload."""

        if not isinstance(payload, Mapping):
            raise InvalidResponseError("address entry is not an object")

        raw_types = payload.get("address_types")
        if raw_types is None:
            raw_types = ()
        elif isinstance(raw_types, str):
            raw_types = (raw_types,)
        elif not isinstance(raw_types, (list, tuple)):
            raise InvalidResponseError("address types are not a list")

        raw_fields = payload.get("address")
        if raw_fields is None:
            raw_fields = {}
        if not isinstance(raw_fields, Mapping):
            raise InvalidResponseError("address fields are not an object")

        fields: dict[str, str | None] = {}
        for key, value in raw_fields.items():
            fields[str(key).lower()] = None if value is None else str(value)

        return cls(
            is_default=bool(payload.get("default_address")),
            types=tuple(str(t) for t in raw_types),
            rendered_html=str(payload.get("rendered") or ""),
            fields=MappingProxyType(fields),
        )


def parse_address_set(body: Any) -> AddressSet:
    """Return the address set contained in a decoded response ``body``.

    A missing or ``null`` ``data`` member yields an empty set.
    """

    if not isinstance(body, Mapping):
        raise InvalidResponseError("body is not a JSON object")
    data = body.get("data")
    if data is None:
        return ()
    if not isinstance(data, list):
        raise InvalidResponseError("'data' is not a list")
    return tuple(AddressRecord.from_api(item) for item in data)


@dataclass(slots=True, frozen=True)
class SelectionRequest:
    """Caller supplied choice of address type and output field."""

    type_filter: str | None = None
    field_filter: str | None = None

    @property
    def address_type(self) -> str:
        """Trimmed, lower-cased type filter; empty when absent."""

        return _normalize(self.type_filter)

    @property
    def field_name(self) -> str:
        """Trimmed, lower-cased field filter; empty when absent."""

        return _normalize(self.field_filter)


__all__ = ["AddressRecord", "AddressSet", "SelectionRequest", "parse_address_set"]
