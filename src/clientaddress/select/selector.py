"""Choose which address of a client to report.

The default address is the first record flagged as default, or the first
record when none is flagged.  A type filter overrides the default with the
first record carrying that type; an unmatched type falls back to the default.
"""

from __future__ import annotations

from collections.abc import Sequence

from clientaddress.models import AddressRecord
from clientaddress.utils.errors import NotFoundError
from clientaddress.utils.logging import get_logger

logger = get_logger(__name__)


def default_address(addresses: Sequence[AddressRecord]) -> AddressRecord:
    """Return the default address of ``addresses``.

    Raises
    ------
    NotFoundError
        If ``addresses`` is empty.
    """

    if not addresses:
        raise NotFoundError()
    for record in addresses:
        if record.is_default:
            return record
    return addresses[0]


def select_address(
    addresses: Sequence[AddressRecord], type_filter: str | None = None
) -> AddressRecord:
    """Return the first address of type ``type_filter``, else the default."""

    fallback = default_address(addresses)
    wanted = (type_filter or "").strip().lower()
    if not wanted:
        return fallback
    for record in addresses:
        if record.has_type(wanted):
            return record
    logger.debug("no address of type %r, using default", wanted)
    return fallback


__all__ = ["default_address", "select_address"]
