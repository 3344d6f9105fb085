"""Address lookup as a spreadsheet style function.

:func:`get_address` is the function exposed to spreadsheets (``GetAddress``
in the sheet).  It validates its parameters, fetches the client's addresses,
picks the target address and returns either one field or the rendered
address as plain text.  Any failure raises a
:class:`~clientaddress.utils.errors.ClientAddressError` whose message is shown
in place of the result.
"""

from __future__ import annotations

from clientaddress.api.client import AddressApiClient, Credentials
from clientaddress.config import ConfigModel
from clientaddress.models import SelectionRequest
from clientaddress.select.resolver import resolve
from clientaddress.select.selector import default_address, select_address
from clientaddress.utils.errors import MissingParameterError, NotFoundError
from clientaddress.utils.logging import get_logger

logger = get_logger(__name__)


def get_client_address(
    credentials: Credentials | None,
    client_id: object,
    type_filter: str | None = None,
    field_filter: str | None = None,
    *,
    client: AddressApiClient | None = None,
    cfg: ConfigModel | None = None,
) -> str:
    """Fetch the addresses of ``client_id`` and resolve the requested value."""

    if credentials is None:
        credentials = Credentials("", "")
    missing = credentials.missing()
    if not client_id:
        missing.append("client id")
    if missing:
        raise MissingParameterError(missing)

    request = SelectionRequest(type_filter=type_filter, field_filter=field_filter)
    if client is None:
        with AddressApiClient(cfg) as own_client:
            addresses = own_client.fetch_addresses(client_id, credentials)
    else:
        addresses = client.fetch_addresses(client_id, credentials)
    if not addresses:
        raise NotFoundError(client_id)

    default = default_address(addresses)
    target = select_address(addresses, request.address_type)
    logger.debug(
        "client %s: selected %s address of %d",
        client_id,
        "default" if target is default else "typed",
        len(addresses),
    )
    return resolve(target, default, request.field_name)


def get_address(
    user: str | None,
    password: str | None,
    client_id: int | str | None,
    type: str | None = None,  # noqa: A002 - spreadsheet parameter name
    field: str | None = None,
    *,
    cfg: ConfigModel | None = None,
) -> str:
    """Return the address of ``client_id`` as plain text or a single field.

    Parameters
    ----------
    user, password:
        API credentials used for HTTP Basic authentication.
    client_id:
        Identifier of the client in the upstream system.
    type:
        Optional address type such as ``"shipping"``; falls back to the
        default address when no address has that type.
    field:
        Optional field name such as ``"postal_code"``; when omitted the whole
        rendered address is returned.
    """

    return get_client_address(
        Credentials(user or "", password or ""),
        client_id,
        type,
        field,
        cfg=cfg,
    )


__all__ = ["get_address", "get_client_address"]
