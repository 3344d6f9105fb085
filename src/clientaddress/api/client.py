"""Authenticated client for the address endpoint.

One GET per lookup, HTTP Basic authentication, JSON body.  There is no
caching, retrying or paging; every failure is raised as one of the typed
errors from :mod:`clientaddress.utils.errors`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from clientaddress.config import ConfigModel, load_config
from clientaddress.models import AddressSet, parse_address_set
from clientaddress.utils.errors import ApiError, InvalidResponseError, NetworkError
from clientaddress.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Credentials:
    """User name and password for HTTP Basic authentication."""

    user: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, password='**********')"

    def missing(self) -> list[str]:
        """Return the names of empty credential parts."""

        return [name for name in ("user", "password") if not getattr(self, name)]


class AddressApiClient:
    """Fetch address sets for clients from the configured API."""

    def __init__(
        self,
        cfg: ConfigModel | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.cfg = cfg if cfg is not None else load_config()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {"User-Agent": self.cfg.api.user_agent, "Accept": "application/json"}
        )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "AddressApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, url: str, credentials: Credentials) -> requests.Response:
        """Issue the authenticated GET, wrapping transport failures."""

        logger.debug("GET %s", url)
        try:
            resp = self.session.get(
                url,
                auth=HTTPBasicAuth(credentials.user, credentials.password),
                timeout=self.cfg.api.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise NetworkError(str(exc) or type(exc).__name__) from exc
        logger.debug("GET %s -> %s", url, resp.status_code)
        return resp

    def fetch_json(self, client_id: object, credentials: Credentials) -> Any:
        """Return the decoded JSON body of the address list for ``client_id``."""

        resp = self.get(self.cfg.api.address_url(client_id), credentials)
        if resp.status_code != 200:
            raise ApiError(resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise InvalidResponseError("body is not valid JSON") from exc

    def fetch_addresses(self, client_id: object, credentials: Credentials) -> AddressSet:
        """Return the ordered address set of ``client_id``; may be empty."""

        addresses = parse_address_set(self.fetch_json(client_id, credentials))
        logger.debug("client %s has %d address(es)", client_id, len(addresses))
        return addresses


__all__ = ["AddressApiClient", "Credentials"]
