"""HTTP access to the upstream client address endpoint."""

from .client import AddressApiClient, Credentials

__all__ = ["AddressApiClient", "Credentials"]
