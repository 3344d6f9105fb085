"""Look up a client's address from a REST API and render it as plain text.

The main entry point is :func:`get_address`; the command line interface lives
in :mod:`clientaddress.cli`.
"""

from .formula import get_address, get_client_address

__version__ = "0.1.0"

__all__ = ["__version__", "get_address", "get_client_address"]
