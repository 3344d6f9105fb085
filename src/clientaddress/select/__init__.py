"""Address selection and field resolution."""

from .resolver import resolve
from .selector import default_address, select_address

__all__ = ["default_address", "resolve", "select_address"]
