"""Tests for default and typed address selection."""

from __future__ import annotations

import pytest

from clientaddress.models import AddressRecord
from clientaddress.select.selector import default_address, select_address
from clientaddress.utils.errors import NotFoundError


def _rec(*types: str, default: bool = False, html: str = "") -> AddressRecord:
    return AddressRecord(is_default=default, types=types, rendered_html=html)


def test_single_flagged_default_wins() -> None:
    first = _rec("billing")
    flagged = _rec("office", default=True)
    last = _rec("shipping")
    addresses = (first, flagged, last)
    assert default_address(addresses) is flagged
    assert select_address(addresses) is flagged
    assert select_address(addresses, "") is flagged


def test_no_flag_uses_first() -> None:
    first = _rec("billing")
    addresses = (first, _rec("shipping"))
    assert select_address(addresses) is first


def test_several_flags_first_flagged_wins() -> None:
    a = _rec("a")
    b = _rec("b", default=True)
    c = _rec("c", default=True)
    assert default_address((a, b, c)) is b


def test_type_match_case_insensitive_and_trimmed() -> None:
    billing = _rec("billing", default=True)
    shipping = _rec("Shipping")
    addresses = (billing, shipping)
    assert select_address(addresses, "shipping") is shipping
    assert select_address(addresses, "  SHIPPING ") is shipping


def test_first_type_match_in_order() -> None:
    default = _rec("billing", default=True)
    first_ship = _rec("shipping")
    second_ship = _rec("other", "shipping")
    assert select_address((default, first_ship, second_ship), "shipping") is first_ship


def test_no_substring_match() -> None:
    default = _rec("billing", default=True)
    shipping = _rec("shipping")
    assert select_address((default, shipping), "ship") is default


def test_unmatched_type_falls_back_to_default() -> None:
    default = _rec("billing", default=True)
    addresses = (_rec("shipping"), default)
    assert select_address(addresses, "billing_for_lots") is select_address(addresses)


def test_whitespace_filter_is_absent() -> None:
    first = _rec("billing")
    assert select_address((first, _rec("shipping")), "   ") is first


def test_empty_set_raises() -> None:
    with pytest.raises(NotFoundError):
        default_address(())
    with pytest.raises(NotFoundError):
        select_address([], "billing")
