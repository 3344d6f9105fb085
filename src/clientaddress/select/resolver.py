"""Turn the selected address into the string returned to the caller."""

from __future__ import annotations

from clientaddress.models import AddressRecord
from clientaddress.render.html_text import html_to_plain_text
from clientaddress.utils.errors import UnknownFieldError


def resolve(
    target: AddressRecord,
    default: AddressRecord,
    field_filter: str | None = None,
) -> str:
    """Return one field of ``target`` or its rendered text.

    Without ``field_filter`` the rendered HTML of ``target`` is converted to
    plain text.  Otherwise the lower-cased field is looked up in ``target``
    and, when ``target`` is a different record than ``default``, in
    ``default``.  Present but empty values yield ``""``.

    Raises
    ------
    UnknownFieldError
        If neither record has the field.
    """

    name = (field_filter or "").strip().lower()
    if not name:
        return html_to_plain_text(target.rendered_html)

    if name in target.fields:
        return target.fields[name] or ""
    if target is not default and name in default.fields:
        return default.fields[name] or ""
    raise UnknownFieldError(name)


__all__ = ["resolve"]
