"""
Helpers for partial updates.

Update requests distinguish three states per field: absent (keep the
current value), explicit ``null`` and explicit value.  Pydantic
records which fields were actually sent in ``model_fields_set``, so a
field the client omitted never reaches the record.
"""

from typing import Any, Dict, Iterable

from pydantic import BaseModel


def collect_changes(
    data: BaseModel,
    *,
    non_blank: Iterable[str] = (),
    foreign_keys: Iterable[str] = (),
) -> Dict[str, Any]:
    """Return the fields of ``data`` that should be written.

    Parameters
    ----------
    data : BaseModel
        Parsed update request.
    non_blank : Iterable[str]
        Fields that may never be empty.  A ``None`` or ``""`` sent for
        one of them is dropped, leaving the stored value untouched.
    foreign_keys : Iterable[str]
        Reference fields.  ``None`` is kept (it detaches the record) but
        ``0`` is dropped, since no record ever has id 0.
    """
    non_blank = set(non_blank)
    foreign_keys = set(foreign_keys)
    changes: Dict[str, Any] = {}
    for name in data.model_fields_set:
        value = getattr(data, name)
        if name in non_blank and not value:
            continue
        if name in foreign_keys and value == 0:
            continue
        changes[name] = value
    return changes


def apply_changes(record: BaseModel, changes: Dict[str, Any]) -> None:
    for name, value in changes.items():
        setattr(record, name, value)
