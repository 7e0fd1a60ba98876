"""Field types for the shapes i-doit uses inside category payloads.

i-doit is loose about scalar encoding: ids arrive as strings, dialog fields
as ``{"id", "title", "const"}`` objects, dates either as ISO strings or as
``{"title": "2020-02-13"}`` objects and empty values as ``""`` or ``[]``.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer


class Dialog(BaseModel):
    """A dialog (drop-down) value."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | None = None
    title: str | None = None
    const: str | None = None


def _empty_to_none(value: Any) -> Any:
    if value == "" or value == [] or value == {}:
        return None
    return value


def _parse_date(value: Any) -> Any:
    value = _empty_to_none(value)
    if isinstance(value, dict):
        value = value.get("title") or None
    if isinstance(value, str):
        # "2020-02-13 00:00:00" shows up for datetime-backed fields
        return date.fromisoformat(value.strip()[:10])
    return value


def _parse_ref(value: Any) -> Any:
    value = _empty_to_none(value)
    if isinstance(value, dict):
        return value.get("id")
    return value


def _parse_title(value: Any) -> Any:
    value = _empty_to_none(value)
    if isinstance(value, dict):
        return value.get("title")
    return value


def _parse_dialog(value: Any) -> Any:
    value = _empty_to_none(value)
    if isinstance(value, (str, int)):
        return {"id": value} if str(value).isdigit() else {"title": value}
    return value


IdoitDate = Annotated[
    date | None,
    BeforeValidator(_parse_date),
    PlainSerializer(lambda d: d.isoformat() if d else None, return_type=str | None),
]
"""Date accepting both plain strings and i-doit's ``{"title": ...}`` objects."""

ObjectRef = Annotated[int | None, BeforeValidator(_parse_ref)]
"""Reference to another object, stored as its id."""

DialogTitle = Annotated[str | None, BeforeValidator(_parse_title)]
"""Dialog field reduced to its display title."""

DialogValue = Annotated[Dialog | None, BeforeValidator(_parse_dialog)]

OptionalText = Annotated[str | None, BeforeValidator(_empty_to_none)]
