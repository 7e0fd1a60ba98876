"""Object types shipped with the client."""

from __future__ import annotations

from idoitclient.models.base import IdoitObject
from idoitclient.models.categories import (
    CategoryAccounting,
    CategoryContactAssignment,
    CategoryGeneral,
    CategoryModel,
    CategoryPersonMasterData,
)


class Server(IdoitObject):
    OBJECT_TYPE = "C__OBJTYPE__SERVER"
    CATEGORIES = (CategoryGeneral, CategoryModel, CategoryAccounting, CategoryContactAssignment)


class Client(IdoitObject):
    """Workstation / notebook."""
    OBJECT_TYPE = "C__OBJTYPE__CLIENT"
    CATEGORIES = (CategoryGeneral, CategoryModel, CategoryAccounting, CategoryContactAssignment)


class Person(IdoitObject):
    OBJECT_TYPE = "C__OBJTYPE__PERSON"
    CATEGORIES = (CategoryGeneral, CategoryPersonMasterData)
