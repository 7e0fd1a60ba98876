"""CMDB object and category models."""

from idoitclient.models.base import IdoitCategory, IdoitObject, ObjectFactory, lookup_object_type
from idoitclient.models.categories import (
    CategoryAccounting,
    CategoryContactAssignment,
    CategoryGeneral,
    CategoryModel,
    CategoryPersonMasterData,
)
from idoitclient.models.objects import Client, Person, Server
from idoitclient.models.params import Dialog

__all__ = [
    "IdoitCategory",
    "IdoitObject",
    "ObjectFactory",
    "lookup_object_type",
    "CategoryAccounting",
    "CategoryContactAssignment",
    "CategoryGeneral",
    "CategoryModel",
    "CategoryPersonMasterData",
    "Client",
    "Person",
    "Server",
    "Dialog",
]
