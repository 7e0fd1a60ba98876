"""Domain-fixed i-doit requests and the result types they declare.

Requests are immutable. The API key and language are not part of a request;
the protocol engine adds them to the params of every outgoing envelope.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from idoitclient.models.base import IdoitCategory, IdoitObject
from idoitclient.models.params import OptionalText
from idoitclient.utils.exceptions import InvalidArgument


class IdoitRequest(BaseModel):
    """Base request: a method name, a params payload and a result type."""
    METHOD: ClassVar[str] = ""
    RESPONSE_TYPE: ClassVar[Any] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def method(self) -> str:
        return self.METHOD

    def response_type(self) -> Any:
        return self.RESPONSE_TYPE

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- responses ---


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    result: bool | None = None
    user_id: int | None = Field(default=None, alias="userid")
    name: str | None = None
    mail: str | None = None
    username: str | None = None
    session_id: str = Field(alias="session-id")
    client_id: int | None = Field(default=None, alias="client-id")
    client_name: str | None = Field(default=None, alias="client-name")


class SimpleSuccessResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    result: bool | None = None
    message: str | None = None


class ObjectDescriptor(BaseModel):
    """One row of cmdb.objects.read."""
    model_config = ConfigDict(extra="ignore")

    id: int
    title: OptionalText = None
    sysid: OptionalText = None
    type: int | None = None
    type_title: OptionalText = None
    type_group_title: OptionalText = None
    status: int | None = None
    cmdb_status: int | None = None
    cmdb_status_title: OptionalText = None
    created: OptionalText = None
    updated: OptionalText = None


class ObjectsReadResponse(BaseModel):
    # cmdb.objects.read answers with a bare array
    WRAP_KEY: ClassVar[str] = "objects"

    objects: list[ObjectDescriptor] = Field(default_factory=list)


class CategorySaveResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool | None = None
    message: str | None = None
    entry: int | None = None


# --- requests ---


class Login(IdoitRequest):
    METHOD = "idoit.login"
    RESPONSE_TYPE = LoginResponse


class Logout(IdoitRequest):
    METHOD = "idoit.logout"
    RESPONSE_TYPE = SimpleSuccessResponse


class Ordering(str, Enum):
    EMAIL = "email"
    FIRST_NAME = "first_name"
    ID = "id"
    LAST_NAME = "last_name"
    SYSID = "sysid"
    TITLE = "title"
    TYPE = "type"
    TYPE_TITLE = "type_title"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class ObjectsFilter(BaseModel):
    """Filter block of cmdb.objects.read."""
    model_config = ConfigDict(frozen=True)

    ids: list[int] | None = None
    # Object type id ("5") or constant ("C__OBJTYPE__SERVER")
    type: str | None = None
    title: str | None = None
    # Translated type name, e.g. "Server"; depends on the request language
    type_title: str | None = None
    sysid: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class ObjectsRead(IdoitRequest):
    METHOD = "cmdb.objects.read"
    RESPONSE_TYPE = ObjectsReadResponse

    filter: ObjectsFilter = Field(default_factory=ObjectsFilter)
    order_by: Ordering | None = None
    sort: SortDirection | None = None
    # Integer count, or "offset,count" string
    limit: int | str | None = None
    filter_type: type[IdoitObject] | None = Field(default=None, exclude=True)

    @classmethod
    def build(
        cls,
        *,
        filter_type: type[IdoitObject] | None = None,
        filter_type_name: str | None = None,
        ids: list[int] | tuple[int, ...] | None = None,
        title: str | None = None,
        type_title: str | None = None,
        sysid: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        order_by: Ordering | str | None = None,
        sort: SortDirection | str | None = None,
        limit: int | str | None = None,
    ) -> ObjectsRead:
        if filter_type is not None:
            filter_type_name = filter_type.object_type_name()
        object_filter = ObjectsFilter(
            ids=list(ids) if ids else None,
            type=filter_type_name,
            title=title,
            type_title=type_title,
            sysid=sysid,
            first_name=first_name,
            last_name=last_name,
            email=email,
        )
        return cls(filter=object_filter, order_by=order_by, sort=sort, limit=limit, filter_type=filter_type)

    @classmethod
    def of(cls, object_type: type[IdoitObject]) -> ObjectsRead:
        return cls.build(filter_type=object_type)


class CategoryRead(IdoitRequest):
    METHOD = "cmdb.category.read"

    obj_id: int = Field(alias="objID")
    category_class: type[IdoitCategory] = Field(exclude=True)

    def response_type(self) -> Any:
        return self.category_class

    def to_params(self) -> dict[str, Any]:
        return {"objID": self.obj_id, "category": self.category_class.category_name()}


class CategorySave(IdoitRequest):
    METHOD = "cmdb.category.save"
    RESPONSE_TYPE = CategorySaveResponse

    data: SerializeAsAny[IdoitCategory]
    # Entry id for multi-value categories; without it a new entry is created
    entry: int | None = None

    def to_params(self) -> dict[str, Any]:
        if self.data.obj_id is None:
            raise InvalidArgument("CategorySave needs data with an objID", field="data.obj_id")
        params: dict[str, Any] = {
            "object": self.data.obj_id,
            "category": self.data.category_name(),
            "data": self.data.to_data(),
        }
        if self.entry is not None:
            params["entry"] = self.entry
        return params
