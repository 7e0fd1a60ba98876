"""Base types for CMDB objects and their categories.

Object types declare their i-doit type constant and the category classes they
carry as class attributes; nothing is discovered at runtime:

    class Server(IdoitObject):
        OBJECT_TYPE = "C__OBJTYPE__SERVER"
        CATEGORIES = (CategoryGeneral, CategoryContactAssignment)
"""

from __future__ import annotations

from typing import Callable, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from idoitclient.utils.exceptions import InvalidArgument

C = TypeVar("C", bound="IdoitCategory")

ObjectFactory = Callable[[int], "IdoitObject"]

_OBJECT_TYPES: dict[str, type["IdoitObject"]] = {}


class IdoitCategory(BaseModel):
    """Attribute set attached to an object, e.g. contact assignment."""
    CATEGORY: ClassVar[str] = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None  # Entry id, only meaningful for multi-value categories
    obj_id: int | None = Field(default=None, alias="objID")

    @classmethod
    def category_name(cls) -> str:
        if not cls.CATEGORY:
            raise InvalidArgument(f"{cls.__name__} does not declare a category constant", field="CATEGORY")
        return cls.CATEGORY

    def to_data(self) -> dict:
        """Attribute payload for cmdb.category.save."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id", "obj_id"})


class IdoitObject(BaseModel):
    """A CMDB object with the categories read for it so far."""
    OBJECT_TYPE: ClassVar[str | None] = None
    CATEGORIES: ClassVar[tuple[type[IdoitCategory], ...]] = ()

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    title: str | None = None
    categories: dict[str, SerializeAsAny[IdoitCategory]] = Field(default_factory=dict)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        object_type = cls.__dict__.get("OBJECT_TYPE")
        if object_type:
            _OBJECT_TYPES[object_type] = cls

    @classmethod
    def object_type_name(cls) -> str:
        if not cls.OBJECT_TYPE:
            raise InvalidArgument(f"{cls.__name__} does not declare an object type", field="OBJECT_TYPE")
        return cls.OBJECT_TYPE

    @classmethod
    def category_classes(cls) -> tuple[type[IdoitCategory], ...]:
        return cls.CATEGORIES

    def get_category(self, category_class: type[C]) -> C | None:
        return self.categories.get(category_class.category_name())  # type: ignore[return-value]

    def set_category(self, category: IdoitCategory) -> None:
        if type(category) not in self.CATEGORIES:
            raise InvalidArgument(
                f"{type(self).__name__} does not carry category {type(category).__name__}",
                field="category",
            )
        self.categories[category.category_name()] = category


def lookup_object_type(type_name: str | None) -> type[IdoitObject] | None:
    """Return the object class registered for an i-doit type constant."""
    if not type_name:
        return None
    return _OBJECT_TYPES.get(type_name)
