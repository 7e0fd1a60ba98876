"""Two-phase object read: object identities first, then their categories in one batch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from loguru import logger

from idoitclient.jsonrpc.batch import Batch
from idoitclient.jsonrpc.requests import CategoryRead, ObjectsRead, ObjectsReadResponse
from idoitclient.models.base import IdoitCategory, IdoitObject, ObjectFactory, lookup_object_type
from idoitclient.utils.exceptions import InvalidArgument

if TYPE_CHECKING:
    from idoitclient.session import IdoitSession

CATEGORY_KEY_PREFIX = "category"


class ObjectsReader:
    def __init__(self, session: IdoitSession):
        self.session = session

    def read(
        self,
        target: type[IdoitObject] | ObjectsRead,
        factory: ObjectFactory | None = None,
    ) -> list[IdoitObject]:
        """
        Read all objects matching ``target`` together with their declared categories.

        Args:
            target: An object type, or a prepared ObjectsRead filter.
            factory: Builds an empty object for an id. Defaults to the filter's
                object type, or the type registered for the filter's type constant.

        Returns:
            Objects in the order the service listed them.
        """
        request = target if isinstance(target, ObjectsRead) else ObjectsRead.of(target)
        object_factory = self._resolve_factory(request, factory)

        objects_by_id = self._read_objects(request, object_factory)
        categories = self._read_categories(objects_by_id.values())
        return self._add_categories_to_objects(objects_by_id, categories)

    @staticmethod
    def _resolve_factory(request: ObjectsRead, factory: ObjectFactory | None) -> ObjectFactory:
        if request.filter_type is None and not request.filter.type:
            raise InvalidArgument("Request needs to specify a filter type", field="filter_type")
        if factory is not None:
            return factory
        object_class = request.filter_type or lookup_object_type(request.filter.type) or IdoitObject
        return lambda object_id: object_class(id=object_id)

    def _read_objects(self, request: ObjectsRead, factory: ObjectFactory) -> dict[int, IdoitObject]:
        response: ObjectsReadResponse = self.session.send(request)

        objects_by_id: dict[int, IdoitObject] = {}
        for descriptor in response.objects:
            new_object = factory(descriptor.id)
            new_object.id = descriptor.id
            if new_object.title is None:
                new_object.title = descriptor.title
            objects_by_id[descriptor.id] = new_object
        return objects_by_id

    def _read_categories(self, objects: Iterable[IdoitObject]) -> dict[str, IdoitCategory | None]:
        batch = Batch()
        for obj in objects:
            for category_class in obj.category_classes():
                batch.add_with_prefix(CATEGORY_KEY_PREFIX, CategoryRead(obj_id=obj.id, category_class=category_class))
        return self.session.send(batch)

    @staticmethod
    def _add_categories_to_objects(
        objects: dict[int, IdoitObject],
        categories: dict[str, IdoitCategory | None],
    ) -> list[IdoitObject]:
        for key, category in categories.items():
            if category is None:
                continue
            owner = objects.get(category.obj_id)
            if owner is None:
                logger.warning(
                    f"Dropping {type(category).__name__} ({key}) for unknown object {category.obj_id}"
                )
                continue
            if type(category) not in owner.category_classes():
                logger.warning(
                    f"Dropping {type(category).__name__} ({key}) for object {category.obj_id}: "
                    f"{type(owner).__name__} does not carry it"
                )
                continue
            owner.set_category(category)
        return list(objects.values())
