from datetime import date

import pytest
from pydantic import ValidationError

from idoitclient.jsonrpc.requests import CategoryRead, CategorySave, Login, Logout, ObjectsRead
from idoitclient.models import CategoryAccounting, CategoryContactAssignment, CategoryGeneral, Server
from idoitclient.models.base import IdoitCategory
from idoitclient.utils.exceptions import InvalidArgument


def test_objects_read_params_only_carry_set_fields() -> None:
    request = ObjectsRead.build(filter_type=Server, ids=(1, 2), order_by="title", sort="ASC")

    assert request.method == "cmdb.objects.read"
    assert request.filter_type is Server
    assert request.to_params() == {
        "filter": {"ids": [1, 2], "type": "C__OBJTYPE__SERVER"},
        "order_by": "title",
        "sort": "ASC",
    }


def test_objects_read_accepts_offset_limit() -> None:
    request = ObjectsRead.build(filter_type_name="C__OBJTYPE__PERSON", email="jane@example.com", limit="10,20")

    assert request.to_params() == {
        "filter": {"type": "C__OBJTYPE__PERSON", "email": "jane@example.com"},
        "limit": "10,20",
    }


def test_objects_read_rejects_unknown_ordering() -> None:
    with pytest.raises(ValidationError):
        ObjectsRead.build(filter_type_name="C__OBJTYPE__SERVER", order_by="color")


def test_requests_are_immutable() -> None:
    request = ObjectsRead.of(Server)

    with pytest.raises(ValidationError):
        request.limit = 5


def test_login_and_logout_have_empty_params() -> None:
    assert Login().method == "idoit.login"
    assert Login().to_params() == {}
    assert Logout().method == "idoit.logout"
    assert Logout().to_params() == {}


def test_category_read_params() -> None:
    request = CategoryRead(obj_id=7, category_class=CategoryContactAssignment)

    assert request.method == "cmdb.category.read"
    assert request.to_params() == {"objID": 7, "category": "C__CATG__CONTACT"}
    assert request.response_type() is CategoryContactAssignment


def test_category_read_requires_category_constant() -> None:
    class Nameless(IdoitCategory):
        pass

    with pytest.raises(InvalidArgument):
        CategoryRead(obj_id=7, category_class=Nameless).to_params()


def test_category_save_params() -> None:
    data = CategoryAccounting(obj_id=3, inventory_no="INV-1", acquirementdate=date(2021, 5, 4))

    request = CategorySave(data=data, entry=9)

    assert request.method == "cmdb.category.save"
    assert request.to_params() == {
        "object": 3,
        "category": "C__CATG__ACCOUNTING",
        "data": {"inventory_no": "INV-1", "acquirementdate": "2021-05-04"},
        "entry": 9,
    }


def test_category_save_needs_owner_object() -> None:
    request = CategorySave(data=CategoryGeneral(title="orphan"))

    with pytest.raises(InvalidArgument, match="objID"):
        request.to_params()
