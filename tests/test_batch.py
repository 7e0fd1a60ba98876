import pytest

from idoitclient.jsonrpc import Batch
from idoitclient.jsonrpc.requests import Logout, ObjectsRead
from idoitclient.utils.exceptions import InvalidArgument


def test_add_keeps_insertion_order() -> None:
    batch = Batch()
    batch.add("b", Logout())
    batch.add("a", Logout())
    batch.add("c", Logout())

    assert list(batch) == ["b", "a", "c"]
    assert len(batch) == 3
    assert "a" in batch
    assert repr(batch) == "Batch(['b', 'a', 'c'])"


def test_add_rejects_duplicate_and_empty_keys() -> None:
    batch = Batch()
    batch.add("servers", ObjectsRead.build(filter_type_name="C__OBJTYPE__SERVER"))

    with pytest.raises(InvalidArgument, match="Duplicate batch key: servers"):
        batch.add("servers", Logout())
    with pytest.raises(InvalidArgument):
        batch.add("", Logout())
    assert len(batch) == 1


def test_add_with_prefix_generates_unique_keys() -> None:
    batch = Batch()
    batch.add("category1", Logout())

    keys = [batch.add_with_prefix("category", Logout()) for _ in range(3)]

    assert keys == ["category0", "category2", "category3"]
    assert list(batch) == ["category1", "category0", "category2", "category3"]


def test_requests_returns_a_copy() -> None:
    batch = Batch()
    request = Logout()
    batch.add("logout", request)

    snapshot = batch.requests
    snapshot.clear()

    assert batch.get("logout") is request
    assert batch.get("missing") is None
    assert len(batch) == 1
