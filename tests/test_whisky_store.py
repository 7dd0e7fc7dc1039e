import threading

import pytest

from whisky_api.app.core.errors import InvalidIdentifier, MalformedPayload, NotFound
from whisky_api.app.models.whisky import Whisky
from whisky_api.app.schemas.whisky import WhiskyCreate, WhiskyUpdate
from whisky_api.app.services.id_allocator import IdentifierAllocator
from whisky_api.app.services.whisky_store import WhiskyStore, create_store, parse_identifier


def test_seeded_store_lists_two_whiskies_in_creation_order(store):
    assert store.list_whiskies() == [
        Whisky(id=0, name="Bowmore 15 Years Laimrig", origin="Scotland, Islay"),
        Whisky(id=1, name="Talisker 57° North", origin="Scotland, Island"),
    ]


def test_unseeded_store_is_empty():
    assert create_store(seed=False).list_whiskies() == []


def test_seed_uses_allocator():
    store = WhiskyStore()
    seeded = store.seed_defaults(IdentifierAllocator(start=5))
    assert [w.id for w in seeded] == [5, 6]
    assert 5 in store and 6 in store


def test_create_then_read_returns_equal_whisky(store):
    created = store.create_whisky({"id": 7, "name": "Lagavulin 16", "origin": "Scotland, Islay"})
    assert created == Whisky(id=7, name="Lagavulin 16", origin="Scotland, Islay")
    assert store.get_whisky(7) == created


def test_create_accepts_schema_instance(store):
    created = store.create_whisky(WhiskyCreate(id=3, name="Name", origin="Origin"))
    assert store.get_whisky("3") == created


def test_listing_follows_insertion_not_id_order():
    store = create_store(seed=False)
    for whisky_id in (30, 10, 20):
        store.create_whisky({"id": whisky_id, "name": str(whisky_id)})
    assert [w.id for w in store.list_whiskies()] == [30, 10, 20]


def test_create_with_existing_id_replaces_whisky(store):
    store.create_whisky({"id": 1, "name": "Oban 14", "origin": "Scotland, Highlands"})
    assert store.get_whisky(1) == Whisky(id=1, name="Oban 14", origin="Scotland, Highlands")
    assert len(store) == 2
    # the replaced record keeps its position
    assert [w.id for w in store.list_whiskies()] == [0, 1]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "No id"},
        {"id": "not a number", "name": "x"},
        {"id": None},
        ["id", 1],
        None,
        "text",
    ],
)
def test_create_rejects_malformed_payload(store, payload):
    with pytest.raises(MalformedPayload):
        store.create_whisky(payload)
    assert len(store) == 2


def test_create_coerces_numeric_string_id(store):
    assert store.create_whisky({"id": "12", "name": "x"}).id == 12


def test_read_unknown_id_raises_not_found(store):
    with pytest.raises(NotFound):
        store.get_whisky(11)


def test_read_deleted_id_raises_not_found(store):
    store.delete_whisky(1)
    with pytest.raises(NotFound):
        store.get_whisky(1)


@pytest.mark.parametrize(
    "raw", ["abc", "1.5", "", " 1", "1\n", "\u0661", "99999999999", True, None, 1.0]
)
def test_invalid_identifiers(store, raw):
    with pytest.raises(InvalidIdentifier):
        store.get_whisky(raw)
    with pytest.raises(InvalidIdentifier):
        store.delete_whisky(raw)


def test_parse_identifier_accepts_signed_integers():
    assert parse_identifier("-3") == -3
    assert parse_identifier("+4") == 4
    assert parse_identifier(2147483647) == 2147483647


def test_update_changes_name_and_origin_only(store):
    updated = store.update_whisky("1", {"id": 99, "name": "Whisky", "origin": "Colombia"})
    assert updated == Whisky(id=1, name="Whisky", origin="Colombia")
    assert store.get_whisky(1) == updated
    assert 99 not in store


def test_update_accepts_schema_instance(store):
    updated = store.update_whisky(0, WhiskyUpdate(name="A", origin="B"))
    assert (updated.name, updated.origin) == ("A", "B")


def test_update_overwrites_missing_fields_with_none(store):
    # Absent fields are cleared rather than kept.
    updated = store.update_whisky(1, {"name": "Only name"})
    assert updated == Whisky(id=1, name="Only name", origin=None)


def test_update_unknown_id_raises_not_found(store):
    with pytest.raises(NotFound):
        store.update_whisky(42, {"name": "x", "origin": "y"})


def test_update_without_payload_is_malformed(store):
    with pytest.raises(MalformedPayload):
        store.update_whisky(1, None)


def test_update_with_bad_field_type_is_malformed(store):
    with pytest.raises(MalformedPayload):
        store.update_whisky(1, {"name": ["not", "text"]})
    assert store.get_whisky(1).name == "Talisker 57° North"


def test_delete_is_idempotent(store):
    assert store.delete_whisky(1) is None
    assert 1 not in store
    assert store.delete_whisky(1) is None
    assert [w.id for w in store.list_whiskies()] == [0]


def test_returned_whiskies_are_copies(store):
    whisky = store.get_whisky(1)
    whisky.name = "Tampered"
    store.list_whiskies()[0].origin = "Tampered"
    assert store.get_whisky(1).name == "Talisker 57° North"
    assert store.get_whisky(0).origin == "Scotland, Islay"


def test_concurrent_creates_are_all_stored():
    store = create_store(seed=False)

    def worker(offset):
        for i in range(100):
            store.create_whisky({"id": offset + i, "name": f"w{offset + i}"})

    threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 800


@pytest.mark.parametrize("whisky_id", [2 ** 31, -(2 ** 31) - 1, 2 ** 40])
def test_create_rejects_out_of_range_id(store, whisky_id):
    with pytest.raises(MalformedPayload):
        store.create_whisky({"id": whisky_id, "name": "Too big"})
    assert [w.id for w in store.list_whiskies()] == [0, 1]


def test_create_accepts_both_id_bounds():
    store = create_store(seed=False)
    for whisky_id in (-(2 ** 31), 2 ** 31 - 1):
        created = store.create_whisky({"id": whisky_id, "name": "Edge"})
        assert store.get_whisky(str(whisky_id)) == created
        store.delete_whisky(whisky_id)
    assert len(store) == 0


def test_numeric_name_and_origin_become_text(store):
    created = store.create_whisky({"id": 3, "name": 15, "origin": 12})
    assert (created.name, created.origin) == ("15", "12")
    updated = store.update_whisky(3, {"name": 18, "origin": "Islay"})
    assert updated.name == "18"
