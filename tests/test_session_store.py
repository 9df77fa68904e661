import json
from unittest.mock import MagicMock

import pytest
import redis

from cafenet.domain.errors import StorageError
from cafenet.domain.schemas import Role, Session
from cafenet.services.session_store import FileStorage, RedisStorage, SessionStore, build_session_store


def test_save_then_load_returns_same_session(store, admin):
    store.save(admin)
    assert store.load() == admin


def test_save_overwrites_previous_session(store, admin, customer):
    store.save(admin)
    store.save(customer)
    assert store.load() == customer


def test_load_without_record_returns_none(store):
    assert store.load() is None


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "",
        "[]",
        "null",
        json.dumps({"id": 1, "name": "Ayu"}),
        json.dumps({"id": 1, "role": "admin"}),
        json.dumps({"id": 1, "name": "Ayu", "role": "owner"}),
        "[" * 100_000 + "]" * 100_000,
    ],
)
def test_load_on_corrupted_record_returns_none(store, raw):
    store.storage.set_item(store.key, raw)
    assert store.load() is None


def test_load_ignores_extra_fields(store):
    store.storage.set_item(store.key, json.dumps({"id": 3, "name": "Dewi", "role": "staff", "username": "dewi"}))
    assert store.load() == Session(id=3, name="Dewi", role=Role.STAFF)


def test_load_when_storage_unreadable_returns_none():
    storage = MagicMock()
    storage.get_item.side_effect = OSError("disk gone")
    assert SessionStore(storage).load() is None


def test_load_on_invalid_utf8_file_returns_none(store, tmp_path):
    (tmp_path / "aradabiya_user.json").write_bytes(b'\xff\xfe{"id": 1}')
    assert store.load() is None


def test_load_when_redis_value_cannot_be_decoded_returns_none():
    fake = MagicMock()
    fake.get.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    assert SessionStore(RedisStorage(client=fake)).load() is None


def test_save_on_broken_storage_raises_storage_error(admin):
    storage = MagicMock()
    storage.set_item.side_effect = OSError("read-only file system")
    with pytest.raises(StorageError):
        SessionStore(storage).save(admin)


def test_clear_on_redis_outage_raises_storage_error():
    fake = MagicMock()
    fake.delete.side_effect = redis.ConnectionError("down")
    with pytest.raises(StorageError):
        SessionStore(RedisStorage(client=fake)).clear()


def test_clear_is_idempotent(store, admin):
    store.save(admin)
    store.clear()
    store.clear()
    assert store.load() is None


def test_file_storage_writes_one_file_per_key(tmp_path):
    storage = FileStorage(str(tmp_path / "nested"))
    storage.set_item("aradabiya_user", '{"a": 1}')

    assert (tmp_path / "nested" / "aradabiya_user.json").read_text() == '{"a": 1}'
    assert storage.get_item("other") is None


def test_redis_storage_round_trip_through_client(admin):
    fake = MagicMock()
    store = SessionStore(RedisStorage(client=fake), key="aradabiya_user")

    store.save(admin)
    key, value = fake.set.call_args.kwargs["name"], fake.set.call_args.kwargs["value"]
    assert key == "aradabiya_user"

    fake.get.return_value = value
    assert store.load() == admin

    store.clear()
    fake.delete.assert_called_once_with("aradabiya_user")


def test_redis_outage_on_load_returns_none():
    fake = MagicMock()
    fake.get.side_effect = redis.ConnectionError("down")
    store = SessionStore(RedisStorage(client=fake))

    assert store.load() is None
    # redis_retry: 3 proby zanim sie podda
    assert fake.get.call_count == 3


def test_build_session_store_rejects_unknown_backend():
    with pytest.raises(ValueError):
        build_session_store("localstorage")


def test_build_session_store_file_backend():
    assert isinstance(build_session_store("file").storage, FileStorage)
