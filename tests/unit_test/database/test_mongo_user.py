from unittest.mock import MagicMock

import pytest
from pymongo import ASCENDING

from quotes_gateway.database.mongo_driver import MongoDatabase, MongoUserBackend


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def backend(collection):
    db = MagicMock()
    db.__getitem__.return_value = collection

    return MongoUserBackend(db)


class TestMongoUserBackend:
    def test_uses_users_collection(self):
        db = MagicMock()

        MongoUserBackend(db)

        db.__getitem__.assert_called_once_with('users')

    def test_insert_assigns_uid(self, backend, collection):
        uid = backend.insert({'nickname': 'a'})

        collection.insert_one.assert_called_once_with({'nickname': 'a', 'uid': uid})
        assert uid

    def test_get_strips_object_id(self, backend, collection):
        collection.find_one.return_value = {'uid': 'x', 'nickname': 'a'}

        assert backend.get('x') == {'uid': 'x', 'nickname': 'a'}
        collection.find_one.assert_called_once_with({'uid': 'x'}, {'_id': 0})

    def test_fetch_by_nickname(self, backend, collection):
        collection.find_one.return_value = None

        assert backend.fetch('a') is None
        collection.find_one.assert_called_once_with({'nickname': 'a'}, {'_id': 0})

    def test_update_replaces_by_uid(self, backend, collection):
        backend.update({'uid': 'x', 'nickname': 'a'})

        collection.replace_one.assert_called_once_with(
            {'uid': 'x'},
            {'uid': 'x', 'nickname': 'a'},
        )

    def test_all_sorted_by_insertion(self, backend, collection):
        cursor = collection.find.return_value
        cursor.sort.return_value = iter([{'uid': 'x'}, {'uid': 'y'}])

        assert backend.all() == [{'uid': 'x'}, {'uid': 'y'}]
        collection.find.assert_called_once_with({}, {'_id': 0})
        cursor.sort.assert_called_once_with('_id', ASCENDING)

    def test_delete(self, backend, collection):
        backend.delete('x')

        collection.delete_one.assert_called_once_with({'uid': 'x'})


class TestMongoDatabase:
    def test_requires_client(self, monkeypatch):
        monkeypatch.setattr(MongoDatabase, '_client', None)

        with pytest.raises(ValueError):
            _ = MongoDatabase().db

    def test_users_use_configured_database(self, monkeypatch):
        client = MagicMock()
        monkeypatch.setattr(MongoDatabase, '_client', client)
        monkeypatch.setattr(MongoDatabase, '_db_name', 'test-db')

        users = MongoDatabase().users

        client.__getitem__.assert_called_once_with('test-db')
        assert isinstance(users, MongoUserBackend)
