"""
Unit tests for MongoUserRepository against a mocked Motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from user_api.domain.exceptions import StorageError
from user_api.domain.models.filter import UserFilter
from user_api.infrastructure.db.mongo_connection import ensure_user_indexes
from user_api.infrastructure.db.mongo_user_repository import MongoUserRepository
from tests.conftest import make_user


class _AsyncCursor:
    """Async-iterable stand-in for a Motor cursor"""

    def __init__(self, documents, error=None):
        self._documents = list(documents)
        self._error = error

    def __aiter__(self):
        self._iter = iter(self._documents)
        return self

    async def __anext__(self):
        if self._error is not None:
            raise self._error
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


def _document(nickname="test1", country="UK", password="hash"):
    return {
        "_id": ObjectId("5ea7208049e00ddb76994ede"),
        "email": "test@test.com",
        "country": country,
        "nickname": nickname,
        "lastName": "lastName",
        "firstName": "firstName",
        "password": password,
    }


@pytest.fixture
def collection():
    mock = MagicMock()
    mock.find_one = AsyncMock()
    mock.insert_one = AsyncMock()
    mock.update_one = AsyncMock()
    mock.delete_one = AsyncMock()
    mock.create_indexes = AsyncMock()
    return mock


@pytest.fixture
def repository(collection):
    return MongoUserRepository(user_collection=collection)


class TestFindAllByFilter:
    """Tests for find_all_by_filter"""

    @pytest.mark.asyncio
    async def test_empty_filter_queries_everything(self, repository, collection):
        collection.find.return_value = _AsyncCursor([_document("a"), _document("b")])

        users = await repository.find_all_by_filter(UserFilter())

        collection.find.assert_called_once_with({})
        assert [u.nickname for u in users] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_populated_fields_become_equality_conjunction(self, repository, collection):
        collection.find.return_value = _AsyncCursor([])

        await repository.find_all_by_filter(
            UserFilter(nickname="testnick1", country="UK", first_name="First")
        )

        collection.find.assert_called_once_with(
            {"nickname": "testnick1", "country": "UK", "firstName": "First"}
        )

    @pytest.mark.asyncio
    async def test_passwords_are_cleared(self, repository, collection):
        collection.find.return_value = _AsyncCursor([_document(password="secret-hash")])
        users = await repository.find_all_by_filter(UserFilter())
        assert users[0].password == ""

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, repository, collection):
        collection.find.return_value = _AsyncCursor([])
        assert await repository.find_all_by_filter(UserFilter(country="XX")) == []

    @pytest.mark.asyncio
    async def test_undecodable_document_is_skipped(self, repository, collection):
        collection.find.return_value = _AsyncCursor([{"nickname": "no-id"}, _document("ok")])
        users = await repository.find_all_by_filter(UserFilter())
        assert [u.nickname for u in users] == ["ok"]

    @pytest.mark.asyncio
    async def test_driver_error_becomes_storage_error(self, repository, collection):
        collection.find.return_value = _AsyncCursor([], error=ServerSelectionTimeoutError("no servers"))
        with pytest.raises(StorageError, match="no servers"):
            await repository.find_all_by_filter(UserFilter())


class TestFindAll:
    """Tests for find_all"""

    @pytest.mark.asyncio
    async def test_returns_users_with_passwords(self, repository, collection):
        collection.find.return_value = _AsyncCursor([_document(password="h")])
        users = await repository.find_all()
        collection.find.assert_called_once_with({})
        assert users[0].password == "h"
        assert users[0].id == "5ea7208049e00ddb76994ede"


class TestFindByNickname:
    """Tests for find_by_nickname"""

    @pytest.mark.asyncio
    async def test_found(self, repository, collection):
        collection.find_one.return_value = _document("testnickname")
        user = await repository.find_by_nickname("testnickname")
        collection.find_one.assert_awaited_once_with({"nickname": "testnickname"})
        assert user.nickname == "testnickname"
        assert user.last_name == "lastName"
        assert user.password == "hash"

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, repository, collection):
        collection.find_one.return_value = None
        assert await repository.find_by_nickname("missing") is None

    @pytest.mark.asyncio
    async def test_driver_error(self, repository, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("down")
        with pytest.raises(StorageError):
            await repository.find_by_nickname("x")


class TestSave:
    """Tests for save"""

    @pytest.mark.asyncio
    async def test_inserts_document_with_object_id(self, repository, collection):
        user = make_user("testnickname", password="$2b$hash")

        saved = await repository.save(user)

        assert saved is user
        document = collection.insert_one.call_args.args[0]
        assert document["_id"] == ObjectId("5ea7208049e00ddb76994ede")
        assert document["nickname"] == "testnickname"
        assert document["lastName"] == "lastName"
        assert document["firstName"] == "firstName"
        assert document["password"] == "$2b$hash"

    @pytest.mark.asyncio
    async def test_requires_id(self, repository):
        user = make_user(user_id=None)
        with pytest.raises(ValueError):
            await repository.save(user)

    @pytest.mark.asyncio
    async def test_driver_error(self, repository, collection):
        collection.insert_one.side_effect = ServerSelectionTimeoutError("down")
        with pytest.raises(StorageError):
            await repository.save(make_user())


class TestUpdateByNickname:
    """Tests for update_by_nickname"""

    @pytest.mark.asyncio
    async def test_sets_all_fields_but_not_id(self, repository, collection):
        collection.update_one.return_value = MagicMock(matched_count=1)
        user = make_user("renamed", country="BR", password="newhash")

        matched = await repository.update_by_nickname("testnickname", user)

        assert matched == 1
        query, update = collection.update_one.call_args.args
        assert query == {"nickname": "testnickname"}
        assert update == {
            "$set": {
                "email": "test@test.com",
                "country": "BR",
                "nickname": "renamed",
                "lastName": "lastName",
                "firstName": "firstName",
                "password": "newhash",
            }
        }

    @pytest.mark.asyncio
    async def test_no_match_returns_zero(self, repository, collection):
        collection.update_one.return_value = MagicMock(matched_count=0)
        assert await repository.update_by_nickname("missing", make_user(user_id=None)) == 0

    @pytest.mark.asyncio
    async def test_driver_error(self, repository, collection):
        collection.update_one.side_effect = ServerSelectionTimeoutError("down")
        with pytest.raises(StorageError):
            await repository.update_by_nickname("x", make_user())


class TestDelete:
    """Tests for delete"""

    @pytest.mark.asyncio
    async def test_deletes_by_nickname(self, repository, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        await repository.delete("testnickname")
        collection.delete_one.assert_awaited_once_with({"nickname": "testnickname"})

    @pytest.mark.asyncio
    async def test_driver_error(self, repository, collection):
        collection.delete_one.side_effect = ServerSelectionTimeoutError("down")
        with pytest.raises(StorageError, match="down"):
            await repository.delete("x")


class TestEnsureUserIndexes:
    """Tests for ensure_user_indexes"""

    @pytest.mark.asyncio
    async def test_creates_nickname_and_email_indexes(self, collection):
        await ensure_user_indexes(collection)
        indexes = collection.create_indexes.call_args.args[0]
        keys = [list(index.document["key"].keys()) for index in indexes]
        assert keys == [["nickname"], ["email"]]
        assert all(not index.document.get("unique") for index in indexes)

    @pytest.mark.asyncio
    async def test_failure_is_not_raised(self, collection):
        collection.create_indexes.side_effect = ServerSelectionTimeoutError("down")
        await ensure_user_indexes(collection)
