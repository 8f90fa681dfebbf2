"""
Account rules: registration and login
"""

import pytest

from models.enums import ErrorType


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_assigns_id(self, accounts_service):
        result = await accounts_service.register("alice", "pass1")

        assert result.success
        assert result.data.account_id == 1
        assert result.data.username == "alice"
        assert result.data.password == "pass1"

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, accounts_service):
        first = await accounts_service.register("alice", "pass1")
        second = await accounts_service.register("bob", "pass2")

        assert first.data.account_id != second.data.account_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["", "   ", None])
    async def test_blank_username_rejected(self, accounts_service, username):
        result = await accounts_service.register(username, "password")

        assert not result.success
        assert result.error_type == ErrorType.VALIDATION_ERROR
        assert result.error == "blank username"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["abc", "", None])
    async def test_short_password_rejected(self, accounts_service, password):
        result = await accounts_service.register("alice", password)

        assert not result.success
        assert result.error_type == ErrorType.VALIDATION_ERROR
        assert result.error == "short password"

    @pytest.mark.asyncio
    async def test_four_character_password_accepted(self, accounts_service):
        result = await accounts_service.register("alice", "abcd")
        assert result.success

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, accounts_service, store):
        await accounts_service.register("alice", "pass1")

        result = await accounts_service.register("alice", "another")

        assert not result.success
        assert result.error_type == ErrorType.DUPLICATE_ERROR
        assert await store.accounts.find_by_username("alice") is not None

    @pytest.mark.asyncio
    async def test_username_match_is_case_sensitive(self, accounts_service):
        await accounts_service.register("alice", "pass1")

        result = await accounts_service.register("Alice", "pass1")

        assert result.success

    @pytest.mark.asyncio
    async def test_store_constraint_reported_as_duplicate(self, accounts_service, store, monkeypatch):
        """A concurrent insert that slips past the lookup is still reported as a duplicate"""
        await store.accounts.save("alice", "pass1")

        async def missed_lookup(username):
            return None

        monkeypatch.setattr(store.accounts, "find_by_username", missed_lookup)
        result = await accounts_service.register("alice", "pass2")

        assert result.error_type == ErrorType.DUPLICATE_ERROR


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_returns_stored_account(self, accounts_service, alice):
        result = await accounts_service.login("alice", "pass1")

        assert result.success
        assert result.data == alice

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password,expected", [
        ("", "pass1", "invalid input"),
        ("alice", None, "invalid input"),
        ("bob", "pass1", "not found"),
        ("alice", "wrong", "mismatch"),
        ("alice", "PASS1", "mismatch"),
    ])
    async def test_login_failures(self, accounts_service, alice, username, password, expected):
        result = await accounts_service.login(username, password)

        assert not result.success
        assert result.error_type == ErrorType.AUTH_ERROR
        assert result.error == expected
