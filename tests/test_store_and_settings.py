"""
Tests for the users store, password hashing and settings.
"""

import pytest
from pydantic import ValidationError

from auth.password import hash_password, verify_password
from config.settings import Settings
from database.helpers import (
    UsernameTakenError,
    create_user,
    find_user_by_id,
    find_user_by_username,
)


class TestPasswordHashing:
    def test_default_cost_factor(self):
        hashed = hash_password("password123")
        assert hashed.startswith("$2b$08$")
        assert hashed != "password123"

    def test_verify(self):
        hashed = hash_password("password123", rounds=4)
        assert verify_password("password123", hashed)
        assert not verify_password("password124", hashed)

    def test_verify_against_malformed_hash(self):
        assert verify_password("password123", "not-a-bcrypt-hash") is False


class TestUserStore:
    @pytest.mark.asyncio
    async def test_create_and_find(self, db):
        user = await create_user(db, "alice", "hash")
        assert user.id is not None

        assert (await find_user_by_username(db, "alice")).id == user.id
        assert (await find_user_by_id(db, user.id)).username == "alice"
        assert await find_user_by_username(db, "nobody") is None

    @pytest.mark.asyncio
    async def test_unique_constraint_maps_to_username_taken(self, db):
        await create_user(db, "alice", "hash")
        await db.commit()
        with pytest.raises(UsernameTakenError):
            await create_user(db, "alice", "other-hash")


class TestSettings:
    def test_development_defaults(self):
        settings = Settings()
        assert settings.jwt_expiry_seconds == 3600
        assert settings.bcrypt_rounds == 8
        assert not settings.is_production

    def test_production_requires_secret(self):
        with pytest.raises(ValidationError):
            Settings(environment="production", jwt_secret="shh")

    def test_production_with_secret(self):
        settings = Settings(environment="production", jwt_secret="s3cr3t")
        assert settings.is_production
