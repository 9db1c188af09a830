"""Tests for AuthService."""

from datetime import UTC, datetime

import pytest

from src.config.settings import DemoAccount
from src.core.entities import UserRole
from src.core.services.auth_service import AuthService

ACCOUNTS = [
    DemoAccount(
        id="1",
        email="admin@studiokatalika.com",
        password="admin123",
        name="Administrator",
        role="admin",
    ),
    DemoAccount(id="2", email="user@studiokatalika.com", password="user123", name="Staff User"),
]


@pytest.fixture
def service(memory_store, clock) -> AuthService:
    return AuthService(memory_store, ACCOUNTS, clock=clock)


class TestLogin:
    async def test_valid_credentials(self, service, fixed_now):
        user = await service.login("admin@studiokatalika.com", "admin123")

        assert user is not None
        assert user.id == "1"
        assert user.name == "Administrator"
        assert user.role == UserRole.ADMIN
        assert user.created_at == datetime(2024, 1, 1, tzinfo=UTC)
        assert user.last_login == fixed_now

    async def test_persists_user(self, service, memory_store):
        await service.login("user@studiokatalika.com", "user123")
        stored = await memory_store.get_current_user()
        assert stored is not None
        assert stored.email == "user@studiokatalika.com"

    async def test_wrong_password(self, service, memory_store):
        assert await service.login("admin@studiokatalika.com", "nope") is None
        assert await memory_store.get_current_user() is None

    async def test_unknown_email(self, service):
        assert await service.login("ghost@example.com", "admin123") is None

    async def test_password_of_other_account(self, service):
        assert await service.login("admin@studiokatalika.com", "user123") is None


class TestSession:
    async def test_current_user_after_login(self, service):
        await service.login("admin@studiokatalika.com", "admin123")
        user = await service.current_user()
        assert user is not None
        assert user.id == "1"

    async def test_logout_clears_user(self, service):
        await service.login("admin@studiokatalika.com", "admin123")
        await service.logout()
        assert await service.current_user() is None
