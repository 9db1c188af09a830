"""
Static credential check.

Accounts come from configuration. A successful login is persisted in the
record store so the session survives restarts, the same way the record
collections do.
"""

import hmac
from collections.abc import Sequence

from src.config import get_logger
from src.config.settings import DemoAccount
from src.core.clock import Clock, utc_now
from src.core.entities.user import User, UserRole
from src.core.interfaces.record_store import IRecordStore

logger = get_logger(__name__)


class AuthService:
    """Signs users in and out against a fixed account list."""

    def __init__(
        self,
        record_store: IRecordStore,
        accounts: Sequence[DemoAccount],
        clock: Clock = utc_now,
    ) -> None:
        self._store = record_store
        self._accounts = list(accounts)
        self._clock = clock

    def _find_account(self, email: str, password: str) -> DemoAccount | None:
        for account in self._accounts:
            if account.email == email and hmac.compare_digest(
                account.password.encode(), password.encode()
            ):
                return account
        return None

    async def login(self, email: str, password: str) -> User | None:
        """Return the signed-in user, or None when the credentials are wrong."""
        account = self._find_account(email, password)
        if account is None:
            logger.info("login_rejected", email=email)
            return None

        user = User(
            id=account.id,
            email=account.email,
            name=account.name,
            role=UserRole(account.role),
            created_at=account.created_at,
            last_login=self._clock(),
        )
        await self._store.save_current_user(user)
        logger.info("login_succeeded", user_id=user.id, role=user.role.value)
        return user

    async def current_user(self) -> User | None:
        return await self._store.get_current_user()

    async def logout(self) -> None:
        await self._store.clear_current_user()
        logger.info("logout")
