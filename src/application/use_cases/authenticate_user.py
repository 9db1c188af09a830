"""Authenticate User Use Case."""

from src.application.services import get_auth_service, get_write_lock
from src.core.entities.user import User
from src.core.exceptions import AuthenticationError
from src.core.interfaces import IRecordStore
from src.core.services.auth_service import AuthService


class AuthenticateUserUseCase:
    """Login, logout and current-user lookup against the fixed accounts."""

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        auth_service: AuthService | None = None,
    ):
        self._record_store = record_store
        self._auth_service = auth_service

    async def _get_auth_service(self) -> AuthService:
        if self._auth_service is None:
            if self._record_store is None:
                from src.infrastructure.storage.sqlite import get_record_store

                self._record_store = await get_record_store()
            self._auth_service = get_auth_service(self._record_store)
        return self._auth_service

    async def login(self, email: str, password: str) -> User:
        """
        Raises:
            AuthenticationError: Unknown email or wrong password.
        """
        service = await self._get_auth_service()
        async with get_write_lock():
            user = await service.login(email, password)
        if user is None:
            raise AuthenticationError()
        return user

    async def logout(self) -> None:
        service = await self._get_auth_service()
        async with get_write_lock():
            await service.logout()

    async def current_user(self) -> User:
        """
        Raises:
            AuthenticationError: Nobody is signed in.
        """
        service = await self._get_auth_service()
        user = await service.current_user()
        if user is None:
            raise AuthenticationError("Not signed in")
        return user
