"""Login endpoints for the fixed account list."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_use_case
from src.application.dto.requests import LoginRequest
from src.application.dto.responses import ErrorResponse, LoginResponse
from src.application.use_cases.authenticate_user import AuthenticateUserUseCase

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    request: LoginRequest,
    use_case: AuthenticateUserUseCase = Depends(get_auth_use_case),
) -> LoginResponse:
    user = await use_case.login(request.email, request.password)
    return LoginResponse(user=user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    use_case: AuthenticateUserUseCase = Depends(get_auth_use_case),
) -> None:
    await use_case.logout()


@router.get(
    "/me",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
async def current_user(
    use_case: AuthenticateUserUseCase = Depends(get_auth_use_case),
) -> LoginResponse:
    return LoginResponse(user=await use_case.current_user())
