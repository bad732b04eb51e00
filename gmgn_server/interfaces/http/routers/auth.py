"""Demo authentication endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, status

from gmgn_server.core.errors import ApiError
from gmgn_server.core.security import bearer_token
from gmgn_server.interfaces.http.deps import get_account_service
from gmgn_server.modules.accounts import (
    AccountService,
    AccountValidationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    RegisterInput,
)
from gmgn_server.schemas import ApiResponse, AuthSessionOut, LoginRequest, RegisterRequest, UserOut

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=ApiResponse[AuthSessionOut], summary="Log in (demo users accept any password)")
async def login(payload: LoginRequest, account_service: AccountService = Depends(get_account_service)):
    logger.info("[Auth] Login attempt: %s", payload.email)
    try:
        session = await account_service.login(payload.email, payload.password)
    except AccountValidationError as exc:
        raise ApiError.validation(exc.message, exc.details) from exc
    except InvalidCredentialsError as exc:
        raise ApiError.unauthorized("Invalid credentials") from exc
    return ApiResponse[AuthSessionOut](data=AuthSessionOut.model_validate(session), message="Login successful")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthSessionOut],
    summary="Register an account",
)
async def register(payload: RegisterRequest, account_service: AccountService = Depends(get_account_service)):
    logger.info("[Auth] Register attempt: %s", payload.email)
    try:
        session = await account_service.register(
            RegisterInput(
                email=payload.email or "",
                password=payload.password or "",
                confirm_password=payload.confirm_password or "",
            )
        )
    except AccountValidationError as exc:
        raise ApiError.validation(exc.message, exc.details) from exc
    except EmailAlreadyRegisteredError as exc:
        raise ApiError.conflict("Email already registered") from exc
    return ApiResponse[AuthSessionOut](data=AuthSessionOut.model_validate(session), message="Registration successful")


@router.post("/logout", response_model=ApiResponse[None], summary="Log out")
async def logout():
    logger.info("[Auth] Logout")
    return ApiResponse[None](message="Logged out successfully")


@router.get("/me", response_model=ApiResponse[UserOut], summary="Current user")
async def me(
    authorization: Optional[str] = Header(default=None),
    account_service: AccountService = Depends(get_account_service),
):
    token = bearer_token(authorization)
    if token is None:
        raise ApiError.unauthorized("No token provided")
    user = await account_service.current_user(token)
    if user is None:
        raise ApiError.not_found("User not found")
    return ApiResponse[UserOut](data=UserOut.model_validate(user))
