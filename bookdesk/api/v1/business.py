"""Public account endpoints — register, login, password recovery."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from bookdesk.api.deps import Notifier, Session
from bookdesk.services import accounts
from bookdesk.services.accounts import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
)

router = APIRouter(prefix="/business", tags=["business"])


class MessageResponse(BaseModel):
    message: str


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new business",
)
async def register(body: RegisterRequest, session: Session) -> TokenResponse:
    """Create the business (plus optional seed employees and services) and log it in."""
    return await accounts.register(session, body)


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, session: Session) -> TokenResponse:
    return await accounts.login(session, body)


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    body: ForgotPasswordRequest,
    session: Session,
    notifier: Notifier,
) -> MessageResponse:
    # Same answer whether or not the email exists
    await accounts.request_password_reset(session, body.email, notifier)
    return MessageResponse(
        message="If the email exists, password reset instructions have been sent."
    )


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(body: ResetPasswordRequest, session: Session) -> MessageResponse:
    await accounts.reset_password(session, body)
    return MessageResponse(message="Password updated.")
