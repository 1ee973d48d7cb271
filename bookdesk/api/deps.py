"""FastAPI dependencies for authentication and tenant resolution."""

import uuid
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bookdesk.core.database import get_session
from bookdesk.core.errors import TokenMissingError
from bookdesk.core.security import verify_token
from bookdesk.services.notifications import EmailNotifier, get_notifier

# auto_error=False so a missing header maps to our own token_missing error
bearer_scheme = HTTPBearer(auto_error=False)


class AuthContext:
    """Resolved identity carried through a request."""

    __slots__ = ("tenant_id",)

    def __init__(self, tenant_id: uuid.UUID) -> None:
        self.tenant_id = tenant_id


async def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AuthContext:
    """Resolve ``Authorization: Bearer <jwt>`` to the owning business."""
    if credentials is None or not credentials.credentials:
        raise TokenMissingError()
    return AuthContext(tenant_id=verify_token(credentials.credentials))


# Typed shorthand for use in route signatures
Auth = Annotated[AuthContext, Depends(get_auth_context)]
Session = Annotated[AsyncSession, Depends(get_session)]
Notifier = Annotated[EmailNotifier, Depends(get_notifier)]
