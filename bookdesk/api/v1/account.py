"""Authenticated account management — profile and deletion."""

from fastapi import APIRouter, status

from bookdesk.api.deps import Auth, Session
from bookdesk.models.business import BusinessProfile, BusinessProfileUpdate
from bookdesk.services import accounts

router = APIRouter(prefix="/account", tags=["account"])


@router.get("/profile", response_model=BusinessProfile)
async def get_profile(auth: Auth, session: Session) -> BusinessProfile:
    return await accounts.get_profile(session, auth.tenant_id)


@router.put("/profile", response_model=BusinessProfile)
async def update_profile(
    body: BusinessProfileUpdate,
    auth: Auth,
    session: Session,
) -> BusinessProfile:
    return await accounts.update_profile(session, auth.tenant_id, body)


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(auth: Auth, session: Session) -> None:
    """Delete the business and every employee, service, slot and appointment it owns."""
    await accounts.delete_account(session, auth.tenant_id)
