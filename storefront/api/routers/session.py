# storefront/api/routers/session.py
from fastapi import APIRouter, Depends

from storefront.api.deps import get_cart_store, get_identity_service
from storefront.domain.identity import ANONYMOUS, Identity
from storefront.domain.schemas import SessionIn, IdentityOut
from storefront.services.cart_service import CartStore
from storefront.services.identity_service import IdentityService

router = APIRouter(prefix="/session", tags=["session"])


def identity_out(identity: Identity) -> IdentityOut:
    return IdentityOut(
        user_id=identity.user_id,
        is_admin=identity.is_admin,
        authenticated=not identity.is_anonymous,
    )


@router.get("", response_model=IdentityOut)
def get_session(store: CartStore = Depends(get_cart_store)):
    return identity_out(store.identity)


@router.put("", response_model=IdentityOut)
def sign_in(
    payload: SessionIn,
    store: CartStore = Depends(get_cart_store),
    identities: IdentityService = Depends(get_identity_service),
):
    """Called by the front end after its auth provider reports a user."""
    identity = identities.resolve(payload.user_id)
    store.switch_identity(identity)
    return identity_out(identity)


@router.delete("", response_model=IdentityOut)
def sign_out(store: CartStore = Depends(get_cart_store)):
    store.switch_identity(ANONYMOUS)
    return identity_out(ANONYMOUS)
