# storefront/services/identity_service.py
from requests import RequestException

from storefront.domain.identity import ANONYMOUS, Identity
from storefront.repos.profile_repo import ProfileRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class IdentityService:
    """Resolves capabilities once, when the signed-in user changes."""

    def __init__(self, profiles: ProfileRepo | None = None):
        self.profiles = profiles or ProfileRepo()

    def resolve(self, user_id: str | None) -> Identity:
        if not user_id:
            return ANONYMOUS

        try:
            profile = self.profiles.get_profile(user_id)
        except RequestException as e:
            logger.error(f"Profile lookup failed for user {user_id}, treating as regular user: {e}")
            return Identity(user_id=user_id, is_admin=False)

        is_admin = bool(profile and profile.get("is_admin"))
        logger.info(f"Resolved user {user_id} (admin={is_admin})")
        return Identity(user_id=user_id, is_admin=is_admin)


def require_admin(identity: Identity) -> None:
    if identity.is_anonymous:
        raise PermissionError("Authentication required")
    if not identity.is_admin:
        raise PermissionError("You don't have admin privileges")
