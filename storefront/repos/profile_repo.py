# storefront/repos/profile_repo.py
from typing import Any, Dict

from storefront.repos.rest import SupabaseRest
from storefront.utils.retry import http_retry


class ProfileRepo:
    def __init__(self, rest: SupabaseRest | None = None):
        self.rest = rest or SupabaseRest()

    @http_retry()
    def get_profile(self, user_id: str) -> Dict[str, Any] | None:
        rows = self.rest.select(
            "profiles",
            {"select": "user_id,full_name,email,is_admin", "user_id": f"eq.{user_id}"},
        )
        return rows[0] if rows else None
