# storefront/domain/identity.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    user_id: str | None = None
    is_admin: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None


ANONYMOUS = Identity()
