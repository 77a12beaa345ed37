# storefront/repos/cart_repo.py
from storefront.repos.rest import SupabaseRest
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

TABLE = "cart_items"


class CartRepo:
    """
    Remote mirror of the cart, one row per (user, product).
    Write-only from the client point of view, rows are never read back.
    """

    def __init__(self, rest: SupabaseRest | None = None):
        self.rest = rest or SupabaseRest()

    def upsert_line(self, user_id: str, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.delete_line(user_id, product_id)
            return

        logger.info(f"Mirror upsert user={user_id} product={product_id} quantity={quantity}")
        self.rest.insert(
            TABLE,
            {"user_id": user_id, "product_id": product_id, "quantity": quantity},
            params={"on_conflict": "user_id,product_id"},
            prefer="resolution=merge-duplicates,return=minimal",
        )

    def delete_line(self, user_id: str, product_id: str) -> None:
        logger.info(f"Mirror delete user={user_id} product={product_id}")
        self.rest.delete(TABLE, {"user_id": f"eq.{user_id}", "product_id": f"eq.{product_id}"})

    def delete_all(self, user_id: str) -> None:
        logger.info(f"Mirror clear user={user_id}")
        self.rest.delete(TABLE, {"user_id": f"eq.{user_id}"})
