# storefront/services/order_service.py
from typing import Any, Dict, List

from requests import RequestException

from storefront.domain.errors import AuthenticationRequired, RemoteStoreError
from storefront.domain.schemas import CustomerIn
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import CartStore
from storefront.services.identity_service import require_admin
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Checkout. Unlike cart sync, order writes are awaited and their failures
    reach the caller, the cart is only cleared once the order is stored.
    """

    def __init__(self, repo: OrderRepo | None = None):
        self.repo = repo or OrderRepo()

    def place_order(self, store: CartStore, customer: CustomerIn) -> Dict[str, Any]:
        identity = store.identity
        if identity.is_anonymous:
            raise AuthenticationRequired(
                notice="Please sign in to place an order.",
                title="Authentication Required",
            )

        if not customer.name or not customer.phone or not customer.address:
            raise ValueError("Please fill in all required fields.")

        cart = store.state
        if not cart.lines:
            raise ValueError("Your cart is empty")

        try:
            order = self.repo.create_order(
                {
                    "user_id": identity.user_id,
                    "total_amount": str(cart.total),
                    "status": "pending",
                    "shipping_address": customer.address,
                    "phone": customer.phone,
                }
            )
            self.repo.add_order_items(
                [
                    {
                        "order_id": order["id"],
                        "product_id": line.product_id,
                        "quantity": line.quantity,
                        "price": str(line.product.price),
                    }
                    for line in cart.lines
                ]
            )
        except RequestException as e:
            logger.error(f"Error placing order for user {identity.user_id}: {e}")
            raise RemoteStoreError("There was an error placing your order. Please try again.") from e

        logger.info(f"Order {order['id']} placed by user {identity.user_id}, total {cart.total}")
        store.clear_cart()
        return order

    def list_orders(self, store: CartStore) -> List[Dict[str, Any]]:
        require_admin(store.identity)
        try:
            return self.repo.list_orders()
        except RequestException as e:
            logger.error(f"Error fetching orders: {e}")
            raise RemoteStoreError("Failed to load orders") from e
