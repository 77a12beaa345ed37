# storefront/services/cart_service.py
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from storefront.domain import cart as reducer
from storefront.domain.cart import CartLine, CartState, EMPTY_CART
from storefront.domain.errors import AuthenticationRequired
from storefront.domain.identity import ANONYMOUS, Identity
from storefront.domain.schemas import Product
from storefront.domain.snapshot import decode_snapshot, encode_snapshot, snapshot_key
from storefront.services.mirror_service import MirrorService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartView:
    lines: Tuple[CartLine, ...]
    total: Decimal
    count: int


class CartStore:
    """
    Owner of the in-memory cart for one client.

    Local state is updated synchronously and is what the UI renders. After
    each change the full line list is saved as the snapshot of the current
    user, then the affected row is pushed to the remote mirror without
    waiting for it. The mirror is never read back; restoring a cart always
    comes from the local snapshot.
    """

    def __init__(self, snapshots, mirror: MirrorService | None = None):
        self.snapshots = snapshots
        self.mirror = mirror or MirrorService()
        self._state: CartState = EMPTY_CART
        self._identity: Identity = ANONYMOUS
        # route handlers run on a threadpool, one change at a time
        self._lock = threading.RLock()

    #query
    @property
    def state(self) -> CartView:
        current = self._state
        return CartView(lines=current.lines, total=current.total, count=current.count)

    @property
    def identity(self) -> Identity:
        return self._identity

    def switch_identity(self, identity: Identity) -> None:
        with self._lock:
            self._switch_identity(identity)

    def _switch_identity(self, identity: Identity) -> None:
        previous = self._identity
        self._identity = identity

        if identity.is_anonymous:
            logger.info(f"User {previous.user_id} signed out, clearing cart")
            self._apply(reducer.clear(self._state))
            return

        raw = self._load(snapshot_key(identity.user_id))
        lines = decode_snapshot(raw)
        logger.info(f"Loaded {len(lines)} cart lines for user {identity.user_id}")
        self._apply(reducer.load_snapshot(self._state, lines))

    #commands
    def add_item(self, product: Product) -> CartView:
        with self._lock:
            user_id = self._require_user()
            logger.info(f"Adding product {product.id} to cart of user {user_id}")
            self._apply(reducer.add_line(self._state, product))
            self._mirror_line(user_id, product.id)
            return self.state

    def remove_item(self, product_id: str) -> CartView:
        with self._lock:
            user_id = self._require_user(notice="You need to be logged in to change your cart.")
            self._apply(reducer.remove_line(self._state, product_id))
            self._mirror_line(user_id, product_id)
            return self.state

    def update_quantity(self, product_id: str, quantity: int) -> CartView:
        with self._lock:
            user_id = self._require_user(notice="You need to be logged in to change your cart.")
            logger.info(f"Setting quantity of {product_id} to {quantity} for user {user_id}")
            self._apply(reducer.set_quantity(self._state, product_id, quantity))
            self._mirror_line(user_id, product_id)
            return self.state

    def clear_cart(self) -> CartView:
        with self._lock:
            # allowed while anonymous, then it is purely local
            self._apply(reducer.clear(self._state))
            if not self._identity.is_anonymous:
                self.mirror.clear(self._identity.user_id)
            return self.state

    def _require_user(self, notice: str | None = None) -> str:
        if self._identity.is_anonymous:
            logger.info("Cart change refused for anonymous user")
            raise AuthenticationRequired(notice) if notice else AuthenticationRequired()
        return self._identity.user_id

    def _apply(self, new_state: CartState) -> None:
        self._state = new_state
        if not self._identity.is_anonymous:
            self._save(snapshot_key(self._identity.user_id), encode_snapshot(new_state.lines))

    def _mirror_line(self, user_id: str, product_id: str) -> None:
        # mirror whatever the local line ended up as, a missing line is a delete
        line = self._state.find(product_id)
        self.mirror.sync_line(user_id, product_id, line.quantity if line else 0)

    def _load(self, key: str) -> str | None:
        try:
            return self.snapshots.load(key)
        except (SQLAlchemyError, RedisError) as e:
            logger.error(f"Error loading cart snapshot {key}: {e}")
            return None

    def _save(self, key: str, payload: str) -> None:
        try:
            self.snapshots.save(key, payload)
        except (SQLAlchemyError, RedisError) as e:
            logger.error(f"Error saving cart snapshot {key}: {e}")
