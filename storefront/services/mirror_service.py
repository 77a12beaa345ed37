# storefront/services/mirror_service.py
from storefront.tasks.mirror import (
    upsert_cart_line_task,
    delete_cart_line_task,
    clear_cart_task,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class MirrorService:
    """
    Fire-and-forget writes to the remote cart table.
    Every call only enqueues a Celery task, without publish retries; a broker failure is logged and
    swallowed so the caller's local state is never affected.
    Tasks may finish in any order relative to each other.
    """

    def sync_line(self, user_id: str, product_id: str, quantity: int) -> None:
        if quantity > 0:
            self._dispatch(upsert_cart_line_task, user_id, product_id, quantity)
        else:
            self._dispatch(delete_cart_line_task, user_id, product_id)

    def clear(self, user_id: str) -> None:
        self._dispatch(clear_cart_task, user_id)

    @staticmethod
    def _dispatch(task, *args) -> None:
        try:
            # no publish retry, a dead broker must not hold up the caller
            task.apply_async(args=args, retry=False)
        except Exception as e:
            logger.error(f"Could not enqueue {task.name}{args}: {e}")
