# storefront/tasks/mirror.py
from requests import RequestException

from storefront.celery_worker import celery_app
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _repo() -> CartRepo:
    return CartRepo()


#no retry on purpose, a failed write is logged and dropped
@celery_app.task(name="storefront.tasks.mirror.upsert_cart_line_task")
def upsert_cart_line_task(user_id: str, product_id: str, quantity: int):
    try:
        _repo().upsert_line(user_id, product_id, quantity)
    except RequestException as e:
        logger.error(f"Error syncing cart line {product_id} for user {user_id}: {e}")
        return {"user_id": user_id, "product_id": product_id, "status": "failed"}
    return {"user_id": user_id, "product_id": product_id, "status": "synced"}


@celery_app.task(name="storefront.tasks.mirror.delete_cart_line_task")
def delete_cart_line_task(user_id: str, product_id: str):
    try:
        _repo().delete_line(user_id, product_id)
    except RequestException as e:
        logger.error(f"Error removing cart line {product_id} for user {user_id}: {e}")
        return {"user_id": user_id, "product_id": product_id, "status": "failed"}
    return {"user_id": user_id, "product_id": product_id, "status": "synced"}


@celery_app.task(name="storefront.tasks.mirror.clear_cart_task")
def clear_cart_task(user_id: str):
    try:
        _repo().delete_all(user_id)
    except RequestException as e:
        logger.error(f"Error clearing remote cart for user {user_id}: {e}")
        return {"user_id": user_id, "status": "failed"}
    return {"user_id": user_id, "status": "synced"}
