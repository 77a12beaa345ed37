# storefront/celery_worker.py
from celery import Celery

from storefront.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND

celery_app = Celery(
    "storefront",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# explicit task imports so the worker registers them
celery_app.conf.imports = (
    "storefront.tasks.mirror",
)

celery_app.conf.task_ignore_result = True
celery_app.conf.task_publish_retry = False
celery_app.conf.timezone = "UTC"
