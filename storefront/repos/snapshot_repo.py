# storefront/repos/snapshot_repo.py
from typing import Callable

import redis
from sqlalchemy.orm import Session

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models.snapshot import CartSnapshotModel
from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL, SNAPSHOT_BACKEND
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class SqlSnapshotRepo:
    """Device-local snapshots in SQLite, one row per storage key."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self.session_factory = session_factory

    def load(self, key: str) -> str | None:
        with self.session_factory() as db:
            row = db.get(CartSnapshotModel, key)
            return row.payload if row else None

    def save(self, key: str, payload: str) -> None:
        with self.session_factory() as db:
            row = db.get(CartSnapshotModel, key)
            if row:
                row.payload = payload
            else:
                db.add(CartSnapshotModel(key=key, payload=payload))
            db.commit()


class RedisSnapshotRepo:
    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(url or REDIS_URL, decode_responses=True)

    @redis_retry()
    def load(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def save(self, key: str, payload: str) -> None:
        self.redis.set(name=key, value=payload)


def build_snapshot_repo(backend: str | None = None):
    backend = (backend or SNAPSHOT_BACKEND).lower()
    logger.info(f"Using '{backend}' cart snapshot backend")

    if backend == "redis":
        return RedisSnapshotRepo()
    if backend == "sql":
        Base.metadata.create_all(bind=engine)
        return SqlSnapshotRepo()

    raise ValueError(f"Unknown snapshot backend: {backend}")
