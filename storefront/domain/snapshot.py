# storefront/domain/snapshot.py
import json
from typing import Iterable, Tuple

from pydantic import ValidationError

from storefront.domain.cart import CartLine
from storefront.domain.schemas import CartSnapshot, SnapshotLine
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

GUEST_KEY = "cart_guest"


def snapshot_key(user_id: str | None) -> str:
    return f"cart_{user_id}" if user_id else GUEST_KEY


def encode_snapshot(lines: Iterable[CartLine]) -> str:
    snapshot = CartSnapshot(
        lines=[SnapshotLine(product=line.product, quantity=line.quantity) for line in lines]
    )
    return snapshot.model_dump_json()


def decode_snapshot(raw: str | bytes | None) -> Tuple[CartLine, ...]:
    """
    Stored data is never trusted: anything that is not a valid snapshot
    decodes to an empty cart instead of raising.
    """
    if not raw:
        return ()

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Cart snapshot is not valid JSON, starting empty: {e}")
        return ()

    #older clients stored a bare list of lines without a version
    if isinstance(data, list):
        data = {"version": 1, "lines": data}

    try:
        snapshot = CartSnapshot.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Cart snapshot has unexpected shape, starting empty: {e.error_count()} errors")
        return ()

    return tuple(CartLine(product=line.product, quantity=line.quantity) for line in snapshot.lines)
