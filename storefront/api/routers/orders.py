# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_cart_store, get_order_service
from storefront.domain.errors import AuthenticationRequired, RemoteStoreError
from storefront.domain.schemas import CustomerIn, OrderOut
from storefront.services.cart_service import CartStore
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=201)
def place_order(
    payload: CustomerIn,
    store: CartStore = Depends(get_cart_store),
    svc: OrderService = Depends(get_order_service),
):
    """
    Creates the order and its items from the current cart, then clears it.
    """
    try:
        return svc.place_order(store, payload)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail={"title": e.title, "notice": e.notice})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RemoteStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("", response_model=List[OrderOut])
def list_orders(
    store: CartStore = Depends(get_cart_store),
    svc: OrderService = Depends(get_order_service),
):
    """Admin only."""
    try:
        return svc.list_orders(store)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except RemoteStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
