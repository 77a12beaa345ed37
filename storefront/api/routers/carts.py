# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from requests import RequestException

from storefront.api.deps import get_cart_store, get_product_client
from storefront.domain.errors import AuthenticationRequired, ProductNotFound
from storefront.domain.schemas import CartItemOut, CartOut, ItemIn, QuantityIn
from storefront.services.cart_service import CartStore, CartView
from storefront.services.product_client import ProductClient

router = APIRouter(prefix="/cart", tags=["cart"])


def cart_out(view: CartView) -> CartOut:
    return CartOut(
        items=[
            CartItemOut(product=line.product, quantity=line.quantity, subtotal=line.subtotal)
            for line in view.lines
        ],
        total=view.total,
        count=view.count,
    )


def auth_error(e: AuthenticationRequired) -> HTTPException:
    return HTTPException(status_code=401, detail={"title": e.title, "notice": e.notice})


@router.get("", response_model=CartOut)
def get_cart(store: CartStore = Depends(get_cart_store)):
    return cart_out(store.state)


@router.post("/items", response_model=CartOut)
def add_item(
    payload: ItemIn,
    store: CartStore = Depends(get_cart_store),
    products: ProductClient = Depends(get_product_client),
):
    #refuse before hitting the catalog
    if store.identity.is_anonymous:
        raise auth_error(AuthenticationRequired())

    try:
        product = products.fetch_product(payload.product_id)
        return cart_out(store.add_item(product))
    except AuthenticationRequired as e:
        raise auth_error(e)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RequestException as e:
        raise HTTPException(status_code=502, detail=f"Failed to load product: {e}")


@router.patch("/items/{product_id}", response_model=CartOut)
def update_quantity(
    product_id: str,
    payload: QuantityIn,
    store: CartStore = Depends(get_cart_store),
):
    try:
        return cart_out(store.update_quantity(product_id, payload.quantity))
    except AuthenticationRequired as e:
        raise auth_error(e)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(product_id: str, store: CartStore = Depends(get_cart_store)):
    try:
        return cart_out(store.remove_item(product_id))
    except AuthenticationRequired as e:
        raise auth_error(e)


@router.delete("", response_model=CartOut)
def clear_cart(store: CartStore = Depends(get_cart_store)):
    return cart_out(store.clear_cart())
