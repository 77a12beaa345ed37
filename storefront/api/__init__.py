# storefront/api/__init__.py
from fastapi import FastAPI

from storefront.api.routers import carts, orders, products, session
from storefront.api.routers.health import router as health_router
from storefront.repos.snapshot_repo import build_snapshot_repo
from storefront.services.cart_service import CartStore
from storefront.services.identity_service import IdentityService
from storefront.services.order_service import OrderService
from storefront.services.product_client import ProductClient


def create_app(
    cart_store: CartStore | None = None,
    product_client: ProductClient | None = None,
    identity_service: IdentityService | None = None,
    order_service: OrderService | None = None,
) -> FastAPI:
    app = FastAPI(title="Storefront", version="1.0.0")

    #one cart per application root, handed to handlers through deps
    app.state.cart_store = cart_store or CartStore(snapshots=build_snapshot_repo())
    app.state.product_client = product_client or ProductClient()
    app.state.identity_service = identity_service or IdentityService()
    app.state.order_service = order_service or OrderService()

    app.include_router(health_router)
    app.include_router(session.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    return app
