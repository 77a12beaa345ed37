# storefront/api/deps.py
from fastapi import Request

from storefront.services.cart_service import CartStore
from storefront.services.identity_service import IdentityService
from storefront.services.order_service import OrderService
from storefront.services.product_client import ProductClient


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.cart_store


def get_product_client(request: Request) -> ProductClient:
    return request.app.state.product_client


def get_identity_service(request: Request) -> IdentityService:
    return request.app.state.identity_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service
