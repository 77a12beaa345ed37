# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from requests import RequestException

from storefront.api.deps import get_product_client
from storefront.domain.errors import ProductNotFound
from storefront.domain.schemas import Product
from storefront.services.product_client import ProductClient

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[Product])
def list_products(client: ProductClient = Depends(get_product_client)):
    try:
        return client.list_products()
    except RequestException as e:
        raise HTTPException(status_code=502, detail=f"Failed to load products: {e}")


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str, client: ProductClient = Depends(get_product_client)):
    try:
        return client.fetch_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RequestException as e:
        raise HTTPException(status_code=502, detail=f"Failed to load product: {e}")
