# storefront/services/product_client.py
from decimal import Decimal
from typing import Any, Dict, List

from storefront.domain.errors import ProductNotFound
from storefront.domain.schemas import Product
from storefront.repos.rest import SupabaseRest
from storefront.utils.retry import http_retry
from storefront.utils.settings import STORE_NAME
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def row_to_product(row: Dict[str, Any]) -> Product:
    return Product(
        id=str(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
        price=Decimal(str(row["price"])),
        image=row.get("image_url") or "",
        category=row.get("category") or "General",
        stock=row.get("stock_quantity") or 0,
        manufacturer=STORE_NAME,
        prescription=False,
    )


class ProductClient:
    """Read side of the remote product catalog, only active products are visible."""

    def __init__(self, rest: SupabaseRest | None = None):
        self.rest = rest or SupabaseRest()

    @http_retry()
    def list_products(self) -> List[Product]:
        logger.info("ProductClient GET products")
        rows = self.rest.select(
            "products",
            {"select": "*", "is_active": "eq.true", "order": "created_at.desc"},
        )
        return [row_to_product(r) for r in rows]

    def fetch_product(self, product_id: str) -> Product:
        rows = self._fetch_rows(product_id)
        if not rows:
            raise ProductNotFound(f"Product {product_id} not found")
        return row_to_product(rows[0])

    @http_retry()
    def _fetch_rows(self, product_id: str) -> List[Dict[str, Any]]:
        logger.info(f"ProductClient GET products id={product_id}")
        return self.rest.select(
            "products",
            {"select": "*", "id": f"eq.{product_id}", "is_active": "eq.true"},
        )
