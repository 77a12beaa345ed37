# storefront/repos/order_repo.py
from typing import Any, Dict, List

from storefront.repos.rest import SupabaseRest


class OrderRepo:
    def __init__(self, rest: SupabaseRest | None = None):
        self.rest = rest or SupabaseRest()

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        rows = self.rest.insert("orders", order)
        return rows[0]

    def add_order_items(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return self.rest.insert("order_items", items)

    def list_orders(self) -> List[Dict[str, Any]]:
        return self.rest.select("orders", {"select": "*", "order": "created_at.desc"})
