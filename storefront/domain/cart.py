# storefront/domain/cart.py
"""
Pure cart reducer.

Every function takes a CartState and returns a new one, nothing is mutated
in place. total and count are derived from lines on every read so they can
never drift from the lines they describe.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable, Tuple

from storefront.domain.schemas import Product


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CartState:
    lines: Tuple[CartLine, ...] = ()

    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0.00"))

    @property
    def count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None


EMPTY_CART = CartState()


def add_line(state: CartState, product: Product) -> CartState:
    if state.find(product.id) is None:
        return CartState(lines=state.lines + (CartLine(product=product, quantity=1),))

    return CartState(
        lines=tuple(
            replace(line, quantity=line.quantity + 1) if line.product_id == product.id else line
            for line in state.lines
        )
    )


def remove_line(state: CartState, product_id: str) -> CartState:
    return CartState(lines=tuple(line for line in state.lines if line.product_id != product_id))


def set_quantity(state: CartState, product_id: str, quantity: int) -> CartState:
    quantity = max(0, quantity)
    if quantity == 0:
        return remove_line(state, product_id)

    return CartState(
        lines=tuple(
            replace(line, quantity=quantity) if line.product_id == product_id else line
            for line in state.lines
        )
    )


def clear(state: CartState) -> CartState:
    return EMPTY_CART


def load_snapshot(state: CartState, lines: Iterable[CartLine]) -> CartState:
    # duplicates are not checked, the snapshot decoder is trusted
    return CartState(lines=tuple(lines))
