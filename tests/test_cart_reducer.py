"""Tests for the pure cart reducer."""

from decimal import Decimal

import pytest

from storefront.domain import cart as reducer
from storefront.domain.cart import CartLine, CartState, EMPTY_CART


def test_add_same_product_many_times_keeps_one_line(paracetamol):
    state = EMPTY_CART
    for _ in range(5):
        state = reducer.add_line(state, paracetamol)

    assert len(state.lines) == 1
    assert state.lines[0].quantity == 5
    assert state.count == 5


def test_add_two_products_scenario(paracetamol, amoxicillin):
    state = reducer.add_line(EMPTY_CART, paracetamol)
    state = reducer.add_line(state, paracetamol)
    state = reducer.add_line(state, amoxicillin)

    assert [line.product_id for line in state.lines] == ["1", "2"]
    assert state.find("1").quantity == 2
    assert state.find("2").quantity == 1
    assert state.count == 3
    assert state.total == Decimal("25.99") * 2 + Decimal("45.50")


def test_add_does_not_mutate_previous_state(paracetamol):
    before = reducer.add_line(EMPTY_CART, paracetamol)
    after = reducer.add_line(before, paracetamol)

    assert before.lines[0].quantity == 1
    assert after.lines[0].quantity == 2


def test_remove_is_idempotent(paracetamol, amoxicillin):
    state = reducer.add_line(reducer.add_line(EMPTY_CART, paracetamol), amoxicillin)

    once = reducer.remove_line(state, "1")
    twice = reducer.remove_line(once, "1")

    assert once == twice
    assert [line.product_id for line in twice.lines] == ["2"]


def test_remove_unknown_product_is_noop(paracetamol):
    state = reducer.add_line(EMPTY_CART, paracetamol)
    assert reducer.remove_line(state, "missing") == state


@pytest.mark.parametrize("quantity", [0, -1, -20])
def test_set_quantity_non_positive_equals_remove(paracetamol, amoxicillin, quantity):
    state = reducer.add_line(reducer.add_line(EMPTY_CART, paracetamol), amoxicillin)

    assert reducer.set_quantity(state, "1", quantity) == reducer.remove_line(state, "1")


def test_set_quantity_overwrites_and_keeps_order(paracetamol, amoxicillin):
    state = reducer.add_line(reducer.add_line(EMPTY_CART, paracetamol), amoxicillin)

    state = reducer.set_quantity(state, "1", 7)

    assert [line.product_id for line in state.lines] == ["1", "2"]
    assert state.find("1").quantity == 7
    assert state.count == 8


def test_set_quantity_for_unknown_product_is_noop(paracetamol):
    state = reducer.add_line(EMPTY_CART, paracetamol)
    assert reducer.set_quantity(state, "missing", 3) == state


def test_clear_resets_derived_fields(paracetamol):
    state = reducer.clear(reducer.add_line(EMPTY_CART, paracetamol))

    assert state.lines == ()
    assert state.total == Decimal("0")
    assert state.count == 0


def test_load_snapshot_returns_given_lines(paracetamol, amoxicillin):
    lines = (CartLine(product=paracetamol, quantity=2), CartLine(product=amoxicillin, quantity=3))

    state = reducer.load_snapshot(EMPTY_CART, lines)

    assert state.lines == lines
    assert state.count == 5
    assert state.total == Decimal("25.99") * 2 + Decimal("45.50") * 3


def test_total_matches_lines_for_any_sequence(product_factory):
    products = [product_factory(str(i), f"{i}.25") for i in range(1, 4)]
    state = CartState()
    ops = [
        lambda s: reducer.add_line(s, products[0]),
        lambda s: reducer.add_line(s, products[1]),
        lambda s: reducer.set_quantity(s, "2", 4),
        lambda s: reducer.add_line(s, products[2]),
        lambda s: reducer.remove_line(s, "1"),
        lambda s: reducer.add_line(s, products[0]),
        lambda s: reducer.set_quantity(s, "3", -2),
    ]

    for op in ops:
        state = op(state)
        expected = sum((l.product.price * l.quantity for l in state.lines), Decimal("0"))
        assert state.total == expected
        assert state.count == sum(l.quantity for l in state.lines)
        assert all(l.quantity >= 1 for l in state.lines)
