"""Shared fixtures for storefront tests."""

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.data.database import Base
from storefront.data.models import CartSnapshotModel  # noqa: F401
from storefront.domain.identity import Identity
from storefront.domain.schemas import Product
from storefront.repos.snapshot_repo import SqlSnapshotRepo
from storefront.services.cart_service import CartStore


class RecordingMirror:
    """Stands in for MirrorService and keeps every dispatched write."""

    def __init__(self):
        self.calls = []

    def sync_line(self, user_id, product_id, quantity):
        self.calls.append(("sync", user_id, product_id, quantity))

    def clear(self, user_id):
        self.calls.append(("clear", user_id))


def make_product(product_id="1", price="25.99", name=None):
    return Product(
        id=product_id,
        name=name or f"Product {product_id}",
        price=Decimal(price),
        category="Pain Relief",
        stock=10,
        manufacturer="PharmaCorp",
    )


@pytest.fixture
def paracetamol():
    return make_product("1", "25.99", "Paracetamol 500mg")


@pytest.fixture
def amoxicillin():
    return make_product("2", "45.50", "Amoxicillin 250mg")


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def snapshots(session_factory):
    return SqlSnapshotRepo(session_factory=session_factory)


@pytest.fixture
def mirror():
    return RecordingMirror()


@pytest.fixture
def store(snapshots, mirror):
    return CartStore(snapshots=snapshots, mirror=mirror)


@pytest.fixture
def alice():
    return Identity(user_id="alice")


@pytest.fixture
def signed_in_store(store, alice):
    store.switch_identity(alice)
    return store


@pytest.fixture
def product_factory():
    return make_product
