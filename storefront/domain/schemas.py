# storefront/domain/schemas.py
from pydantic import AliasChoices, BaseModel, Field, ConfigDict
from typing import List, Literal
from decimal import Decimal
from datetime import datetime


class Product(BaseModel):
    """Catalog product, denormalized into the cart snapshot for offline rendering."""

    id: str
    name: str
    description: str = ""
    price: Decimal = Field(..., ge=0)
    category: str = "General"
    image: str = ""
    stock: int = 0
    manufacturer: str = ""
    prescription: bool = False
    dosage: str | None = None
    # older snapshots used the camelCase name
    side_effects: str | None = Field(None, validation_alias=AliasChoices("side_effects", "sideEffects"))

    model_config = ConfigDict(frozen=True)


class SnapshotLine(BaseModel):
    product: Product
    quantity: int = Field(..., gt=0)


class CartSnapshot(BaseModel):
    """Versioned shape of the locally persisted cart."""

    version: Literal[1] = 1
    lines: List[SnapshotLine] = Field(default_factory=list)


class ItemIn(BaseModel):
    """Schema for adding a product to the cart."""

    product_id: str = Field(..., min_length=1)


class QuantityIn(BaseModel):
    # negative values are clamped to 0 and remove the line
    quantity: int


class CartItemOut(BaseModel):
    product: Product
    quantity: int
    subtotal: Decimal


class CartOut(BaseModel):
    """Schema for the current cart (response)."""

    items: List[CartItemOut]
    total: Decimal
    count: int


class SessionIn(BaseModel):
    user_id: str = Field(..., min_length=1)


class IdentityOut(BaseModel):
    user_id: str | None
    is_admin: bool
    authenticated: bool


class CustomerIn(BaseModel):
    """Delivery details collected at checkout."""

    name: str = ""
    phone: str = ""
    address: str = ""
    email: str = ""


class OrderOut(BaseModel):
    id: str
    user_id: str
    status: str
    total_amount: Decimal
    shipping_address: str | None = None
    phone: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
