# storefront/data/models/snapshot.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime

from storefront.data.database import Base


class CartSnapshotModel(Base):
    __tablename__ = "cart_snapshots"

    key = Column(String, primary_key=True)  # cart_<user_id>
    payload = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
