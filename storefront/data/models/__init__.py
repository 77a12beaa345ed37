#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.snapshot import CartSnapshotModel

__all__ = ["CartSnapshotModel"]
