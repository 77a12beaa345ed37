# storefront/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.utils.settings import LOCAL_DATABASE_URL

#sqlite on the device, holds only local cart snapshots
connect_args = {"check_same_thread": False} if LOCAL_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(LOCAL_DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()
