# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL", "http://localhost:54321")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", 5))
HTTP_RETRY_ATTEMPTS = int(os.getenv("HTTP_RETRY_ATTEMPTS", 3))

LOCAL_DATABASE_URL = os.getenv("LOCAL_DATABASE_URL", "sqlite:///./storefront_local.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
REDIS_RETRY_ATTEMPTS = int(os.getenv("REDIS_RETRY_ATTEMPTS", 2))
# sql | redis
SNAPSHOT_BACKEND = os.getenv("SNAPSHOT_BACKEND", "sql")

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/1")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/2")

STORE_NAME = os.getenv("STORE_NAME", "Shahi Medicals")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
