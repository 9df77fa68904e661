# cafenet/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

BACKEND_URL = os.getenv("CAFENET_BACKEND_URL", "http://localhost:8000")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 10))

# file | redis
SESSION_BACKEND = os.getenv("SESSION_BACKEND", "file")
SESSION_DIR = os.getenv("SESSION_DIR", os.path.join(os.path.expanduser("~"), ".cafenet"))
SESSION_KEY = os.getenv("SESSION_KEY", "aradabiya_user")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

DEFAULT_BILLING_HOURS = int(os.getenv("DEFAULT_BILLING_HOURS", 2))
CURRENCY_PREFIX = os.getenv("CURRENCY_PREFIX", "Rp")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", 8080))
