import os

from dotenv import load_dotenv

# Load .env from the project root
load_dotenv()

SERVICE_NAME = os.getenv("SERVICE_NAME", "order-rounds").strip() or "order-rounds"
ENV = os.getenv("ENV", "dev")
ENV_NORMALIZED = ENV.lower()
IS_DEV = ENV_NORMALIZED in {"dev", "development", "local"}
IS_PROD = ENV_NORMALIZED in {"prod", "production"}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
_cors_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [origin.strip() for origin in _cors_env.split(",") if origin.strip() and origin.strip() != "*"]

if not CORS_ORIGINS and IS_DEV:
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
