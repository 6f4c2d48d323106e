# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))

DEFAULT_JWT_SECRET = "dev-secret-change-this-in-production"
JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
JWT_ALGORITHM = "HS256"
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", 7 * 24 * 60 * 60))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
PUBLIC_DIR = os.getenv("PUBLIC_DIR", os.path.join(os.getcwd(), "public"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
SEED_CATALOG = os.getenv("SEED_CATALOG", "1").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
