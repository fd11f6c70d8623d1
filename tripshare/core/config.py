import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./tripshare.db")

# Secret key for JWT
JWT_SECRET_KEY = os.environ.get(
    "JWT_SECRET_KEY", "5c0b1e2d7a9f4e63b8d2c1a0f9e8d7c6b5a49382716f5e4d3c2b1a0f9e8d7c6b"
)
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "360000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE", "server.log")

# Older clients relied on POST /api/points/:id echoing the trip without storing
# the point. Set to false to get that behaviour back.
PERSIST_NEW_POINTS = _flag("PERSIST_NEW_POINTS", "true")

PORT = int(os.environ.get("PORT", "5000"))
