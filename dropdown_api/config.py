import os
from dotenv import load_dotenv

load_dotenv()

# Duda Partner API
DUDA_API_BASE_URL = os.getenv("DUDA_API_BASE_URL", "https://api.duda.co/api").rstrip("/")
DUDA_API_TIMEOUT = float(os.getenv("DUDA_API_TIMEOUT", "30"))

# Collection used by the editor proxy when it omits collection_name
DEFAULT_COLLECTION_NAME = os.getenv("DEFAULT_COLLECTION_NAME", "CarCatalog")

# 404 instead of an empty list when renderName matches no item
WINDOW_PARTS_STRICT_MATCH = os.getenv("WINDOW_PARTS_STRICT_MATCH", "false").strip().lower() in ("1", "true", "yes")

ALLOWED_ORIGINS = [s.strip() for s in os.getenv("ALLOWED_ORIGINS", "*").split(",") if s.strip()]
ALLOW_ALL_ORIGINS = not ALLOWED_ORIGINS or "*" in ALLOWED_ORIGINS

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "8787"))


def get_duda_credentials() -> tuple[str, str] | None:
    """
    Read the Duda API username/password pair from the environment.
    Looked up on every call so a rotated secret is picked up without a restart.
    """
    user = os.getenv("DUDA_API_USERNAME", "")
    password = os.getenv("DUDA_API_PASSWORD", "")
    if not user.strip() or not password.strip():
        return None
    return user, password
