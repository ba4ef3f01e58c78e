import os
from dotenv import load_dotenv

load_dotenv()

WAITLIST_API_URL = os.getenv("WAITLIST_API_URL", "http://localhost:8000/api/add_emails")

# Unset means no timeout: wait until the upstream answers or the transport fails.
_timeout = os.getenv("WAITLIST_API_TIMEOUT")
WAITLIST_API_TIMEOUT = float(_timeout) if _timeout else None

PROJECT_NAME = os.getenv("PROJECT_NAME", "ai-resteraunt-review-manager")

# Unset means the landing form calls the proxy in-process.
PROXY_URL = os.getenv("PROXY_URL")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
