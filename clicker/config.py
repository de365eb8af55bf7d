# env vars + constants
import os

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Fail at startup if a situation lacks one of the three answer pairs
STRICT_CATALOG = os.getenv("STRICT_CATALOG", "true").strip().lower() in ("1", "true", "yes", "on")

# Participant page refresh period, served to the page by /api/config
POLL_INTERVAL_MS = int(os.getenv("POLL_INTERVAL_MS", "1500"))

CLICKER_URL = os.getenv("CLICKER_URL", f"http://localhost:{PORT}")
CLIENT_TIMEOUT = float(os.getenv("CLIENT_TIMEOUT", "2.0"))
