import os

# ===================== CONFIG =====================
BASE_URL = os.getenv("TASKS_API_URL") or "http://localhost:5000"
REQUEST_TIMEOUT = 10  # seconds

LOG_LEVEL = os.getenv("TASKS_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("TASKS_LOG_FILE") or None

WINDOW_GEOMETRY = "560x640"
TOPMOST = False
UI_POLL_INTERVAL_MS = 50  # drain worker results on the Tk thread
