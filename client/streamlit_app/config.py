"""Configuration for the Streamlit chat client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:9999")
POLL_INTERVAL_SECONDS = float(os.getenv("CHAT_POLL_INTERVAL_SECONDS", "3"))
