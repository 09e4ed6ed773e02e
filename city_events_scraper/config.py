"""Environment-configurable settings.

Values are read once at import. Every setting has a default that works for
local development against the live listing site.
"""

import os

# Listing site
LISTING_BASE_URL = os.getenv("LISTING_BASE_URL", "https://insider.in").rstrip("/")

# Browser
# Headless mode can be toggled via env var (0 means headed)
PLAYWRIGHT_HEADLESS = os.getenv("PLAYWRIGHT_HEADLESS", "1") != "0"
BROWSER_CHANNEL = os.getenv("BROWSER_CHANNEL", "chromium")
MAX_CONCURRENT_SESSIONS = int(os.getenv("MAX_CONCURRENT_SESSIONS", "4"))

# Navigation
GOTO_TIMEOUT_MS = int(os.getenv("PAGE_GOTO_TIMEOUT_MS", "60000"))

# Extraction
CONTENT_TIMEOUT_MS = int(os.getenv("PAGE_CONTENT_TIMEOUT_MS", "30000"))

# Scrolling
SCROLL_STEP_PX = int(os.getenv("SCROLL_STEP_PX", "100"))
SCROLL_INTERVAL_MS = int(os.getenv("SCROLL_INTERVAL_MS", "300"))
SCROLL_SETTLE_MS = int(os.getenv("SCROLL_SETTLE_MS", "1000"))
SCROLL_MAX_ITERATIONS = int(os.getenv("SCROLL_MAX_ITERATIONS", "500"))
SCROLL_MAX_SECONDS = float(os.getenv("SCROLL_MAX_SECONDS", "60"))

# HTTP
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if o.strip()
]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
