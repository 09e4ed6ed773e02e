"""Application entrypoint.

This file is intentionally small: browser lifecycle, scraping, and HTTP
handlers live in their own modules for readability and testability.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import routes
from .config import CORS_ORIGINS
from .playwright_manager import lifespan


app = FastAPI(title="City Events Scraper", lifespan=lifespan, redirect_slashes=False)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(routes.router)

logger = logging.getLogger("app")
logging.basicConfig(level=logging.INFO)
