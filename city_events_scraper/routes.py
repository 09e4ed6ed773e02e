"""HTTP route handlers (FastAPI APIRouter).

Defines the event listing, user registration and `/health` endpoints.
Scraping is delegated to `session.run_scrape`; every pipeline failure is
logged here and answered with a generic message.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional
import logging

from .errors import ResourceError, ScraperError, ScrapeTimeoutError, ValidationError
from .models import EventsResponse, MessageResponse
from .session import run_scrape
from .users import UserStore, get_user_store

logger = logging.getLogger("app.routes")

router = APIRouter()

EVENTS_PREFIX = "/api/v1/fetch-events"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def validate_city(city_name: Optional[str]) -> str:
    city = (city_name or "").strip()
    if not city:
        raise ValidationError("City parameter is required")
    return city


@router.get(
    EVENTS_PREFIX + "/{city_name}",
    response_model=EventsResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def get_events_by_city(city_name: str):
    try:
        city = validate_city(city_name)
    except ValidationError as e:
        return _message(400, str(e))

    try:
        result = await run_scrape(city)
        return EventsResponse(city=city_name, events=result.events)
    except ResourceError as e:
        # Browser could not start or stop: the host is misconfigured
        logger.critical("Browser resource failure for %r: %s", city, e, exc_info=True)
    except ScrapeTimeoutError as e:
        logger.error("Timeout scraping %r: %s", city, e)
    except ScraperError as e:
        logger.exception("Scrape failed for %r: %s", city, e)
    except Exception as e:
        logger.exception("Unexpected error scraping %r: %s", city, e)
    return _message(500, "Internal server error")


@router.get(EVENTS_PREFIX, include_in_schema=False)
@router.get(EVENTS_PREFIX + "/", include_in_schema=False)
async def get_events_missing_city():
    return _message(400, "City parameter is required")


class SaveUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    eventTitle: Optional[str] = None


@router.post("/api/v1/save-user", status_code=201)
async def save_user(
    payload: SaveUserRequest, store: UserStore = Depends(get_user_store)
):
    name = (payload.name or "").strip()
    email = (payload.email or "").strip()
    if not name or not email:
        return _message(400, "All fields are required")

    try:
        existing = await store.find_by_email(email)
        if existing is not None:
            return _message(200, "User already exists, You can continue")

        user = await store.create(name=name, email=email)
    except Exception as e:
        logger.exception("Saving user failed: %s", e)
        return _message(500, "Internal server error")

    logger.info("Registered new user for event %r", payload.eventTitle or "")
    return {"message": "User saved successfully", "user": user.model_dump(mode="json")}


@router.get("/health")
async def health():
    """Lightweight health endpoint that does not start Playwright.

    This is useful for load balancers and tests that want a quick
    liveness check without exercising the browser.
    """
    return {"status": "ok"}
