"""Scrape one city's listing: navigate, scroll, extract, normalize.

Each call owns one browser session from `playwright_manager.open_session`
and releases it before returning or raising. Steps run strictly in order
since each depends on the DOM left by the previous one.
"""

import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from . import playwright_manager
from .config import GOTO_TIMEOUT_MS
from .errors import ExtractionError, NavigationError, ScrapeTimeoutError
from .extractor import extract_raw
from .normalizer import ScrapeResult, normalize
from .scroll import ScrollOptions, exhaust_scroll
from .site import DEFAULT_SITE, SiteAdapter

logger = logging.getLogger("app.session")


async def navigate(page: Page, url: str, timeout_ms: int = GOTO_TIMEOUT_MS) -> None:
    """Load `url` and wait until the network goes idle, bounded by `timeout_ms`."""
    try:
        response = await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise ScrapeTimeoutError(f"Navigation to {url} timed out after {timeout_ms} ms") from e
    except PlaywrightError as e:
        raise NavigationError(f"Navigation to {url} failed: {e}") from e

    # Unknown cities answer with an error page; scrape what rendered
    if response is not None and response.status >= 400:
        logger.warning("Navigation to %s returned HTTP %d", url, response.status)


async def run_scrape(
    city_name: str,
    site: Optional[SiteAdapter] = None,
    scroll_options: Optional[ScrollOptions] = None,
) -> ScrapeResult:
    """Scrape the event listing for `city_name`.

    `city_name` must be non-empty; validating it is the caller's job.
    """
    site = site or DEFAULT_SITE
    url = site.listing_url(city_name)
    logger.info("Scraping %s", url)

    async with playwright_manager.open_session() as page:
        await navigate(page, url)

        try:
            state = await exhaust_scroll(page, scroll_options)
        except PlaywrightError as e:
            raise ExtractionError(f"Scrolling {url} failed: {e}") from e
        if state.capped:
            logger.warning("Listing %s did not finish loading; extracting what rendered", url)

        raw = await extract_raw(page, site)

    result = normalize(raw, site)
    logger.info(
        "Scraped %d events for %r (%d rejected)",
        len(result.events),
        city_name,
        result.rejected,
    )
    return result
