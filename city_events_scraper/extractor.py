"""Read raw event cards out of a rendered listing page."""

import asyncio
import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .config import CONTENT_TIMEOUT_MS
from .errors import ExtractionError, ScrapeTimeoutError
from .models import RawEventRecord
from .site import DEFAULT_SITE, SiteAdapter

logger = logging.getLogger("app.extractor")


def _text(card, selector: str) -> str:
    el = card.select_one(selector)
    if el is None:
        return ""
    return " ".join(el.get_text(" ", strip=True).split())


def _href(card, selector: str) -> str:
    el = card.select_one(selector)
    if el is None:
        return ""
    return (el.get("href") or "").strip()


def parse_cards(html: str, site: SiteAdapter = DEFAULT_SITE) -> List[RawEventRecord]:
    """Return one record per event card, in document order.

    Missing fields come back as empty strings; nothing is dropped here.
    """
    soup = BeautifulSoup(html, "html.parser")
    records = []
    for card in soup.select(site.card_selector):
        records.append(
            RawEventRecord(
                title=_text(card, site.title_selector),
                date_text=_text(card, site.date_selector),
                href=_href(card, site.link_selector),
            )
        )
    return records


async def extract_raw(
    page: Page,
    site: Optional[SiteAdapter] = None,
    timeout_ms: int = CONTENT_TIMEOUT_MS,
) -> List[RawEventRecord]:
    site = site or DEFAULT_SITE
    try:
        html = await asyncio.wait_for(page.content(), timeout=timeout_ms / 1000)
        records = parse_cards(html, site)
    except asyncio.TimeoutError as e:
        raise ScrapeTimeoutError(f"Reading page content timed out after {timeout_ms} ms") from e
    except PlaywrightError as e:
        raise ExtractionError(f"Could not read page content: {e}") from e
    except Exception as e:
        raise ExtractionError(f"Failed to parse event cards: {e}") from e

    logger.info("Found %d event cards on %s", len(records), page.url)
    return records
