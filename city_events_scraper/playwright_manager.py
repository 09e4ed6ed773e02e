"""Playwright lifecycle and browser session manager.

The Playwright driver is started once for the application. Browsers are
not shared: every scrape launches its own browser process through
`open_session` and tears it down before the request completes.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional
from contextlib import asynccontextmanager

from playwright.async_api import Browser, Page, Playwright, async_playwright

from .config import BROWSER_CHANNEL, MAX_CONCURRENT_SESSIONS, PLAYWRIGHT_HEADLESS
from .errors import ResourceError

logger = logging.getLogger("app.playwright")

# Restricted server environments (containers, PaaS) have no usable sandbox
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

_playwright: Optional[Playwright] = None
# Bounded semaphore to limit concurrent browser processes
_semaphore = asyncio.BoundedSemaphore(MAX_CONCURRENT_SESSIONS)


async def _ensure_startup() -> Playwright:
    """Start the Playwright driver.

    Should be safe to call multiple times (no-op if already started).
    """
    global _playwright
    if _playwright is None:
        try:
            _playwright = await async_playwright().start()
            logger.info("Playwright started")
        except Exception as e:
            logger.exception("Failed to start Playwright: %s", e)
            _playwright = None
            raise ResourceError(f"Failed to start Playwright: {e}") from e
    return _playwright


async def _shutdown() -> None:
    """Stop the Playwright driver.

    Shutdown may fail if the driver already exited; log and continue.
    """
    global _playwright
    # Wait briefly for in-flight sessions by acquiring all permits, so
    # browsers are not killed underneath a running scrape.
    acquired = 0
    per_attempt = 5.0 / max(1, MAX_CONCURRENT_SESSIONS)
    for _ in range(MAX_CONCURRENT_SESSIONS):
        try:
            await asyncio.wait_for(_semaphore.acquire(), timeout=per_attempt)
            acquired += 1
        except asyncio.TimeoutError:
            logger.warning("Timed out waiting for active sessions to finish before shutdown")
            break

    if _playwright:
        try:
            await _playwright.stop()
        except Exception as e:
            logger.warning("Exception while stopping Playwright during shutdown: %s", e)

    for _ in range(acquired):
        _semaphore.release()

    _playwright = None
    logger.info("Playwright stopped")


@asynccontextmanager
async def lifespan(app):
    await _ensure_startup()
    try:
        yield
    finally:
        await _shutdown()


async def _launch(playwright: Playwright) -> Browser:
    try:
        return await playwright.chromium.launch(
            channel=BROWSER_CHANNEL, headless=PLAYWRIGHT_HEADLESS, args=BROWSER_ARGS
        )
    except Exception as e:
        raise ResourceError(f"Failed to launch browser: {e}") from e


async def _close(browser: Browser, strict: bool) -> None:
    try:
        await browser.close()
    except Exception as e:
        if strict:
            raise ResourceError(f"Failed to close browser: {e}") from e
        # Another error is already propagating; do not mask it
        logger.warning("Failed to close browser cleanly: %s", e)


@asynccontextmanager
async def open_session() -> AsyncIterator[Page]:
    """Yield a page in a freshly launched browser owned by the caller.

    The browser is closed on every exit path.
    """
    async with _semaphore:
        playwright = await _ensure_startup()
        browser = await _launch(playwright)
        logger.debug("Browser launched")
        try:
            context = await browser.new_context(
                **playwright.devices.get("Desktop Chrome", {})
            )
            page = await context.new_page()
            yield page
        except BaseException:
            await _close(browser, strict=False)
            raise
        else:
            await _close(browser, strict=True)
        logger.debug("Browser closed")

