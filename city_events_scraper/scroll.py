"""Scroll driver that forces infinite-scroll listings to fully render.

The page is scrolled in fixed steps. Before each step the current document
height is read again, since lazily mounted cards grow the page while we
scroll. Scrolling stops once the accumulated distance reaches the bottom
of the last observed height, or when an iteration or time cap is hit.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Page

from .config import (
    SCROLL_INTERVAL_MS,
    SCROLL_MAX_ITERATIONS,
    SCROLL_MAX_SECONDS,
    SCROLL_SETTLE_MS,
    SCROLL_STEP_PX,
)
from .errors import ScrapeTimeoutError

logger = logging.getLogger("app.scroll")

# Seconds a single scroll step may take even when the time cap is spent
MIN_STEP_TIMEOUT = 0.5

# Reads the height before scrolling so the stop check matches what was
# rendered when the step was taken.
_SCROLL_STEP_JS = """(distance) => {
    const height = document.body.scrollHeight;
    window.scrollBy(0, distance);
    return [height, window.innerHeight];
}"""


@dataclass
class ScrollOptions:
    step: int = SCROLL_STEP_PX
    interval_ms: int = SCROLL_INTERVAL_MS
    settle_ms: int = SCROLL_SETTLE_MS
    max_iterations: int = SCROLL_MAX_ITERATIONS
    max_seconds: float = SCROLL_MAX_SECONDS


@dataclass
class ScrollState:
    distance: int = 0
    height: int = 0
    viewport: int = 0
    iterations: int = 0
    capped: bool = False

    @property
    def at_bottom(self) -> bool:
        return self.distance >= self.height - self.viewport


async def exhaust_scroll(page: Page, options: Optional[ScrollOptions] = None) -> ScrollState:
    """Scroll `page` until no more content loads or a cap is reached.

    Raises `ScrapeTimeoutError` if the page stops answering before the time
    cap; other errors from the page propagate.
    """
    options = options or ScrollOptions()
    state = ScrollState()
    loop = asyncio.get_running_loop()
    deadline = loop.time() + options.max_seconds

    while True:
        # A hung page must not outlive the time cap
        timeout = max(deadline - loop.time(), MIN_STEP_TIMEOUT)
        try:
            height, viewport = await asyncio.wait_for(
                page.evaluate(_SCROLL_STEP_JS, options.step), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            raise ScrapeTimeoutError(
                f"Page stopped responding after {state.iterations} scroll steps"
            ) from e
        state.height = int(height or 0)
        state.viewport = int(viewport or 0)
        state.distance += options.step
        state.iterations += 1

        if state.at_bottom:
            break

        if state.iterations >= options.max_iterations or loop.time() >= deadline:
            state.capped = True
            logger.warning(
                "Scroll cap reached after %d iterations (distance=%d, height=%d)",
                state.iterations,
                state.distance,
                state.height,
            )
            break

        await page.wait_for_timeout(options.interval_ms)

    # Let the last batch of lazy content mount
    await page.wait_for_timeout(options.settle_ms)
    logger.debug(
        "Scrolled %d px in %d iterations, final height %d",
        state.distance,
        state.iterations,
        state.height,
    )
    return state
