"""Fake Playwright objects shared by the tests.

The fakes implement only the calls the scraper makes, so the pipeline can
run end to end without a real browser.
"""

import pytest

from city_events_scraper import playwright_manager

LISTING_HTML = """
<html><body>
  <div class="card-list-item">
    <a href="/sunburn-arena-mumbai">
      <span data-ref="event_card_title"> Sunburn Arena </span>
      <div data-ref="event_card_date_string"><p>Sat, 12 Dec</p></div>
    </a>
  </div>
  <div class="card-list-item">
    <a href="https://insider.in/comedy-night">
      <span data-ref="event_card_title">Comedy   Night</span>
      <div data-ref="event_card_date_string"><p>Sun, 13 Dec</p></div>
    </a>
  </div>
  <div class="card-list-item">
    <a href="/no-date-show">
      <span data-ref="event_card_title">No Date Show</span>
    </a>
  </div>
  <div class="card-list-item">
    <a href="jazz-brunch">
      <span data-ref="event_card_title">Jazz Brunch</span>
      <div data-ref="event_card_date_string"><p>Mon, 14 Dec</p></div>
    </a>
  </div>
</body></html>
"""


class FakeResponse:
    def __init__(self, status=200):
        self.status = status


class FakePage:
    def __init__(self, html=LISTING_HTML, height=2000, viewport=800, growth=0,
                 goto_error=None, status=200, evaluate_error=None):
        self.html = html
        self.height = height
        self.viewport = viewport
        self.growth = growth
        self.goto_error = goto_error
        self.status = status
        self.evaluate_error = evaluate_error
        self.url = "about:blank"
        self.goto_calls = []
        self.scroll_calls = 0
        self.waits = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error is not None:
            raise self.goto_error
        self.url = url
        return FakeResponse(self.status)

    async def evaluate(self, expression, arg=None):
        if self.evaluate_error is not None:
            raise self.evaluate_error
        self.scroll_calls += 1
        height = self.height
        self.height += self.growth
        return [height, self.viewport]

    async def wait_for_timeout(self, timeout):
        self.waits.append(timeout)

    async def content(self):
        return self.html


class FakeContext:
    def __init__(self, page):
        self.page = page

    async def new_page(self):
        return self.page


class FakeBrowser:
    def __init__(self, page, close_error=None):
        self.page = page
        self.close_error = close_error
        self.closed = False
        self.context_kwargs = None

    async def new_context(self, **kwargs):
        self.context_kwargs = kwargs
        return FakeContext(self.page)

    async def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeChromium:
    def __init__(self, page_factory, launch_error=None, close_error=None):
        self.page_factory = page_factory
        self.launch_error = launch_error
        self.close_error = close_error
        self.launch_kwargs = []
        self.browsers = []

    async def launch(self, **kwargs):
        self.launch_kwargs.append(kwargs)
        if self.launch_error is not None:
            raise self.launch_error
        browser = FakeBrowser(self.page_factory(), close_error=self.close_error)
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, page_factory=FakePage, **chromium_kwargs):
        self.chromium = FakeChromium(page_factory, **chromium_kwargs)
        self.devices = {"Desktop Chrome": {"viewport": {"width": 1280, "height": 720}}}


@pytest.fixture
def install_playwright(monkeypatch):
    """Return a function that swaps the real driver for a FakePlaywright."""

    def install(page_factory=FakePage, **chromium_kwargs):
        fake = FakePlaywright(page_factory, **chromium_kwargs)
        monkeypatch.setattr(playwright_manager, "_playwright", fake)
        return fake

    return install
