"""Listing site adapter.

All knowledge of the upstream site lives here: where the listing for a
city is, and which selectors identify an event card and its fields. When
the site changes its markup, this is the only module to update.
"""

from dataclasses import dataclass
from urllib.parse import urljoin, urlsplit

from .config import LISTING_BASE_URL


@dataclass(frozen=True)
class SiteAdapter:
    origin: str
    card_selector: str = ".card-list-item"
    title_selector: str = '[data-ref="event_card_title"]'
    date_selector: str = '[data-ref="event_card_date_string"] p'
    link_selector: str = "a"
    listing_path: str = "all-events-in-{city}"

    def listing_url(self, city: str) -> str:
        """URL of the infinite-scroll listing for `city`."""
        path = self.listing_path.format(city=city.lower())
        return f"{self.origin.rstrip('/')}/{path}"

    def absolute_link(self, href: str) -> str:
        # Already absolute when a scheme is present
        if urlsplit(href).scheme:
            return href
        return urljoin(self.origin.rstrip("/") + "/", href)


DEFAULT_SITE = SiteAdapter(origin=LISTING_BASE_URL)
