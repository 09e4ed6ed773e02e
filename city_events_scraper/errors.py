"""Error taxonomy for the scrape pipeline.

Every error the pipeline raises derives from `ScraperError`. The route
layer maps them to status codes and never returns their message to the
caller.
"""


class ScraperError(Exception):
    """Base class for scrape pipeline failures."""

    status_code = 500


class ValidationError(ScraperError):
    """The city parameter is missing or blank."""

    status_code = 400


class NavigationError(ScraperError):
    """The listing page could not be loaded."""


class ScrapeTimeoutError(ScraperError, TimeoutError):
    """Navigation or scrolling exceeded its bound."""


class ExtractionError(ScraperError):
    """Reading events out of the rendered page failed."""


class ResourceError(ScraperError):
    """The browser process failed to launch or close."""
