import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .models import EventRecord, RawEventRecord
from .site import DEFAULT_SITE, SiteAdapter

logger = logging.getLogger("app.normalizer")


@dataclass
class ScrapeResult:
    events: List[EventRecord] = field(default_factory=list)
    rejected: int = 0


def normalize(raw: Iterable[RawEventRecord], site: Optional[SiteAdapter] = None) -> ScrapeResult:
    """Keep complete records, make links absolute and number them from 0.

    Incomplete records are counted in `rejected` rather than raised.
    """
    site = site or DEFAULT_SITE
    result = ScrapeResult()
    for record in raw:
        if not (record.title and record.date_text and record.href):
            result.rejected += 1
            continue
        result.events.append(
            EventRecord(
                id=len(result.events),
                title=record.title,
                date=record.date_text,
                link=site.absolute_link(record.href),
            )
        )

    if result.rejected:
        logger.warning(
            "Dropped %d incomplete event cards (kept %d)",
            result.rejected,
            len(result.events),
        )
    return result
