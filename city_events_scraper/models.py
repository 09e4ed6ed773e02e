from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, Field


@dataclass
class RawEventRecord:
    """One event card as read from the DOM, before validation."""

    title: str = ""
    date_text: str = ""
    href: str = ""


class EventRecord(BaseModel):
    """A normalized event as returned to the caller."""

    id: int = Field(..., ge=0, description="Ordinal within one response, in page order")
    title: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1, description="Display text, not parsed")
    link: str = Field(..., min_length=1, description="Absolute URL of the event page")


class EventsResponse(BaseModel):
    city: str
    events: List[EventRecord] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str
