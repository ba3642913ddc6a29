"""
Timeline Models

Contains the static TimelineTemplate configuration, the TimelineStep records
resolved from it, and the CalendarEvent used for iCalendar export.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimelineTemplateStep:
    """
    One step of a production schedule.

    offset_minutes_from_bake is relative to the bake start (offset 0):
    negative before the bake, positive after.
    """
    step_type: str
    name: str
    offset_minutes_from_bake: int
    duration_minutes: int
    description: str


@dataclass(frozen=True)
class TimelineTemplate:
    id: str
    name: str
    description: str
    steps: tuple[TimelineTemplateStep, ...]


@dataclass(frozen=True)
class TimelineStep:
    """A template step pinned to concrete start and end times."""
    step_type: str
    name: str
    description: str
    scheduled_start_at: datetime
    scheduled_end_at: datetime


@dataclass(frozen=True)
class CalendarEvent:
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    location: str | None = None
