"""
Calendar Export Service

Renders production timelines as an iCalendar (.ics) document that calendar
apps can import. Times are written in UTC; naive datetimes are taken to be
UTC already.
"""

import uuid
from datetime import datetime, timezone

from models import CalendarEvent

DEFAULT_PRODID = '-//MicroBatch//EN'

# RFC 5545 line length limit, in octets
MAX_LINE_LENGTH = 75


def format_ics_date(value):
    """Format a datetime as an iCalendar UTC timestamp: YYYYMMDDTHHMMSSZ."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime('%Y%m%dT%H%M%SZ')


def escape_ics_text(text):
    """Escape backslashes, semicolons, commas, and newlines in a text value."""
    return (
        text.replace('\\', '\\\\')
        .replace(';', '\\;')
        .replace(',', '\\,')
        .replace('\r\n', '\n')
        .replace('\n', '\\n')
    )


def fold_line(line):
    """
    Fold a content line at 75 octets; continuations start with a space.

    Lengths are counted in UTF-8 bytes and a multi-byte character is never
    split across lines.
    """
    if len(line.encode('utf-8')) <= MAX_LINE_LENGTH:
        return line

    parts = []
    current = ''
    current_octets = 0
    for char in line:
        size = len(char.encode('utf-8'))
        if current_octets + size > MAX_LINE_LENGTH:
            parts.append(current)
            current = ' '
            current_octets = 1
        current += char
        current_octets += size
    parts.append(current)
    return '\r\n'.join(parts)


def timeline_to_events(steps, location=None):
    """Map TimelineStep records to CalendarEvent records."""
    return [
        CalendarEvent(
            title=step.name,
            description=step.description,
            start_time=step.scheduled_start_at,
            end_time=step.scheduled_end_at,
            location=location,
        )
        for step in steps
    ]


def generate_ics(events, prodid=DEFAULT_PRODID, now=None):
    """
    Generate an iCalendar document from CalendarEvent records.

    Args:
        events: CalendarEvent list
        prodid: PRODID identifying the producing application
        now: DTSTAMP for every event (default: current UTC time)

    Returns:
        The .ics text with CRLF line endings
    """
    lines = [
        'BEGIN:VCALENDAR',
        'VERSION:2.0',
        f'PRODID:{prodid}',
        'CALSCALE:GREGORIAN',
        'METHOD:PUBLISH',
    ]

    stamp = format_ics_date(now or datetime.now(timezone.utc))

    for event in events:
        lines.append('BEGIN:VEVENT')
        lines.append(f'UID:{uuid.uuid4()}@microbatch')
        lines.append(f'DTSTAMP:{stamp}')
        lines.append(f'DTSTART:{format_ics_date(event.start_time)}')
        lines.append(f'DTEND:{format_ics_date(event.end_time)}')
        lines.append(fold_line(f'SUMMARY:{escape_ics_text(event.title)}'))
        lines.append(fold_line(f'DESCRIPTION:{escape_ics_text(event.description)}'))
        if event.location:
            lines.append(fold_line(f'LOCATION:{escape_ics_text(event.location)}'))
        lines.append('END:VEVENT')

    lines.append('END:VCALENDAR')

    return '\r\n'.join(lines) + '\r\n'
