"""
Tests for timeline generation and iCalendar export.
Run with: pytest tests/test_timeline.py
"""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from constants import STEP_TYPES, check_step_types
from models import TimelineTemplate, TimelineTemplateStep, TimelineStep, CalendarEvent
from services.timeline import (
    list_templates, get_template, generate_timeline, generate_timeline_from_template
)
from services.calendar import (
    MAX_LINE_LENGTH, format_ics_date, escape_ics_text, fold_line,
    timeline_to_events, generate_ics
)

BAKE_AT = datetime(2026, 3, 14, 8, 0, tzinfo=timezone.utc)


# ============================================
# Templates
# ============================================

def test_builtin_templates():
    ids = [template.id for template in list_templates()]
    assert ids == ['standard_sourdough', 'enriched_dough', 'same_day_sourdough']
    assert get_template('enriched_dough').name
    assert get_template('focaccia') is None


def test_template_steps_use_known_types():
    for template in list_templates():
        assert template.steps, template.id
        for step in template.steps:
            assert step.step_type in STEP_TYPES, (template.id, step.name)
            assert step.duration_minutes > 0


def test_check_step_types_rejects_unknown_type():
    template = TimelineTemplate(
        id='custom', name='Custom', description='',
        steps=(TimelineTemplateStep('nap', 'Nap', -30, 30, ''),),
    )
    with pytest.raises(ValueError):
        check_step_types([template])
    check_step_types(list_templates())


# ============================================
# Timeline generation
# ============================================

def test_standard_sourdough_schedule():
    steps = generate_timeline('standard_sourdough', BAKE_AT)
    assert len(steps) == 14
    first = steps[0]
    assert first.name == 'Levain build'
    assert first.scheduled_start_at == BAKE_AT - timedelta(minutes=1440)
    assert first.scheduled_end_at == first.scheduled_start_at + timedelta(minutes=720)

    bake = next(step for step in steps if step.step_type == 'bake')
    assert bake.scheduled_start_at == BAKE_AT


def test_steps_sorted_by_start():
    for template in list_templates():
        steps = generate_timeline(template.id, BAKE_AT)
        starts = [step.scheduled_start_at for step in steps]
        assert starts == sorted(starts), template.id


def test_unknown_template_gives_empty_timeline():
    assert generate_timeline('focaccia', BAKE_AT) == []


def test_out_of_order_offsets_are_sorted():
    template = TimelineTemplate(
        id='custom', name='Custom', description='',
        steps=(
            TimelineTemplateStep('bake', 'Bake', 0, 30, ''),
            TimelineTemplateStep('mix', 'Mix', -120, 10, ''),
            TimelineTemplateStep('cool', 'Cool', 30, 60, ''),
        ),
    )
    steps = generate_timeline_from_template(template, BAKE_AT)
    assert [step.name for step in steps] == ['Mix', 'Bake', 'Cool']


def test_simultaneous_steps_keep_template_order():
    steps = generate_timeline('same_day_sourdough', BAKE_AT)
    names = [step.name for step in steps]
    assert names.index('Proof') + 1 == names.index('Preheat')


def test_naive_bake_time_stays_naive():
    naive = datetime(2026, 3, 14, 8, 0)
    steps = generate_timeline('enriched_dough', naive)
    assert all(step.scheduled_start_at.tzinfo is None for step in steps)


# ============================================
# iCalendar export
# ============================================

def test_format_ics_date():
    assert format_ics_date(BAKE_AT) == '20260314T080000Z'
    eastern = datetime(2026, 3, 1, 8, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert format_ics_date(eastern) == '20260301T130000Z'
    assert format_ics_date(datetime(2026, 3, 1, 8, 0)) == '20260301T080000Z'


def test_escape_ics_text():
    assert escape_ics_text('a,b;c\\d\nx') == 'a\\,b\\;c\\\\d\\nx'
    assert escape_ics_text('plain') == 'plain'


def test_fold_long_lines():
    line = 'DESCRIPTION:' + 'x' * 200
    folded = fold_line(line)
    assert all(len(part) <= MAX_LINE_LENGTH for part in folded.split('\r\n'))
    assert folded.replace('\r\n ', '') == line
    assert fold_line('SUMMARY:Mix') == 'SUMMARY:Mix'


def test_fold_counts_octets_not_characters():
    line = 'DESCRIPTION:Maintain dough at 78°F' + ' °F' * 60
    folded = fold_line(line)
    parts = folded.split('\r\n')
    assert len(parts) > 1
    assert all(len(part.encode('utf-8')) <= MAX_LINE_LENGTH for part in parts)
    assert folded.replace('\r\n ', '') == line


def test_generated_calendar_lines_fit_in_75_octets():
    steps = generate_timeline('standard_sourdough', BAKE_AT)
    ics = generate_ics(timeline_to_events(steps), now=BAKE_AT)
    for line in ics.split('\r\n'):
        assert len(line.encode('utf-8')) <= MAX_LINE_LENGTH


def test_timeline_to_events():
    step = TimelineStep(
        step_type='mix', name='Mix', description='Mix it',
        scheduled_start_at=BAKE_AT, scheduled_end_at=BAKE_AT + timedelta(minutes=15),
    )
    events = timeline_to_events([step], location='Main kitchen')
    assert events == [CalendarEvent(
        title='Mix', description='Mix it',
        start_time=BAKE_AT, end_time=BAKE_AT + timedelta(minutes=15),
        location='Main kitchen',
    )]


def test_generate_ics_document():
    steps = generate_timeline('enriched_dough', BAKE_AT)
    events = timeline_to_events(steps, location='Bakery, Oven 2')
    ics = generate_ics(events, now=BAKE_AT)

    assert ics.startswith('BEGIN:VCALENDAR\r\n')
    assert ics.endswith('END:VCALENDAR\r\n')
    assert 'PRODID:-//MicroBatch//EN\r\n' in ics
    assert ics.count('BEGIN:VEVENT') == len(steps)
    assert ics.count('DTSTAMP:20260314T080000Z') == len(steps)
    assert 'LOCATION:Bakery\\, Oven 2' in ics

    uids = [line for line in ics.split('\r\n') if line.startswith('UID:')]
    assert len(set(uids)) == len(steps)


def test_generate_ics_without_events():
    ics = generate_ics([], prodid='-//Test//EN', now=BAKE_AT)
    assert 'BEGIN:VEVENT' not in ics
    assert 'PRODID:-//Test//EN' in ics
