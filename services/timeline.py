"""
Timeline Service

Resolves the offset-based production templates into concrete, timestamped
steps for a target bake start time.
"""

import logging
from datetime import timedelta

from constants import TIMELINE_TEMPLATES
from models import TimelineStep

logger = logging.getLogger(__name__)


def list_templates():
    """All timeline templates, in declaration order."""
    return list(TIMELINE_TEMPLATES)


def get_template(template_id):
    """Find a template by id. None if unknown."""
    for template in TIMELINE_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def _resolve_step(step, target_bake_time):
    start = target_bake_time + timedelta(minutes=step.offset_minutes_from_bake)
    return TimelineStep(
        step_type=step.step_type,
        name=step.name,
        description=step.description,
        scheduled_start_at=start,
        scheduled_end_at=start + timedelta(minutes=step.duration_minutes),
    )


def generate_timeline_from_template(template, target_bake_time):
    """
    Generate a concrete timeline from a template and a bake start time.

    Offsets are not required to be monotonic within a template, so steps
    come back sorted by start time rather than in template order. Steps
    starting together keep their template order.
    """
    steps = [_resolve_step(step, target_bake_time) for step in template.steps]
    steps.sort(key=lambda step: step.scheduled_start_at)
    return steps


def generate_timeline(template_id, target_bake_time):
    """Generate a timeline by template id. Empty list if the id is unknown."""
    template = get_template(template_id)
    if template is None:
        logger.debug("Unknown timeline template %r", template_id)
        return []
    return generate_timeline_from_template(template, target_bake_time)
