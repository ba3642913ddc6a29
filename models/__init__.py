"""
Models Package

Exports the immutable records produced and consumed by the engine.
"""

from .ingredient import ParsedIngredient, ScaledIngredient, ScalingInput
from .production import (
    PackagingSpec,
    PackagingBatch,
    PackagingNeed,
    ShoppingIngredient,
    ShoppingBatch,
    BatchContribution,
    ShoppingItem,
)
from .timeline import TimelineTemplateStep, TimelineTemplate, TimelineStep, CalendarEvent

__all__ = [
    'ParsedIngredient',
    'ScaledIngredient',
    'ScalingInput',
    'PackagingSpec',
    'PackagingBatch',
    'PackagingNeed',
    'ShoppingIngredient',
    'ShoppingBatch',
    'BatchContribution',
    'ShoppingItem',
    'TimelineTemplateStep',
    'TimelineTemplate',
    'TimelineStep',
    'CalendarEvent',
]
