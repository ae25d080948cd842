"""Atomic helpers for denormalized counters (followers, likes, comments).

Callers run these inside the same transaction as the row mutation that
licenses the change, so counter and source rows move together.
"""

import logging

from django.db.models import F

logger = logging.getLogger(__name__)


def increment(model, pk, field):
    """Add one to `field` on the row `pk`; return the number of rows touched."""
    return model.objects.filter(pk=pk).update(**{field: F(field) + 1})


def decrement(model, pk, field):
    """Subtract one from `field` on the row `pk`, never going below zero.

    A decrement that would go negative leaves the counter at zero and is logged
    as an inconsistency between the counter and its source rows.
    """
    updated = model.objects.filter(pk=pk, **{f"{field}__gt": 0}).update(**{field: F(field) - 1})
    if not updated and model.objects.filter(pk=pk).exists():
        logger.warning(
            "Counter inconsistency: %s.%s for %s already at zero; decrement clamped",
            model.__name__,
            field,
            pk,
        )
    return updated


def current(model, pk, *fields):
    """Read the current value(s) of counter fields for one row."""
    values = model.objects.filter(pk=pk).values_list(*fields).first()
    if values is None:
        return tuple(0 for _ in fields) if len(fields) > 1 else 0
    return values if len(fields) > 1 else values[0]
