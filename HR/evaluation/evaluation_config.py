"""
Evaluation settings accessors.

Reads the EVALUATION_* settings at call time so tests can override them with
``override_settings``.
"""
from django.conf import settings
from django.utils import timezone


def default_cycle():
    """
    Cycle label used when a caller does not name one.

    EVALUATION_DEFAULT_CYCLE when set, otherwise the current calendar year.
    """
    configured = getattr(settings, 'EVALUATION_DEFAULT_CYCLE', '')
    if configured:
        return configured
    return str(timezone.now().year)


def notify_assessors_enabled():
    return getattr(settings, 'EVALUATION_NOTIFY_ASSESSORS', True)


def frontend_url():
    return getattr(settings, 'EVALUATION_FRONTEND_URL', '').rstrip('/')


def evaluation_link(evaluation):
    """Deep link to an evaluation in the web client."""
    return f"{frontend_url()}/evaluations/{evaluation.pk}"
