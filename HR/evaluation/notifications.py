"""
Assessor notifications.

Sent by the HTTP layer after a completed self evaluation has fanned out new
assessor evaluations. Delivery failures are logged and never fail the request.
"""
import logging

from django.conf import settings
from django.core.mail import send_mail

from HR.evaluation.evaluation_config import evaluation_link, notify_assessors_enabled

logger = logging.getLogger(__name__)


def _message_for(evaluation):
    subject = f"New {evaluation.get_kind_display().lower()} to complete"
    body = (
        f"Hello {evaluation.assessor.name},\n\n"
        f"{evaluation.employee.name} has completed their self evaluation for {evaluation.cycle}. "
        f"Your assessment is now waiting for you:\n\n"
        f"{evaluation_link(evaluation)}\n"
    )
    return subject, body


def notify_assessors(evaluations):
    """
    Email each assessor about their new evaluation.

    Returns:
        Number of messages handed to the mail backend
    """
    if not notify_assessors_enabled():
        return 0

    sent = 0
    for evaluation in evaluations:
        if not evaluation.assessor or not evaluation.assessor.email:
            continue
        subject, body = _message_for(evaluation)
        try:
            send_mail(
                subject,
                body,
                settings.DEFAULT_FROM_EMAIL,
                [evaluation.assessor.email],
                fail_silently=False,
            )
            sent += 1
        except Exception as e:
            logger.error(f"Failed to notify assessor {evaluation.assessor_id} for evaluation {evaluation.pk}: {str(e)}")
    return sent
