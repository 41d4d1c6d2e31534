"""
Evaluation workflow errors.

Rendered by hr_platform.response_formatter.custom_exception_handler with the
error code in ``data.code`` so clients can tell "doesn't exist", "not yours"
and "wrong state" apart. Input validation failures use
django.core.exceptions.ValidationError and are turned into 400 responses by
the views.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class EvaluationNotFound(APIException):
    """Evaluation does not exist or belongs to another organization."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Evaluation not found'
    default_code = 'not_found'


class EvaluationForbidden(APIException):
    """Caller's role or ownership does not allow the operation."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have access to this evaluation'
    default_code = 'forbidden'


class InvalidTransition(APIException):
    """Requested operation is not legal from the evaluation's current status."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Transition not allowed from the current status'
    default_code = 'invalid_transition'
