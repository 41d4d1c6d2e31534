"""
Standardized API response envelope.

Every response body follows:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}

Error responses raised as DRF exceptions also carry the machine-readable error
code in ``data.code`` (e.g. ``not_found``, ``forbidden``,
``invalid_transition``) so clients can tell the failure modes apart.
"""
from rest_framework import status as http_status
from rest_framework.exceptions import APIException
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler


def custom_exception_handler(exc, context):
    """
    Format every exception DRF knows how to handle into the standard envelope.
    """
    response = exception_handler(exc, context)

    if response is not None:
        code = _error_code(exc)
        response.data = format_error_response(response.data, response.status_code, code=code)

    return response


def _error_code(exc):
    if not isinstance(exc, APIException):
        return None
    codes = exc.get_codes()
    if isinstance(codes, str):
        return codes
    return exc.default_code


def format_error_response(errors, status_code, code=None):
    """
    Flatten DRF error payloads into a single message.

    - {"field": ["error1", "error2"]} -> "field: error1, error2"
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    message = ""

    if isinstance(errors, dict):
        error_messages = []
        for field, field_errors in errors.items():
            if field == 'detail':
                message = str(field_errors)
            elif isinstance(field_errors, list):
                error_messages.append(f"{field}: {', '.join(str(e) for e in field_errors)}")
            elif isinstance(field_errors, dict):
                error_messages.append(f"{field}: {format_nested_errors(field_errors)}")
            else:
                error_messages.append(f"{field}: {field_errors}")

        if error_messages:
            message = "; ".join(error_messages)

    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)

    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": {"code": code} if code else None,
    }


def format_nested_errors(errors_dict):
    """Format nested error dictionaries."""
    messages = []
    for key, value in errors_dict.items():
        if isinstance(value, list):
            messages.append(f"{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            messages.append(f"{key}: {format_nested_errors(value)}")
        else:
            messages.append(f"{key}: {value}")
    return "; ".join(messages)


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps responses not yet in the standard envelope.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 No Content keeps an empty body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = self.format_success_response(data)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        return isinstance(data, dict) and {'status', 'message', 'data'} <= data.keys()

    def format_success_response(self, data):
        if isinstance(data, dict) and 'detail' in data:
            return {"status": "success", "message": str(data['detail']), "data": None}
        if data is None or (isinstance(data, dict) and not data):
            return {"status": "success", "message": "", "data": None}
        return {"status": "success", "message": "", "data": data}


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build a standardized success response.

    Usage:
        return success_response(
            data=serializer.data,
            message="Evaluation completed",
            status_code=status.HTTP_200_OK
        )
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """Build a standardized error response."""
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
