"""
Standardized API Responses

Every roster response body follows the envelope:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [...] | null
}
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer

ENVELOPE_KEYS = ('status', 'message', 'data')


def envelope(status, message='', data=None):
    return {
        "status": status,
        "message": message,
        "data": data,
    }


def custom_exception_handler(exc, context):
    """
    Wrap DRF's own error responses (parse errors, 404s, 405s) in the envelope.

    Returns None for exceptions DRF does not handle so they propagate.
    """
    response = exception_handler(exc, context)
    if response is not None:
        response.data = envelope('error', flatten_errors(response.data))
    return response


def flatten_errors(errors):
    """
    Collapse DRF error structures into a single message.

    - {"detail": "message"} -> "message"
    - {"firstName": ["error"]} -> "firstName: error"
    - {"department": {"name": ["error"]}} -> "department: name: error"
    - ["error1", "error2"] -> "error1, error2"
    """
    if isinstance(errors, dict):
        if set(errors) == {'detail'}:
            return str(errors['detail'])
        return "; ".join(
            f"{field}: {flatten_errors(field_errors)}"
            for field, field_errors in errors.items()
        )
    if isinstance(errors, (list, tuple)):
        return ", ".join(flatten_errors(e) for e in errors)
    return str(errors)


class StandardizedJSONRenderer(JSONRenderer):
    """JSON renderer that wraps any response body not already in the envelope."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None

        # 204 No Content carries no body
        if response is not None and response.status_code == http_status.HTTP_204_NO_CONTENT:
            return b''

        if response is not None and not self.is_enveloped(data):
            if response.status_code >= 400:
                data = envelope('error', flatten_errors(data))
            else:
                data = envelope('success', '', data)

        return super().render(data, accepted_media_type, renderer_context)

    @staticmethod
    def is_enveloped(data):
        return isinstance(data, dict) and all(key in data for key in ENVELOPE_KEYS)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Usage:
        return error_response(
            message="Person with ID 7 not found.",
            status_code=status.HTTP_404_NOT_FOUND
        )
    """
    return Response(envelope('error', message, data), status=status_code)
