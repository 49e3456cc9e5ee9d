import logging

from rest_framework import status
from rest_framework.exceptions import APIException, AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

GATE_MISSING_MESSAGE = 'Authorization token missing or invalid'
GATE_INVALID_MESSAGE = 'Invalid or expired token'


class Conflict(APIException):
    """A unique field (admin or patient email) is already taken."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Resource already exists'
    default_code = 'conflict'


class Unauthorized(APIException):
    """Credentials were supplied but did not match."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized'
    default_code = 'unauthorized'


def _first_message(data) -> str:
    if isinstance(data, dict):
        if 'detail' in data:
            return _first_message(data['detail'])
        for value in data.values():
            return _first_message(value)
        return ''
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ''
    return str(data)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        logger.exception(
            'Unhandled error while handling %s %s',
            getattr(request, 'method', '?'), getattr(request, 'path', '?'),
            exc_info=exc,
        )
        return Response({'error': 'Internal Server Error', 'success': False}, status=500)
    # the auth gate reports under "error", everything else under "message"
    if isinstance(exc, NotAuthenticated):
        return Response({'error': GATE_MISSING_MESSAGE, 'success': False}, status=resp.status_code, headers=_auth_headers(resp))
    if isinstance(exc, AuthenticationFailed):
        return Response({'error': GATE_INVALID_MESSAGE, 'success': False}, status=resp.status_code, headers=_auth_headers(resp))
    return Response({'message': _first_message(resp.data), 'success': False}, status=resp.status_code)


def _auth_headers(resp) -> dict:
    header = resp.headers.get('WWW-Authenticate')
    return {'WWW-Authenticate': header} if header else {}
