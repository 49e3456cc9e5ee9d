"""
Authentication views.

``/login`` and ``/signup`` are the only endpoints that accept requests
without a bearer token.  Both return a freshly signed token together
with the admin's public view (never the password hash).  They skip the
bearer authentication entirely so a stale token sent along with a
login does not get in the way.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from records.serializers.auth import LoginSerializer, SignupSerializer
from records.serializers.render import render_admin
from records.services import auth as auth_service
from records.validation import validate_payload


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([ScopedRateThrottle])
def login_view(request):
    """Exchange ``{email, password}`` for a bearer token."""
    result = validate_payload(LoginSerializer, request.data)
    if not result.ok:
        raise ValidationError(result.error)
    token, admin = auth_service.login(**result.value)
    return Response({
        'message': 'Sign In Successful',
        'token': token,
        'admin': render_admin(admin),
        'success': True,
    }, status=200)

# ScopedRateThrottle reads throttle_scope from the wrapped view class
login_view.cls.throttle_scope = 'auth'


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([ScopedRateThrottle])
def signup_view(request):
    """Create an admin account and sign it in."""
    result = validate_payload(SignupSerializer, request.data)
    if not result.ok:
        raise ValidationError(result.error)
    v = result.value
    token, admin = auth_service.signup(
        full_name=v['fullName'],
        email=v['email'],
        password=v['password'],
        role=v['role'],
    )
    return Response({
        'message': 'Account Created Successfully',
        'token': token,
        'admin': render_admin(admin),
        'success': True,
    }, status=200)

signup_view.cls.throttle_scope = 'auth'
