"""
Bearer token authentication for the admin API.

The signed access token already carries everything a handler needs to
know about the caller, so the identity is rebuilt from the token claims
instead of loading the admin row on every request.  The result is an
immutable :class:`AdminIdentity` that DRF exposes as ``request.user``.
"""
from __future__ import annotations

from dataclasses import dataclass

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken


@dataclass(frozen=True)
class AdminIdentity:
    """Claims decoded from a valid access token."""

    id: int
    email: str
    role: str

    @property
    def pk(self) -> int:
        return self.id

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False


class BearerTokenAuthentication(JWTAuthentication):
    """Verify ``Authorization: Bearer <token>`` and attach the claims.

    Signature, expiry and token type checks are done by simplejwt.  Any
    valid token passes; there are no role based distinctions.
    """

    def get_raw_token(self, header):
        # "Bearer" alone or with extra parts is treated as no token at all
        if len(header.split()) != 2:
            return None
        return super().get_raw_token(header)

    def get_user(self, validated_token) -> AdminIdentity:  # type: ignore[override]
        try:
            return AdminIdentity(
                id=int(validated_token['id']),
                email=validated_token['email'],
                role=validated_token['role'],
            )
        except (KeyError, TypeError, ValueError):
            raise InvalidToken('Token contained no recognizable admin identity')
