"""
Admin signup/login and token issuing.

Passwords are hashed with Django's configured password hashers (salted
PBKDF2 by default).  Tokens are simplejwt access tokens carrying the
admin's ``id``, ``email`` and ``role`` claims.
"""
import logging

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound
from rest_framework_simplejwt.tokens import AccessToken

from records.exceptions import Conflict, Unauthorized
from records.models import Admin

logger = logging.getLogger(__name__)


def hash_password(raw_password: str) -> str:
    return make_password(raw_password)


def verify_password(raw_password: str, hashed: str) -> bool:
    return check_password(raw_password, hashed)


def issue_token(admin: Admin) -> str:
    token = AccessToken()
    token['id'] = admin.id
    token['email'] = admin.email
    token['role'] = admin.role
    return str(token)


def signup(*, full_name: str, email: str, password: str, role: str):
    """Create an admin and return ``(token, admin)``."""
    if Admin.objects.filter(email=email).exists():
        logger.info('Signup rejected, email already registered: %s', email)
        raise Conflict('User Already Exsists')
    try:
        with transaction.atomic():
            admin = Admin.objects.create(
                full_name=full_name,
                email=email,
                password=hash_password(password),
                role=role,
            )
    except IntegrityError:
        raise Conflict('User Already Exsists')
    logger.info('Admin %s created with role %s', admin.id, admin.role)
    return issue_token(admin), admin


def login(*, email: str, password: str):
    """Check credentials and return ``(token, admin)``."""
    admin = Admin.objects.filter(email=email).first()
    if not admin:
        logger.info('Login failed, unknown email: %s', email)
        raise NotFound('Admin not found')
    if not verify_password(password, admin.password):
        logger.info('Login failed, wrong password for admin %s', admin.id)
        raise Unauthorized('Invalid Password')
    logger.info('Admin %s signed in', admin.id)
    return issue_token(admin), admin
