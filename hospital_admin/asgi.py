"""
ASGI config for the hospital_admin project.

Only plain HTTP is served; every request is handled by Django.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hospital_admin.settings")

application = get_asgi_application()
