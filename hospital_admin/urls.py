"""
Root URL configuration.

API routes live in ``records.routers`` and are mounted at the root
since the front-end calls paths such as ``/login`` and ``/patients``
directly.  The browsable schema is served by drf-yasg and is public.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

api_info = openapi.Info(
    title="Hospital Administration API",
    default_version='v1',
    description="Admin sign-in and patient records: contacts, physical information, diagnoses and lab results.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
    authentication_classes=(),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    path('', include('records.routers')),
]
