"""Records application for the hospital administration backend.

This package contains the admin and patient models, serializers, views
and route registrations implementing the API contract expected by the
front-end application.
"""
