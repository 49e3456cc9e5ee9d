"""
Payload validation independent of the HTTP layer.

A serializer class is used purely as a constraint set: fields are
checked in declaration order and only the first violation is reported.
Nothing here touches the database, so the same call works from views,
management commands and tests alike.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[dict]
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.error is None


def first_error(errors: Any, path: tuple = ()) -> Optional[str]:
    """Return ``"<dotted.path>: <message>"`` for the first error found."""
    if isinstance(errors, dict):
        for key, value in errors.items():
            sub_path = path if key == 'non_field_errors' else path + (str(key),)
            found = first_error(value, sub_path)
            if found:
                return found
        return None
    if isinstance(errors, (list, tuple)):
        for index, value in enumerate(errors):
            # list serializers report one entry per item, valid items are empty
            nested = isinstance(value, (dict, list, tuple))
            found = first_error(value, path + (str(index),) if nested else path)
            if found:
                return found
        return None
    if errors in (None, ''):
        return None
    message = str(errors)
    return f"{'.'.join(path)}: {message}" if path else message


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def validate_payload(serializer_class, payload: Any) -> ValidationResult:
    """Check ``payload`` against ``serializer_class``.

    Returns the normalized value (dates parsed, strings trimmed) on
    success, or the first error message on failure.
    """
    if not isinstance(payload, dict):
        return ValidationResult(value=None, error='Request body must be a JSON object')
    serializer = serializer_class(data=payload)
    if serializer.is_valid():
        return ValidationResult(value=_plain(serializer.validated_data), error=None)
    return ValidationResult(value=None, error=first_error(serializer.errors) or 'Invalid payload')
