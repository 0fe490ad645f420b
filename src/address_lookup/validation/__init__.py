"""Field-level validation run before a save."""

from __future__ import annotations

from address_lookup.validation.validators import (
    DEFAULT_MAX_LENGTH,
    FieldValue,
    MaxLengthValidator,
    PatternValidator,
    RequiredFieldValidator,
    create_default_field_validators,
    validate_fields,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "FieldValue",
    "MaxLengthValidator",
    "PatternValidator",
    "RequiredFieldValidator",
    "create_default_field_validators",
    "validate_fields",
]
