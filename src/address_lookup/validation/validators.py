from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from address_lookup.models import AddressRole

DEFAULT_MAX_LENGTH = 255


@dataclass(frozen=True)
class FieldValue:
    """The value the user is about to save for one bound role."""

    role: AddressRole
    field_id: str
    value: str


class RequiredFieldValidator(BaseValidator[FieldValue]):
    """Rejects blank values for the given roles."""

    def __init__(self, roles: Iterable[AddressRole]) -> None:
        self._roles = frozenset(roles)

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "required"

    def validate(self, item: FieldValue) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if item.role in self._roles and not item.value.strip():
            result.add_error(
                field=item.field_id,
                message=f"Complete this field: {item.role.value}",
                value=item.value,
            )
        return result


class MaxLengthValidator(BaseValidator[FieldValue]):
    """Rejects values longer than the host field can hold."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self._max_length = max_length

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "max_length"

    def validate(self, item: FieldValue) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if len(item.value) > self._max_length:
            result.add_error(
                field=item.field_id,
                message=(
                    f"{item.role.value} is {len(item.value)} characters; "
                    f"the maximum is {self._max_length}"
                ),
                value=item.value,
            )
        return result


class PatternValidator(BaseValidator[FieldValue]):
    """Checks a role's value against a regular expression.

    Blank values pass; combine with RequiredFieldValidator to demand a value.
    """

    def __init__(self, role: AddressRole, pattern: str, message: str | None = None) -> None:
        self._role = role
        self._pattern = re.compile(pattern)
        self._message = message or f"{role.value} has an invalid format"

    @property
    def name(self) -> str:
        """Name of this validator."""
        return f"pattern_{self._role.value}"

    def validate(self, item: FieldValue) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if item.role is self._role and item.value and not self._pattern.fullmatch(item.value):
            result.add_error(field=item.field_id, message=self._message, value=item.value)
        return result


def create_default_field_validators(
    required: Iterable[AddressRole] = (),
    max_length: int = DEFAULT_MAX_LENGTH,
) -> CompositeValidator[FieldValue]:
    """Create the default field validation pipeline.

    Args:
        required: Roles that must not be blank on save.
        max_length: Longest value any host field accepts.

    Returns:
        CompositeValidator running the configured validators.
    """
    builder: ValidatorPipelineBuilder[FieldValue] = ValidatorPipelineBuilder("field_validation")
    required_roles = list(required)
    if required_roles:
        builder.add(RequiredFieldValidator(required_roles))
    builder.add(MaxLengthValidator(max_length))
    return builder.build()


def validate_fields(
    validator: BaseValidator[FieldValue],
    fields: Sequence[FieldValue],
) -> list[str]:
    """Run ``validator`` on every field and collect all error messages.

    Every field is checked even after a failure so the caller can report
    them together.

    Returns:
        Error messages; empty when all fields are valid.
    """
    messages: list[str] = []
    for item in fields:
        result = validator.validate(item)
        if not result.is_valid:
            messages.extend(error.message for error in result.errors)
    return messages
