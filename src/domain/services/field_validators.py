"""Field validator registry - per-field predicates for wizard values."""

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

import structlog

from src.domain.errors import InvalidFieldValue, WizardError

log = structlog.get_logger()

Validator = Callable[[str], bool]

# Permissive email shape: local part, "@", dotted domain, alphabetic TLD.
# Local part starts with a word char, "+" or "-" and never has two other
# chars in a row (same language as ([\w+\-].?)+ without its backtracking).
_LOCAL_CHAR = r"[\w+\-]"
_OTHER_CHAR = r"[^\w+\-\n]"
EMAIL_PATTERN = re.compile(
    rf"{_LOCAL_CHAR}(?:{_OTHER_CHAR}?{_LOCAL_CHAR})*{_OTHER_CHAR}?"
    r"@[a-z\d\-]+(?:\.[a-z]+)*\.[a-z]+",
    re.IGNORECASE | re.ASCII,
)


def is_email(value: str) -> bool:
    """Return True when value looks like an email address."""
    return EMAIL_PATTERN.fullmatch(value) is not None


class FieldValidatorRegistry:
    """Registry of validators keyed by field name.

    Fields without a validator accept any value. After freeze() the
    registry is read-only.
    """

    def __init__(self) -> None:
        """Create empty registry."""
        self._validators: Mapping[str, Validator] = {}

    @property
    def frozen(self) -> bool:
        return isinstance(self._validators, MappingProxyType)

    def register(self, field_name: str, validator: Validator) -> None:
        """Register a validator for a field name."""
        if self.frozen:
            raise WizardError(f"Validator registry is frozen, cannot register {field_name!r}")
        self._validators[field_name] = validator

    def freeze(self) -> "FieldValidatorRegistry":
        """Make the registry read-only. Returns self."""
        self._validators = MappingProxyType(dict(self._validators))
        return self

    def get(self, field_name: str) -> Validator | None:
        """Get validator for field name."""
        return self._validators.get(field_name)

    def has(self, field_name: str) -> bool:
        """Check if a validator exists for field name."""
        return field_name in self._validators

    def validate(self, field_name: str, value: str) -> bool:
        """Check value against the validator for field_name (True when none registered)."""
        validator = self.get(field_name)
        if validator is None:
            return True
        return bool(validator(value))

    def ensure_valid(self, field_name: str, value: str) -> None:
        """Raise InvalidFieldValue when value is rejected."""
        if not self.validate(field_name, value):
            log.debug("field_rejected", field=field_name)
            raise InvalidFieldValue(field_name, value)

    def list_fields(self) -> list[str]:
        """List all field names with a validator."""
        return list(self._validators.keys())


def create_default_registry() -> FieldValidatorRegistry:
    """Create registry with the built-in validators."""
    registry = FieldValidatorRegistry()
    registry.register("email", is_email)
    return registry


_default_registry: FieldValidatorRegistry | None = None


def get_default_registry() -> FieldValidatorRegistry:
    """Get the process-wide read-only registry, built on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry().freeze()
    return _default_registry


def validate(field_name: str, value: str) -> bool:
    """Validate value for field_name against the default registry."""
    return get_default_registry().validate(field_name, value)
