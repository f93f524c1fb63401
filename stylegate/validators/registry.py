"""
Check registry.

Checks register themselves on import via ``@register_validator``. The
registry keeps registration order, which is also the order findings are
reported in.
"""

from __future__ import annotations

from typing import Type, TypeVar

from .base import Validator

# Type variable for the decorator
V = TypeVar("V", bound=Type[Validator])

VALID_CATEGORIES = frozenset({"inline", "style-block", "document"})


class ValidatorRegistry:
    """Registry for check plugins.

    Manages registration and lookup. Checks register via the
    @register_validator decorator or by calling registry.register() directly.
    """

    def __init__(self) -> None:
        self._validators: dict[str, Validator] = {}

    def register(self, validator: Validator) -> None:
        """Register a check instance.

        Raises:
            TypeError: If validator doesn't implement the Validator protocol.
            ValueError: If the name is taken or the category is unknown.
        """
        if not isinstance(validator, Validator):
            raise TypeError(
                f"Validator must implement the Validator protocol. "
                f"Got {type(validator).__name__} which is missing required "
                f"attributes/methods (name, category, validate)."
            )

        name = validator.name
        category = validator.category

        if name in self._validators:
            existing = self._validators[name]
            raise ValueError(
                f"Validator '{name}' is already registered "
                f"(existing: {type(existing).__name__}, "
                f"new: {type(validator).__name__})"
            )

        if category not in VALID_CATEGORIES:
            raise ValueError(
                f"Invalid category '{category}' for validator '{name}'. "
                f"Must be one of: {', '.join(sorted(VALID_CATEGORIES))}"
            )

        self._validators[name] = validator

    def list_all(self) -> list[Validator]:
        """Get all registered checks, in registration order."""
        return list(self._validators.values())

    def clear(self) -> None:
        """Clear all registered checks. Primarily for testing."""
        self._validators.clear()

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, name: str) -> bool:
        return name in self._validators


# Module-level singleton instance
registry = ValidatorRegistry()


def register_validator(cls: V) -> V:
    """Decorator to register a check class.

    The decorated class is instantiated with no arguments and registered
    with the global registry.

    Usage:
        @register_validator
        class MyCheck(BaseValidator):
            def __init__(self):
                super().__init__("my-check", "document")

            def validate(self, context):
                ...
    """
    instance = cls()
    registry.register(instance)
    return cls
