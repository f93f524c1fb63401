"""
Pluggable check system for prototype linting.

Usage:
    from stylegate.validators import register_validator, BaseValidator, registry

    @register_validator
    class MyCheck(BaseValidator):
        def __init__(self):
            super().__init__("my-check", "document")

        def validate(self, context):
            # ... inspect context.text ...
            return self._make_result()

    # Importing the design package registers the built-in checks:
    import stylegate.validators.design
    for validator in registry.list_all():
        result = validator.validate(context)
"""

from .base import (
    BaseValidator,
    ScanContext,
    Validator,
    ValidatorResult,
    Violation,
    ViolationType,
)
from .registry import register_validator, registry

__all__ = [
    # Findings
    "Violation",
    "ViolationType",
    # Data containers
    "ScanContext",
    "ValidatorResult",
    # Protocols
    "Validator",
    # Base class
    "BaseValidator",
    # Registry
    "registry",
    "register_validator",
]
