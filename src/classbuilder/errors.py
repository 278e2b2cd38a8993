"""
Errors raised by the class builder.

Every error is a programmer-error signal: the builder raises at the point
of violation and never catches or retries.
"""

from typing import Optional


class ClassBuilderError(Exception):
    """Base class for all class builder errors."""

    def __init__(self, message: str, member: Optional[str] = None):
        super().__init__(message)
        self.member = member


class ReservedNameViolation(ClassBuilderError):
    """Raised when a definition writes a reserved name."""

    def __init__(self, member: str):
        super().__init__(
            f"Attempt to make a class definition using a restricted keyword '{member}'.",
            member,
        )


class PrivateAccessViolation(ClassBuilderError):
    """Raised when a private method is called from outside its definition."""

    def __init__(self, member: str):
        super().__init__(f"Attempt to call a private method '{member}'.", member)


class StaticAccessViolation(ClassBuilderError):
    """Raised when a non-static method is called on the class record."""

    def __init__(self, member: str):
        super().__init__(
            f"Attempt to make a static call to non-static method '{member}'.",
            member,
        )


class MalformedDescriptorError(ClassBuilderError):
    """Raised at assembly time for a method descriptor that cannot be registered."""


class SealedDefinitionError(ClassBuilderError):
    """Raised when a definition surface is written after its class was assembled."""

    def __init__(self, member: str):
        super().__init__(
            f"Cannot define '{member}': the class has already been assembled.",
            member,
        )


class FrozenClassError(ClassBuilderError, AttributeError):
    """Raised on any attempt to bind, rebind or delete a class record member."""

    def __init__(self, class_name: str, member: str):
        super().__init__(
            f"Class '{class_name}' is frozen; cannot modify member '{member}'.",
            member,
        )


class ConfigError(ClassBuilderError):
    """Raised when builder configuration cannot be loaded."""
