"""
classbuilder

Declarative class definitions with static and private methods.

    from classbuilder import define_class, describe_method, get_modifiers

    static, private = get_modifiers()

    def Cake(cls):
        cls.temp = 250
        cls.getTemperature = describe_method(private, lambda self: self.temp)
        cls.isCooked = describe_method(
            lambda self: cls.getTemperature(self) >= 250
        )

    Cake = define_class(Cake)
    Cake.new().isCooked()        # True
    Cake.new().getTemperature()  # PrivateAccessViolation

ARCHITECTURAL GUARANTEE:
------------------------
A class record never changes after define_class returns.
Only instances carry mutable state.
"""

from classbuilder.builder import (
    ClassRecord,
    ObjectInstance,
    define_class,
)
from classbuilder.config import RESERVED_NAMES, BuilderConfig, load_config
from classbuilder.definition import DefinitionSurface
from classbuilder.errors import (
    ClassBuilderError,
    ConfigError,
    FrozenClassError,
    MalformedDescriptorError,
    PrivateAccessViolation,
    ReservedNameViolation,
    SealedDefinitionError,
    StaticAccessViolation,
)
from classbuilder.method import MethodDescriptor, describe_method, is_method_descriptor
from classbuilder.modifiers import Modifier, get_modifiers

__version__ = "0.1.0"

__all__ = [
    "RESERVED_NAMES",
    "BuilderConfig",
    "ClassBuilderError",
    "ClassRecord",
    "ConfigError",
    "DefinitionSurface",
    "FrozenClassError",
    "MalformedDescriptorError",
    "MethodDescriptor",
    "Modifier",
    "ObjectInstance",
    "PrivateAccessViolation",
    "ReservedNameViolation",
    "SealedDefinitionError",
    "StaticAccessViolation",
    "define_class",
    "describe_method",
    "get_modifiers",
    "is_method_descriptor",
    "load_config",
]
