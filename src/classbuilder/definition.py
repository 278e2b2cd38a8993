"""
Definition capture.

The definition callback receives a DefinitionSurface and declares members
by assigning to it:

    def Cake(cls):
        cls.temp = 250                                   # property
        cls.bake = describe_method(lambda self: ...)     # method

Every assignment goes through DefinitionSurface.define, which:
    - rejects reserved names (the write is discarded)
    - routes method descriptors to the method partition
    - routes everything else to the property partition

Reading from the surface is the raw accessor used by the class's own
methods: it always yields the real callable, even for private methods.
The surface can therefore be captured in a method's closure to call a
private sibling after the class has been assembled.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from classbuilder.config import BuilderConfig
from classbuilder.errors import ReservedNameViolation, SealedDefinitionError
from classbuilder.method import MethodDescriptor, is_method_descriptor
from classbuilder.utils import contains


logger = logging.getLogger(__name__)

# Slot names are mangled so no ordinary member name can shadow them
_INTERNALS = (
    "_DefinitionSurface__config",
    "_DefinitionSurface__methods",
    "_DefinitionSurface__properties",
    "_DefinitionSurface__sealed",
)


class DefinitionSurface:
    """
    Write-validated builder passed to a definition callback.

    Attribute and item assignment are both routed through define().
    The reserved names `methods` and `properties` expose read-only views
    of the two partitions. Members named `define` or `lookup` are shadowed
    by the surface API on attribute reads; read them as surface["define"].
    """

    __slots__ = _INTERNALS

    def __init__(self, config: Optional[BuilderConfig] = None):
        object.__setattr__(self, "_DefinitionSurface__config", config or BuilderConfig())
        object.__setattr__(self, "_DefinitionSurface__methods", {})
        object.__setattr__(self, "_DefinitionSurface__properties", {})
        object.__setattr__(self, "_DefinitionSurface__sealed", False)

    def define(self, name: str, value: Any) -> None:
        """
        Record a member. Later writes to the same name replace earlier ones,
        including a switch between method and property.

        Raises:
            ReservedNameViolation: name is reserved
            SealedDefinitionError: the class has already been assembled
        """
        if self.__sealed:
            raise SealedDefinitionError(name)
        if contains(self.__config.reserved_names, name) or name in _INTERNALS:
            raise ReservedNameViolation(name)

        if is_method_descriptor(value):
            self.__properties.pop(name, None)
            self.__methods[name] = value
            logger.debug("captured method %r (modifiers=%s)", name, value.modifiers)
        else:
            self.__methods.pop(name, None)
            self.__properties[name] = value
            logger.debug("captured property %r", name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.define(name, value)

    def __setitem__(self, name: str, value: Any) -> None:
        self.define(name, value)

    def lookup(self, name: str) -> Any:
        """
        Return the real callable for a method, or the value of a property.

        Raises:
            KeyError: name was never defined
        """
        if name in self.__methods:
            return self.__methods[name].call
        return self.__properties[name]

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails
        if name in _INTERNALS:
            raise AttributeError(name)
        try:
            return self.lookup(name)
        except KeyError:
            raise AttributeError(f"'{name}' has not been defined") from None

    def __getitem__(self, name: str) -> Any:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return name in self.__methods or name in self.__properties

    @property
    def methods(self) -> Mapping[str, MethodDescriptor]:
        return MappingProxyType(self.__methods)

    @property
    def properties(self) -> Mapping[str, Any]:
        return MappingProxyType(self.__properties)

    def __repr__(self) -> str:
        return (
            f"<DefinitionSurface methods={sorted(self.__methods)} "
            f"properties={sorted(self.__properties)}>"
        )


def capture(definition: Callable[[DefinitionSurface], Any],
            config: Optional[BuilderConfig] = None) -> DefinitionSurface:
    """
    Run a definition callback once against a fresh surface.

    Args:
        definition: Callable receiving the surface
        config: Builder configuration (defaults to BuilderConfig())

    Returns:
        The populated (not yet sealed) surface
    """
    surface = DefinitionSurface(config)
    definition(surface)
    return surface



def seal(surface: DefinitionSurface) -> None:
    """Refuse further writes to a surface; reads keep working."""
    object.__setattr__(surface, "_DefinitionSurface__sealed", True)
