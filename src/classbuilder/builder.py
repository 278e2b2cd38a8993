"""
Class assembly and instantiation.

define_class turns a definition callback into an immutable ClassRecord:

    static, private = get_modifiers()

    def Math(cls):
        cls.add = describe_method(static, lambda a, b: a + b)

    Math = define_class(Math)
    Math.add(7, 3)  # 10

Access rules, resolved once per method at assembly time:

    modifiers          on class record       on instances
    ---------          ---------------       ------------
    (none)             StaticAccessViolation bound method
    static             raw callable          raw callable
    private            StaticAccessViolation PrivateAccessViolation
    static + private   PrivateAccessViolation PrivateAccessViolation

Private methods stay reachable through the definition surface only.

SHARED DEFAULTS:
    Instances are shallow copies of the class template. A list/dict
    property default is the SAME object in every instance until an instance
    rebinds the attribute.
"""

import logging
import warnings
from dataclasses import dataclass, field, replace
from types import MappingProxyType, MethodType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

from classbuilder.config import BuilderConfig
from classbuilder.definition import DefinitionSurface, capture, seal
from classbuilder.errors import (
    FrozenClassError,
    MalformedDescriptorError,
    PrivateAccessViolation,
    StaticAccessViolation,
)
from classbuilder.method import MethodDescriptor
from classbuilder.modifiers import Modifier
from classbuilder.utils import contains


logger = logging.getLogger(__name__)

CONSTRUCT = "_construct"


@dataclass(frozen=True)
class ClassInfo:
    """
    Read-only description of an assembled class.

    Properties:
        name: Class name (not a member)
        methods: Member name -> MethodDescriptor, in definition order
        properties: Member name -> default value, in definition order
    """

    name: str
    methods: Mapping[str, MethodDescriptor] = field(default_factory=dict)
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class _ClassState:
    info: ClassInfo
    members: Mapping[str, Any]
    template: Mapping[str, Any]
    bound: FrozenSet[str]
    instance_type: type


def _guard(error_cls: type, name: str) -> Callable[..., Any]:
    def guard(*args: Any, **kwargs: Any) -> Any:
        raise error_cls(name)

    guard.__name__ = name
    guard.__qualname__ = f"{error_cls.__name__}Guard.{name}"
    return guard


class ObjectInstance:
    """
    Base type of every object produced by ClassRecord.new.

    Each class gets its own subclass named after it, so
    type(Cake.new()).__name__ == "Cake". Members live in the instance
    __dict__; instances can rebind them and add new attributes freely.

    Property defaults are copied by reference: a list or dict default is
    shared with every other instance until this instance rebinds it.
    """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} object at {id(self):#x}>"


class ClassRecord:
    """
    Immutable product of define_class.

    Members are readable as attributes (Cake.temp) or items (Cake["temp"]).
    Any attempt to bind, rebind or delete a member raises FrozenClassError.
    `new` always refers to the constructor.
    """

    __slots__ = ("_ClassRecord__state",)

    def __init__(self, state: _ClassState):
        object.__setattr__(self, "_ClassRecord__state", state)

    def new(self, *args: Any, **kwargs: Any) -> ObjectInstance:
        """
        Create an instance: a shallow copy of the class template.

        If the class defines `_construct`, it is called once on the new
        instance with the given arguments before the instance is returned.
        The copy is shallow, see ObjectInstance.
        """
        state = self.__state
        instance = state.instance_type()
        bindings = instance.__dict__
        for member, value in state.template.items():
            if member in state.bound:
                value = MethodType(value, instance)
            bindings[member] = value

        construct = state.info.methods.get(CONSTRUCT)
        if construct is not None:
            if construct.is_static:
                construct.call(*args, **kwargs)
            else:
                construct.call(instance, *args, **kwargs)
        return instance

    def __getattr__(self, name: str) -> Any:
        if name == "_ClassRecord__state":
            raise AttributeError(name)
        try:
            return self.__state.members[name]
        except KeyError:
            raise AttributeError(
                f"Class '{self.__state.info.name}' has no member '{name}'"
            ) from None

    def __getitem__(self, name: str) -> Any:
        if name == "new":
            return self.new
        return self.__state.members[name]

    def __contains__(self, name: object) -> bool:
        return name == "new" or name in self.__state.members

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenClassError(self.__state.info.name, name)

    def __delattr__(self, name: str) -> None:
        raise FrozenClassError(self.__state.info.name, name)

    def __setitem__(self, name: str, value: Any) -> None:
        raise FrozenClassError(self.__state.info.name, name)

    def __delitem__(self, name: str) -> None:
        raise FrozenClassError(self.__state.info.name, name)

    def __dir__(self):
        return sorted(set(self.__state.members) | {"new"})

    def __repr__(self) -> str:
        return f"<ClassRecord {self.__state.info.name}>"


def _check_descriptor(name: str, descriptor: MethodDescriptor,
                      config: BuilderConfig) -> MethodDescriptor:
    problems = []
    if not callable(descriptor.call):
        problems.append(f"no callable was given (got {descriptor.call!r})")
    unknown = [m for m in descriptor.modifiers if not isinstance(m, Modifier)]
    if unknown:
        problems.append(f"unrecognised modifiers {unknown!r}")
    if not problems:
        return descriptor

    message = f"Method '{name}' is malformed: {'; '.join(problems)}."
    if config.strict_descriptors:
        raise MalformedDescriptorError(message, name)

    warnings.warn(message, UserWarning, stacklevel=4)
    logger.warning(message)
    return replace(
        descriptor,
        modifiers=tuple(m for m in descriptor.modifiers if isinstance(m, Modifier)),
    )


def assemble(surface: DefinitionSurface, name: str,
             config: Optional[BuilderConfig] = None) -> ClassRecord:
    """
    Build a ClassRecord from a populated definition surface.

    The surface is sealed once the record exists; it keeps serving reads
    so methods can still reach private siblings through it.

    Raises:
        MalformedDescriptorError: strict mode and a descriptor is malformed
    """
    config = config or BuilderConfig()
    members: Dict[str, Any] = {}
    template: Dict[str, Any] = {}
    methods: Dict[str, MethodDescriptor] = {}
    bound = set()

    for member, descriptor in surface.methods.items():
        descriptor = _check_descriptor(member, descriptor, config)
        methods[member] = descriptor

        is_private = contains(descriptor.modifiers, Modifier.PRIVATE)
        is_static = contains(descriptor.modifiers, Modifier.STATIC)
        call = descriptor.call

        template[member] = call
        members[member] = call

        if is_private:
            template[member] = _guard(PrivateAccessViolation, member)
            members[member] = template[member]
        elif not is_static and callable(call):
            bound.add(member)

        if not is_static:
            members[member] = _guard(StaticAccessViolation, member)

        logger.debug("assembled method %r static=%s private=%s",
                     member, is_static, is_private)

    properties = dict(surface.properties)
    for member, value in properties.items():
        template[member] = value
        members[member] = value

    info = ClassInfo(
        name=name,
        methods=MappingProxyType(methods),
        properties=MappingProxyType(properties),
    )
    instance_type = type(name, (ObjectInstance,), {"__module__": __name__})
    state = _ClassState(
        info=info,
        members=MappingProxyType(members),
        template=MappingProxyType(template),
        bound=frozenset(bound),
        instance_type=instance_type,
    )
    record = ClassRecord(state)
    seal(surface)

    logger.info("defined class %s (%d methods, %d properties)",
                name, len(methods), len(properties))
    return record


def define_class(definition: Callable[[DefinitionSurface], Any],
                 name: Optional[str] = None,
                 config: Optional[BuilderConfig] = None) -> ClassRecord:
    """
    Create a class from a definition callback.

    Args:
        definition: Called once with a DefinitionSurface to declare members
        name: Class name (defaults to definition.__name__)
        config: Builder configuration (defaults to BuilderConfig())

    Returns:
        The assembled, immutable ClassRecord

    Raises:
        ReservedNameViolation: a reserved name was defined
        MalformedDescriptorError: strict mode and a descriptor is malformed
    """
    config = config or BuilderConfig()
    if name is None:
        name = getattr(definition, "__name__", "AnonymousClass")
    surface = capture(definition, config)
    return assemble(surface, name, config)
