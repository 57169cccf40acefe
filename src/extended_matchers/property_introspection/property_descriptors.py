"""Readable property discovery and access for arbitrary objects."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from types import MemberDescriptorType

_MISSING = object()


class PropertyIntrospectionError(Exception):
    """Base class for failures while reading a property."""


class PropertyNotFoundError(PropertyIntrospectionError):
    """Raised when an object has no readable member with the requested name."""

    def __init__(self, name: str, target: object) -> None:
        super().__init__(f"{type(target).__name__} has no readable property '{name}'")
        self.name = name


class PropertyAccessError(PropertyIntrospectionError):
    """Raised when an existing property accessor fails while being read."""

    def __init__(self, name: str, target: object) -> None:
        super().__init__(f"Could not read property '{name}' on {target!r}")
        self.name = name


class PropertyKind(str, Enum):
    """Where a readable property is declared."""

    FIELD = "field"
    ATTRIBUTE = "attribute"
    SLOT = "slot"
    PROPERTY = "property"


@dataclass(frozen=True)
class PropertyDescriptor:
    """One readable public property of an object."""

    name: str
    kind: PropertyKind


def property_descriptors_for(target: object) -> tuple[PropertyDescriptor, ...]:
    """Return the readable public properties of ``target`` in discovery order.

    Named-tuple fields come first, then instance attributes in insertion
    order, then class-level getters, cached properties and slots walked from
    the base class down. A name is reported once, by its first occurrence.
    """
    found: dict[str, PropertyKind] = {}
    for name in _named_tuple_fields(target):
        found.setdefault(name, PropertyKind.FIELD)
    for name in _instance_attribute_names(target):
        found.setdefault(name, PropertyKind.ATTRIBUTE)
    owner = type(target)
    for klass in reversed(owner.__mro__):
        if klass is object:
            continue
        for name in vars(klass):
            if not _is_public(name) or name in found:
                continue
            kind = _class_member_kind(inspect.getattr_static(owner, name, None))
            if kind is not None:
                found[name] = kind
    return tuple(PropertyDescriptor(name=name, kind=kind) for name, kind in found.items())


def property_names_for(target: object) -> frozenset[str]:
    """Return the readable public property names of ``target``."""
    return frozenset(descriptor.name for descriptor in property_descriptors_for(target))


def read_property(name: str, target: object) -> object:
    """Read one property, normalizing enum members to their name.

    Raises:
      PropertyNotFoundError: If ``target`` has no readable member called ``name``.
      PropertyAccessError: If the member exists but reading it fails.
    """
    member = inspect.getattr_static(target, name, _MISSING)
    if member is _MISSING or (isinstance(member, property) and member.fget is None):
        raise PropertyNotFoundError(name, target)
    try:
        value = getattr(target, name)
    except Exception as exc:
        # an unassigned slot is an absent value, not a broken accessor
        if isinstance(exc, AttributeError) and isinstance(member, MemberDescriptorType):
            raise PropertyNotFoundError(name, target) from exc
        raise PropertyAccessError(name, target) from exc
    if isinstance(value, Enum):
        return value.name
    return value


def _named_tuple_fields(target: object) -> tuple[str, ...]:
    if not isinstance(target, tuple):
        return ()
    fields = getattr(type(target), "_fields", ())
    return tuple(name for name in fields if isinstance(name, str) and _is_public(name))


def _instance_attribute_names(target: object) -> tuple[str, ...]:
    try:
        attributes = vars(target)
    except TypeError:
        return ()
    return tuple(name for name in attributes if _is_public(name))


def _class_member_kind(member: object) -> PropertyKind | None:
    if isinstance(member, property):
        return PropertyKind.PROPERTY if member.fget is not None else None
    if isinstance(member, cached_property):
        return PropertyKind.PROPERTY
    if isinstance(member, MemberDescriptorType):
        return PropertyKind.SLOT
    return None


def _is_public(name: str) -> bool:
    return not name.startswith("_")
