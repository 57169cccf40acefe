"""Property introspection domain exports."""

from .property_descriptors import (
    PropertyAccessError,
    PropertyDescriptor,
    PropertyIntrospectionError,
    PropertyKind,
    PropertyNotFoundError,
    property_descriptors_for,
    property_names_for,
    read_property,
)

__all__ = [
    "PropertyDescriptor",
    "PropertyKind",
    "PropertyIntrospectionError",
    "PropertyNotFoundError",
    "PropertyAccessError",
    "property_descriptors_for",
    "property_names_for",
    "read_property",
]
