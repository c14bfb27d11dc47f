"""
pyioc - runtime dependency-resolution container.

This library provides:
- Name-keyed bindings, singletons, aliases and instance overrides
- Signature introspection: parameter names are the dependencies to inject
- Recursive resolution with cycle detection
- Invocation of functions and "name@method" targets with injected arguments
"""

from .bindings import Binding
from .container import Container
from .errors import (
    CircularDependencyError,
    ConstructibleNotFoundError,
    ContainerError,
    InvalidArgumentError,
    NotConstructibleError,
)
from .introspection import DependencyInfo, SignatureIntrospector
from .loader import ConstructibleLoader, ImportLoader, MappingLoader
from .options import ContainerOptions
from .targets import ClassMethod, Direct, DirectCall, ExternalLoad, ReferenceTo

__all__ = [
    "Binding",
    "CircularDependencyError",
    "ClassMethod",
    "ConstructibleLoader",
    "ConstructibleNotFoundError",
    "Container",
    "ContainerError",
    "ContainerOptions",
    "DependencyInfo",
    "Direct",
    "DirectCall",
    "ExternalLoad",
    "ImportLoader",
    "InvalidArgumentError",
    "MappingLoader",
    "NotConstructibleError",
    "ReferenceTo",
    "SignatureIntrospector",
]
