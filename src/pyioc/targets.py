"""
Tagged variants for concretes and call targets.

Callers may keep using the string syntax (``"+module.Class"`` for external
loads, ``"name@method"`` for class-method calls). It is parsed here once, at
the API boundary, and the rest of the container only sees these variants.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgumentError
from .options import ContainerOptions


@dataclass(frozen=True)
class Direct:
    """A constructible (class or factory) that is built as is."""

    constructible: Any

    def __str__(self) -> str:
        return getattr(self.constructible, "__qualname__", repr(self.constructible))


@dataclass(frozen=True)
class ReferenceTo:
    """A pointer to another abstract, resolved through a nested ``make``."""

    name: str

    def __str__(self) -> str:
        return f"ref({self.name})"


@dataclass(frozen=True)
class ExternalLoad:
    """A constructible the loader has to locate by name."""

    name: str

    def __str__(self) -> str:
        return f"load({self.name})"


Concrete = Direct | ReferenceTo | ExternalLoad


@dataclass(frozen=True)
class DirectCall:
    """A callable, or an ``(instance, method_name)`` pair, invoked directly."""

    target: Callable[..., Any] | tuple[Any, str] | list[Any]


@dataclass(frozen=True)
class ClassMethod:
    """Resolve ``abstract`` from the container, then invoke ``method`` on it."""

    abstract: str
    method: str

    def __str__(self) -> str:
        return f"{self.abstract}@{self.method}"


CallTarget = DirectCall | ClassMethod


def external_load_for(name: str, options: ContainerOptions) -> ExternalLoad:
    """Build the external-load variant for a name that may carry the load prefix."""
    if name.startswith(options.load_prefix):
        return ExternalLoad(name[len(options.load_prefix) :])
    return ExternalLoad(name)


def parse_concrete(abstract: str, value: Any, options: ContainerOptions) -> Concrete:
    """
    Turn whatever was passed to ``bind`` into a concrete variant.

    Args:
        abstract: The name being bound
        value: A variant, ``None``, a string or a constructible
        options: Container options carrying the load prefix

    Returns:
        The concrete variant to store in the binding
    """
    if isinstance(value, Direct | ReferenceTo | ExternalLoad):
        return value
    if value is None:
        return ExternalLoad(abstract)
    if isinstance(value, str):
        if value.startswith(options.load_prefix):
            return external_load_for(value, options)
        if value == abstract:
            return ExternalLoad(abstract)
        return ReferenceTo(value)
    # No shape validation here; a bad constructible fails when it is built.
    return Direct(value)


def parse_call_target(target: Any, default_method: str | None, options: ContainerOptions) -> CallTarget:
    """
    Turn the argument of ``call`` into a call target variant.

    Args:
        target: A callable, an ``(instance, method)`` pair or a ``"name@method"`` string
        default_method: Method to use when the string names none
        options: Container options carrying the method separator

    Returns:
        The call target variant

    Raises:
        InvalidArgumentError: If a class-method target has no method name
    """
    if isinstance(target, DirectCall | ClassMethod):
        return target

    if not isinstance(target, str):
        if default_method is not None:
            raise InvalidArgumentError(
                f"Cannot apply default method '{default_method}' to non-string target {target!r}"
            )
        return DirectCall(target)

    segments = target.split(options.method_separator)
    method = segments[1] if len(segments) == 2 else None
    method = method or default_method

    if not method:
        raise InvalidArgumentError(f"Method is not provided for call target '{target}'")

    return ClassMethod(segments[0], method)
