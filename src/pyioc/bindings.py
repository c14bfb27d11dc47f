"""
Binding definitions and the binding registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .instances import InstanceCache
from .options import ContainerOptions
from .targets import Concrete, parse_concrete


@dataclass(frozen=True)
class Binding:
    """The concrete registered for an abstract name, and whether it is shared."""

    abstract: str
    concrete: Concrete
    shared: bool = False

    def __str__(self) -> str:
        shared_str = " (shared)" if self.shared else ""
        return f"{self.abstract} -> {self.concrete}{shared_str}"


class BindingRegistry:
    """
    Stores bindings and one-level aliases.

    The registry shares the instance cache with the resolver so that binding a
    name evicts any stale instance and registering an instance drops an alias
    of the same name.
    """

    def __init__(self, instances: InstanceCache, options: ContainerOptions | None = None):
        self._instances = instances
        self._options = options or ContainerOptions.default()
        self._bindings: dict[str, Binding] = {}
        self._aliases: dict[str, str] = {}

    def bind(self, name: str, concrete: Any = None, shared: bool = False) -> Binding:
        """
        Register a binding, replacing any previous binding for the name.

        Args:
            name: Abstract name to register
            concrete: A constructible, a string naming another abstract or an
                external load, a concrete variant, or None to load ``name`` itself
            shared: Whether the resolved value is cached and reused

        Returns:
            The stored binding
        """
        self._instances.drop(name)
        binding = Binding(name, parse_concrete(name, concrete, self._options), bool(shared))
        self._bindings[name] = binding
        return binding

    def bind_if(self, name: str, concrete: Any = None, shared: bool = False) -> Binding | None:
        """Register a binding only if the name is not bound yet."""
        if self.bound(name):
            return None
        return self.bind(name, concrete, shared)

    def get_binding(self, name: str) -> Binding | None:
        """Get the binding for a name, if any."""
        return self._bindings.get(name)

    def alias(self, name: str, alias_name: str) -> None:
        """Register ``alias_name`` as another name for ``name``."""
        self._aliases[alias_name] = name

    def get_alias(self, name: str) -> str:
        """Resolve a name through the alias table, one level only."""
        return self._aliases.get(name, name)

    def is_alias(self, name: str) -> bool:
        return name in self._aliases

    def bound(self, name: str) -> bool:
        """Check if a name has a binding, a cached instance or an alias."""
        return name in self._bindings or self._instances.has(name) or self.is_alias(name)

    def instance(self, name: str, value: Any) -> None:
        """Register a ready value under a name, taking precedence over any alias."""
        self._aliases.pop(name, None)
        self._instances.put(name, value)

    def forget(self, name: str) -> None:
        """Remove the binding, instance and alias for a name."""
        self._instances.drop(name)
        self._bindings.pop(name, None)
        self._aliases.pop(name, None)

    def snapshot(self) -> dict[str, Binding]:
        return dict(self._bindings)

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def clear(self) -> None:
        """Clear bindings and aliases."""
        self._bindings.clear()
        self._aliases.clear()
