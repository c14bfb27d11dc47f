"""
Container - runtime dependency-resolution container keyed by abstract names.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .bindings import Binding, BindingRegistry
from .instances import InstanceCache
from .invoker import Invoker
from .loader import ConstructibleLoader, ImportLoader
from .options import ContainerOptions
from .resolver import Resolver
from .targets import ClassMethod

logger = logging.getLogger(__name__)


class Container:
    """
    Registry mapping abstract names to constructibles, resolving object graphs on demand.

    A constructible's parameter names are themselves abstract names: building it
    resolves each parameter from the caller's overrides or, failing that, from
    the container.

    Example:
        ```python
        class Config:
            def grab(self) -> str:
                return "Grab config"

        class Star:
            def __init__(self, config):
                self.config = config

        container = Container()
        container.singleton("config", Config)
        container.bind("star", Star)

        star = container.make("star")
        assert star.config is container.make("config")
        ```
    """

    def __init__(self, loader: ConstructibleLoader | None = None, options: ContainerOptions | None = None):
        """
        Create an empty container.

        Args:
            loader: Loader used for names without a binding; defaults to ImportLoader
            options: Container options; defaults to ContainerOptions()
        """
        self._options = options or ContainerOptions.default()
        self._loader = loader if loader is not None else ImportLoader()
        self._instances = InstanceCache()
        self._registry = BindingRegistry(self._instances, self._options)
        self._resolver = Resolver(self._registry, self._instances, self._loader, self._options)
        self._invoker = Invoker(self._resolver, self._options)

    def bind(self, name: str, concrete: Any = None, shared: bool = False) -> None:
        """
        Register a binding, evicting any instance cached for the name.

        Args:
            name: Abstract name
            concrete: A class or factory, another abstract's name, a ``"+"``-prefixed
                name to load externally, or None to load ``name`` itself
            shared: Whether the resolved value is cached and reused
        """
        binding = self._registry.bind(name, concrete, shared)
        logger.debug("Bound %s", binding)

    def bind_if(self, name: str, concrete: Any = None, shared: bool = False) -> None:
        """Register a binding only if the name has no binding, instance or alias yet."""
        binding = self._registry.bind_if(name, concrete, shared)
        if binding is None:
            logger.debug("Skipped binding %s, already bound", name)
        else:
            logger.debug("Bound %s", binding)

    def singleton(self, name: str, concrete: Any = None) -> None:
        """Register a shared binding."""
        self.bind(name, concrete, shared=True)

    def alias(self, name: str, alias_name: str) -> None:
        """Register ``alias_name`` as another name for ``name``."""
        self._registry.alias(name, alias_name)
        logger.debug("Aliased %s as %s", name, alias_name)

    def get_alias(self, name: str) -> str:
        """Resolve a name through the alias table, one level only."""
        return self._registry.get_alias(name)

    def is_alias(self, name: str) -> bool:
        """Check if a name is a registered alias."""
        return self._registry.is_alias(name)

    def bound(self, name: str) -> bool:
        """Check if a name has a binding, a cached instance or an alias."""
        return self._registry.bound(name)

    def instance(self, name: str, value: Any) -> None:
        """
        Register a ready value; ``make(name)`` returns exactly this value.

        Registering again under the same name replaces the previous value.
        """
        self._registry.instance(name, value)
        logger.debug("Registered instance for %s", name)

    def make(self, name: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """
        Resolve a name into a value.

        Args:
            name: Abstract name or alias
            parameters: Override values keyed by parameter name

        Returns:
            The resolved value

        Raises:
            ConstructibleNotFoundError: If the name or a dependency cannot be loaded
            CircularDependencyError: If the bindings form a cycle
        """
        return self._resolver.make(name, parameters)

    def build(self, concrete: Any, parameters: Mapping[str, Any] | None = None) -> Any:
        """Instantiate a concrete directly, without consulting bindings or the cache for it."""
        return self._resolver.build(concrete, parameters)

    def is_shared(self, name: str) -> bool:
        """Check if the value for a name is cached or its binding is shared."""
        return self._resolver.is_shared(name)

    def is_resolved(self, name: str) -> bool:
        """Check if a name has been resolved at least once."""
        return self._instances.is_resolved(name)

    def call(
        self,
        target: Any,
        parameters: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        """
        Call a function, an ``(instance, method)`` pair or a ``"name@method"`` target
        with injected arguments.

        Example:
            ```python
            container.instance("foo", "bar")
            container.call(lambda id, foo: (id, foo), {"id": "x"})  # ("x", "bar")
            ```
        """
        return self._invoker.call(target, parameters, default_method)

    def call_class(
        self,
        target: str | ClassMethod,
        parameters: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        """Resolve ``"name@method"`` and call the method on the resolved instance."""
        return self._invoker.call_class(target, parameters, default_method)

    def forget_instance(self, name: str) -> None:
        """Remove the binding, cached instance and alias for a name."""
        self._registry.forget(name)
        logger.debug("Forgot %s", name)

    def forget_all(self) -> None:
        """Clear bindings, instances, aliases and resolved markers."""
        self._registry.clear()
        self._instances.clear()
        self._resolver.reset()
        logger.debug("Forgot all bindings")

    @property
    def bindings(self) -> dict[str, Binding]:
        """Copy of the registered bindings."""
        return self._registry.snapshot()

    @property
    def instances(self) -> dict[str, Any]:
        """Copy of the cached instances."""
        return self._instances.snapshot()

    @property
    def aliases(self) -> dict[str, str]:
        """Copy of the alias table."""
        return self._registry.aliases()

    @property
    def resolved(self) -> frozenset[str]:
        """Names resolved at least once."""
        return self._instances.resolved_names()

    def get_instance_count(self) -> int:
        """Get the number of cached instances."""
        return self._instances.get_instance_count()
