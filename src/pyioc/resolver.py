"""
Dependency resolution engine.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .bindings import BindingRegistry
from .errors import CircularDependencyError, ConstructibleNotFoundError
from .instances import InstanceCache
from .introspection import DependencyInfo, SignatureIntrospector
from .loader import ConstructibleLoader
from .options import ContainerOptions
from .targets import Concrete, Direct, ExternalLoad, ReferenceTo, external_load_for

logger = logging.getLogger(__name__)


class Resolver:
    """
    Resolves abstract names into values by recursively building their dependencies.

    Parameter names are abstract names: every parameter of a constructible is
    either taken from the caller's override map or resolved with ``make``.
    """

    def __init__(
        self,
        registry: BindingRegistry,
        instances: InstanceCache,
        loader: ConstructibleLoader,
        options: ContainerOptions | None = None,
    ):
        self._registry = registry
        self._instances = instances
        self._loader = loader
        self._options = options or ContainerOptions.default()
        self._resolving: list[str] = []

    def make(self, name: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """
        Resolve a name into a value.

        Args:
            name: Abstract name or alias
            parameters: Values that take precedence over container resolution,
                keyed by parameter name

        Returns:
            The cached instance, or a freshly built value

        Raises:
            ConstructibleNotFoundError: If the name, or one of its dependencies,
                can be neither resolved nor loaded
            CircularDependencyError: If resolution re-enters a name being resolved
        """
        parameters = parameters or {}
        abstract = self._registry.get_alias(name)

        if self._instances.has(abstract):
            logger.debug("Returning cached instance for %s", abstract)
            return self._instances.get(abstract)

        if abstract in self._resolving:
            raise CircularDependencyError([*self._resolving, abstract])

        self._resolving.append(abstract)
        try:
            concrete = self.get_concrete(abstract)
            if isinstance(concrete, ReferenceTo):
                logger.debug("Resolving %s through %s", abstract, concrete.name)
                value = self.make(concrete.name, parameters)
            else:
                value = self.build(concrete, parameters)
        finally:
            self._resolving.pop()

        if self.is_shared(abstract):
            self._instances.put(abstract, value)

        self._instances.mark_resolved(abstract)
        return value

    def get_concrete(self, abstract: str) -> Concrete:
        """Get the concrete bound to a name, or an external load of the name itself."""
        binding = self._registry.get_binding(abstract)
        if binding is None:
            return external_load_for(abstract, self._options)
        return binding.concrete

    def is_shared(self, name: str) -> bool:
        """Check if the value for a name is cached or its binding is shared."""
        if self._instances.has(name):
            return True
        binding = self._registry.get_binding(name)
        return binding is not None and binding.shared

    def build(self, concrete: Concrete | Any, parameters: Mapping[str, Any] | None = None) -> Any:
        """
        Instantiate a concrete, resolving each of its parameters.

        Args:
            concrete: A concrete variant, a constructible, or a string to load externally
            parameters: Override values keyed by parameter name

        Returns:
            Whatever the constructible returns
        """
        parameters = parameters or {}

        if isinstance(concrete, ReferenceTo):
            return self.make(concrete.name, parameters)
        if isinstance(concrete, str):
            concrete = external_load_for(concrete, self._options)

        if isinstance(concrete, ExternalLoad):
            constructible = self._load(concrete.name)
        elif isinstance(concrete, Direct):
            constructible = concrete.constructible
        else:
            constructible = concrete

        dependencies = SignatureIntrospector.extract_dependencies(constructible)
        args, kwargs = self.resolve_arguments(dependencies, parameters)

        logger.debug(
            "Building %s with %d dependencies",
            getattr(constructible, "__qualname__", constructible),
            len(dependencies),
        )
        return constructible(*args, **kwargs)

    def resolve_arguments(
        self, dependencies: list[DependencyInfo], parameters: Mapping[str, Any]
    ) -> tuple[list[Any], dict[str, Any]]:
        """
        Resolve declared parameters into call arguments.

        Each parameter is taken from ``parameters`` when present under its exact
        name, otherwise resolved with ``make``. A parameter with a default keeps
        that default only when ``make`` fails because the parameter's own name
        cannot be loaded. Positional order follows the declaration order;
        keyword-only parameters are passed by keyword.

        Returns:
            Positional arguments and keyword arguments
        """
        args: list[Any] = []
        kwargs: dict[str, Any] = {}

        for dep in dependencies:
            if dep.name in parameters:
                value = parameters[dep.name]
            else:
                try:
                    value = self.make(dep.name)
                except ConstructibleNotFoundError as exc:
                    if not self._falls_back_to_default(dep, exc):
                        raise
                    logger.debug("Using default for unresolvable parameter %s", dep.name)
                    if dep.keyword_only:
                        continue
                    value = dep.default

            if dep.keyword_only:
                kwargs[dep.name] = value
            else:
                args.append(value)

        return args, kwargs

    def _falls_back_to_default(self, dep: DependencyInfo, exc: ConstructibleNotFoundError) -> bool:
        """Check if a failed ``make`` of a parameter may be replaced by its default."""
        if not (dep.has_default and self._options.use_parameter_defaults):
            return False
        if self._registry.bound(dep.name):
            return False
        # Only a failure to load the parameter itself, not one of its dependencies.
        return exc.name == external_load_for(dep.name, self._options).name

    def _load(self, name: str) -> Any:
        """Ask the loader for a constructible; failures are never cached."""
        logger.debug("Loading %s externally", name)
        try:
            return self._loader.load(name)
        except ConstructibleNotFoundError as exc:
            logger.debug("Could not load %s: %s", name, exc)
            raise
        except (ImportError, LookupError, AttributeError) as exc:
            logger.debug("Could not load %s: %s", name, exc)
            raise ConstructibleNotFoundError(name, str(exc)) from exc

    def reset(self) -> None:
        """Forget any in-progress resolution chain."""
        self._resolving.clear()
