"""
Invocation of functions and methods with injected arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidArgumentError
from .introspection import SignatureIntrospector
from .options import ContainerOptions
from .resolver import Resolver
from .targets import ClassMethod, DirectCall, parse_call_target

logger = logging.getLogger(__name__)


class Invoker:
    """Calls functions, ``(instance, method)`` pairs and ``"name@method"`` targets."""

    def __init__(self, resolver: Resolver, options: ContainerOptions | None = None):
        self._resolver = resolver
        self._options = options or ContainerOptions.default()

    def call(
        self,
        target: Any,
        parameters: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        """
        Call a target, injecting its parameters.

        Args:
            target: A function, an ``(instance, method_name)`` pair, or a
                ``"name@method"`` string
            parameters: Override values keyed by parameter name
            default_method: Method to call when a string target names none

        Returns:
            Whatever the target returns

        Raises:
            InvalidArgumentError: If a string target has no method and no default
        """
        parameters = parameters or {}
        call_target = parse_call_target(target, default_method, self._options)

        if isinstance(call_target, ClassMethod):
            return self._call_class_method(call_target, parameters)

        return self._call_direct(call_target, parameters)

    def call_class(
        self,
        target: str | ClassMethod,
        parameters: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        """
        Resolve the instance named by a ``"name@method"`` target and call the method.

        The constructor and the method are injected in two independent passes over
        the same override map.

        Raises:
            InvalidArgumentError: If the target is not a string or names no method
        """
        if not isinstance(target, str | ClassMethod):
            raise InvalidArgumentError(f"Class-method target must be a string, got {target!r}")

        parameters = parameters or {}
        call_target = parse_call_target(target, default_method, self._options)
        assert isinstance(call_target, ClassMethod)
        return self._call_class_method(call_target, parameters)

    def _call_class_method(self, target: ClassMethod, parameters: Mapping[str, Any]) -> Any:
        logger.debug("Calling %s", target)
        instance = self._resolver.make(target.abstract, parameters)
        return self._call_direct(DirectCall((instance, target.method)), parameters)

    def _call_direct(self, target: DirectCall, parameters: Mapping[str, Any]) -> Any:
        func = SignatureIntrospector.callable_of(target.target)
        dependencies = SignatureIntrospector.extract_dependencies(target.target)
        args, kwargs = self._resolver.resolve_arguments(dependencies, parameters)
        return func(*args, **kwargs)
