"""
Signature introspection for extracting the parameter names to inject.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import NotConstructibleError

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class DependencyInfo:
    """A single declared parameter of a constructible or callable."""

    name: str
    keyword_only: bool = False
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


class SignatureIntrospector:
    """Reads formal parameter names off live classes, functions and methods."""

    @staticmethod
    def is_method_pair(target: Any) -> bool:
        """Check whether target is an ``(instance, method_name)`` pair."""
        return isinstance(target, tuple | list) and len(target) == 2 and isinstance(target[1], str)

    @staticmethod
    def callable_of(target: Any) -> Callable[..., Any]:
        """
        Get the callable a target refers to.

        Args:
            target: A class, function, bound method or ``(instance, method_name)`` pair

        Returns:
            The callable itself, or the bound method for a pair

        Raises:
            NotConstructibleError: If the target is not callable or the method is missing
        """
        if SignatureIntrospector.is_method_pair(target):
            instance, method_name = target
            method = getattr(instance, method_name, None)
            if method is None:
                raise NotConstructibleError(target, f"{type(instance).__name__} has no method '{method_name}'")
            target = method

        if not callable(target):
            raise NotConstructibleError(target)
        return target

    @staticmethod
    def extract_dependencies(target: Any) -> list[DependencyInfo]:
        """
        Extract the ordered parameters of a target.

        Variadic ``*args``/``**kwargs`` are skipped and ``self`` is never reported
        for classes or bound methods.

        Args:
            target: A class, function, bound method or ``(instance, method_name)`` pair

        Returns:
            The declared parameters in declaration order
        """
        func = SignatureIntrospector.callable_of(target)

        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            # Some builtins expose no signature; treat them as taking nothing.
            return []

        return [
            DependencyInfo(
                name=param.name,
                keyword_only=param.kind == inspect.Parameter.KEYWORD_ONLY,
                default=param.default,
            )
            for param in signature.parameters.values()
            if param.kind not in _VARIADIC
        ]

    @staticmethod
    def parameter_names(target: Any) -> list[str]:
        """Get the ordered parameter names of a target."""
        return [dep.name for dep in SignatureIntrospector.extract_dependencies(target)]
