"""
Exceptions raised by the container.
"""

from __future__ import annotations

from typing import Any


class ContainerError(Exception):
    """Base class for every error raised by the container."""


class ConstructibleNotFoundError(ContainerError, LookupError):
    """Raised when the loader cannot locate a constructible for a name."""

    def __init__(self, name: str, reason: str | None = None):
        self.name = name
        msg = f"Cannot find module '{name}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidArgumentError(ContainerError, ValueError):
    """Raised when a call target cannot be dispatched."""


class CircularDependencyError(ContainerError):
    """Raised when resolving a name re-enters a name already being resolved."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        chain_str = " -> ".join(chain)
        super().__init__(f"Circular dependency detected: {chain_str}")


class NotConstructibleError(ContainerError, TypeError):
    """Raised when a concrete is neither a class nor a callable."""

    def __init__(self, target: Any, reason: str | None = None):
        self.target = target
        msg = f"{target!r} is not constructible"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
