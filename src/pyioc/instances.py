"""
Instance cache holding shared and explicitly registered values.
"""

from __future__ import annotations

from typing import Any


class InstanceCache:
    """
    Stores resolved values by abstract name, plus resolved markers.

    Membership decides a cache hit, so ``None`` is a valid cached value.
    Resolved markers are diagnostic only and never consulted during resolution.
    """

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}
        self._resolved: set[str] = set()

    def has(self, name: str) -> bool:
        """Check if a value is cached for the name."""
        return name in self._instances

    def get(self, name: str) -> Any:
        """
        Get the cached value for a name.

        Raises:
            KeyError: If nothing is cached for the name
        """
        return self._instances[name]

    def put(self, name: str, value: Any) -> None:
        """Cache a value, replacing any previous one."""
        self._instances[name] = value

    def drop(self, name: str) -> None:
        """Remove the cached value for a name, if any."""
        self._instances.pop(name, None)

    def mark_resolved(self, name: str) -> None:
        self._resolved.add(name)

    def is_resolved(self, name: str) -> bool:
        return name in self._resolved

    def snapshot(self) -> dict[str, Any]:
        """Get a copy of the cached values."""
        return dict(self._instances)

    def resolved_names(self) -> frozenset[str]:
        return frozenset(self._resolved)

    def get_instance_count(self) -> int:
        """Get the number of cached values."""
        return len(self._instances)

    def clear(self) -> None:
        """Clear cached values and resolved markers."""
        self._instances.clear()
        self._resolved.clear()
