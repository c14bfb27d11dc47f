"""
Loaders locating constructibles by external name.
"""

from __future__ import annotations

import importlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from .errors import ConstructibleNotFoundError, NotConstructibleError

logger = logging.getLogger(__name__)


class ConstructibleLoader(ABC):
    """
    Abstract interface for loading a constructible given its external name.

    Used by the resolver whenever a name has no binding, or its binding asks
    for an external load. Loaders are called once per build and must not
    cache failures.
    """

    @abstractmethod
    def load(self, name: str) -> Callable[..., Any]:
        """
        Load the constructible registered under an external name.

        Args:
            name: External name, without the load prefix

        Returns:
            A class or factory function

        Raises:
            ConstructibleNotFoundError: If nothing can be found under the name
        """


class ImportLoader(ConstructibleLoader):
    """
    Loads constructibles from importable modules.

    Accepts ``"package.module:attr"`` or ``"package.module.attr"``.
    """

    def load(self, name: str) -> Callable[..., Any]:
        module_path, _, attr = name.partition(":")
        if not attr:
            module_path, _, attr = name.rpartition(".")

        if not module_path or not attr:
            raise ConstructibleNotFoundError(name, "expected 'module:attr' or 'module.attr'")

        try:
            module = importlib.import_module(module_path)
        except ImportError as exc:
            logger.debug("Import of %s failed: %s", module_path, exc)
            raise ConstructibleNotFoundError(name, str(exc)) from exc

        try:
            constructible = getattr(module, attr)
        except AttributeError as exc:
            raise ConstructibleNotFoundError(name, f"module '{module_path}' has no attribute '{attr}'") from exc

        if not callable(constructible):
            raise NotConstructibleError(constructible, f"loaded from '{name}'")

        return constructible  # type: ignore[no-any-return]


class MappingLoader(ConstructibleLoader):
    """Loads constructibles from a fixed name -> constructible mapping."""

    def __init__(self, constructibles: Mapping[str, Callable[..., Any]]):
        self._constructibles = dict(constructibles)

    def load(self, name: str) -> Callable[..., Any]:
        try:
            return self._constructibles[name]
        except KeyError:
            raise ConstructibleNotFoundError(name) from None

    def register(self, name: str, constructible: Callable[..., Any]) -> None:
        """Add or replace a constructible."""
        self._constructibles[name] = constructible
