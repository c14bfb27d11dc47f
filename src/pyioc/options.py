"""
Container configuration.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContainerOptions:
    """
    Settings controlling how a container interprets names and parameters.

    Attributes:
        load_prefix: Prefix marking a string concrete as "load externally".
        method_separator: Separator between the abstract and the method in
            call targets such as ``"mailer@send"``.
        use_parameter_defaults: When True, a parameter that declares a default,
            is not overridden and is not bound in the container receives its
            default when the loader cannot provide it.
    """

    load_prefix: str = "+"
    method_separator: str = "@"
    use_parameter_defaults: bool = True

    def __post_init__(self) -> None:
        if not self.load_prefix:
            raise ValueError("load_prefix must not be empty")
        if not self.method_separator:
            raise ValueError("method_separator must not be empty")

    @classmethod
    def default(cls) -> ContainerOptions:
        """Create options with all defaults."""
        return cls()
