"""
Configuration model for dependency resolution.

This module defines the ResolverConfig class and ErrorMode enum, which control
the behavior of the resolver and the package providers, including error
handling strategies and resolution limits.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorMode(str, Enum):
    """Enumeration of error handling modes for resolution.

    Attributes:
        FAIL: Raise an exception immediately when the problem is encountered.
        WARN: Record a warning on the result and continue.
        IGNORE: Silently continue.

    Example:
        >>> mode = ErrorMode.FAIL
        >>> mode.value
        'fail'
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values.

        Returns:
            List of string values for all error modes in the enum.
        """
        return [member.value for member in cls]


@dataclass
class ResolverConfig:
    """Configuration settings for dependency resolution.

    Attributes:
        max_depth: Maximum number of dependency hops allowed in a single
            chain. Walking further raises ChainDepthExceededError.
            Defaults to 1000.
        separator: Separator used when rendering the resolution order as
            a string. Defaults to ", ".
        strip_identifiers: If True, surrounding whitespace is removed from
            requested identifiers before lookup. Defaults to True.
        on_unknown_dependency: What a provider does when a package declares
            a dependency that is not defined. FAIL raises
            UnresolvedPackageError; WARN and IGNORE treat the dependency as
            a package with no dependency of its own. Defaults to FAIL.
        on_duplicate_request: What the resolver does when the same
            identifier is requested more than once. Duplicates never change
            the result; FAIL rejects them, WARN records a warning.
            Defaults to IGNORE.

    Example:
        >>> config = ResolverConfig(on_unknown_dependency=ErrorMode.WARN)
        >>> config.separator
        ', '
    """

    max_depth: int = 1000
    separator: str = ", "
    strip_identifiers: bool = True
    on_unknown_dependency: ErrorMode = ErrorMode.FAIL
    on_duplicate_request: ErrorMode = ErrorMode.IGNORE

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 0:
            raise ValueError("max_depth cannot be negative")
        if not isinstance(self.separator, str):
            raise TypeError("separator must be a string")
        if not isinstance(self.strip_identifiers, bool):
            raise TypeError("strip_identifiers must be a boolean")
        if not isinstance(self.on_unknown_dependency, ErrorMode):
            raise TypeError("on_unknown_dependency must be an ErrorMode instance")
        if not isinstance(self.on_duplicate_request, ErrorMode):
            raise TypeError("on_duplicate_request must be an ErrorMode instance")
