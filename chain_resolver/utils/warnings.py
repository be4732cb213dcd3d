"""
Warning system for dependency resolution.

This module defines warning collection functionality for the resolver,
allowing non-fatal issues to be collected during resolution and reported
to users alongside the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class ResolutionWarning:
    """Warning or error message for dependency resolution.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        context: Optional context information (e.g., the package involved).

    Example:
        >>> warning = ResolutionWarning(
        ...     level="WARNING",
        ...     message="Unknown dependency 'b'",
        ...     context="a"
        ... )
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )


class WarningCollector:
    """Collects warnings during resolution.

    Attributes:
        warnings: List of ResolutionWarning objects collected so far.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("WARNING", "Unknown dependency")
        >>> collector.has_errors()
        False
        >>> len(collector.get_all())
        1
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[ResolutionWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            context: Optional context information.
        """
        self.warnings.append(
            ResolutionWarning(level=level, message=message, context=context)
        )

    def extend(self, warnings: list[ResolutionWarning]) -> None:
        """Add already-built warnings, keeping their order."""
        self.warnings.extend(warnings)

    def has_errors(self) -> bool:
        """Check if any error-level warnings exist."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_all(self) -> list[ResolutionWarning]:
        """Get all collected warnings in the order they were added."""
        return self.warnings.copy()

    def get_by_level(self, level: str) -> list[ResolutionWarning]:
        """Get warnings by severity level.

        Args:
            level: Severity level to filter by ("INFO", "WARNING", "ERROR").

        Returns:
            List of ResolutionWarning objects with the specified level.
        """
        return [
            warning for warning in self.warnings if warning.level == level
        ]

    def clear(self) -> None:
        """Clear all collected warnings."""
        self.warnings.clear()

    def add_unknown_dependency_warning(
        self, package: str, dependency: str
    ) -> None:
        """Add a warning when a package depends on an undefined package.

        Args:
            package: Identifier of the dependent package.
            dependency: Identifier of the missing dependency.
        """
        message = (
            f"Package '{package}' depends on unknown package '{dependency}'. "
            f"Treating '{dependency}' as a package with no dependencies."
        )
        self.add("WARNING", message, package)

    def add_duplicate_request_warning(self, identifier: str, count: int) -> None:
        """Add a warning when the same package is requested more than once.

        Args:
            identifier: Duplicated package identifier.
            count: Number of times it was requested.
        """
        message = (
            f"Package '{identifier}' was requested {count} times. "
            f"It is installed once."
        )
        self.add("WARNING", message, identifier)

    def get_summary(self) -> dict[str, int]:
        """Get a summary of warnings by level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("INFO", "Info 1")
            >>> collector.add("WARNING", "Warning 1")
            >>> collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
            True
        """
        summary: dict[str, int] = {level: 0 for level in VALID_LEVELS}
        for warning in self.warnings:
            summary[warning.level] = summary.get(warning.level, 0) + 1
        return summary
