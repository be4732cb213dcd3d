"""
Custom exception classes for dependency resolution.

This module defines all custom exceptions used throughout the chain resolver
package. Every error raised during resolution derives from ResolutionError,
so callers can catch a single type and get no partial result.
"""

import difflib
from typing import Optional


class ResolutionError(Exception):
    """Base exception class for all resolution errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a ResolutionError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class UnresolvedPackageError(ResolutionError):
    """Exception raised when a package identifier cannot be resolved.

    Raised by a package provider when a requested identifier (or a
    dependency link) does not name any known package.

    Attributes:
        message: Error message describing the unresolved identifier.
        identifier: The identifier that could not be resolved.
        available_packages: Optional list of known package identifiers.
        required_by: Optional identifier of the package that declared the
            missing dependency.
    """

    def __init__(
        self,
        message: str,
        identifier: str,
        available_packages: Optional[list[str]] = None,
        required_by: Optional[str] = None,
    ) -> None:
        """Initialize an UnresolvedPackageError.

        Args:
            message: Error message describing the unresolved identifier.
            identifier: The identifier that could not be resolved.
            available_packages: Optional list of known package identifiers.
            required_by: Optional identifier of the dependent package.
        """
        self.identifier = identifier
        self.available_packages = available_packages or []
        self.required_by = required_by

        # If available_packages are provided, build enhanced message
        if available_packages:
            message = self._build_message(message)

        super().__init__(message)

    def _build_message(self, base: str) -> str:
        """Build detailed error message with suggestions."""
        msg = [base]

        suggestions = difflib.get_close_matches(
            self.identifier, self.available_packages, n=3
        )
        if suggestions:
            msg.append("Did you mean:")
            for suggestion in suggestions:
                msg.append(f"  • {suggestion}")

        return "\n".join(msg)


class CyclicDependencyError(ResolutionError):
    """Exception raised when a dependency chain loops back on itself.

    Attributes:
        message: Error message describing the cycle.
        cycle: Identifiers along the cycle, starting and ending with the
            package that was revisited (e.g. ["a", "b", "a"]).
    """

    def __init__(self, cycle: list[str], message: Optional[str] = None) -> None:
        """Initialize a CyclicDependencyError.

        Args:
            cycle: Identifiers along the cycle.
            message: Optional override for the generated message.
        """
        self.cycle = list(cycle)
        if message is None:
            message = f"Cyclic dependency detected: {' -> '.join(self.cycle)}"
        super().__init__(message)


class ChainDepthExceededError(ResolutionError):
    """Exception raised when a chain is longer than the configured limit.

    Attributes:
        identifier: Package whose chain was being walked.
        max_depth: Configured maximum number of dependency hops.
    """

    def __init__(self, identifier: str, max_depth: int) -> None:
        """Initialize a ChainDepthExceededError.

        Args:
            identifier: Package whose chain was being walked.
            max_depth: Configured maximum number of dependency hops.
        """
        self.identifier = identifier
        self.max_depth = max_depth
        super().__init__(
            f"Dependency chain of '{identifier}' exceeds maximum depth "
            f"of {max_depth}"
        )


class DefinitionSyntaxError(ResolutionError):
    """Exception raised when a package definition cannot be parsed.

    Attributes:
        message: Error message describing the problem.
        line_number: 1-based line number of the offending definition.
        line: Raw text of the offending definition.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.line_number = line_number
        self.line = line

        if line_number is not None:
            message = f"Line {line_number}: {message}"
            if line is not None:
                message = f"{message}\n  {line.strip()}"

        super().__init__(message)
