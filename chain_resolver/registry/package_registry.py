"""
Package registry for managing package definitions.

This module defines the PackageRegistry class, which stores every known
package definition keyed by identifier. Packages refer to their dependency
by identifier, so the registry is the single owner of package objects.
"""

import logging
import warnings
from dataclasses import replace as dataclass_replace
from typing import Any, Dict, List, Optional

from chain_resolver.exceptions import ResolutionError
from chain_resolver.models.package import Package

logger = logging.getLogger(__name__)


class PackageRegistry:
    """Package registry: owns all package definitions.

    Responsibilities:
    1. Register package definitions
    2. Query packages by identifier
    3. Answer reverse lookups (which packages depend on X)

    Definition order is preserved, so iterating the registry yields packages
    in the order they were registered.

    Usage:
        registry = PackageRegistry()
        registry.register_package(Package("a", dependency="b"))
        registry.register_root("b")

        pkg = registry.get_package("a")
        if registry.has_package("b"):
            ...
    """

    def __init__(self) -> None:
        """Initialize a PackageRegistry."""
        self.packages: Dict[str, Package] = {}

    def register_package(self, package: Package, replace: bool = False) -> None:
        """Register a package definition.

        Registering an identical definition twice is a no-op.
        Surrounding whitespace is removed from the identifiers before the
        package is stored; lookups afterwards are exact.

        Args:
            package: Package definition.
            replace: Allow overwriting an existing, different definition.

        Raises:
            ResolutionError: If the package is already defined with a
                different dependency and replace is False.
        """
        identifier = self._normalize_identifier(package.identifier)
        dependency = (
            self._normalize_identifier(package.dependency)
            if package.dependency is not None
            else None
        )
        if (identifier, dependency) != (package.identifier, package.dependency):
            package = dataclass_replace(package, identifier=identifier, dependency=dependency)
        existing = self.packages.get(identifier)

        if existing is not None and existing != package:
            if not replace:
                raise ResolutionError(
                    f"Package '{identifier}' is already defined with "
                    f"dependency '{existing.dependency}'; cannot redefine it "
                    f"with dependency '{package.dependency}'."
                )
            warnings.warn(
                f"Package '{identifier}' is being redefined. Dependency "
                f"'{existing.dependency}' is replaced by '{package.dependency}'.",
                UserWarning,
            )

        self.packages[identifier] = package
        logger.debug("Registered package %s -> %s", identifier, package.dependency)

    def register_root(self, identifier: str) -> Package:
        """Register a package with no dependency, unless already defined.

        Args:
            identifier: Package identifier.

        Returns:
            The registered (or already existing) Package.
        """
        identifier = self._normalize_identifier(identifier)
        existing = self.packages.get(identifier)
        if existing is not None:
            return existing

        package = Package(identifier)
        self.packages[identifier] = package
        return package

    def get_package(self, identifier: str) -> Optional[Package]:
        """Get package definition.

        Args:
            identifier: Package identifier.

        Returns:
            Package or None if not found.
        """
        return self.packages.get(identifier)

    def has_package(self, identifier: str) -> bool:
        """Check if a package is defined."""
        return identifier in self.packages

    def get_all_packages(self) -> List[Package]:
        """Get all package definitions in registration order."""
        return list(self.packages.values())

    def get_root_packages(self) -> List[Package]:
        """Get all packages that have no dependency."""
        return [p for p in self.packages.values() if not p.has_dependency]

    def get_dependents(self, identifier: str) -> List[Package]:
        """Get packages that depend directly on the given package.

        Args:
            identifier: Package identifier.

        Returns:
            List of dependent packages in registration order.
        """
        return [p for p in self.packages.values() if p.dependency == identifier]

    def get_missing_dependencies(self) -> List[str]:
        """Get dependency identifiers that are referenced but not defined."""
        missing: List[str] = []
        for package in self.packages.values():
            dependency = package.dependency
            if (
                dependency is not None
                and dependency not in self.packages
                and dependency not in missing
            ):
                missing.append(dependency)
        return missing

    def identifiers(self) -> List[str]:
        """Get all package identifiers in registration order."""
        return list(self.packages.keys())

    def remove_package(self, identifier: str) -> bool:
        """Remove a package from the registry.

        Args:
            identifier: Package identifier.

        Returns:
            bool: Whether the package was removed.
        """
        if identifier in self.packages:
            del self.packages[identifier]
            return True
        return False

    def reset(self) -> None:
        """Remove every package definition."""
        self.packages.clear()

    def _normalize_identifier(self, identifier: str) -> str:
        """Normalize an identifier (remove surrounding whitespace).

        Identifiers are case-sensitive.
        """
        return identifier.strip()

    def to_dict(self) -> Dict[str, Any]:
        """Export to dictionary (for serialization).

        Returns:
            Mapping of identifier to dependency identifier (or None).
        """
        return {name: pkg.dependency for name, pkg in self.packages.items()}

    def __len__(self) -> int:
        return len(self.packages)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.has_package(identifier)
