"""
Package model.

This module defines the Package class, a named unit with at most one direct
dependency, and the PackageCollection class, which holds the packages built
for a single resolution request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from chain_resolver.exceptions import CyclicDependencyError, UnresolvedPackageError
from chain_resolver.utils.warnings import ResolutionWarning


@dataclass(frozen=True)
class Package:
    """A named package with at most one direct dependency.

    The dependency is stored as the identifier of another package rather
    than an object reference; it is looked up through the PackageCollection
    that owns both packages.

    Attributes:
        identifier: Unique package name.
        dependency: Identifier of the package this one depends on, or None.

    Example:
        >>> pkg = Package("a", dependency="b")
        >>> pkg.has_dependency
        True
        >>> str(pkg)
        'a'
    """

    identifier: str
    dependency: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate identifier and dependency."""
        if not self.identifier:
            raise ValueError("package identifier cannot be empty")
        if self.dependency == "":
            raise ValueError("dependency identifier cannot be empty")
        if self.dependency == self.identifier:
            raise CyclicDependencyError([self.identifier, self.identifier])

    @property
    def has_dependency(self) -> bool:
        """Whether this package declares a dependency."""
        return self.dependency is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation of the Package.
        """
        return {"identifier": self.identifier, "dependency": self.dependency}

    def __str__(self) -> str:
        return self.identifier


@dataclass
class PackageCollection:
    """Packages built by a provider for one resolution request.

    Attributes:
        requested: One package per requested identifier, in request order
            (duplicates preserved).
        packages: Arena of every package reachable from the requested ones,
            keyed by identifier.
        warnings: Non-fatal issues the provider hit while building.
    """

    requested: List[Package] = field(default_factory=list)
    packages: Dict[str, Package] = field(default_factory=dict)
    warnings: List[ResolutionWarning] = field(default_factory=list)

    def add(self, package: Package) -> None:
        """Add a package to the arena (without requesting it)."""
        self.packages.setdefault(package.identifier, package)

    def request(self, package: Package) -> None:
        """Append a package to the requested list and the arena."""
        self.add(package)
        self.requested.append(package)

    def get(self, identifier: str) -> Optional[Package]:
        """Get a package by identifier.

        Args:
            identifier: Package identifier.

        Returns:
            Package or None if not in the collection.
        """
        return self.packages.get(identifier)

    def dependency_of(self, package: Package) -> Optional[Package]:
        """Follow a package's dependency link.

        Args:
            package: Package whose dependency should be returned.

        Returns:
            The dependency Package, or None if the package has no dependency.

        Raises:
            UnresolvedPackageError: If the dependency is not in the collection.
        """
        if package.dependency is None:
            return None

        dependency = self.packages.get(package.dependency)
        if dependency is None:
            raise UnresolvedPackageError(
                f"Package '{package.identifier}' depends on unknown "
                f"package '{package.dependency}'",
                identifier=package.dependency,
                available_packages=sorted(self.packages),
                required_by=package.identifier,
            )
        return dependency

    def __iter__(self) -> Iterator[Package]:
        return iter(self.requested)

    def __len__(self) -> int:
        return len(self.requested)

    def to_dict(self) -> Dict[str, Any]:
        """Export to dictionary (for serialization)."""
        return {
            "requested": [p.identifier for p in self.requested],
            "packages": {
                name: pkg.to_dict() for name, pkg in self.packages.items()
            },
        }
