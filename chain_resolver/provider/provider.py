"""
Abstract package provider interface.

This module defines the PackageProvider abstract base class. A provider turns
requested package identifiers into Package objects whose dependency links are
wired through a PackageCollection. Implementations can read package
information from any source (in-memory mappings, files, registries, etc.).
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from chain_resolver.models.config import ResolverConfig
from chain_resolver.models.package import Package, PackageCollection


class PackageProvider(ABC):
    """Abstract interface for package providers.

    The resolver only consumes build_collection(), passing its own
    ResolverConfig; the remaining methods support lookups from callers such
    as the CLI.

    Contract for build_collection():
    - exactly one Package per requested identifier, in the same order
    - every package reachable through dependency links is present in the
      collection arena
    - an unresolvable identifier raises UnresolvedPackageError; a partial
      collection is never returned

    Example:
        >>> class StaticProvider(PackageProvider):
        ...     def get_package(self, identifier):
        ...         return Package(identifier)
        ...     def build_collection(self, identifiers, config=None):
        ...         collection = PackageCollection()
        ...         for identifier in identifiers:
        ...             collection.request(self.get_package(identifier))
        ...         return collection
    """

    @abstractmethod
    def build_collection(
        self,
        identifiers: Iterable[str],
        config: Optional[ResolverConfig] = None,
    ) -> PackageCollection:
        """Build the package collection for a resolution request.

        Args:
            identifiers: Requested package identifiers, in order. May be
                empty and may contain duplicates.
            config: ResolverConfig for this request. Implementations fall
                back to their own configuration when it is None.

        Returns:
            PackageCollection with one requested package per identifier.

        Raises:
            UnresolvedPackageError: If an identifier cannot be resolved.
        """

    @abstractmethod
    def get_package(self, identifier: str) -> Optional[Package]:
        """Return the package with the given identifier.

        Args:
            identifier: Package identifier.

        Returns:
            Package, or None if the provider does not know it.
        """

    def has_package(self, identifier: str) -> bool:
        """Check if the provider knows a package.

        Args:
            identifier: Package identifier.

        Returns:
            True if get_package() returns a package, False otherwise.
        """
        return self.get_package(identifier) is not None
