"""
Dictionary-based package provider implementation.

This module defines the DictPackageProvider class, which implements the
PackageProvider interface on top of an in-memory PackageRegistry. This is
useful for tests, for the CLI, and whenever package definitions are available
as a simple mapping or definitions file.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from chain_resolver.exceptions import UnresolvedPackageError
from chain_resolver.models.config import ErrorMode, ResolverConfig
from chain_resolver.models.package import Package, PackageCollection
from chain_resolver.parser.definition_parser import DefinitionParser
from chain_resolver.provider.provider import PackageProvider
from chain_resolver.registry.package_registry import PackageRegistry
from chain_resolver.utils.warnings import WarningCollector

logger = logging.getLogger(__name__)


class DictPackageProvider(PackageProvider):
    """Package provider that reads package definitions from a mapping.

    The mapping sends each package identifier to the identifier of its
    single dependency, or None when it has no dependency.

    Attributes:
        registry: PackageRegistry holding every defined package.
        config: ResolverConfig controlling identifier handling and what
            happens when a package depends on an undefined package.

    Example:
        >>> provider = DictPackageProvider({"a": "b", "b": "c", "c": None})
        >>> collection = provider.build_collection(["a"])
        >>> sorted(collection.packages)
        ['a', 'b', 'c']
    """

    def __init__(
        self,
        definitions: Optional[Dict[str, Optional[str]]] = None,
        config: Optional[ResolverConfig] = None,
    ) -> None:
        """Initialize a DictPackageProvider.

        Args:
            definitions: Mapping of package identifier to dependency
                identifier (or None).
            config: Optional ResolverConfig. Defaults to ResolverConfig().

        Raises:
            TypeError: If definitions is not a dictionary.
        """
        if definitions is not None and not isinstance(definitions, dict):
            raise TypeError("definitions must be a dictionary")

        self.config = config or ResolverConfig()
        self.registry = PackageRegistry()

        if definitions:
            for package in DefinitionParser().parse_mapping(definitions):
                self.registry.register_package(package)

    @classmethod
    def from_packages(
        cls, packages: Iterable[Package], config: Optional[ResolverConfig] = None
    ) -> "DictPackageProvider":
        """Create a provider from already-built Package objects."""
        provider = cls(config=config)
        for package in packages:
            provider.registry.register_package(package)
        return provider

    @classmethod
    def from_definitions(
        cls, text: str, config: Optional[ResolverConfig] = None
    ) -> "DictPackageProvider":
        """Create a provider from text definitions ("a: b" per line)."""
        return cls.from_packages(DefinitionParser().parse(text), config=config)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], config: Optional[ResolverConfig] = None
    ) -> "DictPackageProvider":
        """Create a provider from a text or JSON definitions file."""
        return cls.from_packages(DefinitionParser().parse_file(path), config=config)

    def get_package(self, identifier: str) -> Optional[Package]:
        """Return the package with the given identifier, or None."""
        if not identifier:
            return None
        return self.registry.get_package(identifier)

    def identifiers(self) -> List[str]:
        """Return all defined identifiers in definition order."""
        return self.registry.identifiers()

    def build_collection(
        self,
        identifiers: Iterable[str],
        config: Optional[ResolverConfig] = None,
    ) -> PackageCollection:
        """Build the package collection for a resolution request.

        Each requested package is looked up, then its dependency links are
        followed until a package with no dependency is reached or a package
        already in the collection is met.

        Args:
            identifiers: Requested package identifiers, in order.
            config: ResolverConfig for this request, usually the resolver's.
                Defaults to the provider's own config.

        Returns:
            PackageCollection with one requested package per identifier.

        Raises:
            UnresolvedPackageError: If a requested identifier is not defined,
                or if a dependency is not defined and on_unknown_dependency
                is FAIL.
        """
        config = config or self.config
        collection = PackageCollection()
        collector = WarningCollector()

        for raw_identifier in identifiers:
            identifier = (
                raw_identifier.strip()
                if config.strip_identifiers
                else raw_identifier
            )
            package = self.get_package(identifier)
            if package is None:
                raise UnresolvedPackageError(
                    f"Package '{identifier}' not found",
                    identifier=identifier,
                    available_packages=self.registry.identifiers(),
                )

            collection.request(package)
            self._wire_dependencies(package, collection, config, collector)

        collection.warnings = collector.get_all()
        logger.debug(
            "Built collection: %d requested, %d total packages",
            len(collection.requested),
            len(collection.packages),
        )
        return collection

    def _wire_dependencies(
        self,
        package: Package,
        collection: PackageCollection,
        config: ResolverConfig,
        collector: WarningCollector,
    ) -> None:
        """Add every package reachable from package to the collection."""
        current = package
        while current.dependency is not None:
            if current.dependency in collection.packages:
                # Already wired (or a cycle, reported by the resolver)
                return

            dependency = self.registry.get_package(current.dependency)
            if dependency is None:
                dependency = self._handle_unknown_dependency(
                    current, config.on_unknown_dependency, collector
                )

            collection.add(dependency)
            current = dependency

    def _handle_unknown_dependency(
        self, package: Package, mode: ErrorMode, collector: WarningCollector
    ) -> Package:
        missing = package.dependency

        if mode == ErrorMode.FAIL:
            raise UnresolvedPackageError(
                f"Package '{package.identifier}' depends on unknown "
                f"package '{missing}'",
                identifier=missing,
                available_packages=self.registry.identifiers(),
                required_by=package.identifier,
            )

        if mode == ErrorMode.WARN:
            collector.add_unknown_dependency_warning(package.identifier, missing)
        logger.debug("Treating unknown dependency %s as a root package", missing)
        return Package(missing)
