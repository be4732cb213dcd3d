"""
Dependency resolver for single-dependency package chains.

This module defines the DependencyResolver class, which turns a list of
requested packages into one deduplicated, dependency-first install order.
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional, Set

from chain_resolver.exceptions import (
    ChainDepthExceededError,
    CyclicDependencyError,
    ResolutionError,
)
from chain_resolver.models.chain import DependencyChain
from chain_resolver.models.config import ErrorMode, ResolverConfig
from chain_resolver.models.package import Package, PackageCollection
from chain_resolver.models.result import ResolutionResult
from chain_resolver.provider.provider import PackageProvider
from chain_resolver.utils.ordering import dedupe_preserving_order
from chain_resolver.utils.warnings import WarningCollector

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Dependency-first install order resolver.

    Responsibilities:
    1. Gather the chain of each requested package (gather_chain)
    2. Flatten all chains in request order
    3. Keep the first occurrence of every package (resolve)

    Core algorithm: iterative chain walk + visited-set cycle detection

    A shared dependency takes the position of the first chain that reaches
    it; later chains do not move it. For requests [a, d] where a → b and
    d → b the order is b, a, d.

    Usage:
        provider = DictPackageProvider({"a": "b", "b": "c", "c": None})
        resolver = DependencyResolver(provider)

        resolver.resolve_to_string(["a"])   # 'c, b, a'

        result = resolver.resolve(["a"])
        for chain in result.chains:
            print(chain.to_string())
    """

    def __init__(
        self,
        provider: PackageProvider,
        config: Optional[ResolverConfig] = None,
    ) -> None:
        """Initialize a DependencyResolver.

        Args:
            provider: PackageProvider that builds Package objects.
            config: Optional ResolverConfig. Defaults to the provider's
                config if it has one, else ResolverConfig().
        """
        self.provider = provider
        self.config = config or getattr(provider, "config", None) or ResolverConfig()

    def resolve(self, identifiers: Iterable[str]) -> ResolutionResult:
        """Resolve requested packages into an install order.

        Steps:
        1. Build the package collection for the identifiers (input order)
        2. Gather the chain of every requested package
        3. Concatenate the chains in input order
        4. Keep the first occurrence of each identifier

        Args:
            identifiers: Requested package identifiers. May be empty.

        Returns:
            ResolutionResult whose order lists every reachable package
            exactly once, dependencies before dependents.

        Raises:
            UnresolvedPackageError: If an identifier cannot be resolved.
            CyclicDependencyError: If a dependency chain loops.
            ChainDepthExceededError: If a chain exceeds config.max_depth.
            ResolutionError: If duplicates are requested and
                on_duplicate_request is FAIL.
        """
        identifiers = list(identifiers)
        collector = WarningCollector()

        collection = self.provider.build_collection(identifiers, config=self.config)
        collector.extend(collection.warnings)
        self._check_duplicates(collection, collector)

        chains: List[DependencyChain] = []
        flattened: List[Package] = []
        for package in collection:
            chain = self.gather_chain(package, collection)
            chains.append(chain)
            flattened.extend(chain.packages)

        order = [
            package.identifier
            for package in dedupe_preserving_order(
                flattened, key=lambda p: p.identifier
            )
        ]

        logger.debug(
            "Resolved %d requested package(s) into %d install step(s)",
            len(collection.requested),
            len(order),
        )

        return ResolutionResult(
            order=order,
            requested=[p.identifier for p in collection.requested],
            chains=chains,
            warnings=collector.get_all(),
            separator=self.config.separator,
        )

    def resolve_to_string(
        self, identifiers: Iterable[str], separator: Optional[str] = None
    ) -> str:
        """Resolve and render the install order as a delimited string.

        Example:
            >>> resolver.resolve_to_string(["a"])
            'c, b, a'
        """
        return self.resolve(identifiers).to_string(separator)

    def resolve_to_list(self, identifiers: Iterable[str]) -> List[str]:
        """Resolve and return the install order as a list of identifiers."""
        return self.resolve(identifiers).to_list()

    def gather_chain(
        self,
        package: Package,
        collection: PackageCollection,
        accumulator: Optional[List[Package]] = None,
    ) -> DependencyChain:
        """Gather the chain of a single package, root first.

        Follows dependency links from package until a package with no
        dependency is reached, prepending each one, so the deepest
        dependency comes first and package comes last.

        Args:
            package: Package whose chain should be gathered.
            collection: Collection used to follow dependency links.
            accumulator: Optional packages that should follow the chain.
                The list passed in is not modified.

        Returns:
            DependencyChain ordered root → package (→ accumulator).

        Raises:
            CyclicDependencyError: If a package is reached twice.
            ChainDepthExceededError: If the chain exceeds config.max_depth.
            UnresolvedPackageError: If a dependency link is dangling.
        """
        walked: List[Package] = []
        visited: Set[str] = set()
        current: Optional[Package] = package

        while current is not None:
            if current.identifier in visited:
                cycle = [p.identifier for p in walked]
                start = cycle.index(current.identifier)
                raise CyclicDependencyError(
                    cycle[start:] + [current.identifier]
                )
            if len(walked) > self.config.max_depth:
                raise ChainDepthExceededError(
                    package.identifier, self.config.max_depth
                )

            visited.add(current.identifier)
            walked.append(current)
            current = collection.dependency_of(current)

        walked.reverse()
        chain = DependencyChain(
            packages=walked + list(accumulator or []), package=package
        )
        logger.debug("Chain for %s: %s", package.identifier, chain.to_string(True))
        return chain

    def _check_duplicates(
        self, collection: PackageCollection, collector: WarningCollector
    ) -> None:
        mode = self.config.on_duplicate_request
        if mode == ErrorMode.IGNORE:
            return

        counts = Counter(p.identifier for p in collection.requested)
        duplicates = [(name, n) for name, n in counts.items() if n > 1]
        if not duplicates:
            return

        if mode == ErrorMode.FAIL:
            names = ", ".join(name for name, _ in duplicates)
            raise ResolutionError(f"Packages requested more than once: {names}")

        for name, count in duplicates:
            collector.add_duplicate_request_warning(name, count)
