"""
Chain Resolver v1.0

Dependency-first install ordering for packages that declare at most one
direct dependency. Every requested package's chain is walked to its root,
the chains are flattened in request order, and each package is kept at the
position where it first appeared.

Example:
    >>> from chain_resolver import DependencyResolver, DictPackageProvider
    >>> provider = DictPackageProvider({"a": "b", "b": "c", "c": None})
    >>> DependencyResolver(provider).resolve_to_string(["a"])
    'c, b, a'
"""

from chain_resolver.version import __version__, __version_info__

__author__ = "Chain Resolver Contributors"

from chain_resolver.exceptions import (
    ChainDepthExceededError,
    CyclicDependencyError,
    DefinitionSyntaxError,
    ResolutionError,
    UnresolvedPackageError,
)
from chain_resolver.graph.package_graph import PackageGraph
from chain_resolver.models.chain import DependencyChain
from chain_resolver.models.config import ErrorMode, ResolverConfig
from chain_resolver.models.package import Package, PackageCollection
from chain_resolver.models.result import ResolutionResult
from chain_resolver.parser.definition_parser import DefinitionParser
from chain_resolver.provider.dict_provider import DictPackageProvider
from chain_resolver.provider.provider import PackageProvider
from chain_resolver.registry.package_registry import PackageRegistry
from chain_resolver.resolver.dependency_resolver import DependencyResolver
from chain_resolver.utils.warnings import ResolutionWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core resolver
    "DependencyResolver",
    # Configuration
    "ResolverConfig",
    "ErrorMode",
    # Results
    "ResolutionResult",
    "DependencyChain",
    "ResolutionWarning",
    "WarningCollector",
    # Data models
    "Package",
    "PackageCollection",
    # Registry
    "PackageRegistry",
    # Providers
    "PackageProvider",
    "DictPackageProvider",
    # Parser
    "DefinitionParser",
    # Graph
    "PackageGraph",
    # Exceptions
    "ResolutionError",
    "UnresolvedPackageError",
    "CyclicDependencyError",
    "ChainDepthExceededError",
    "DefinitionSyntaxError",
]
