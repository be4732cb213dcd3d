"""
Data models for dependency resolution.

This package contains the core data structures used by the resolver:
packages, chains, configuration, and results.
"""

from chain_resolver.models.chain import DependencyChain
from chain_resolver.models.config import ErrorMode, ResolverConfig
from chain_resolver.models.package import Package, PackageCollection
from chain_resolver.models.result import ResolutionResult

__all__ = [
    "DependencyChain",
    "ErrorMode",
    "Package",
    "PackageCollection",
    "ResolutionResult",
    "ResolverConfig",
]
