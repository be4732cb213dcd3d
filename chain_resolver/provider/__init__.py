"""
Package provider interfaces and implementations.

This package contains the abstract interface the resolver uses to obtain
Package objects, and a concrete in-memory implementation.
"""

from chain_resolver.provider.dict_provider import DictPackageProvider
from chain_resolver.provider.provider import PackageProvider

__all__ = [
    "DictPackageProvider",
    "PackageProvider",
]
