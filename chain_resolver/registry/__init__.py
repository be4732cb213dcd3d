"""
Registry module for dependency resolution.

This module provides the registry class that owns package definitions and
answers lookups by identifier.
"""

from chain_resolver.registry.package_registry import PackageRegistry

__all__ = ["PackageRegistry"]
