"""
Resolver module for dependency resolution.

This module provides the resolver that turns requested packages into a
deduplicated, dependency-first install order.
"""

from chain_resolver.resolver.dependency_resolver import DependencyResolver

__all__ = ["DependencyResolver"]
