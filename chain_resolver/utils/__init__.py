"""
Utility functions and helpers for dependency resolution.

This package contains helper classes that support the resolver, such as
warning collection and order-preserving deduplication.
"""

from chain_resolver.utils.ordering import dedupe_preserving_order
from chain_resolver.utils.warnings import (
    ResolutionWarning,
    WarningCollector,
)

__all__ = [
    "dedupe_preserving_order",
    "ResolutionWarning",
    "WarningCollector",
]
