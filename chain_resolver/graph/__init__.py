"""
Package graph module.

This package contains the networkx-backed PackageGraph used for exporting,
verifying and summarizing package dependencies.
"""

from chain_resolver.graph.package_graph import PackageGraph

__all__ = [
    "PackageGraph",
]
