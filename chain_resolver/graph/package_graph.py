"""
Package graph for dependency resolution.

This module defines the PackageGraph class, which uses networkx to build a
directed graph of package dependencies for export, statistics, and order
verification.
"""

from __future__ import annotations

from typing import Any, Iterable

import networkx as nx
from networkx.drawing.nx_pydot import to_pydot

from chain_resolver.exceptions import CyclicDependencyError
from chain_resolver.models.package import Package, PackageCollection


class PackageGraph:
    """Directed graph of package dependencies.

    Edges point from a dependency to the package that needs it, so any
    topological order of the graph is a valid install order.

    Attributes:
        graph: networkx DiGraph object representing the dependencies.

    Example:
        >>> graph = PackageGraph.from_packages([Package("a", "b"), Package("b")])
        >>> graph.get_dependencies("a")
        ['b']
        >>> graph.is_valid_order(["b", "a"])
        True
    """

    def __init__(self) -> None:
        """Initialize a PackageGraph."""
        self.graph = nx.DiGraph()

    @classmethod
    def from_packages(cls, packages: Iterable[Package]) -> PackageGraph:
        """Build a graph from package definitions."""
        package_graph = cls()
        for package in packages:
            package_graph.add_package(package)
        return package_graph

    @classmethod
    def from_collection(cls, collection: PackageCollection) -> PackageGraph:
        """Build a graph from every package in a collection arena."""
        package_graph = cls.from_packages(collection.packages.values())
        for package in collection.requested:
            package_graph.graph.nodes[package.identifier]["requested"] = True
        return package_graph

    def add_package(self, package: Package) -> None:
        """Add a package and its dependency edge to the graph.

        Args:
            package: Package to add.
        """
        self.graph.add_node(package.identifier, requested=False)

        if package.dependency is not None:
            if package.dependency not in self.graph:
                self.graph.add_node(package.dependency, requested=False)
            self.graph.add_edge(package.dependency, package.identifier)

    def get_dependencies(self, identifier: str) -> list[str]:
        """Get all transitive dependencies of a package, nearest first.

        Args:
            identifier: Package identifier.

        Returns:
            Dependency identifiers, direct dependency first.
        """
        if identifier not in self.graph:
            return []

        dependencies: list[str] = []
        current = identifier
        while True:
            predecessors = list(self.graph.predecessors(current))
            if not predecessors or predecessors[0] in dependencies:
                return dependencies
            current = predecessors[0]
            if current == identifier:
                return dependencies
            dependencies.append(current)

    def get_dependents(self, identifier: str) -> set[str]:
        """Get every package that depends on this one, directly or not.

        Args:
            identifier: Package identifier.

        Returns:
            Set of dependent identifiers.
        """
        if identifier not in self.graph:
            return set()

        # Use networkx descendants query
        return set(nx.descendants(self.graph, identifier))

    def find_cycle(self) -> list[str] | None:
        """Return a dependency cycle, if the graph has one.

        Returns:
            Identifiers along the cycle (first repeated at the end), or None.
        """
        try:
            edges = nx.find_cycle(self.graph)
        except nx.NetworkXNoCycle:
            return None

        cycle = [u for u, _ in edges]
        cycle.append(cycle[0])
        return cycle

    def install_order(self) -> list[str]:
        """Return an install order for every package in the graph.

        Raises:
            CyclicDependencyError: If the graph contains a cycle.
        """
        try:
            return list(nx.topological_sort(self.graph))
        except nx.NetworkXUnfeasible as e:
            raise CyclicDependencyError(self.find_cycle() or []) from e

    def is_valid_order(self, order: list[str]) -> bool:
        """Check that every dependency in the graph precedes its dependent.

        Only edges whose two ends both appear in order are checked.

        Args:
            order: Install order to verify.

        Returns:
            True if no dependency is placed after a package that needs it.
        """
        positions = {identifier: i for i, identifier in enumerate(order)}
        for dependency, dependent in self.graph.edges():
            if dependency in positions and dependent in positions:
                if positions[dependency] > positions[dependent]:
                    return False
        return True

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Export graph to dictionary format.

        Returns:
            Dictionary containing nodes and edges.
        """
        return {
            "nodes": [
                {"id": node, "requested": data.get("requested", False)}
                for node, data in self.graph.nodes(data=True)
            ],
            "edges": [
                {"dependency": u, "dependent": v}
                for u, v in self.graph.edges()
            ],
        }

    def get_statistics(self) -> dict[str, int]:
        """Get graph statistics.

        Returns:
            Dictionary with package, edge, root and chain-length counts.
        """
        roots = [n for n in self.graph.nodes() if self.graph.in_degree(n) == 0]
        leaves = [n for n in self.graph.nodes() if self.graph.out_degree(n) == 0]

        longest_chain = 0
        if nx.is_directed_acyclic_graph(self.graph) and self.graph:
            longest_chain = nx.dag_longest_path_length(self.graph)

        return {
            "total_packages": self.graph.number_of_nodes(),
            "total_dependencies": self.graph.number_of_edges(),
            "root_packages": len(roots),
            "leaf_packages": len(leaves),
            "longest_chain": longest_chain,
        }

    def to_dot(self) -> str:
        """Export graph to Graphviz DOT format.

        Requested packages are drawn as boxes, everything else as ellipses.
        Identifiers that are not plain DOT IDs are quoted and escaped by
        pydot.

        Returns:
            DOT format string.
        """
        display = nx.DiGraph(name="packages")
        for node, data in self.graph.nodes(data=True):
            display.add_node(node, shape="box" if data.get("requested") else "ellipse")
        display.add_edges_from(self.graph.edges())

        return to_pydot(display).to_string()
