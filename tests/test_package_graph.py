"""
Tests for the networkx package graph.
"""

import pydot
import pytest

from chain_resolver import (
    CyclicDependencyError,
    DependencyResolver,
    DictPackageProvider,
    Package,
    PackageGraph,
)


class TestPackageGraph:
    """Tests for PackageGraph."""

    def setup_method(self):
        """Create test data."""
        self.packages = [
            Package("app", "framework"),
            Package("framework", "runtime"),
            Package("plugin", "framework"),
            Package("runtime"),
        ]
        self.graph = PackageGraph.from_packages(self.packages)

    def test_nodes_and_edges(self):
        """Test graph structure."""
        assert self.graph.graph.number_of_nodes() == 4
        assert self.graph.graph.has_edge("runtime", "framework")
        assert self.graph.graph.has_edge("framework", "app")

    def test_get_dependencies(self):
        """Test transitive dependencies, nearest first."""
        assert self.graph.get_dependencies("app") == ["framework", "runtime"]
        assert self.graph.get_dependencies("runtime") == []
        assert self.graph.get_dependencies("nope") == []

    def test_get_dependents(self):
        """Test transitive dependents."""
        assert self.graph.get_dependents("runtime") == {"framework", "app", "plugin"}
        assert self.graph.get_dependents("app") == set()

    def test_install_order(self):
        """Test the graph yields a valid install order."""
        order = self.graph.install_order()

        assert self.graph.is_valid_order(order)
        assert order.index("runtime") < order.index("framework")

    def test_resolver_order_is_valid(self):
        """Test the resolver's order respects every dependency edge."""
        provider = DictPackageProvider.from_packages(self.packages)
        order = DependencyResolver(provider).resolve_to_list(["plugin", "app"])

        assert self.graph.is_valid_order(order)

    def test_invalid_order(self):
        """Test detecting a dependency placed after its dependent."""
        assert not self.graph.is_valid_order(["app", "framework"])

    def test_cycle(self):
        """Test cycle detection."""
        graph = PackageGraph.from_packages([Package("a", "b"), Package("b", "a")])

        assert graph.find_cycle() is not None
        with pytest.raises(CyclicDependencyError):
            graph.install_order()
        assert graph.get_dependencies("a") == ["b"]

    def test_no_cycle(self):
        """Test find_cycle on an acyclic graph."""
        assert self.graph.find_cycle() is None

    def test_from_collection_marks_requested(self):
        """Test requested packages are flagged."""
        provider = DictPackageProvider.from_packages(self.packages)
        graph = PackageGraph.from_collection(provider.build_collection(["app"]))

        nodes = {node["id"]: node for node in graph.to_dict()["nodes"]}
        assert nodes["app"]["requested"] is True
        assert nodes["runtime"]["requested"] is False
        assert "plugin" not in nodes

    def test_statistics(self):
        """Test graph statistics."""
        stats = self.graph.get_statistics()

        assert stats["total_packages"] == 4
        assert stats["total_dependencies"] == 3
        assert stats["root_packages"] == 1
        assert stats["leaf_packages"] == 2
        assert stats["longest_chain"] == 2

    def test_to_dict(self):
        """Test dictionary export."""
        data = self.graph.to_dict()

        assert {"dependency": "runtime", "dependent": "framework"} in data["edges"]

    def test_to_dot(self):
        """Test DOT export."""
        dot = self.graph.to_dot()

        assert "digraph" in dot
        assert "runtime -> framework;" in dot

    def test_to_dot_marks_requested(self):
        """Test requested packages are drawn as boxes."""
        provider = DictPackageProvider.from_packages(self.packages)
        graph = PackageGraph.from_collection(provider.build_collection(["app"]))

        dot = graph.to_dot()

        assert "app [shape=box];" in dot
        assert "runtime [shape=ellipse];" in dot

    def test_to_dot_escapes_quotes(self):
        """Test identifiers containing a double quote yield valid DOT."""
        provider = DictPackageProvider.from_definitions('a"b: c\nc')
        graph = PackageGraph.from_collection(provider.build_collection(['a"b']))

        dot = graph.to_dot()

        assert r'"a\"b"' in dot
        assert '"a"b"' not in dot
        assert len(pydot.graph_from_dot_data(dot)) == 1
