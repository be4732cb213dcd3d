"""
Tests for data models.

This module contains tests for Package, PackageCollection, DependencyChain,
ResolutionResult and ResolverConfig.
"""

import json

import pytest

from chain_resolver import (
    CyclicDependencyError,
    DependencyChain,
    ErrorMode,
    Package,
    PackageCollection,
    ResolutionResult,
    ResolutionWarning,
    ResolverConfig,
    UnresolvedPackageError,
)


class TestPackage:
    """Tests for Package."""

    def test_create_root_package(self):
        """Test creating a package without dependency."""
        package = Package("runtime")

        assert package.identifier == "runtime"
        assert package.dependency is None
        assert not package.has_dependency

    def test_create_dependent_package(self):
        """Test creating a package with a dependency."""
        package = Package("app", dependency="runtime")

        assert package.has_dependency
        assert str(package) == "app"
        assert package.to_dict() == {"identifier": "app", "dependency": "runtime"}

    def test_empty_identifier(self):
        """Test an empty identifier is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Package("")

    def test_self_dependency(self):
        """Test a package cannot depend on itself."""
        with pytest.raises(CyclicDependencyError) as excinfo:
            Package("a", dependency="a")

        assert excinfo.value.cycle == ["a", "a"]

    def test_packages_are_immutable(self):
        """Test packages cannot be modified after creation."""
        package = Package("a")

        with pytest.raises(AttributeError):
            package.dependency = "b"

    def test_equality(self):
        """Test packages compare by identifier and dependency."""
        assert Package("a", "b") == Package("a", "b")
        assert Package("a", "b") != Package("a", "c")


class TestPackageCollection:
    """Tests for PackageCollection."""

    def test_request_preserves_order_and_duplicates(self):
        """Test requested packages keep input order including duplicates."""
        collection = PackageCollection()
        x = Package("x")
        y = Package("y")

        collection.request(x)
        collection.request(y)
        collection.request(x)

        assert [p.identifier for p in collection] == ["x", "y", "x"]
        assert len(collection) == 3
        assert sorted(collection.packages) == ["x", "y"]

    def test_dependency_of(self):
        """Test following a dependency link."""
        collection = PackageCollection()
        collection.add(Package("a", "b"))
        collection.add(Package("b"))

        assert collection.dependency_of(collection.get("a")) == Package("b")
        assert collection.dependency_of(collection.get("b")) is None

    def test_dependency_of_missing(self):
        """Test a dangling dependency link raises."""
        collection = PackageCollection()
        collection.add(Package("a", "b"))

        with pytest.raises(UnresolvedPackageError, match="unknown package 'b'"):
            collection.dependency_of(collection.get("a"))

    def test_to_dict(self):
        """Test collection export."""
        collection = PackageCollection()
        collection.request(Package("a", "b"))
        collection.add(Package("b"))

        data = collection.to_dict()

        assert data["requested"] == ["a"]
        assert data["packages"]["b"] == {"identifier": "b", "dependency": None}


class TestDependencyChain:
    """Tests for DependencyChain."""

    def setup_method(self):
        """Create test data."""
        self.chain = DependencyChain(
            packages=[Package("c"), Package("b", "c"), Package("a", "b")]
        )

    def test_properties(self):
        """Test root, leaf and depth."""
        assert self.chain.root.identifier == "c"
        assert self.chain.leaf.identifier == "a"
        assert self.chain.depth == 2
        assert len(self.chain) == 3

    def test_to_string(self):
        """Test human-readable rendering."""
        assert self.chain.to_string() == "c → b → a"
        assert self.chain.to_string(use_ascii=True) == "c -> b -> a"

    def test_empty_chain(self):
        """Test an empty chain."""
        chain = DependencyChain()

        assert chain.root is None
        assert chain.leaf is None
        assert chain.depth == 0
        assert chain.to_string() == "(empty chain)"

    def test_to_dict(self):
        """Test chain export."""
        assert self.chain.to_dict() == {
            "package": "a",
            "root": "c",
            "depth": 2,
            "chain": ["c", "b", "a"],
        }


class TestResolutionResult:
    """Tests for ResolutionResult."""

    def setup_method(self):
        """Create test data."""
        self.result = ResolutionResult(
            order=["b", "a", "d"],
            requested=["a", "d"],
            warnings=[ResolutionWarning("WARNING", "something", "a")],
        )

    def test_to_string(self):
        """Test delimited rendering."""
        assert self.result.to_string() == "b, a, d"
        assert self.result.to_string(" -> ") == "b -> a -> d"
        assert str(self.result) == "b, a, d"

    def test_container_protocol(self):
        """Test iteration, length and membership."""
        assert list(self.result) == ["b", "a", "d"]
        assert len(self.result) == 3
        assert "a" in self.result
        assert "z" not in self.result

    def test_position(self):
        """Test install positions."""
        assert self.result.position("b") == 0
        with pytest.raises(ValueError):
            self.result.position("z")

    def test_to_list_returns_copy(self):
        """Test to_list does not expose internal state."""
        order = self.result.to_list()
        order.append("z")

        assert "z" not in self.result

    def test_to_json(self):
        """Test JSON export."""
        data = json.loads(self.result.to_json())

        assert data["order"] == ["b", "a", "d"]
        assert data["requested"] == ["a", "d"]
        assert data["total_packages"] == 3
        assert data["warnings"][0]["context"] == "a"


class TestResolverConfig:
    """Tests for ResolverConfig and ErrorMode."""

    def test_defaults(self):
        """Test default configuration."""
        config = ResolverConfig()

        assert config.max_depth == 1000
        assert config.separator == ", "
        assert config.on_unknown_dependency == ErrorMode.FAIL
        assert config.on_duplicate_request == ErrorMode.IGNORE

    def test_error_mode_values(self):
        """Test ErrorMode values."""
        assert ErrorMode.values() == ["fail", "warn", "ignore"]

    def test_invalid_max_depth(self):
        """Test max_depth validation."""
        with pytest.raises(TypeError):
            ResolverConfig(max_depth="10")
        with pytest.raises(ValueError):
            ResolverConfig(max_depth=-1)

    def test_invalid_error_mode(self):
        """Test error mode validation."""
        with pytest.raises(TypeError):
            ResolverConfig(on_unknown_dependency="warn")
