#!/usr/bin/env python3
"""
Quick Start Script - Demonstrates chain-resolver core features

This script provides a quick demonstration of the main features
of chain-resolver v1.0.
"""

from chain_resolver import (
    CyclicDependencyError,
    DependencyResolver,
    DictPackageProvider,
    PackageGraph,
)


def main():
    print("=" * 60)
    print("Chain Resolver v1.0 - Quick Start Demo")
    print("=" * 60)
    print()

    definitions = """
    # web stack
    webapp: framework
    framework: http
    http: sockets
    sockets

    # tooling shares the http layer
    cli: http
    linter
    """

    provider = DictPackageProvider.from_definitions(definitions)
    resolver = DependencyResolver(provider)

    # Demo 1: Single chain
    print("=" * 60)
    print("Demo 1: Install order for one package")
    print("=" * 60)
    print(f"webapp -> {resolver.resolve_to_string(['webapp'])}")
    print()

    # Demo 2: Shared dependencies
    print("=" * 60)
    print("Demo 2: Several packages sharing dependencies")
    print("=" * 60)
    result = resolver.resolve(["linter", "cli", "webapp"])
    print(f"Order: {result.to_string()}")
    for chain in result.chains:
        print(f"  {chain.leaf}: {chain.to_string(use_ascii=True)}")
    print()

    # Demo 3: Graph statistics
    print("=" * 60)
    print("Demo 3: Dependency graph")
    print("=" * 60)
    graph = PackageGraph.from_packages(provider.registry.get_all_packages())
    for key, value in graph.get_statistics().items():
        print(f"  {key}: {value}")
    print()

    # Demo 4: Cycles are reported, not looped on
    print("=" * 60)
    print("Demo 4: Cycle detection")
    print("=" * 60)
    cyclic = DependencyResolver(DictPackageProvider({"a": "b", "b": "a"}))
    try:
        cyclic.resolve(["a"])
    except CyclicDependencyError as e:
        print(f"[ERROR] {e}")


if __name__ == "__main__":
    main()
