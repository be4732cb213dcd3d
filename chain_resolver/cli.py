"""
Command-line interface for chain resolver v1.0.

This module provides a command-line interface for the resolver, allowing
users to compute a dependency-first install order from a package definitions
file.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from colorama import Fore, Style, init
from tabulate import tabulate

from chain_resolver import (
    DependencyResolver,
    DictPackageProvider,
    ErrorMode,
    PackageGraph,
    ResolverConfig,
)
from chain_resolver.exceptions import ResolutionError

LOG_FORMAT = "[%(levelname)s] %(message)s"
MACHINE_FORMATS = ("list", "json", "graph")

init(autoreset=True)
HAS_COLOR = True
QUIET = False

logger = logging.getLogger(__name__)


def print_success(msg: str) -> None:
    """Print success message."""
    if QUIET:
        return
    if HAS_COLOR:
        print(f"{Fore.GREEN}✓ {msg}{Style.RESET_ALL}")
    else:
        print(f"[OK] {msg}")


def print_error(msg: str) -> None:
    """Print error message."""
    if HAS_COLOR:
        print(f"{Fore.RED}✗ {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[ERROR] {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    if HAS_COLOR:
        print(f"{Fore.YELLOW}⚠ {msg}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(f"[WARN] {msg}", file=sys.stderr)


def print_info(msg: str) -> None:
    """Print info message."""
    if QUIET:
        return
    if HAS_COLOR:
        print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}")
    else:
        print(msg)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chain-resolver",
        description="Dependency-first install order resolver - v1.0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Definitions file (one package per line):
  a: b      # a depends on b
  b: c
  c         # no dependency

Examples:
  # Resolve every defined package
  %(prog)s packages.txt

  # Resolve selected packages only
  %(prog)s packages.txt -p a -p d

  # Plain comma-separated order, for scripts
  %(prog)s packages.txt -p a --format list

  # Export the result and graph as JSON
  %(prog)s packages.json --export order.json
        """,
    )

    # === Input parameters ===
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument(
        "definitions", help="Package definitions file (text or .json)"
    )
    input_group.add_argument(
        "--package",
        "-p",
        dest="packages",
        action="append",
        metavar="NAME",
        help="Package to resolve (repeatable; default: all defined packages)",
    )

    # === Output parameters ===
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["pretty", "list", "json", "table", "graph"],
        default="pretty",
        help="Output format (default: pretty)",
    )
    output_group.add_argument(
        "--chains",
        action="store_true",
        help="Show the dependency chain of each requested package",
    )
    output_group.add_argument(
        "--separator",
        default=", ",
        help="Separator for the list format (default: ', ')",
    )
    output_group.add_argument(
        "--export", "-o", metavar="FILE", help="Export result and graph to JSON file"
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )

    # === Configuration parameters ===
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a package depends on an undefined package",
    )
    config_group.add_argument(
        "--no-warnings", action="store_true", help="Suppress warnings"
    )
    config_group.add_argument(
        "--max-depth",
        type=int,
        default=1000,
        help="Maximum dependency chain length (default: 1000)",
    )
    config_group.add_argument(
        "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        chain-resolver packages.txt
        chain-resolver packages.txt -p a -p d
        chain-resolver packages.txt --format list
        chain-resolver packages.txt --format table --chains
        chain-resolver packages.txt --export order.json
    """
    global HAS_COLOR, QUIET

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_depth < 0:
        parser.error("--max-depth cannot be negative")

    logging.basicConfig(level=getattr(logging, args.loglevel), format=LOG_FORMAT)

    HAS_COLOR = not args.no_color
    QUIET = args.format in MACHINE_FORMATS

    try:
        # 1. Read definitions
        definitions = Path(args.definitions)
        if not definitions.exists():
            print_error(f"File not found: {args.definitions}")
            sys.exit(1)

        config = ResolverConfig(
            max_depth=args.max_depth,
            separator=args.separator,
            on_unknown_dependency=(
                ErrorMode.FAIL if args.strict else ErrorMode.WARN
            ),
            on_duplicate_request=ErrorMode.WARN,
        )

        print_info(f"Reading package definitions from: {definitions}")
        provider = DictPackageProvider.from_file(definitions, config=config)
        logger.info("Loaded %d package definition(s)", len(provider.registry))

        # 2. Resolve
        requested = args.packages or provider.identifiers()
        resolver = DependencyResolver(provider, config=config)
        result = resolver.resolve(requested)

        print_success(
            f"Resolved {len(result.requested)} package(s) into "
            f"{len(result)} install step(s)."
        )

        # 3. Output
        if args.format == "list":
            print(result.to_string())
        elif args.format == "json":
            print(result.to_json(indent=2))
        elif args.format == "graph":
            graph = PackageGraph.from_collection(provider.build_collection(requested))
            print(graph.to_dot())
        elif args.format == "table":
            handle_table(result, provider)
        else:
            handle_pretty(result, provider)

        if args.chains and args.format not in MACHINE_FORMATS:
            handle_chains(result)

        # 4. Export (if needed)
        if args.export:
            handle_export(result, provider, requested, args.export)

        # 5. Show warnings (if any)
        if not args.no_warnings:
            show_warnings(result)

    except ResolutionError as e:
        print_error(f"Resolution failed: {e}")
        sys.exit(1)
    except OSError as e:
        print_error(f"I/O error: {e}")
        sys.exit(1)


def handle_pretty(result, provider) -> None:
    """Show the install order as a numbered list."""
    print_info("\nInstall order:\n")

    if not result.order:
        print("  (nothing to install)")
        return

    width = len(str(len(result.order)))
    for position, identifier in enumerate(result.order, 1):
        package = provider.get_package(identifier)
        dependency = package.dependency if package else None
        suffix = f"  (needs {dependency})" if dependency else ""
        if HAS_COLOR and identifier in result.requested:
            print(f"  {position:>{width}}. {Fore.GREEN}{identifier}{Style.RESET_ALL}{suffix}")
        else:
            print(f"  {position:>{width}}. {identifier}{suffix}")


def handle_table(result, provider) -> None:
    """Show the install order as a table."""
    rows = []
    for position, identifier in enumerate(result.order, 1):
        package = provider.get_package(identifier)
        rows.append(
            [
                position,
                identifier,
                (package.dependency if package else None) or "-",
                "yes" if identifier in result.requested else "",
            ]
        )

    print(
        tabulate(
            rows,
            headers=["#", "Package", "Depends on", "Requested"],
            tablefmt="simple",
        )
    )


def handle_chains(result) -> None:
    """Show the chain of each requested package."""
    print_info("\nDependency chains:\n")
    for chain in result.chains:
        if HAS_COLOR:
            print(f"  {Fore.CYAN}{chain.leaf}{Style.RESET_ALL}: {chain.to_string(use_ascii=True)}")
        else:
            print(f"  {chain.leaf}: {chain.to_string(use_ascii=True)}")


def handle_export(result, provider, requested, output_file: str) -> None:
    """Export result and package graph to JSON."""
    output_path = Path(output_file)
    print_info(f"\nExporting result to: {output_path}")

    graph = PackageGraph.from_collection(provider.build_collection(requested))
    data = result.to_dict()
    data["graph"] = graph.to_dict()
    data["statistics"] = graph.get_statistics()

    output_path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    print_success(f"Exported to {output_path}")


def show_warnings(result) -> None:
    """Show warning messages."""
    if result.warnings:
        print_warning(f"{len(result.warnings)} warning(s):")
        for i, warning in enumerate(result.warnings, 1):
            print(f"  {i}. {warning.message}", file=sys.stderr)


if __name__ == "__main__":
    main()
