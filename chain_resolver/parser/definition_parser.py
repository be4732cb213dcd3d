"""
Package definition parser.

This module defines the DefinitionParser class, which turns package
definitions written as text or JSON into Package objects.

Text format, one package per line:

    # comment
    a: b        # a depends on b
    b => c      # alternative arrow syntax
    c           # c has no dependency
    d:          # empty dependency also means none
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from chain_resolver.exceptions import DefinitionSyntaxError
from chain_resolver.models.package import Package

_SEPARATOR_PATTERN = re.compile(r"\s*(?:=>|:)\s*")
_INVALID_DEPENDENCY_PATTERN = re.compile(r"[\s,]|=>|:")


class DefinitionParser:
    """Parses package definitions into Package objects.

    Definition order is preserved. Defining the same package twice with the
    same dependency is allowed; defining it with a different dependency is a
    syntax error.

    Usage:
        parser = DefinitionParser()
        packages = parser.parse("a: b\\nb: c\\nc")
        [p.identifier for p in packages]  # ['a', 'b', 'c']
    """

    COMMENT_CHAR = "#"

    def parse(self, text: str) -> List[Package]:
        """Parse text definitions.

        Args:
            text: Definitions, one per line.

        Returns:
            List of Package objects in definition order.

        Raises:
            DefinitionSyntaxError: If a line is malformed or a package is
                redefined with a different dependency.
        """
        packages: Dict[str, Package] = {}

        for line_number, raw_line in enumerate(text.splitlines(), 1):
            line = raw_line.split(self.COMMENT_CHAR, 1)[0].strip()
            if not line:
                continue

            package = self._parse_line(line, line_number, raw_line)
            self._add(packages, package, line_number, raw_line)

        return list(packages.values())

    def parse_json(self, text: str) -> List[Package]:
        """Parse JSON definitions.

        The document must be an object mapping package identifiers to a
        dependency identifier or null.

        Args:
            text: JSON document.

        Returns:
            List of Package objects in document order.

        Raises:
            DefinitionSyntaxError: If the document is not valid JSON or does
                not have the expected shape.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DefinitionSyntaxError(
                f"Invalid JSON: {e.msg}", line_number=e.lineno
            ) from e

        return self.parse_mapping(data)

    def parse_mapping(self, data: Any) -> List[Package]:
        """Build packages from a mapping of identifier to dependency.

        Args:
            data: Mapping such as {"a": "b", "b": None}.

        Returns:
            List of Package objects in mapping order.
        """
        if not isinstance(data, dict):
            raise DefinitionSyntaxError(
                "Package definitions must be an object mapping names to "
                "dependencies"
            )

        packages: Dict[str, Package] = {}
        for name, dependency in data.items():
            if dependency is not None and not isinstance(dependency, str):
                raise DefinitionSyntaxError(
                    f"Dependency of '{name}' must be a string or null, "
                    f"got {type(dependency).__name__}"
                )
            package = self._build_package(name, dependency)
            for identifier in (package.identifier, package.dependency):
                if identifier and _INVALID_DEPENDENCY_PATTERN.search(identifier):
                    raise DefinitionSyntaxError(
                        f"Invalid package name '{identifier}'"
                    )
            self._add(packages, package)

        return list(packages.values())

    def parse_file(self, path: Union[str, Path]) -> List[Package]:
        """Parse a definitions file.

        Files with a .json suffix are parsed as JSON, everything else as
        text definitions.

        Args:
            path: Path to the definitions file.

        Returns:
            List of Package objects in definition order.
        """
        file_path = Path(path)
        text = file_path.read_text(encoding="utf-8")

        if file_path.suffix.lower() == ".json":
            return self.parse_json(text)
        return self.parse(text)

    def _parse_line(
        self, line: str, line_number: int, raw_line: str
    ) -> Package:
        """Parse a single non-empty, comment-free line."""
        parts = _SEPARATOR_PATTERN.split(line, maxsplit=1)
        name = parts[0].strip()
        dependency: Optional[str] = parts[1].strip() if len(parts) > 1 else None

        if not name:
            raise DefinitionSyntaxError(
                "Missing package name", line_number=line_number, line=raw_line
            )
        if _INVALID_DEPENDENCY_PATTERN.search(name):
            raise DefinitionSyntaxError(
                f"Invalid package name '{name}'",
                line_number=line_number,
                line=raw_line,
            )
        if dependency and _INVALID_DEPENDENCY_PATTERN.search(dependency):
            raise DefinitionSyntaxError(
                f"Package '{name}' may declare at most one dependency",
                line_number=line_number,
                line=raw_line,
            )

        return self._build_package(name, dependency or None)

    def _build_package(self, name: str, dependency: Optional[str]) -> Package:
        name = name.strip()
        if not name:
            raise DefinitionSyntaxError("Missing package name")
        if dependency is not None:
            dependency = dependency.strip() or None
        return Package(name, dependency=dependency)

    def _add(
        self,
        packages: Dict[str, Package],
        package: Package,
        line_number: Optional[int] = None,
        raw_line: Optional[str] = None,
    ) -> None:
        existing = packages.get(package.identifier)
        if existing is not None and existing != package:
            raise DefinitionSyntaxError(
                f"Package '{package.identifier}' redefined with dependency "
                f"'{package.dependency}' (previously '{existing.dependency}')",
                line_number=line_number,
                line=raw_line,
            )
        packages.setdefault(package.identifier, package)
