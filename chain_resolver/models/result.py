"""
Resolution result model.

This module defines the ResolutionResult class, which holds the deduplicated
install order produced by the resolver together with the per-package chains
and any warnings collected along the way.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator

from chain_resolver.models.chain import DependencyChain
from chain_resolver.utils.warnings import ResolutionWarning


@dataclass
class ResolutionResult:
    """Result of a resolution request.

    Attributes:
        order: Deduplicated package identifiers, dependencies first.
        requested: Identifiers as requested, in input order.
        chains: One DependencyChain per requested identifier.
        warnings: Non-fatal issues collected during resolution.
        separator: Separator used by to_string() when none is given.

    Example:
        >>> result = resolver.resolve(["a"])
        >>> result.to_string()
        'c, b, a'
        >>> "b" in result
        True
    """

    order: list[str] = field(default_factory=list)
    requested: list[str] = field(default_factory=list)
    chains: list[DependencyChain] = field(default_factory=list)
    warnings: list[ResolutionWarning] = field(default_factory=list)
    separator: str = ", "

    def to_string(self, separator: str | None = None) -> str:
        """Render the install order as a delimited string.

        Args:
            separator: Delimiter between identifiers. Defaults to the
                result's separator (", ").

        Returns:
            Joined identifiers, or an empty string for an empty result.
        """
        if separator is None:
            separator = self.separator
        return separator.join(self.order)

    def to_list(self) -> list[str]:
        """Return a copy of the install order."""
        return list(self.order)

    def position(self, identifier: str) -> int:
        """Return the 0-based install position of a package.

        Raises:
            ValueError: If the package is not part of the result.
        """
        return self.order.index(identifier)

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary format."""
        return {
            "requested": list(self.requested),
            "order": list(self.order),
            "chains": [chain.to_dict() for chain in self.chains],
            "warnings": [
                {
                    "level": w.level,
                    "message": w.message,
                    "context": w.context,
                }
                for w in self.warnings
            ],
            "total_packages": len(self.order),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert result to JSON string.

        Args:
            indent: Number of spaces to use for indentation. Defaults to 2.

        Returns:
            JSON string representation of the result.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __iter__(self) -> Iterator[str]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.order

    def __str__(self) -> str:
        return self.to_string()
