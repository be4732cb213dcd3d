"""
Dependency chain model.

This module defines the DependencyChain class, which represents the install
order for a single requested package: deepest dependency first, requested
package last.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from chain_resolver.models.package import Package


@dataclass
class DependencyChain:
    """Install order for one requested package.

    Attributes:
        packages: Packages in order root → leaf, followed by any packages
            accumulated after the chain.
        package: The requested package the chain was gathered for. When
            unset, the last package of the chain is taken as the leaf.

    Example:
        c → b → a  (a depends on b, b depends on c)
        packages = [Package("c"), Package("b", "c"), Package("a", "b")]
        depth = 2
    """

    packages: List[Package] = field(default_factory=list)
    package: Optional[Package] = None

    @property
    def depth(self) -> int:
        """Number of dependency hops in the chain."""
        return len(self.packages) - 1 if self.packages else 0

    @property
    def root(self) -> Optional[Package]:
        """Deepest dependency (chain start)."""
        return self.packages[0] if self.packages else None

    @property
    def leaf(self) -> Optional[Package]:
        """Requested package the chain was gathered for."""
        if self.package is not None:
            return self.package
        return self.packages[-1] if self.packages else None

    def identifiers(self) -> List[str]:
        """Return package identifiers in chain order."""
        return [package.identifier for package in self.packages]

    def to_string(self, use_ascii: bool = False) -> str:
        """Generate human-readable chain string.

        Args:
            use_ascii: If True, use "->" instead of the Unicode arrow.

        Returns:
            String such as "c → b → a", or "c -> b -> a" with use_ascii.
        """
        if not self.packages:
            return "(empty chain)"

        separator = " -> " if use_ascii else " → "
        return separator.join(self.identifiers())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "package": self.leaf.identifier if self.leaf else None,
            "root": self.root.identifier if self.root else None,
            "depth": self.depth,
            "chain": self.identifiers(),
        }

    def __len__(self) -> int:
        return len(self.packages)
