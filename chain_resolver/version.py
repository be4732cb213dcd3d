"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**Chain Resolution**

- Dependency-first install order for single-dependency packages
- First-occurrence deduplication across chains
- Cycle detection with CyclicDependencyError
- Text and JSON package definitions

**CLI**

- --package selection
- list / pretty / json / table / graph output
- Colored output
- Export to JSON
"""
