"""
Parser module for package definitions.

This module provides the parser that reads package definitions from text
or JSON documents.
"""

from chain_resolver.parser.definition_parser import DefinitionParser

__all__ = ["DefinitionParser"]
