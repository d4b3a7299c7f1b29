"""Parsers for the supported token source notations.

- Style Dictionary (style_dictionary.py)
- W3C DTCG (w3c_dtcg.py)
- Token Studio (token_studio.py)
- Figma variables export (platform_variables.py)
- CSV/TSV tables (delimited_text.py)
- Serialized collections (manual.py)
"""

from .base import (
    MAX_DEPTH,
    Branch,
    Leaf,
    MetaNode,
    ParserRegistry,
    TokenParser,
    TreeTokenParser,
    walk_tree,
)
from .delimited_text import DelimitedTextParser
from .manual import ManualTokenParser
from .platform_variables import PlatformVariablesParser, sanitize_token_name
from .style_dictionary import StyleDictionaryParser
from .token_studio import TokenStudioParser
from .w3c_dtcg import W3CTokenParser


def create_parser_registry() -> ParserRegistry:
    """Build a registry holding every built-in parser.

    Returns:
        A new ParserRegistry; callers own it and pass it where needed.
    """
    registry = ParserRegistry()
    registry.register(PlatformVariablesParser())
    registry.register(W3CTokenParser())
    registry.register(TokenStudioParser())
    registry.register(StyleDictionaryParser())
    registry.register(DelimitedTextParser())
    registry.register(ManualTokenParser())
    return registry


__all__ = [
    "MAX_DEPTH",
    "Branch",
    "Leaf",
    "MetaNode",
    "ParserRegistry",
    "TokenParser",
    "TreeTokenParser",
    "walk_tree",
    "create_parser_registry",
    "sanitize_token_name",
    "DelimitedTextParser",
    "ManualTokenParser",
    "PlatformVariablesParser",
    "StyleDictionaryParser",
    "TokenStudioParser",
    "W3CTokenParser",
]
