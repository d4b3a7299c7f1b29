"""Base classes for token notation parsers.

Parsers turn a notation-specific document into a flat list of canonical
DesignTokens. Tree-shaped notations share one recursive walker: each
notation only decides how a single node is classified and how a leaf
becomes a token.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from ..errors import FormatError
from ..tokens import NAME_DELIMITER, DesignToken, NotationTag
from ..translator_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.IMPORT)

# Nodes nested deeper than this below the document root are dropped
MAX_DEPTH = 10


@dataclass(frozen=True)
class Leaf:
    """A node that satisfies the notation's token signature."""

    key: str
    path: str
    payload: Any


@dataclass(frozen=True)
class Branch:
    """A group node whose children are walked in document order."""

    key: str
    path: str
    children: dict[str, Any]


@dataclass(frozen=True)
class MetaNode:
    """A node that carries no tokens: meta-keys and stray scalars."""

    key: str


ParseNode = Leaf | Branch | MetaNode
Classifier = Callable[[str, str, Any], ParseNode]


def join_path(prefix: str, key: str) -> str:
    """Append a segment to a token path."""
    return f"{prefix}{NAME_DELIMITER}{key}" if prefix else key


def walk_tree(
    root: dict[str, Any],
    classify: Classifier,
    prefix: str = "",
    depth: int = 0,
) -> Iterator[Leaf]:
    """Yield every leaf below ``root`` in document order.

    Args:
        root: Mapping to walk.
        classify: Notation-specific classifier for (key, path, node).
        prefix: Path of ``root`` itself.
        depth: Nesting depth of ``root``'s children.

    Yields:
        Leaf nodes.
    """
    for key, node in root.items():
        parsed = classify(key, join_path(prefix, key), node)

        if isinstance(parsed, Leaf):
            yield parsed
        elif isinstance(parsed, Branch):
            if depth + 1 > MAX_DEPTH:
                logger.warning(
                    f"Dropping '{parsed.path}': nesting exceeds depth {MAX_DEPTH}"
                )
                continue
            yield from walk_tree(parsed.children, classify, parsed.path, depth + 1)


class TokenParser(ABC):
    """Abstract base class for notation parsers."""

    @property
    @abstractmethod
    def notation(self) -> NotationTag:
        """Notation this parser understands."""
        ...

    def load(self, content: str) -> Any:
        """Decode raw content into the document this parser walks.

        Raises:
            FormatError: If the content is not valid JSON.
        """
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise FormatError(f"invalid JSON: {e}", self.notation.value) from e

    @abstractmethod
    def parse(self, root: Any, prefix: str = "") -> list[DesignToken]:
        """Parse a decoded document into tokens.

        Args:
            root: Decoded document.
            prefix: Path prefix applied to every token name.

        Returns:
            Tokens in document order.

        Raises:
            FormatError: If the document violates the notation's structure.
        """
        ...

    def parse_content(self, content: str, prefix: str = "") -> list[DesignToken]:
        """Decode and parse raw content in one step."""
        return self.parse(self.load(content), prefix)


class TreeTokenParser(TokenParser):
    """Parser for nested key-value notations."""

    @abstractmethod
    def is_leaf(self, node: dict[str, Any]) -> bool:
        """Check whether a mapping satisfies the notation's token signature."""
        ...

    @abstractmethod
    def build_token(self, leaf: Leaf) -> DesignToken:
        """Create a canonical token from a leaf."""
        ...

    def classify(self, key: str, path: str, node: Any) -> ParseNode:
        """Classify one node of the document."""
        if key.startswith("$") or not isinstance(node, dict):
            return MetaNode(key)
        if self.is_leaf(node):
            return Leaf(key, path, node)
        return Branch(key, path, node)

    def parse(self, root: Any, prefix: str = "") -> list[DesignToken]:
        """Walk the document and build one token per leaf."""
        if not isinstance(root, dict):
            raise FormatError(
                f"expected a JSON object at the root, got {type(root).__name__}",
                self.notation.value,
            )
        return [self.build_token(leaf) for leaf in walk_tree(root, self.classify, prefix)]


class ParserRegistry:
    """Dispatch table from notation to parser.

    Built once by the caller (see ``create_parser_registry``) and passed to
    the importer explicitly.
    """

    def __init__(self) -> None:
        self._parsers: dict[NotationTag, TokenParser] = {}

    def register(self, parser: TokenParser) -> None:
        """Register a parser under its notation, replacing any previous one."""
        self._parsers[parser.notation] = parser

    def get_parser(self, notation: NotationTag) -> TokenParser | None:
        """Get the parser for a notation, or None if none is registered."""
        return self._parsers.get(notation)

    def notations(self) -> list[NotationTag]:
        """Registered notations in registration order."""
        return list(self._parsers)

    def __contains__(self, notation: NotationTag) -> bool:
        return notation in self._parsers
