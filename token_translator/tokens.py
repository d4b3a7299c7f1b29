"""Canonical design token models.

This module defines the notation-neutral representation that every parser
produces and every exporter consumes: DesignToken, TokenCollection and the
enumerations describing token types and notations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Separator used to join hierarchical token path segments
NAME_DELIMITER = "/"

DEFAULT_COLLECTION_NAME = "Imported Tokens"
DEFAULT_VERSION = "1.0.0"

TokenValue = str | int | float


class TokenType(Enum):
    """Semantic type of a design token."""

    COLOR = "color"
    SPACING = "spacing"
    DIMENSION = "dimension"
    FONT_SIZE = "fontSize"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"
    SHADOW = "shadow"
    OPACITY = "opacity"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    OTHER = "other"


class NotationTag(Enum):
    """Source notations recognized by the format detector."""

    STYLE_DICTIONARY = "style-dictionary"
    W3C_DTCG = "w3c-dtcg"
    TOKEN_STUDIO = "token-studio"
    PLATFORM_VARIABLES = "platform-variables"
    DELIMITED_TEXT = "delimited-text"
    MANUAL = "manual"
    UNKNOWN = "unknown"


class ExportFormat(Enum):
    """Target notations that exporters can render."""

    STYLE_DICTIONARY = "style-dictionary"
    W3C_DTCG = "w3c-dtcg"
    CSS = "css"
    TAILWIND = "tailwind"
    TYPESCRIPT = "typescript"


@dataclass(frozen=True)
class DesignToken:
    """A single normalized design decision.

    Tokens are immutable; a merge replaces a token wholesale rather than
    editing it.
    """

    name: str  # Hierarchical path, e.g. "colors/primary/500"
    value: TokenValue  # Resolved, notation-neutral value
    type: TokenType = TokenType.OTHER
    original_value: Any = None  # Value as authored, before normalization
    category: str | None = None  # First path segment of multi-segment names
    description: str | None = None
    reference: str | None = None  # Unresolved alias target path
    extensions: dict[str, Any] | None = None  # Opaque passthrough metadata

    @property
    def is_alias(self) -> bool:
        """Whether the token points at another token instead of a literal."""
        return self.reference is not None

    @property
    def segments(self) -> list[str]:
        """Path segments of the token name."""
        return self.name.split(NAME_DELIMITER)

    @property
    def leaf_name(self) -> str:
        """Last path segment of the token name."""
        return self.segments[-1] or self.name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the manual notation's keys."""
        data: dict[str, Any] = {
            "name": self.name,
            "value": self.value,
            "type": self.type.value,
        }
        if self.category is not None:
            data["category"] = self.category
        if self.description is not None:
            data["description"] = self.description
        if self.reference is not None:
            data["$reference"] = self.reference
        if self.extensions is not None:
            data["$extensions"] = self.extensions
        if self.original_value is not None:
            data["originalValue"] = self.original_value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DesignToken":
        """Create from dictionary.

        Unknown type names fall back to ``TokenType.OTHER``.
        """
        raw_type = data.get("type", TokenType.OTHER.value)
        try:
            token_type = TokenType(raw_type)
        except ValueError:
            token_type = TokenType.OTHER

        return cls(
            name=data["name"],
            value=data["value"],
            type=token_type,
            original_value=data.get("originalValue", data["value"]),
            category=data.get("category"),
            description=data.get("description"),
            reference=data.get("$reference"),
            extensions=data.get("$extensions"),
        )


@dataclass(frozen=True)
class TokenCollectionMetadata:
    """Provenance of a collection."""

    source: NotationTag
    imported_at: str  # ISO-8601 timestamp
    file_name: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "source": self.source.value,
            "importedAt": self.imported_at,
        }
        if self.file_name:
            data["fileName"] = self.file_name
        if self.extra:
            data["extra"] = self.extra
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TokenCollectionMetadata":
        """Create from dictionary."""
        return cls(
            source=NotationTag(data.get("source", NotationTag.MANUAL.value)),
            imported_at=data.get("importedAt", ""),
            file_name=data.get("fileName"),
            extra=data.get("extra", {}),
        )


@dataclass(frozen=True)
class TokenCollection:
    """An ordered, name-unique set of design tokens.

    Insertion order is preserved and drives export ordering. When two
    tokens share a name, the later one replaces the earlier one in the
    earlier one's position.
    """

    name: str = DEFAULT_COLLECTION_NAME
    version: str = DEFAULT_VERSION
    tokens: tuple[DesignToken, ...] = ()
    metadata: TokenCollectionMetadata | None = None

    def __post_init__(self) -> None:
        by_name: dict[str, DesignToken] = {}
        for token in self.tokens:
            by_name[token.name] = token
        # frozen dataclass: bypass __setattr__ to store the normalized tuple
        object.__setattr__(self, "tokens", tuple(by_name.values()))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def names(self) -> list[str]:
        """Token names in collection order."""
        return [token.name for token in self.tokens]

    def get(self, name: str) -> DesignToken | None:
        """Look up a token by name."""
        for token in self.tokens:
            if token.name == name:
                return token
        return None

    def with_tokens(self, tokens: list[DesignToken]) -> "TokenCollection":
        """Return a copy of this collection holding different tokens."""
        return TokenCollection(
            name=self.name,
            version=self.version,
            tokens=tuple(tokens),
            metadata=self.metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the manual notation."""
        data: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "tokens": [token.to_dict() for token in self.tokens],
        }
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TokenCollection":
        """Create from the manual notation."""
        metadata = data.get("metadata")
        return cls(
            name=data.get("name", DEFAULT_COLLECTION_NAME),
            version=data.get("version", DEFAULT_VERSION),
            tokens=tuple(DesignToken.from_dict(t) for t in data.get("tokens", [])),
            metadata=TokenCollectionMetadata.from_dict(metadata) if metadata else None,
        )
