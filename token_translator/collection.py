"""Token collection utilities: merge, filter, group and summarize."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .tokens import (
    DesignToken,
    NotationTag,
    TokenCollection,
    TokenCollectionMetadata,
    TokenType,
)

UNCATEGORIZED = "uncategorized"


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(UTC).isoformat()


def merge_collections(
    existing: TokenCollection,
    incoming: TokenCollection,
    merged_at: str | None = None,
) -> TokenCollection:
    """Merge two collections into a new one.

    Incoming tokens overwrite existing tokens of the same name in place;
    new names are appended in incoming order. Name and version are taken
    from ``existing`` and the provenance resets to ``manual``.

    Args:
        existing: Base collection.
        incoming: Collection whose tokens win on name clashes.
        merged_at: Optional timestamp, defaults to now.

    Returns:
        The merged collection. Neither input is modified.
    """
    by_name: dict[str, DesignToken] = {token.name: token for token in existing}
    for token in incoming:
        by_name[token.name] = token

    return TokenCollection(
        name=existing.name,
        version=existing.version,
        tokens=tuple(by_name.values()),
        metadata=TokenCollectionMetadata(
            source=NotationTag.MANUAL,
            imported_at=merged_at or utc_timestamp(),
        ),
    )


def filter_tokens_by_type(
    collection: TokenCollection | Iterable[DesignToken],
    types: Iterable[TokenType],
) -> list[DesignToken]:
    """Tokens whose type is in ``types``, in collection order."""
    wanted = set(types)
    return [token for token in collection if token.type in wanted]


def group_tokens_by_category(
    tokens: Iterable[DesignToken],
) -> dict[str, list[DesignToken]]:
    """Group tokens by category; tokens without one go to ``uncategorized``."""
    groups: dict[str, list[DesignToken]] = {}
    for token in tokens:
        groups.setdefault(token.category or UNCATEGORIZED, []).append(token)
    return groups


def group_tokens_by_type(
    tokens: Iterable[DesignToken],
) -> dict[TokenType, list[DesignToken]]:
    """Group tokens by type, preserving first-appearance order."""
    groups: dict[TokenType, list[DesignToken]] = {}
    for token in tokens:
        groups.setdefault(token.type, []).append(token)
    return groups


@dataclass
class TokenStats:
    """Counts used for post-import summaries."""

    total: int = 0
    by_type: dict[str, int] = field(default_factory=dict)
    by_category: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total": self.total,
            "byType": dict(self.by_type),
            "byCategory": dict(self.by_category),
        }


def get_token_stats(collection: TokenCollection) -> TokenStats:
    """Count tokens overall, per type and per category."""
    stats = TokenStats(total=len(collection))
    for token in collection:
        stats.by_type[token.type.value] = stats.by_type.get(token.type.value, 0) + 1
        category = token.category or UNCATEGORIZED
        stats.by_category[category] = stats.by_category.get(category, 0) + 1
    return stats
