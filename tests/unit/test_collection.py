"""Unit tests for collection utilities."""

from token_translator.collection import (
    UNCATEGORIZED,
    filter_tokens_by_type,
    get_token_stats,
    group_tokens_by_category,
    group_tokens_by_type,
    merge_collections,
)
from token_translator.tokens import (
    DesignToken,
    NotationTag,
    TokenCollection,
    TokenCollectionMetadata,
    TokenType,
)


def make_collection(values: dict, name: str = "C") -> TokenCollection:
    return TokenCollection(
        name=name,
        tokens=tuple(DesignToken(name=k, value=v) for k, v in values.items()),
        metadata=TokenCollectionMetadata(
            source=NotationTag.STYLE_DICTIONARY, imported_at="2024-01-01T00:00:00+00:00"
        ),
    )


class TestMergeCollections:
    """Tests for merge_collections()."""

    def test_merge_law(self):
        """Test overwrites in place and appends new names in order."""
        a = make_collection({"a": 1, "b": 2}, name="A")
        b = make_collection({"b": 3, "c": 4}, name="B")

        merged = merge_collections(a, b, merged_at="2024-02-02T00:00:00+00:00")

        assert merged.names() == ["a", "b", "c"]
        assert [t.value for t in merged] == [1, 3, 4]

    def test_identity_and_provenance(self):
        """Test name and version come from existing and source resets to manual."""
        a = make_collection({"a": 1}, name="A")
        b = make_collection({"b": 2}, name="B")

        merged = merge_collections(a, b, merged_at="2024-02-02T00:00:00+00:00")

        assert merged.name == "A"
        assert merged.metadata.source == NotationTag.MANUAL
        assert merged.metadata.imported_at == "2024-02-02T00:00:00+00:00"

    def test_inputs_unchanged(self):
        """Test neither input is modified."""
        a = make_collection({"a": 1})
        b = make_collection({"a": 2})

        merge_collections(a, b)

        assert a.get("a").value == 1
        assert b.get("a").value == 2

    def test_default_timestamp(self):
        """Test a timestamp is generated when none is given."""
        merged = merge_collections(make_collection({"a": 1}), make_collection({}))

        assert merged.metadata.imported_at


class TestFilterAndGroup:
    """Tests for filtering and grouping helpers."""

    def test_filter_by_type(self, sample_collection):
        """Test only requested types are kept, in order."""
        tokens = filter_tokens_by_type(
            sample_collection, [TokenType.COLOR, TokenType.SHADOW]
        )

        assert [t.name for t in tokens] == [
            "colors/primary/500",
            "colors/neutral/white",
            "shadow/card",
        ]

    def test_group_by_category(self):
        """Test tokens without a category land in the uncategorized bucket."""
        tokens = [
            DesignToken(name="colors/a", value="#000", category="colors"),
            DesignToken(name="loose", value=1),
            DesignToken(name="colors/b", value="#FFF", category="colors"),
        ]

        groups = group_tokens_by_category(tokens)

        assert list(groups) == ["colors", UNCATEGORIZED]
        assert [t.name for t in groups["colors"]] == ["colors/a", "colors/b"]

    def test_group_by_type(self, sample_tokens):
        """Test grouping by type preserves first appearance order."""
        groups = group_tokens_by_type(sample_tokens)

        assert list(groups)[0] == TokenType.COLOR
        assert len(groups[TokenType.COLOR]) == 2


class TestTokenStats:
    """Tests for get_token_stats()."""

    def test_stats(self, sample_collection):
        """Test per-type and per-category counts."""
        stats = get_token_stats(sample_collection)

        assert stats.total == 10
        assert stats.by_type["color"] == 2
        assert stats.by_category["colors"] == 2

    def test_to_dict(self, sample_collection):
        """Test stats serialization keys."""
        data = get_token_stats(sample_collection).to_dict()

        assert set(data) == {"total", "byType", "byCategory"}
