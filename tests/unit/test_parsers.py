"""Unit tests for the source notation parsers."""

import json

import pytest

from token_translator.errors import FormatError
from token_translator.parsers import (
    MAX_DEPTH,
    DelimitedTextParser,
    ManualTokenParser,
    PlatformVariablesParser,
    StyleDictionaryParser,
    TokenStudioParser,
    W3CTokenParser,
    create_parser_registry,
    sanitize_token_name,
)
from token_translator.parsers.base import Branch, Leaf, MetaNode
from token_translator.parsers.delimited_text import coerce_numeric, sniff_delimiter
from token_translator.parsers.platform_variables import color_descriptor_to_css
from token_translator.parsers.token_studio import parse_alias
from token_translator.tokens import NotationTag, TokenType
from token_translator.translator_logging import setup_logging


def nest(levels: int, leaf: dict) -> dict:
    """Wrap ``leaf`` in ``levels`` single-child groups."""
    node = leaf
    for index in reversed(range(levels)):
        node = {f"g{index}": node}
    return node


class TestParserRegistry:
    """Tests for the parser dispatch table."""

    def test_all_notations_registered(self):
        """Test the built-in registry covers every known notation."""
        registry = create_parser_registry()

        for notation in NotationTag:
            if notation is NotationTag.UNKNOWN:
                assert notation not in registry
            else:
                assert registry.get_parser(notation).notation is notation

    def test_registries_are_independent(self):
        """Test each factory call builds a fresh registry."""
        first = create_parser_registry()
        second = create_parser_registry()

        assert first is not second
        assert first.get_parser(NotationTag.MANUAL) is not second.get_parser(
            NotationTag.MANUAL
        )


class TestTreeWalker:
    """Tests for the shared tree walk."""

    def test_classify(self):
        """Test node classification."""
        parser = StyleDictionaryParser()

        assert isinstance(parser.classify("$schema", "$schema", "x"), MetaNode)
        assert isinstance(parser.classify("note", "note", "text"), MetaNode)
        assert isinstance(parser.classify("a", "a", {"value": 1}), Leaf)
        assert isinstance(parser.classify("a", "a", {"b": {"value": 1}}), Branch)

    def test_document_order(self):
        """Test tokens come out in document order."""
        root = {"z": {"value": 1}, "a": {"value": 2}, "m": {"n": {"value": 3}}}

        tokens = StyleDictionaryParser().parse(root)

        assert [t.name for t in tokens] == ["z", "a", "m/n"]

    def test_depth_limit_drops_deep_nodes(self):
        """Test nodes nested past the depth limit are dropped."""
        root = nest(MAX_DEPTH + 2, {"deep": {"value": "#000"}})
        root["shallow"] = {"value": "#FFF"}

        tokens = StyleDictionaryParser().parse(root)

        assert [t.name for t in tokens] == ["shallow"]

    def test_depth_limit_keeps_nodes_at_limit(self):
        """Test a leaf at the depth limit survives."""
        root = nest(MAX_DEPTH, {"leaf": {"value": 1}})

        tokens = StyleDictionaryParser().parse(root)

        assert len(tokens) == 1
        assert len(tokens[0].segments) == MAX_DEPTH + 1

    def test_prefix(self):
        """Test a prefix is prepended to every path."""
        tokens = StyleDictionaryParser().parse({"a": {"value": 1}}, prefix="theme")

        assert tokens[0].name == "theme/a"

    def test_non_object_root(self):
        """Test a non-object root raises FormatError."""
        with pytest.raises(FormatError):
            W3CTokenParser().parse([1, 2, 3])

    def test_invalid_json(self):
        """Test malformed JSON raises FormatError naming the notation."""
        with pytest.raises(FormatError) as exc_info:
            W3CTokenParser().parse_content("{not json")

        assert exc_info.value.notation == "w3c-dtcg"


class TestStyleDictionaryParser:
    """Tests for StyleDictionaryParser."""

    def test_parse(self, style_dictionary_source):
        """Test nested groups flatten into slash paths."""
        tokens = StyleDictionaryParser().parse_content(style_dictionary_source)

        assert [t.name for t in tokens] == [
            "colors/primary",
            "colors/secondary",
            "spacing/small",
            "spacing/medium",
        ]
        primary = tokens[0]
        assert primary.value == "#1976D2"
        assert primary.type == TokenType.COLOR
        assert primary.category == "colors"
        assert primary.description == "Brand blue"

    def test_type_hint(self):
        """Test the type key is used as an inference hint."""
        tokens = StyleDictionaryParser().parse({"x": {"value": 2, "type": "borderRadius"}})

        assert tokens[0].type == TokenType.BORDER_RADIUS

    def test_dict_value_is_a_group(self):
        """Test an object-valued value key is walked, not emitted."""
        tokens = StyleDictionaryParser().parse({"a": {"value": {"b": {"value": 1}}}})

        assert [t.name for t in tokens] == ["a/value/b"]


class TestW3CTokenParser:
    """Tests for W3CTokenParser."""

    def test_parse(self, w3c_source):
        """Test $-prefixed meta keys are skipped."""
        tokens = W3CTokenParser().parse_content(w3c_source)

        assert [t.name for t in tokens] == ["color/brand", "motion/fast"]
        assert tokens[0].type == TokenType.COLOR
        assert tokens[0].description == "Primary brand color"
        assert tokens[1].type == TokenType.DURATION

    def test_unmapped_type_is_inferred(self):
        """Test an unmapped $type falls back to inference."""
        tokens = W3CTokenParser().parse({"gap": {"$value": 8, "$type": "number"}})

        assert tokens[0].type == TokenType.SPACING

    def test_extensions_pass_through(self):
        """Test $extensions are carried on the token."""
        root = {"a": {"$value": "1px", "$extensions": {"org.example": {"k": 1}}}}

        tokens = W3CTokenParser().parse(root)

        assert tokens[0].extensions == {"org.example": {"k": 1}}


class TestTokenStudioParser:
    """Tests for TokenStudioParser."""

    def test_parse(self, token_studio_source):
        """Test leaves with value and type."""
        tokens = TokenStudioParser().parse_content(token_studio_source)

        assert [t.name for t in tokens] == [
            "global/blue",
            "global/brand",
            "global/space/md",
        ]
        assert tokens[0].type == TokenType.COLOR
        assert tokens[0].value == "#0000FF"
        assert tokens[2].type == TokenType.SPACING

    def test_alias_recorded_not_resolved(self, token_studio_source):
        """Test aliases keep their literal value and record the target."""
        brand = TokenStudioParser().parse_content(token_studio_source)[1]

        assert brand.value == "{global.blue}"
        assert brand.reference == "global/blue"
        assert brand.is_alias

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("{colors.primary}", "colors/primary"),
            (" { a.b } ", "a/b"),
            ("#FFF", None),
            ("{a} and {b}", None),
            (12, None),
        ],
    )
    def test_parse_alias(self, value, expected):
        """Test alias detection."""
        assert parse_alias(value) == expected

    def test_value_without_type_is_a_group(self):
        """Test a node with value but no type is not a leaf."""
        tokens = TokenStudioParser().parse({"a": {"value": {"b": {"value": 1, "type": "opacity"}}}})

        assert [t.name for t in tokens] == ["a/value/b"]
        assert tokens[0].type == TokenType.OPACITY


class TestPlatformVariablesParser:
    """Tests for PlatformVariablesParser."""

    def test_parse(self, platform_variables_source):
        """Test names are sanitized and descriptors become CSS colors."""
        tokens = PlatformVariablesParser().parse_content(platform_variables_source)

        assert [t.name for t in tokens] == [
            "primitives/brand-blue",
            "primitives/spacing-4",
        ]
        color = tokens[0]
        assert color.value == "#1976D2"
        assert color.type == TokenType.COLOR
        assert color.category == "primitives"
        assert color.extensions == {"com.figma.variableId": "VariableID:1:2"}
        assert isinstance(color.original_value, dict)

        spacing = tokens[1]
        assert spacing.value == 16
        assert spacing.type == TokenType.SPACING

    def test_boolean_and_object_values(self):
        """Test non-scalar values are serialized as JSON."""
        root = {
            "flag": {"$value": True},
            "blob": {"$value": {"a": 1}, "$type": "string"},
        }

        tokens = PlatformVariablesParser().parse(root)

        assert tokens[0].value == "true"
        assert tokens[0].type == TokenType.OTHER
        assert tokens[1].value == '{"a": 1}'

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Brand Blue", "brand-blue"),
            ("Colors/Primary  (500)", "colors/primary-500"),
            ("--Weird__Name!!--", "weirdname"),
        ],
    )
    def test_sanitize_token_name(self, name, expected):
        """Test label sanitization."""
        assert sanitize_token_name(name) == expected


class TestColorDescriptor:
    """Tests for color_descriptor_to_css()."""

    def test_opaque_hex(self):
        """Test an opaque hex descriptor returns the hex string."""
        assert color_descriptor_to_css({"hex": "#1976D2", "alpha": 1}) == "#1976D2"

    def test_translucent_hex(self):
        """Test alpha below one produces rgba with two decimals."""
        assert color_descriptor_to_css({"hex": "#FF0000", "alpha": 0.5}) == (
            "rgba(255, 0, 0, 0.50)"
        )

    def test_components(self):
        """Test component descriptors scale to 0-255 channels."""
        assert color_descriptor_to_css({"components": [1, 0.5, 0]}) == "rgb(255, 128, 0)"

    def test_components_with_alpha(self):
        """Test component descriptors with alpha."""
        value = {"components": [0, 0, 1], "alpha": 0.25}

        assert color_descriptor_to_css(value) == "rgba(0, 0, 255, 0.25)"

    def test_fallback(self):
        """Test an unusable descriptor falls back to black."""
        assert color_descriptor_to_css({"components": [1]}) == "#000000"

    @pytest.mark.parametrize(
        "hex_value,expected",
        [
            ("#FFF", "rgba(255, 255, 255, 0.50)"),
            ("#0f08", "rgba(0, 255, 0, 0.50)"),
            ("1976D2", "rgba(25, 118, 210, 0.50)"),
        ],
    )
    def test_translucent_short_hex(self, hex_value, expected):
        """Test shorthand and bare hex strings expand before conversion."""
        assert color_descriptor_to_css({"hex": hex_value, "alpha": 0.5}) == expected

    @pytest.mark.parametrize(
        "value",
        [
            {"hex": "#GGG", "alpha": 0.5},
            {"hex": "#12345", "alpha": 0.5},
            {"hex": "#FFFFFF", "alpha": "half"},
            {"components": ["red", 0, 0]},
        ],
    )
    def test_malformed_descriptor(self, value):
        """Test malformed descriptors raise ValueError."""
        with pytest.raises(ValueError):
            color_descriptor_to_css(value)


class TestDelimitedTextParser:
    """Tests for DelimitedTextParser."""

    def test_radius_row(self):
        """Test an explicit canonical type and numeric coercion."""
        tokens = DelimitedTextParser().parse("name,value,type\nradius/sm,4,dimension\n")

        assert len(tokens) == 1
        token = tokens[0]
        assert token.name == "radius/sm"
        assert token.value == 4
        assert token.type == TokenType.DIMENSION
        assert token.category == "radius"

    def test_all_columns(self, csv_source):
        """Test optional category and description columns."""
        tokens = DelimitedTextParser().parse(csv_source)

        assert [t.name for t in tokens] == ["colors/primary", "radius/sm", "font/body"]
        assert tokens[0].description == "Brand blue"
        assert tokens[2].category == "typography"
        assert tokens[2].type == TokenType.FONT_SIZE

    def test_case_insensitive_header(self):
        """Test header names are matched case-insensitively."""
        tokens = DelimitedTextParser().parse("Name,Value\ngap,8\n")

        assert tokens[0].type == TokenType.SPACING

    def test_missing_columns(self):
        """Test a header without name or value raises FormatError."""
        with pytest.raises(FormatError) as exc_info:
            DelimitedTextParser().parse("token,amount\na,1\n")

        assert 'must have "name" and "value"' in exc_info.value.message

    def test_skips_incomplete_rows(self):
        """Test short rows and rows with empty cells are skipped."""
        content = "name,value\nonly-name\n,5\nempty,\nok,1\n"

        tokens = DelimitedTextParser().parse(content)

        assert [t.name for t in tokens] == ["ok"]

    def test_skipped_rows_logged_as_warnings(self, tmp_path):
        """Test rows with an empty name or value are reported at WARNING."""
        log_file = tmp_path / "import.log"
        setup_logging(log_file=log_file, log_format="json")

        DelimitedTextParser().parse("name,value\n,5\nempty,\nok,1\n")

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        skipped = [e for e in entries if e["message"].startswith("Skipping row")]
        assert [e["level"] for e in skipped] == ["WARNING", "WARNING"]
        assert skipped[0]["message"] == "Skipping row 2: missing name or value"

    def test_tab_separated(self):
        """Test TSV input."""
        tokens = DelimitedTextParser().parse("name\tvalue\ncolor/bg\t#FFF\n")

        assert tokens[0].value == "#FFF"
        assert tokens[0].type == TokenType.COLOR

    def test_quoted_cells(self):
        """Test quoted cells containing the delimiter."""
        content = 'name,value\nfont/sans,"Inter, sans-serif"\n'

        tokens = DelimitedTextParser().parse(content)

        assert tokens[0].value == "Inter, sans-serif"

    def test_header_only(self):
        """Test a header without rows yields no tokens."""
        assert DelimitedTextParser().parse("name,value\n") == []

    @pytest.mark.parametrize(
        ("cell", "expected"),
        [("4", 4), ("-2", -2), ("1.5", 1.5), ("4px", "4px"), ("1e3", "1e3")],
    )
    def test_coerce_numeric(self, cell, expected):
        """Test numeric cell coercion."""
        assert coerce_numeric(cell) == expected

    def test_sniff_delimiter(self):
        """Test delimiter sniffing."""
        assert sniff_delimiter("name\tvalue") == "\t"
        assert sniff_delimiter("name,value") == ","


class TestManualTokenParser:
    """Tests for ManualTokenParser."""

    def test_parse(self):
        """Test a serialized collection parses back into tokens."""
        content = json.dumps(
            {
                "name": "Mine",
                "tokens": [
                    {"name": "a", "value": 1, "type": "opacity"},
                    {"name": "b", "value": "{a}", "$reference": "a"},
                ],
            }
        )

        tokens = ManualTokenParser().parse_content(content)

        assert tokens[0].type == TokenType.OPACITY
        assert tokens[1].reference == "a"

    def test_entry_without_value(self):
        """Test entries need a name and a value."""
        with pytest.raises(FormatError):
            ManualTokenParser().parse({"tokens": [{"name": "a"}]})
