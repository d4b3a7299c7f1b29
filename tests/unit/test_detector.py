"""Unit tests for source notation detection."""

import json

import pytest

from token_translator.detector import detect, detect_structure
from token_translator.tokens import NotationTag


class TestDetect:
    """Tests for detect()."""

    def test_style_dictionary(self, style_dictionary_source):
        """Test bare value leaves are detected as Style Dictionary."""
        assert detect(style_dictionary_source) == NotationTag.STYLE_DICTIONARY

    def test_w3c(self, w3c_source):
        """Test $schema and $value leaves are detected as W3C DTCG."""
        assert detect(w3c_source) == NotationTag.W3C_DTCG

    def test_w3c_without_schema(self):
        """Test $value leaves alone are enough for W3C DTCG."""
        content = json.dumps({"size": {"sm": {"$value": "4px"}}})

        assert detect(content) == NotationTag.W3C_DTCG

    def test_token_studio(self, token_studio_source):
        """Test Token Studio section names are detected."""
        assert detect(token_studio_source) == NotationTag.TOKEN_STUDIO

    def test_token_studio_value_type_pairs(self):
        """Test nested value/type pairs without section names."""
        content = json.dumps({"brand": {"blue": {"value": "#00F", "type": "color"}}})

        assert detect(content) == NotationTag.TOKEN_STUDIO

    def test_platform_variables(self, platform_variables_source):
        """Test color descriptors are detected as platform variables."""
        assert detect(platform_variables_source) == NotationTag.PLATFORM_VARIABLES

    def test_platform_variables_beats_w3c(self):
        """Test a hex descriptor wins over the generic $value signature."""
        content = json.dumps(
            {
                "$schema": "https://design-tokens.github.io/community-group/format/",
                "colors": {"red": {"$value": {"hex": "#FF0000"}}},
            }
        )

        assert detect(content) == NotationTag.PLATFORM_VARIABLES

    def test_platform_variables_extension_marker(self):
        """Test the variable id extension marks platform variables."""
        content = json.dumps(
            {
                "gap": {
                    "$value": 8,
                    "$extensions": {"com.figma.variableId": "VariableID:9:9"},
                }
            }
        )

        assert detect(content) == NotationTag.PLATFORM_VARIABLES

    def test_manual(self):
        """Test a serialized collection is detected as manual."""
        content = json.dumps({"name": "Mine", "tokens": [{"name": "a", "value": 1}]})

        assert detect(content) == NotationTag.MANUAL

    @pytest.mark.parametrize("file_name", ["tokens.csv", "TOKENS.TSV"])
    def test_delimited_by_file_name(self, file_name):
        """Test the file name extension short-circuits detection."""
        assert detect('{"a": {"value": 1}}', file_name) == NotationTag.DELIMITED_TEXT

    def test_delimited_by_content(self, csv_source):
        """Test non-JSON text with commas and newlines is delimited text."""
        assert detect(csv_source) == NotationTag.DELIMITED_TEXT

    def test_unknown_text(self):
        """Test plain text without delimiters is unknown."""
        assert detect("just some words") == NotationTag.UNKNOWN

    def test_unknown_json(self):
        """Test JSON without any token signature is unknown."""
        assert detect(json.dumps({"a": 1, "b": "two"})) == NotationTag.UNKNOWN


class TestDetectStructure:
    """Tests for detect_structure()."""

    def test_non_object_root(self):
        """Test arrays and scalars are unknown."""
        assert detect_structure([1, 2]) == NotationTag.UNKNOWN
        assert detect_structure("x") == NotationTag.UNKNOWN

    def test_deeply_nested_value_is_style_dictionary(self):
        """Test a nested value key still counts as Style Dictionary."""
        data = {"a": {"b": {"c": {"value": "1px"}}}}

        assert detect_structure(data) == NotationTag.STYLE_DICTIONARY
