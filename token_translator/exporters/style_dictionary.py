"""Style Dictionary exporter.

Writes a nested ``tokens.json`` source plus a ``config.json`` that builds
CSS variables and an ES6 module with the Style Dictionary CLI.
"""

from typing import Any

from ..tokens import DesignToken, ExportFormat, TokenType
from .base import ExportOptions, TokenExporter, assign_token_node, dump_json

STYLE_DICTIONARY_TYPES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.SPACING: "size",
    TokenType.FONT_SIZE: "size",
    TokenType.FONT_FAMILY: "fontFamily",
    TokenType.FONT_WEIGHT: "fontWeight",
    TokenType.LINE_HEIGHT: "lineHeight",
    TokenType.LETTER_SPACING: "letterSpacing",
    TokenType.BORDER_RADIUS: "size",
    TokenType.BORDER_WIDTH: "size",
    TokenType.SHADOW: "shadow",
    TokenType.OPACITY: "opacity",
    TokenType.DURATION: "time",
    TokenType.CUBIC_BEZIER: "cubicBezier",
    TokenType.DIMENSION: "size",
    TokenType.OTHER: "other",
}

BUILD_CONFIG: dict[str, Any] = {
    "source": ["tokens.json"],
    "platforms": {
        "css": {
            "transformGroup": "css",
            "buildPath": "build/css/",
            "files": [{"destination": "variables.css", "format": "css/variables"}],
        },
        "js": {
            "transformGroup": "js",
            "buildPath": "build/js/",
            "files": [{"destination": "tokens.js", "format": "javascript/es6"}],
        },
    },
}


class StyleDictionaryExporter(TokenExporter):
    """Exporter for Style Dictionary source files."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.STYLE_DICTIONARY

    @property
    def display_name(self) -> str:
        return "Style Dictionary"

    @property
    def usage(self) -> str:
        return (
            "Usage:\n"
            "```bash\n"
            "npm install style-dictionary\n"
            "npx style-dictionary build --config config.json\n"
            "```"
        )

    def render(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[tuple[str, str]]:
        output: dict[str, Any] = {}

        for token in tokens:
            node: dict[str, Any] = {"value": token.value}
            if token.type is not TokenType.OTHER:
                node["type"] = STYLE_DICTIONARY_TYPES[token.type]
            if options.generate_docs and token.description:
                node["comment"] = token.description
            assign_token_node(output, token.segments, node)

        return [
            ("tokens.json", dump_json(output)),
            ("config.json", dump_json(BUILD_CONFIG)),
        ]
