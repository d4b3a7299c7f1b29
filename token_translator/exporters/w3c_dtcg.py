"""W3C Design Token Community Group (DTCG) exporter."""

from typing import Any

from ..tokens import DesignToken, ExportFormat, TokenType
from .base import ExportOptions, TokenExporter, assign_token_node, dump_json

W3C_SCHEMA_URL = "https://design-tokens.github.io/community-group/format/"

W3C_TYPES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.SPACING: "dimension",
    TokenType.FONT_SIZE: "dimension",
    TokenType.FONT_FAMILY: "fontFamily",
    TokenType.FONT_WEIGHT: "fontWeight",
    TokenType.LINE_HEIGHT: "number",
    TokenType.LETTER_SPACING: "dimension",
    TokenType.BORDER_RADIUS: "dimension",
    TokenType.BORDER_WIDTH: "dimension",
    TokenType.SHADOW: "shadow",
    TokenType.OPACITY: "number",
    TokenType.DURATION: "duration",
    TokenType.CUBIC_BEZIER: "cubicBezier",
    TokenType.DIMENSION: "dimension",
    TokenType.OTHER: "string",
}


class W3CTokenExporter(TokenExporter):
    """Exporter for W3C DTCG ``tokens.json``."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.W3C_DTCG

    @property
    def display_name(self) -> str:
        return "W3C Design Token Community Group (DTCG)"

    @property
    def usage(self) -> str:
        return (
            "Usage:\n"
            "Import the tokens.json file into any tool that supports W3C DTCG format."
        )

    def render(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[tuple[str, str]]:
        output: dict[str, Any] = {"$schema": W3C_SCHEMA_URL}

        for token in tokens:
            node: dict[str, Any] = {"$value": token.value}
            if token.type is not TokenType.OTHER:
                node["$type"] = W3C_TYPES[token.type]
            if options.generate_docs and token.description:
                node["$description"] = token.description
            if token.extensions:
                node["$extensions"] = token.extensions
            assign_token_node(output, token.segments, node)

        return [("tokens.json", dump_json(output))]
