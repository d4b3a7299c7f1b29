"""Tailwind CSS theme exporter."""

import json
from typing import Any

from ..collection import group_tokens_by_type
from ..tokens import DesignToken, ExportFormat, TokenType
from .base import (
    ExportOptions,
    TokenExporter,
    assign_nested,
    format_number,
    stringify_value,
    unique_key,
)

# Theme key for each supported token type, in output order
THEME_KEYS: dict[TokenType, str] = {
    TokenType.COLOR: "colors",
    TokenType.SPACING: "spacing",
    TokenType.FONT_SIZE: "fontSize",
    TokenType.FONT_FAMILY: "fontFamily",
    TokenType.FONT_WEIGHT: "fontWeight",
    TokenType.BORDER_RADIUS: "borderRadius",
    TokenType.SHADOW: "boxShadow",
}

PX_TYPES = frozenset([TokenType.SPACING, TokenType.FONT_SIZE, TokenType.BORDER_RADIUS])


def _with_px(value: Any) -> Any:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return f"{format_number(value)}px"
    return stringify_value(value)


def build_color_palette(
    tokens: list[DesignToken], group_by_category: bool
) -> dict[str, Any]:
    """Nested palette (``colors.primary.500``) or flat dashed keys."""
    colors: dict[str, Any] = {}
    for token in tokens:
        segments = token.segments
        if group_by_category and len(segments) > 1:
            assign_nested(colors, segments, token.value)
        else:
            colors["-".join(segments)] = token.value
    return colors


def build_scale(tokens: list[DesignToken], token_type: TokenType) -> dict[str, Any]:
    """Flat scale keyed by leaf name for every non-color type."""
    scale: dict[str, Any] = {}
    used: set[str] = set()
    for token in tokens:
        key = unique_key(token, used)
        if token_type in PX_TYPES:
            scale[key] = _with_px(token.value)
        elif token_type is TokenType.FONT_FAMILY:
            scale[key] = [
                family.strip()
                for family in stringify_value(token.value).split(",")
                if family.strip()
            ]
        elif token_type is TokenType.FONT_WEIGHT:
            scale[key] = token.value
        else:
            scale[key] = stringify_value(token.value)
    return scale


def build_theme(tokens: list[DesignToken], group_by_category: bool) -> dict[str, Any]:
    """Build the ``theme.extend`` mapping."""
    by_type = group_tokens_by_type(tokens)
    theme: dict[str, Any] = {}
    for token_type, theme_key in THEME_KEYS.items():
        typed = by_type.get(token_type)
        if not typed:
            continue
        if token_type is TokenType.COLOR:
            theme[theme_key] = build_color_palette(typed, group_by_category)
        else:
            theme[theme_key] = build_scale(typed, token_type)
    return theme


class TailwindExporter(TokenExporter):
    """Exporter for Tailwind ``theme.extend`` modules."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.TAILWIND

    @property
    def supported_types(self) -> tuple[TokenType, ...]:
        return tuple(THEME_KEYS)

    @property
    def display_name(self) -> str:
        return "Tailwind CSS"

    @property
    def usage(self) -> str:
        return (
            "Usage:\n"
            "```javascript\n"
            "// tailwind.config.js\n"
            "const tokens = require('./tailwind.tokens.js');\n"
            "module.exports = {\n"
            "  ...tokens,\n"
            "  // your other config\n"
            "};\n"
            "```"
        )

    def render(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[tuple[str, str]]:
        theme = build_theme(tokens, options.group_by_category)
        body = json.dumps(theme, indent=2, ensure_ascii=False)
        extend = body.replace("\n", "\n    ")

        config = (
            "/** @type {import('tailwindcss').Config} */\n"
            "module.exports = {\n"
            "  theme: {\n"
            f"    extend: {extend},\n"
            "  },\n"
            "};\n"
        )
        module = (
            f"// {collection_name} - Tailwind Theme Tokens\n"
            "// Import and spread into your tailwind.config.js theme.extend\n"
            "\n"
            f"export const tokens = {body};\n"
            "\n"
            "export default tokens;\n"
        )
        return [("tailwind.tokens.js", config), ("tailwind.tokens.mjs", module)]
