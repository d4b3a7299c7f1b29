"""TypeScript theme exporter.

Emits ``theme.ts`` with one ``as const`` object per supported token type,
a combined ``theme`` object, its ``Theme`` type and optional key helpers.
"""

import re
from dataclasses import dataclass
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

IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")


@dataclass(frozen=True)
class _ThemeSection:
    name: str
    nested: bool = False  # Follows group_by_category when True
    px: bool = False


THEME_SECTIONS: dict[TokenType, _ThemeSection] = {
    TokenType.COLOR: _ThemeSection("colors", nested=True),
    TokenType.SPACING: _ThemeSection("spacing", nested=True, px=True),
    TokenType.FONT_SIZE: _ThemeSection("fontSize", nested=True, px=True),
    TokenType.FONT_FAMILY: _ThemeSection("fontFamily"),
    TokenType.FONT_WEIGHT: _ThemeSection("fontWeight"),
    TokenType.LINE_HEIGHT: _ThemeSection("lineHeight"),
    TokenType.BORDER_RADIUS: _ThemeSection("borderRadius", px=True),
    TokenType.SHADOW: _ThemeSection("shadows"),
}


def sanitize_key(key: str) -> str:
    """Quote object keys that are not valid identifiers."""
    if IDENTIFIER_PATTERN.match(key):
        return key
    return quote_string(key)


def quote_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_ts_value(value: Any, px: bool = False) -> str:
    """Render a value as a TypeScript literal."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        if px:
            return quote_string(f"{format_number(value)}px")
        return format_number(value)
    return quote_string(stringify_value(value))


def serialize_nested(tree: dict[str, Any], indent: int) -> list[str]:
    """Serialize a nested mapping of pre-rendered literals."""
    lines: list[str] = []
    spaces = "  " * indent
    for key, value in tree.items():
        if isinstance(value, dict):
            lines.append(f"{spaces}{sanitize_key(key)}: {{")
            lines.extend(serialize_nested(value, indent + 1))
            lines.append(f"{spaces}}},")
        else:
            lines.append(f"{spaces}{sanitize_key(key)}: {value},")
    return lines


def render_object(
    name: str, tokens: list[DesignToken], nested: bool, px: bool
) -> list[str]:
    """Render one ``export const <name> = {...} as const;`` block."""
    lines = [f"export const {name} = {{"]

    if nested:
        tree: dict[str, Any] = {}
        for token in tokens:
            assign_nested(tree, token.segments, format_ts_value(token.value, px))
        lines.extend(serialize_nested(tree, 1))
    else:
        used: set[str] = set()
        for token in tokens:
            key = sanitize_key(unique_key(token, used))
            lines.append(f"  {key}: {format_ts_value(token.value, px)},")

    lines.append("} as const;")
    lines.append("")
    return lines


class TypeScriptExporter(TokenExporter):
    """Exporter for a typed ``theme.ts`` module."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.TYPESCRIPT

    @property
    def supported_types(self) -> tuple[TokenType, ...]:
        return tuple(THEME_SECTIONS)

    @property
    def display_name(self) -> str:
        return "TypeScript"

    @property
    def usage(self) -> str:
        return (
            "Usage:\n"
            "```typescript\n"
            "import { theme, colors, spacing } from './theme';\n"
            "\n"
            "const primaryColor = colors.primary[500];\n"
            "```"
        )

    def render(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[tuple[str, str]]:
        lines = ["/**", f" * {collection_name} - Design Tokens"]
        if options.generated_at:
            lines.append(f" * Generated: {options.generated_at}")
        lines.extend([" *", " * This file is auto-generated. Do not edit manually.", " */", ""])

        by_type = group_tokens_by_type(tokens)
        exported: list[str] = []
        for token_type, section in THEME_SECTIONS.items():
            typed = by_type.get(token_type)
            if not typed:
                continue
            nested = section.nested and options.group_by_category
            lines.extend(render_object(section.name, typed, nested, section.px))
            exported.append(section.name)

        lines.append("export const theme = {")
        lines.extend(f"  {name}," for name in exported)
        lines.append("} as const;")
        lines.append("")
        lines.append("export type Theme = typeof theme;")

        if options.include_type_definitions and exported:
            lines.append("")
            lines.append("// Token type helpers")
            for name in exported:
                type_name = f"{name[0].upper()}{name[1:]}Token"
                lines.append(f"export type {type_name} = keyof typeof {name};")

        lines.append("")
        return [("theme.ts", "\n".join(lines))]
