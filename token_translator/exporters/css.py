"""CSS custom properties exporter.

Renders every token as a ``--name: value;`` declaration inside ``:root``.
Numeric values of size-like types get a ``px`` unit and durations ``ms``.
"""

import re

from ..collection import group_tokens_by_category
from ..tokens import DesignToken, ExportFormat, TokenType
from .base import ExportOptions, TokenExporter, format_number, stringify_value

PX_TYPES = frozenset(
    [
        TokenType.SPACING,
        TokenType.FONT_SIZE,
        TokenType.BORDER_RADIUS,
        TokenType.BORDER_WIDTH,
        TokenType.DIMENSION,
        TokenType.LETTER_SPACING,
    ]
)


def token_name_to_css_var(name: str, prefix: str = "") -> str:
    """Convert a token path into a custom property name.

    ``colors/primary/500`` becomes ``--colors-primary-500``. camelCase
    segments are split into kebab-case and the name is lowercased.
    Characters that are not valid in an identifier are backslash-escaped.
    """
    ident = re.sub(r"[/\s]+", "-", name)
    ident = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", ident).lower()
    ident = re.sub(r"([^a-z0-9_-])", r"\\\1", ident)
    return f"--{prefix}{ident}"


def format_css_value(token: DesignToken) -> str:
    """Render a token value as a CSS value."""
    value = token.value
    if isinstance(value, int | float) and not isinstance(value, bool):
        if token.type in PX_TYPES:
            return f"{format_number(value)}px"
        if token.type is TokenType.DURATION:
            return f"{format_number(value)}ms"
    return stringify_value(value)


class CSSVariablesExporter(TokenExporter):
    """Exporter for a ``tokens.css`` stylesheet."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.CSS

    @property
    def display_name(self) -> str:
        return "CSS Custom Properties"

    @property
    def usage(self) -> str:
        return (
            "Usage:\n"
            "```html\n"
            '<link rel="stylesheet" href="tokens.css">\n'
            "```\n"
            "Or import in your CSS/SCSS:\n"
            "```css\n"
            "@import './tokens.css';\n"
            "```"
        )

    def render(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[tuple[str, str]]:
        prefix = f"{options.css_prefix}-" if options.css_prefix else ""
        lines: list[str] = []

        if options.generate_docs:
            lines.append("/**")
            lines.append(f" * {collection_name} - CSS Custom Properties")
            if options.generated_at:
                lines.append(f" * Generated: {options.generated_at}")
            lines.append(f" * Total tokens: {len(tokens)}")
            lines.append(" */")
            lines.append("")

        lines.append(":root {")

        if options.group_by_category:
            grouped = group_tokens_by_category(tokens)
            for category in sorted(grouped):
                if options.generate_docs:
                    lines.append(f"  /* {category} */")
                for token in grouped[category]:
                    lines.extend(self._declaration(token, prefix, options))
                lines.append("")
            if grouped:
                lines.pop()
        else:
            for token in tokens:
                lines.extend(self._declaration(token, prefix, options))

        lines.append("}")
        return [("tokens.css", "\n".join(lines) + "\n")]

    def _declaration(
        self, token: DesignToken, prefix: str, options: ExportOptions
    ) -> list[str]:
        lines = []
        if options.generate_docs and token.description:
            lines.append(f"  /* {token.description} */")
        name = token_name_to_css_var(token.name, prefix)
        lines.append(f"  {name}: {format_css_value(token)};")
        return lines
