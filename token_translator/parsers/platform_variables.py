"""Figma variables export parser.

Figma's variables export looks like W3C DTCG, with three differences:
- variable names are free-form labels with spaces and punctuation
- color ``$value`` is a descriptor object (``hex`` and/or ``components``
  plus ``alpha``) rather than a string
- ``$extensions`` carries platform metadata such as ``com.figma.variableId``
"""

import json
import re
from typing import Any

from ..inference import extract_category, infer_token_type
from ..tokens import DesignToken, NotationTag, TokenType
from .base import Leaf, TreeTokenParser

FALLBACK_COLOR = "#000000"
HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]{3,8}")


def sanitize_token_name(name: str) -> str:
    """Convert a free-form variable label into a canonical token name.

    Whitespace becomes a hyphen, characters other than letters, digits,
    hyphens and path separators are stripped, hyphen runs collapse, edge
    hyphens are trimmed and the result is lowercased.
    """
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[^a-zA-Z0-9\-/]", "", name)
    name = re.sub(r"-{2,}", "-", name)
    name = name.strip("-")
    return name.lower()


def is_color_descriptor(value: Any) -> bool:
    """Check whether a ``$value`` is a structured color descriptor."""
    return isinstance(value, dict) and ("hex" in value or "components" in value)


def _channel(component: float) -> int:
    # Round half up, the way the exporting tool rounds
    return int(float(component) * 255 + 0.5)


def hex_to_rgb(hex_value: str) -> tuple[int, int, int]:
    """Split a 3, 4, 6 or 8 digit hex color into its RGB channels.

    Raises:
        ValueError: If the string is not a hex color.
    """
    digits = hex_value.strip().lstrip("#")
    if len(digits) not in (3, 4, 6, 8) or not HEX_DIGITS_PATTERN.fullmatch(digits):
        raise ValueError(f"invalid hex color {hex_value!r}")
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def color_descriptor_to_css(value: dict[str, Any]) -> str:
    """Convert a color descriptor into a CSS color string.

    Returns the hex string when fully opaque, ``rgba()`` when alpha < 1,
    and ``rgb()`` for opaque component-only descriptors.

    Raises:
        ValueError: If the hex string, alpha or a component is malformed.
    """
    alpha = value.get("alpha")
    try:
        alpha = 1.0 if alpha is None else float(alpha)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color alpha {alpha!r}") from e
    hex_value = value.get("hex")

    if hex_value:
        if alpha < 1:
            r, g, b = hex_to_rgb(str(hex_value))
            return f"rgba({r}, {g}, {b}, {alpha:.2f})"
        return str(hex_value)

    components = value.get("components")
    if isinstance(components, list) and len(components) >= 3:
        try:
            r, g, b = (_channel(c) for c in components[:3])
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid color components {components[:3]!r}") from e
        if alpha < 1:
            return f"rgba({r}, {g}, {b}, {alpha:.2f})"
        return f"rgb({r}, {g}, {b})"

    return FALLBACK_COLOR


class PlatformVariablesParser(TreeTokenParser):
    """Parser for the Figma variables JSON export."""

    @property
    def notation(self) -> NotationTag:
        return NotationTag.PLATFORM_VARIABLES

    def is_leaf(self, node: dict[str, Any]) -> bool:
        return "$value" in node

    def build_token(self, leaf: Leaf) -> DesignToken:
        node = leaf.payload
        raw_value = node["$value"]
        declared_type = str(node.get("$type") or "").lower()
        name = sanitize_token_name(leaf.path)

        if is_color_descriptor(raw_value) or (
            declared_type == "color" and isinstance(raw_value, dict)
        ):
            value: str | int | float = color_descriptor_to_css(raw_value)
            token_type = TokenType.COLOR
        elif isinstance(raw_value, bool):
            value = json.dumps(raw_value)
            token_type = TokenType.OTHER
        elif isinstance(raw_value, str | int | float):
            value = raw_value
            token_type = infer_token_type(name, raw_value)
        else:
            value = json.dumps(raw_value)
            token_type = TokenType.OTHER

        return DesignToken(
            name=name,
            value=value,
            type=token_type,
            original_value=raw_value,
            category=extract_category(name),
            description=node.get("$description"),
            extensions=node.get("$extensions"),
        )
