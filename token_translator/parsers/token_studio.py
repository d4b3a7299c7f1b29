"""Token Studio parser.

Token Studio leaves always carry both ``value`` and ``type``. String values
wrapped in braces (``{colors.primary}``) are aliases; the alias target is
recorded on the token but not resolved here.
"""

import re
from typing import Any

from ..inference import extract_category, map_token_studio_type
from ..tokens import NAME_DELIMITER, DesignToken, NotationTag
from .base import Leaf, TreeTokenParser

ALIAS_PATTERN = re.compile(r"^\{([^{}]+)\}$")


def parse_alias(value: Any) -> str | None:
    """Return the normalized alias path of a ``{a.b.c}`` value, else None."""
    if not isinstance(value, str):
        return None
    match = ALIAS_PATTERN.match(value.strip())
    if not match:
        return None
    return match.group(1).strip().replace(".", NAME_DELIMITER)


class TokenStudioParser(TreeTokenParser):
    """Parser for Token Studio (Figma Tokens) JSON."""

    @property
    def notation(self) -> NotationTag:
        return NotationTag.TOKEN_STUDIO

    def is_leaf(self, node: dict[str, Any]) -> bool:
        return "value" in node and "type" in node

    def build_token(self, leaf: Leaf) -> DesignToken:
        node = leaf.payload
        value = node["value"]
        type_name = node["type"]

        return DesignToken(
            name=leaf.path,
            value=value,
            type=map_token_studio_type(str(type_name)),
            original_value=value,
            category=extract_category(leaf.path),
            description=node.get("description"),
            reference=parse_alias(value),
        )
