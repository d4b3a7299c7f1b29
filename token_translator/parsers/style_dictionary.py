"""Style Dictionary token parser.

Style Dictionary documents nest groups freely and mark tokens with a bare
``value`` key, optionally alongside ``type``, ``description`` or
``comment``.
"""

from typing import Any

from ..inference import extract_category, infer_token_type
from ..tokens import DesignToken, NotationTag
from .base import Leaf, TreeTokenParser


class StyleDictionaryParser(TreeTokenParser):
    """Parser for Style Dictionary JSON."""

    @property
    def notation(self) -> NotationTag:
        return NotationTag.STYLE_DICTIONARY

    def is_leaf(self, node: dict[str, Any]) -> bool:
        return "value" in node and not isinstance(node["value"], dict)

    def build_token(self, leaf: Leaf) -> DesignToken:
        node = leaf.payload
        value = node["value"]
        hint = node.get("type")

        return DesignToken(
            name=leaf.path,
            value=value,
            type=infer_token_type(leaf.path, value, hint if isinstance(hint, str) else None),
            original_value=value,
            category=extract_category(leaf.path),
            description=node.get("description") or node.get("comment"),
        )
