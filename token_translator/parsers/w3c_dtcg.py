"""W3C Design Token Community Group (DTCG) parser.

DTCG tokens are marked by ``$value`` and carry ``$type``, ``$description``
and ``$extensions``. Other ``$``-prefixed keys (``$schema``, group-level
``$type``) are metadata and never become tokens.
"""

from typing import Any

from ..inference import extract_category, infer_token_type, map_w3c_type
from ..tokens import DesignToken, NotationTag
from .base import Leaf, TreeTokenParser


class W3CTokenParser(TreeTokenParser):
    """Parser for W3C DTCG JSON."""

    @property
    def notation(self) -> NotationTag:
        return NotationTag.W3C_DTCG

    def is_leaf(self, node: dict[str, Any]) -> bool:
        return "$value" in node

    def build_token(self, leaf: Leaf) -> DesignToken:
        node = leaf.payload
        value = node["$value"]
        token_type = map_w3c_type(node.get("$type")) or infer_token_type(
            leaf.path, value
        )

        return DesignToken(
            name=leaf.path,
            value=value,
            type=token_type,
            original_value=value,
            category=extract_category(leaf.path),
            description=node.get("$description"),
            extensions=node.get("$extensions"),
        )
