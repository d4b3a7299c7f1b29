"""Format detection for raw token input.

Classifies untagged text (plus an optional file name hint) into one of the
supported source notations. Signatures overlap, so they are tested
narrowest-first: a wrong guess does not fail, it silently produces
nonsense tokens.
"""

import json
from typing import Any

from .tokens import NotationTag
from .translator_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.IMPORT)

MAX_DETECTION_DEPTH = 10

DELIMITED_TEXT_EXTENSIONS = (".csv", ".tsv")

TOKEN_STUDIO_SECTIONS = frozenset(["global", "light", "dark", "core", "semantic"])

PLATFORM_VARIABLE_ID_KEY = "com.figma.variableId"


def detect(content: str, file_name: str | None = None) -> NotationTag:
    """Detect the notation of raw token content.

    Args:
        content: Raw text as read from the source.
        file_name: Optional original file name used as a hint.

    Returns:
        The detected NotationTag, ``NotationTag.UNKNOWN`` if nothing matched.
    """
    if file_name and file_name.lower().endswith(DELIMITED_TEXT_EXTENSIONS):
        logger.debug(f"Detected delimited-text from file name {file_name}")
        return NotationTag.DELIMITED_TEXT

    try:
        data = json.loads(content)
    except (json.JSONDecodeError, TypeError):
        if "," in content and "\n" in content:
            return NotationTag.DELIMITED_TEXT
        return NotationTag.UNKNOWN

    notation = detect_structure(data)
    logger.debug(f"Detected {notation.value} from document structure")
    return notation


def detect_structure(data: Any) -> NotationTag:
    """Detect the notation of an already-decoded JSON document."""
    if not isinstance(data, dict):
        return NotationTag.UNKNOWN

    if is_platform_variables(data):
        return NotationTag.PLATFORM_VARIABLES

    schema = data.get("$schema")
    if (isinstance(schema, str) and "design-tokens" in schema) or has_w3c_tokens(data):
        return NotationTag.W3C_DTCG

    if is_token_studio(data):
        return NotationTag.TOKEN_STUDIO

    if is_style_dictionary(data):
        return NotationTag.STYLE_DICTIONARY

    if isinstance(data.get("tokens"), list):
        return NotationTag.MANUAL

    return NotationTag.UNKNOWN


def _child_nodes(obj: dict[str, Any]) -> list[dict[str, Any]]:
    return [value for value in obj.values() if isinstance(value, dict)]


def is_platform_variables(obj: dict[str, Any], depth: int = 0) -> bool:
    """Check for a ``$value`` color descriptor or a platform extension marker."""
    if depth > MAX_DETECTION_DEPTH:
        return False

    for node in _child_nodes(obj):
        value = node.get("$value")
        if isinstance(value, dict) and ("hex" in value or "components" in value):
            return True
        extensions = node.get("$extensions")
        if isinstance(extensions, dict) and PLATFORM_VARIABLE_ID_KEY in extensions:
            return True
        if is_platform_variables(node, depth + 1):
            return True
    return False


def has_w3c_tokens(obj: dict[str, Any], depth: int = 0) -> bool:
    """Check whether any nested node carries a ``$value`` key."""
    if depth > MAX_DETECTION_DEPTH:
        return False

    for node in _child_nodes(obj):
        if "$value" in node:
            return True
        if has_w3c_tokens(node, depth + 1):
            return True
    return False


def is_token_studio(obj: dict[str, Any]) -> bool:
    """Check for Token Studio section names or value/type leaves."""
    for key, value in obj.items():
        if key.lower() in TOKEN_STUDIO_SECTIONS:
            return True
        if isinstance(value, dict) and "type" in value:
            return True
    return has_value_type_pairs(obj)


def has_value_type_pairs(obj: dict[str, Any], depth: int = 0) -> bool:
    """Check whether any nested node has sibling ``value`` and ``type`` keys."""
    if depth > MAX_DETECTION_DEPTH:
        return False

    for node in _child_nodes(obj):
        if "value" in node and "type" in node:
            return True
        if has_value_type_pairs(node, depth + 1):
            return True
    return False


def is_style_dictionary(obj: dict[str, Any], depth: int = 0) -> bool:
    """Check whether any nested node has ``value`` without ``$value``."""
    if depth > MAX_DETECTION_DEPTH:
        return False

    for node in _child_nodes(obj):
        if "value" in node and "$value" not in node:
            return True
        if is_style_dictionary(node, depth + 1):
            return True
    return False
