"""Token type inference.

Assigns a semantic TokenType to tokens that arrive without usable type
metadata, and maps notation-specific type names onto TokenType.
"""

from typing import Any

from .tokens import NAME_DELIMITER, TokenType

# Keyword table for explicit type hints. Order matters: the first rule whose
# keywords all occur in the hint wins.
HINT_RULES: list[tuple[tuple[str, ...], TokenType]] = [
    (("color",), TokenType.COLOR),
    (("spacing",), TokenType.SPACING),
    (("space",), TokenType.SPACING),
    (("size", "font"), TokenType.FONT_SIZE),
    (("font", "family"), TokenType.FONT_FAMILY),
    (("weight",), TokenType.FONT_WEIGHT),
    (("line", "height"), TokenType.LINE_HEIGHT),
    (("letter", "spacing"), TokenType.LETTER_SPACING),
    (("radius",), TokenType.BORDER_RADIUS),
    (("shadow",), TokenType.SHADOW),
    (("elevation",), TokenType.SHADOW),
    (("opacity",), TokenType.OPACITY),
    (("duration",), TokenType.DURATION),
    (("time",), TokenType.DURATION),
]

# Keyword table for token names. Color keywords come first so compound
# names such as "shadow-color" resolve to color.
NAME_RULES: list[tuple[tuple[str, ...], TokenType]] = [
    (("color", "fill", "stroke"), TokenType.COLOR),
    (("spacing", "gap", "margin", "padding"), TokenType.SPACING),
    (("font-size", "fontsize", "text-size"), TokenType.FONT_SIZE),
    (("font-family", "fontfamily", "typeface"), TokenType.FONT_FAMILY),
    (("font-weight", "fontweight", "weight"), TokenType.FONT_WEIGHT),
    (("line-height", "lineheight"), TokenType.LINE_HEIGHT),
    (("letter-spacing", "letterspacing"), TokenType.LETTER_SPACING),
    (("radius", "corner"), TokenType.BORDER_RADIUS),
    (("border-width", "borderwidth", "stroke-width"), TokenType.BORDER_WIDTH),
    (("shadow", "elevation"), TokenType.SHADOW),
    (("opacity", "alpha"), TokenType.OPACITY),
    (("duration", "delay"), TokenType.DURATION),
]

W3C_TYPE_MAP: dict[str, TokenType] = {
    "color": TokenType.COLOR,
    "dimension": TokenType.SPACING,
    "fontFamily": TokenType.FONT_FAMILY,
    "fontWeight": TokenType.FONT_WEIGHT,
    "duration": TokenType.DURATION,
    "cubicBezier": TokenType.CUBIC_BEZIER,
    "shadow": TokenType.SHADOW,
}

# Keys are lowercase; Token Studio type names are matched case-insensitively
TOKEN_STUDIO_TYPE_MAP: dict[str, TokenType] = {
    "color": TokenType.COLOR,
    "spacing": TokenType.SPACING,
    "sizing": TokenType.DIMENSION,
    "borderradius": TokenType.BORDER_RADIUS,
    "borderwidth": TokenType.BORDER_WIDTH,
    "fontfamilies": TokenType.FONT_FAMILY,
    "fontweights": TokenType.FONT_WEIGHT,
    "fontsizes": TokenType.FONT_SIZE,
    "lineheights": TokenType.LINE_HEIGHT,
    "letterspacing": TokenType.LETTER_SPACING,
    "paragraphspacing": TokenType.SPACING,
    "boxshadow": TokenType.SHADOW,
    "opacity": TokenType.OPACITY,
}


def _match_rules(
    text: str, rules: list[tuple[tuple[str, ...], TokenType]], require_all: bool
) -> TokenType | None:
    for keywords, token_type in rules:
        if require_all:
            matched = all(keyword in text for keyword in keywords)
        else:
            matched = any(keyword in text for keyword in keywords)
        if matched:
            return token_type
    return None


def infer_token_type(name: str, value: Any, hint: str | None = None) -> TokenType:
    """Infer a token's type from an explicit hint, its name and its value.

    Resolution order:
    1. Explicit hint mapped through the hint keyword table
    2. Keywords in the token name (color keywords before generic ones)
    3. Value shape (color functions, dimension and duration suffixes)
    4. ``TokenType.OTHER``

    Args:
        name: Token name, any delimiter.
        value: Token value.
        hint: Optional notation-supplied type string.

    Returns:
        The inferred TokenType.
    """
    if hint:
        hinted = _match_rules(hint.lower(), HINT_RULES, require_all=True)
        if hinted is not None:
            return hinted

    by_name = _match_rules(name.lower(), NAME_RULES, require_all=False)
    if by_name is not None:
        return by_name

    if isinstance(value, str):
        if value.startswith(("#", "rgb", "hsl")):
            return TokenType.COLOR
        if value.endswith(("px", "rem", "em")):
            return TokenType.DIMENSION
        if value.endswith(("ms", "s")):
            return TokenType.DURATION

    return TokenType.OTHER


def map_w3c_type(type_name: str | None) -> TokenType | None:
    """Map a W3C DTCG ``$type`` onto TokenType, None when unmapped."""
    if not type_name:
        return None
    return W3C_TYPE_MAP.get(type_name)


def map_token_studio_type(type_name: str) -> TokenType:
    """Map a Token Studio ``type`` onto TokenType."""
    return TOKEN_STUDIO_TYPE_MAP.get(type_name.lower(), TokenType.OTHER)


def coerce_token_type(type_name: str) -> TokenType | None:
    """Return the TokenType whose value equals ``type_name``, if any."""
    try:
        return TokenType(type_name.strip())
    except ValueError:
        return None


def extract_category(name: str) -> str | None:
    """First path segment of a multi-segment token name."""
    parts = name.split(NAME_DELIMITER)
    if len(parts) > 1:
        return parts[0]
    return None
