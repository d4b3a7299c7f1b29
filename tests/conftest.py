"""
Shared fixtures for the token translator test suite.

Provides test fixtures for:
- Sample documents in every supported source notation
- A small canonical collection for exporter tests
- Logger cleanup between tests
"""

import json
import logging
from collections.abc import Iterator

import pytest

from token_translator.tokens import (
    DesignToken,
    NotationTag,
    TokenCollection,
    TokenCollectionMetadata,
    TokenType,
)
from token_translator.translator_logging import LOGGER_NAME

# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_translator_logger() -> Iterator[None]:
    """Drop handlers installed by setup_logging so streams do not leak."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


# ---------------------------------------------------------------------------
# Source documents
# ---------------------------------------------------------------------------


@pytest.fixture()
def style_dictionary_source() -> str:
    """Style Dictionary document with nested groups."""
    return json.dumps(
        {
            "colors": {
                "primary": {"value": "#1976D2", "comment": "Brand blue"},
                "secondary": {"value": "#DC004E"},
            },
            "spacing": {
                "small": {"value": "4px"},
                "medium": {"value": "8px"},
            },
        }
    )


@pytest.fixture()
def w3c_source() -> str:
    """W3C DTCG document with a schema marker and group metadata."""
    return json.dumps(
        {
            "$schema": "https://design-tokens.github.io/community-group/format/",
            "color": {
                "$type": "color",
                "brand": {
                    "$value": "#0055FF",
                    "$type": "color",
                    "$description": "Primary brand color",
                },
            },
            "motion": {
                "fast": {"$value": "100ms", "$type": "duration"},
            },
        }
    )


@pytest.fixture()
def token_studio_source() -> str:
    """Token Studio document with a section name and an alias."""
    return json.dumps(
        {
            "global": {
                "blue": {"value": "#0000FF", "type": "color"},
                "brand": {"value": "{global.blue}", "type": "color"},
                "space": {"md": {"value": "16", "type": "spacing"}},
            }
        }
    )


@pytest.fixture()
def platform_variables_source() -> str:
    """Figma variables export with color descriptors and free-form names."""
    return json.dumps(
        {
            "Primitives": {
                "Brand Blue": {
                    "$type": "color",
                    "$value": {
                        "colorSpace": "srgb",
                        "components": [0.098, 0.463, 0.824],
                        "alpha": 1,
                        "hex": "#1976D2",
                    },
                    "$extensions": {"com.figma.variableId": "VariableID:1:2"},
                },
                "Spacing 4": {"$type": "number", "$value": 16},
            }
        }
    )


@pytest.fixture()
def csv_source() -> str:
    """Delimited-text table with all optional columns."""
    return (
        "name,value,type,category,description\n"
        "colors/primary,#1976D2,color,colors,Brand blue\n"
        "radius/sm,4,dimension,,\n"
        "font/body,16,fontSize,typography,\n"
    )


# ---------------------------------------------------------------------------
# Canonical collection
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_tokens() -> list[DesignToken]:
    """Tokens covering every type the TypeScript and Tailwind exporters know."""
    return [
        DesignToken(
            name="colors/primary/500",
            value="#3B82F6",
            type=TokenType.COLOR,
            category="colors",
            description="Primary shade",
        ),
        DesignToken(
            name="colors/neutral/white",
            value="#FFFFFF",
            type=TokenType.COLOR,
            category="colors",
        ),
        DesignToken(name="spacing/sm", value=8, type=TokenType.SPACING, category="spacing"),
        DesignToken(
            name="fontSize/body", value=16, type=TokenType.FONT_SIZE, category="fontSize"
        ),
        DesignToken(
            name="font/sans",
            value="Inter, sans-serif",
            type=TokenType.FONT_FAMILY,
            category="font",
        ),
        DesignToken(name="weight/bold", value=700, type=TokenType.FONT_WEIGHT, category="weight"),
        DesignToken(
            name="lineHeight/tight", value=1.25, type=TokenType.LINE_HEIGHT, category="lineHeight"
        ),
        DesignToken(name="radius/md", value=4, type=TokenType.BORDER_RADIUS, category="radius"),
        DesignToken(
            name="shadow/card",
            value="0 1px 2px rgba(0,0,0,0.1)",
            type=TokenType.SHADOW,
            category="shadow",
        ),
        DesignToken(name="motion/fast", value=150, type=TokenType.DURATION, category="motion"),
    ]


@pytest.fixture()
def sample_collection(sample_tokens: list[DesignToken]) -> TokenCollection:
    """Collection built from sample_tokens with fixed provenance."""
    return TokenCollection(
        name="Sample",
        version="2.0.0",
        tokens=tuple(sample_tokens),
        metadata=TokenCollectionMetadata(
            source=NotationTag.STYLE_DICTIONARY,
            imported_at="2024-01-01T00:00:00+00:00",
            file_name="tokens.json",
        ),
    )
