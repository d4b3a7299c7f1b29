"""Delimited text (CSV/TSV) token parser.

Expected columns: name, value, type (optional), category (optional),
description (optional). Header names are matched case-insensitively.
"""

import csv
import re
from typing import Any

from ..errors import FormatError
from ..inference import coerce_token_type, extract_category, infer_token_type
from ..tokens import DesignToken, NotationTag
from ..translator_logging import LogCategory, get_category_logger
from .base import TokenParser

logger = get_category_logger(LogCategory.IMPORT)

NUMERIC_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")

KNOWN_COLUMNS = ("name", "value", "type", "category", "description")


def coerce_numeric(value: str) -> str | int | float:
    """Convert purely numeric cells to int or float."""
    if not NUMERIC_PATTERN.match(value):
        return value
    return float(value) if "." in value else int(value)


def sniff_delimiter(header: str) -> str:
    """Tab when the header is tab-separated, comma otherwise."""
    if "\t" in header and "," not in header:
        return "\t"
    return ","


class DelimitedTextParser(TokenParser):
    """Parser for CSV and TSV token tables."""

    @property
    def notation(self) -> NotationTag:
        return NotationTag.DELIMITED_TEXT

    def load(self, content: str) -> str:
        """Delimited text is parsed straight from the raw content."""
        return content

    def parse(self, root: Any, prefix: str = "") -> list[DesignToken]:
        """Parse a token table.

        Args:
            root: Raw delimited text.
            prefix: Path prefix applied to every token name.

        Returns:
            One token per usable row, in row order.

        Raises:
            FormatError: If the header lacks a name or value column.
        """
        lines = str(root).strip().splitlines()
        if len(lines) < 2:
            return []

        delimiter = sniff_delimiter(lines[0])
        rows = csv.reader(lines, delimiter=delimiter, skipinitialspace=True)
        header = [column.strip().lower() for column in next(rows)]
        columns = {name: header.index(name) for name in KNOWN_COLUMNS if name in header}

        if "name" not in columns or "value" not in columns:
            raise FormatError(
                'CSV must have "name" and "value" columns',
                self.notation.value,
            )

        tokens: list[DesignToken] = []
        for line_number, cells in enumerate(rows, start=2):
            if len(cells) < 2:
                continue

            row = {
                column: cells[index].strip() if index < len(cells) else ""
                for column, index in columns.items()
            }
            name = row["name"]
            raw_value = row["value"]
            if not name or not raw_value:
                logger.warning(f"Skipping row {line_number}: missing name or value")
                continue

            if prefix:
                name = f"{prefix}/{name}"
            value = coerce_numeric(raw_value)
            type_cell = row.get("type", "")
            token_type = coerce_token_type(type_cell) if type_cell else None
            if token_type is None:
                token_type = infer_token_type(name, value, type_cell or None)

            tokens.append(
                DesignToken(
                    name=name,
                    value=value,
                    type=token_type,
                    original_value=value,
                    category=row.get("category") or extract_category(name),
                    description=row.get("description") or None,
                )
            )

        return tokens
