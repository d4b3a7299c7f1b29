"""Token import service.

Detects the notation of raw content, dispatches to the matching parser and
wraps the result in a TokenCollection. Import is all-or-nothing: any
failure raises and no partial token list is returned.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .collection import merge_collections, utc_timestamp
from .detector import detect
from .errors import EmptyResultError, FormatError
from .parsers import ParserRegistry, create_parser_registry
from .tokens import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_VERSION,
    NotationTag,
    TokenCollection,
    TokenCollectionMetadata,
)
from .translator_logging import LogCategory, get_category_logger

logger = get_category_logger(LogCategory.IMPORT)

IMPORT_MODES = ("replace", "merge")

PLATFORM_VARIABLES_DEFAULT_NAME = "Figma Variables"


@dataclass
class ImportOptions:
    """Options controlling a single import."""

    mode: str = "replace"  # "replace" or "merge"
    collection_name: str | None = None  # Overrides the detected name
    file_name: str | None = None  # Original file name, also a detection hint

    def __post_init__(self) -> None:
        if self.mode not in IMPORT_MODES:
            raise ValueError(f"Invalid import mode: {self.mode}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mode": self.mode,
            "collectionName": self.collection_name,
            "fileName": self.file_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImportOptions":
        """Create from dictionary."""
        return cls(
            mode=data.get("mode", "replace"),
            collection_name=data.get("collectionName"),
            file_name=data.get("fileName"),
        )


class TokenImporter:
    """Imports raw token content into canonical collections."""

    def __init__(self, registry: ParserRegistry | None = None):
        """Initialize the importer.

        Args:
            registry: Parser dispatch table. A fresh built-in registry is
                created when omitted.
        """
        self.registry = registry if registry is not None else create_parser_registry()

    def import_content(
        self,
        content: str,
        options: ImportOptions | None = None,
        existing: TokenCollection | None = None,
        imported_at: str | None = None,
    ) -> TokenCollection:
        """Import tokens from raw content.

        Args:
            content: Raw token text.
            options: Import options; defaults to replace mode.
            existing: Collection to merge into when ``options.mode`` is merge.
            imported_at: Optional import timestamp, defaults to now.

        Returns:
            The imported (or merged) collection.

        Raises:
            FormatError: If the notation is unknown or the content is malformed.
            EmptyResultError: If the notation was recognized but had no tokens.
        """
        options = options or ImportOptions()
        notation = detect(content, options.file_name)

        if notation is NotationTag.UNKNOWN:
            raise FormatError("could not detect a supported token format")

        parser = self.registry.get_parser(notation)
        if parser is None:
            raise FormatError("no parser registered", notation.value)

        root = parser.load(content)
        try:
            tokens = parser.parse(root)
        except (TypeError, ValueError) as e:
            raise FormatError(str(e), notation.value) from e
        if not tokens:
            raise EmptyResultError(notation.value)

        logger.info(
            f"Imported {len(tokens)} tokens from {notation.value}",
            extra={"notation": notation.value, "token_count": len(tokens)},
        )

        collection = TokenCollection(
            name=options.collection_name
            or self._detected_name(notation, root, options.file_name),
            version=self._detected_version(notation, root),
            tokens=tuple(tokens),
            metadata=TokenCollectionMetadata(
                source=notation,
                imported_at=imported_at or utc_timestamp(),
                file_name=options.file_name,
            ),
        )

        if options.mode == "merge" and existing is not None:
            return merge_collections(existing, collection, merged_at=imported_at)
        return collection

    def _detected_name(
        self, notation: NotationTag, root: Any, file_name: str | None
    ) -> str:
        if notation is NotationTag.MANUAL and isinstance(root.get("name"), str):
            return root["name"]
        if notation is NotationTag.PLATFORM_VARIABLES:
            if file_name:
                return re.sub(r"\.(tokens\.json|json)$", "", Path(file_name).name, flags=re.I)
            return PLATFORM_VARIABLES_DEFAULT_NAME
        return DEFAULT_COLLECTION_NAME

    def _detected_version(self, notation: NotationTag, root: Any) -> str:
        if notation is NotationTag.MANUAL and isinstance(root.get("version"), str):
            return root["version"]
        return DEFAULT_VERSION


def import_tokens(
    content: str,
    file_name: str | None = None,
    collection_name: str | None = None,
    existing: TokenCollection | None = None,
    mode: str = "replace",
    registry: ParserRegistry | None = None,
    imported_at: str | None = None,
) -> TokenCollection:
    """Convenience function to import raw token content.

    See ``TokenImporter.import_content`` for details.
    """
    importer = TokenImporter(registry)
    options = ImportOptions(
        mode=mode, collection_name=collection_name, file_name=file_name
    )
    return importer.import_content(
        content, options, existing=existing, imported_at=imported_at
    )
