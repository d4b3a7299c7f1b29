"""Token Translator.

Normalizes design tokens from Style Dictionary, W3C DTCG, Token Studio,
Figma variables and CSV sources into one canonical collection, and exports
that collection as Style Dictionary, W3C DTCG, CSS custom properties,
Tailwind theme and TypeScript files.
"""

__version__ = "1.0.0"

from .collection import (
    TokenStats,
    filter_tokens_by_type,
    get_token_stats,
    group_tokens_by_category,
    group_tokens_by_type,
    merge_collections,
)
from .detector import detect, detect_structure
from .errors import (
    ConfigurationError,
    EmptyResultError,
    ExportTargetError,
    FormatError,
    PartialExportWarning,
    TokenError,
)
from .exporters import (
    ExportOptions,
    ExportResult,
    VirtualFile,
    create_exporter_registry,
    export_tokens,
    generate_preview,
)
from .importer import ImportOptions, TokenImporter, import_tokens
from .inference import infer_token_type
from .parsers import create_parser_registry
from .tokens import (
    DesignToken,
    ExportFormat,
    NotationTag,
    TokenCollection,
    TokenCollectionMetadata,
    TokenType,
)

__all__ = [
    "__version__",
    # Models
    "DesignToken",
    "TokenCollection",
    "TokenCollectionMetadata",
    "TokenType",
    "NotationTag",
    "ExportFormat",
    # Import
    "detect",
    "detect_structure",
    "infer_token_type",
    "import_tokens",
    "ImportOptions",
    "TokenImporter",
    "create_parser_registry",
    # Collections
    "merge_collections",
    "filter_tokens_by_type",
    "group_tokens_by_category",
    "group_tokens_by_type",
    "get_token_stats",
    "TokenStats",
    # Export
    "export_tokens",
    "generate_preview",
    "create_exporter_registry",
    "ExportOptions",
    "ExportResult",
    "VirtualFile",
    # Errors
    "TokenError",
    "FormatError",
    "EmptyResultError",
    "ExportTargetError",
    "ConfigurationError",
    "PartialExportWarning",
]
