"""Base classes and shared helpers for token exporters.

Exporters render a canonical token list into the files of one target
notation. They never modify the tokens they are given, and they iterate in
collection order so repeated renders are byte-identical.
"""

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..errors import PartialExportWarning
from ..tokens import DesignToken, ExportFormat, TokenType

ALL_TOKEN_TYPES: tuple[TokenType, ...] = tuple(TokenType)

# Tailwind's key for a value that sits next to nested shades
DEFAULT_KEY = "DEFAULT"


@dataclass(frozen=True)
class VirtualFile:
    """An in-memory file destined for packaging."""

    path: str
    content: str
    format: ExportFormat | None = None  # None for the shared manifest

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "content": self.content,
            "format": self.format.value if self.format else None,
        }


@dataclass
class ExportOptions:
    """Options for a single export call.

    Attributes:
        formats: Requested target notations, in order. Unknown names are
            kept as strings so the export can report them.
        include_types: Token types to export.
        group_by_category: Group output by token category where supported.
        include_type_definitions: Emit TypeScript helper types.
        generate_docs: Emit descriptions and header comments.
        css_prefix: Optional prefix for CSS custom property names.
        resolve_references: Replace alias values with their target's value.
        generated_at: Timestamp written to headers and the manifest.
            Omitted from output when None.
    """

    formats: list[ExportFormat | str] = field(
        default_factory=lambda: [ExportFormat.TYPESCRIPT]
    )
    include_types: list[TokenType] = field(
        default_factory=lambda: list(ALL_TOKEN_TYPES)
    )
    group_by_category: bool = True
    include_type_definitions: bool = True
    generate_docs: bool = False
    css_prefix: str | None = None
    resolve_references: bool = False
    generated_at: str | None = None

    def __post_init__(self) -> None:
        if not self.formats:
            raise ValueError("At least one export format is required")

        formats: list[ExportFormat | str] = []
        for requested in self.formats:
            normalized = _coerce_format(requested)
            if normalized not in formats:
                formats.append(normalized)
        self.formats = formats
        self.include_types = [
            t if isinstance(t, TokenType) else TokenType(t) for t in self.include_types
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "formats": [f.value if isinstance(f, ExportFormat) else f for f in self.formats],
            "includeTypes": [t.value for t in self.include_types],
            "groupByCategory": self.group_by_category,
            "includeTypeDefinitions": self.include_type_definitions,
            "generateDocs": self.generate_docs,
            "cssPrefix": self.css_prefix,
            "resolveReferences": self.resolve_references,
            "generatedAt": self.generated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportOptions":
        """Create from dictionary."""
        return cls(
            formats=data.get("formats", [ExportFormat.TYPESCRIPT.value]),
            include_types=data.get("includeTypes", [t.value for t in ALL_TOKEN_TYPES]),
            group_by_category=data.get("groupByCategory", True),
            include_type_definitions=data.get("includeTypeDefinitions", True),
            generate_docs=data.get("generateDocs", False),
            css_prefix=data.get("cssPrefix"),
            resolve_references=data.get("resolveReferences", False),
            generated_at=data.get("generatedAt"),
        )


def _coerce_format(requested: ExportFormat | str) -> ExportFormat | str:
    if isinstance(requested, ExportFormat):
        return requested
    try:
        return ExportFormat(requested)
    except ValueError:
        return requested


@dataclass(frozen=True)
class ExportFailure:
    """A notation that failed to render.

    ``format`` stays a plain string when the requested name is not a known
    export format.
    """

    format: ExportFormat | str
    reason: str

    @property
    def format_name(self) -> str:
        """Requested format as text."""
        if isinstance(self.format, ExportFormat):
            return self.format.value
        return str(self.format)


@dataclass
class ExportResult:
    """Outcome of an export call."""

    files: list[VirtualFile] = field(default_factory=list)
    token_count: int = 0
    formats: list[ExportFormat] = field(default_factory=list)
    format_token_counts: dict[ExportFormat, int] = field(default_factory=dict)
    manifest: VirtualFile | None = None
    failures: list[ExportFailure] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        """Some notations failed while others succeeded."""
        return bool(self.failures) and bool(self.formats)

    @property
    def warning(self) -> PartialExportWarning | None:
        """Warning describing the failed notations of a partial export."""
        if not self.is_partial:
            return None
        return PartialExportWarning(self.failures)

    def all_files(self) -> list[VirtualFile]:
        """Notation files followed by the manifest."""
        if self.manifest is None:
            return list(self.files)
        return [*self.files, self.manifest]

    def files_for(self, export_format: ExportFormat) -> list[VirtualFile]:
        """Files produced for one notation."""
        return [f for f in self.files if f.format is export_format]


class TokenExporter(ABC):
    """Abstract base class for notation exporters."""

    @property
    @abstractmethod
    def format(self) -> ExportFormat:
        """Target notation."""
        ...

    @property
    def supported_types(self) -> tuple[TokenType, ...]:
        """Token types this notation can represent."""
        return ALL_TOKEN_TYPES

    @property
    def folder(self) -> str:
        """Folder that holds this notation's files."""
        return self.format.value

    def select(self, tokens: list[DesignToken]) -> list[DesignToken]:
        """Keep the tokens this notation can represent, in order."""
        supported = set(self.supported_types)
        return [token for token in tokens if token.type in supported]

    def export(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[VirtualFile]:
        """Render the supported subset of ``tokens`` into virtual files."""
        rendered = self.render(self.select(tokens), options, collection_name)
        return [
            VirtualFile(path=f"{self.folder}/{path}", content=content, format=self.format)
            for path, content in rendered
        ]

    @abstractmethod
    def render(
        self,
        tokens: list[DesignToken],
        options: ExportOptions,
        collection_name: str,
    ) -> list[tuple[str, str]]:
        """Render tokens into (relative path, content) pairs.

        Args:
            tokens: Tokens already filtered to supported types.
            options: Export options.
            collection_name: Name of the exported collection.

        Returns:
            Files in a fixed order.
        """
        ...

    @property
    def usage(self) -> str:
        """Short usage guidance for the manifest."""
        return ""

    @property
    def display_name(self) -> str:
        """Human-readable notation name."""
        return self.format.value


class ExporterRegistry:
    """Dispatch table from export format to exporter.

    Built once by the caller (see ``create_exporter_registry``) and passed
    to ``export_tokens`` explicitly.
    """

    def __init__(self) -> None:
        self._exporters: dict[ExportFormat, TokenExporter] = {}

    def register(self, exporter: TokenExporter) -> None:
        """Register an exporter under its format, replacing any previous one."""
        self._exporters[exporter.format] = exporter

    def get_exporter(self, export_format: ExportFormat | str) -> TokenExporter | None:
        """Get the exporter for a format, or None if none is registered."""
        if not isinstance(export_format, ExportFormat):
            return None
        return self._exporters.get(export_format)

    def formats(self) -> list[ExportFormat]:
        """Registered formats in registration order."""
        return list(self._exporters)

    def __contains__(self, export_format: object) -> bool:
        return export_format in self._exporters


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def format_number(value: int | float) -> str:
    """Render a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def stringify_value(value: Any) -> str:
    """Render any token value as text."""
    if isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, int | float):
        return format_number(value)
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def dump_json(data: Any) -> str:
    """Serialize a document the way every JSON exporter writes it."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def assign_nested(tree: dict[str, Any], path: list[str], value: Any) -> None:
    """Place ``value`` at ``path`` in a nested mapping of plain values.

    When a value and a group share a key, the value moves under ``DEFAULT``
    inside the group so neither is lost.
    """
    current = tree
    for key in path[:-1]:
        existing = current.get(key)
        if existing is None:
            existing = current[key] = {}
        elif not isinstance(existing, dict):
            existing = current[key] = {DEFAULT_KEY: existing}
        current = existing

    leaf = path[-1]
    if isinstance(current.get(leaf), dict):
        current[leaf][DEFAULT_KEY] = value
    else:
        current[leaf] = value


def assign_token_node(
    tree: dict[str, Any], path: list[str], node: dict[str, Any]
) -> None:
    """Place a token object at ``path`` in a nested token document."""
    current = tree
    for key in path[:-1]:
        current = current.setdefault(key, {})

    leaf = path[-1]
    if isinstance(current.get(leaf), dict):
        current[leaf].update(node)
    else:
        current[leaf] = node


def unique_key(token: DesignToken, used: set[str]) -> str:
    """Leaf name of a token, or its dashed full name when the leaf is taken.

    A numeric suffix is appended while the dashed name is still taken.
    """
    key = token.leaf_name
    if key in used:
        key = token.name.replace("/", "-")
        base, suffix = key, 2
        while key in used:
            key = f"{base}-{suffix}"
            suffix += 1
    used.add(key)
    return key
