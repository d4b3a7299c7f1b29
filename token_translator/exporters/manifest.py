"""README manifest that accompanies every export bundle."""

from ..tokens import ExportFormat, TokenCollection
from .base import ExportFailure, ExportOptions, ExporterRegistry, VirtualFile

MANIFEST_PATH = "README.md"


def build_manifest(
    collection: TokenCollection,
    options: ExportOptions,
    files: list[VirtualFile],
    token_count: int,
    registry: ExporterRegistry,
    failures: list[ExportFailure] | None = None,
    format_token_counts: dict[ExportFormat, int] | None = None,
) -> VirtualFile:
    """Describe an export bundle.

    Lists every notation that produced files together with its token
    count and usage snippet. Failed notations, the included token types
    and the collection provenance follow.

    Args:
        collection: Exported collection.
        options: Options the export ran with.
        files: Notation files, already prefixed with their folder.
        token_count: Number of tokens after type filtering.
        registry: Registry used for display names and usage snippets.
        failures: Notations that failed to render.
        format_token_counts: Tokens each notation could represent.

    Returns:
        The ``README.md`` virtual file.
    """
    counts = format_token_counts or {}
    lines = [f"# {collection.name} - Design Tokens", ""]
    if options.generated_at:
        lines.append(f"Generated: {options.generated_at}")
    lines.append(f"Total tokens: {token_count}")
    lines.append("")
    lines.append("## Included Formats")
    lines.append("")

    for export_format in options.formats:
        exporter = registry.get_exporter(export_format)
        format_files = [f for f in files if f.format is export_format]
        if exporter is None or not format_files:
            continue
        lines.append(f"### {exporter.display_name}")
        lines.append("")
        if export_format in counts:
            lines.append(f"Tokens: {counts[export_format]}")
            lines.append("")
        lines.extend(f"- `{f.path}`" for f in format_files)
        lines.append("")
        if exporter.usage:
            lines.append(exporter.usage)
            lines.append("")

    if failures:
        lines.append("## Failed Formats")
        lines.append("")
        lines.extend(f"- {f.format_name}: {f.reason}" for f in failures)
        lines.append("")

    lines.append("## Token Types Included")
    lines.append("")
    lines.extend(f"- {token_type.value}" for token_type in options.include_types)
    lines.append("")

    if collection.metadata is not None:
        metadata = collection.metadata
        lines.append("## Source Information")
        lines.append("")
        lines.append(f"- Source: {metadata.source.value}")
        if metadata.file_name:
            lines.append(f"- Original file: {metadata.file_name}")
        lines.append(f"- Imported: {metadata.imported_at}")
        lines.append("")

    return VirtualFile(path=MANIFEST_PATH, content="\n".join(lines))
