"""Export orchestration: filter, resolve, dispatch and package."""

import dataclasses

from ..errors import EmptyResultError, ExportTargetError
from ..tokens import DesignToken, ExportFormat, TokenCollection
from ..translator_logging import LogCategory, get_category_logger
from .base import (
    ExportFailure,
    ExportOptions,
    ExporterRegistry,
    ExportResult,
    TokenExporter,
)
from .manifest import build_manifest
from .registry import create_exporter_registry

logger = get_category_logger(LogCategory.EXPORT)

NO_EXPORTER_REASON = "no registered exporter"


def resolve_references(
    tokens: list[DesignToken], collection: TokenCollection
) -> list[DesignToken]:
    """Replace alias values with their target's value, one hop deep.

    Targets are looked up in the whole collection. A token keeps its
    literal value when the target is missing or is itself an alias.
    """
    by_name = {token.name: token for token in collection}
    resolved: list[DesignToken] = []
    for token in tokens:
        target = by_name.get(token.reference) if token.reference else None
        if target is None or target.is_alias:
            if token.reference:
                logger.debug(
                    f"Leaving reference unresolved: {token.name} -> {token.reference}"
                )
            resolved.append(token)
        else:
            resolved.append(dataclasses.replace(token, value=target.value))
    return resolved


def prepare_tokens(
    collection: TokenCollection, options: ExportOptions
) -> list[DesignToken]:
    """Apply the type filter and optional reference resolution."""
    wanted = set(options.include_types)
    tokens = [token for token in collection if token.type in wanted]
    if options.resolve_references:
        tokens = resolve_references(tokens, collection)
    return tokens


def _split_targets(
    options: ExportOptions, registry: ExporterRegistry
) -> tuple[list[TokenExporter], list[ExportFailure]]:
    """Separate requested formats into exporters and unregistered names.

    Raises:
        ExportTargetError: If none of the requested formats has an exporter.
    """
    exporters: list[TokenExporter] = []
    missing: list[ExportFailure] = []
    for export_format in options.formats:
        exporter = registry.get_exporter(export_format)
        if exporter is None:
            missing.append(ExportFailure(format=export_format, reason=NO_EXPORTER_REASON))
        else:
            exporters.append(exporter)

    if not exporters:
        raise ExportTargetError([f.format_name for f in missing])
    for failure in missing:
        logger.warning(
            f"Skipping {failure.format_name}: {NO_EXPORTER_REASON}",
            extra={"export_format": failure.format_name},
        )
    return exporters, missing


def export_tokens(
    collection: TokenCollection,
    options: ExportOptions | None = None,
    registry: ExporterRegistry | None = None,
) -> ExportResult:
    """Export a collection into every requested notation.

    Args:
        collection: Collection to export. It is never modified.
        options: Export options; defaults to TypeScript only.
        registry: Exporter dispatch table; the built-in exporters are used
            when omitted.

    Returns:
        ExportResult with notation files, the README manifest and the
        notations that failed, if any.

    Raises:
        EmptyResultError: If the collection holds no tokens.
        ExportTargetError: If none of the requested formats has an exporter.
    """
    options = options or ExportOptions()
    if registry is None:
        registry = create_exporter_registry()

    if collection.is_empty:
        raise EmptyResultError(None, message="Cannot export an empty collection")
    exporters, missing = _split_targets(options, registry)

    tokens = prepare_tokens(collection, options)
    result = ExportResult(token_count=len(tokens))
    result.failures.extend(missing)

    for exporter in exporters:
        try:
            files = exporter.export(tokens, options, collection.name)
        except Exception as e:
            logger.error(
                f"Export to {exporter.format.value} failed: {e}",
                extra={"export_format": exporter.format.value},
            )
            result.failures.append(ExportFailure(format=exporter.format, reason=str(e)))
            continue

        count = len(exporter.select(tokens))
        result.files.extend(files)
        result.formats.append(exporter.format)
        result.format_token_counts[exporter.format] = count
        logger.info(
            f"Exported {count} tokens to {exporter.format.value}",
            extra={"export_format": exporter.format.value, "token_count": count},
        )

    if result.formats:
        result.manifest = build_manifest(
            collection,
            options,
            result.files,
            result.token_count,
            registry,
            failures=result.failures,
            format_token_counts=result.format_token_counts,
        )
    else:
        logger.warning("Every requested export format failed")

    return result


def generate_preview(
    collection: TokenCollection,
    export_format: ExportFormat | str,
    options: ExportOptions | None = None,
    registry: ExporterRegistry | None = None,
) -> str:
    """Content of the main file one notation would produce.

    Returns an empty string when the notation produces nothing.

    Raises:
        ExportTargetError: If the format has no exporter.
    """
    if registry is None:
        registry = create_exporter_registry()

    base = options or ExportOptions()
    options = dataclasses.replace(base, formats=[export_format])
    exporter = _split_targets(options, registry)[0][0]
    tokens = prepare_tokens(collection, options)
    files = exporter.export(tokens, options, collection.name)
    if not files:
        return ""
    return files[0].content
