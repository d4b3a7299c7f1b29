"""Click-based CLI for token-translator."""

import sys
import warnings
from pathlib import Path
from typing import Any

import click

from . import __version__
from .collection import get_token_stats, utc_timestamp
from .config import TranslatorConfig, load_config
from .detector import detect
from .errors import TokenError
from .exporters import export_tokens
from .exporters.base import dump_json
from .importer import import_tokens
from .tokens import ExportFormat, TokenCollection, TokenType
from .translator_logging import LogCategory, get_category_logger, setup_logging

logger = get_category_logger(LogCategory.CLI)

# Exit code when some export formats failed and others succeeded
PARTIAL_EXIT_CODE = 2

FORMAT_CHOICES = [f.value for f in ExportFormat]
TYPE_CHOICES = [t.value for t in TokenType]


def common_options(f: Any) -> Any:
    """Options shared by every command."""
    f = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")(f)
    f = click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")(f)
    f = click.option(
        "--config",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Configuration file path",
    )(f)
    return f


def _fail(error: TokenError) -> None:
    click.echo(error.format(use_color=sys.stderr.isatty()), err=True)
    sys.exit(error.exit_code)


def _prepare(
    verbose: bool, quiet: bool, config_file: Path | None, **overrides: Any
) -> TranslatorConfig:
    """Load configuration and configure logging for a command."""
    if verbose and quiet:
        click.echo("Error: --quiet and --verbose are mutually exclusive", err=True)
        sys.exit(1)

    config = load_config(config_file=config_file, **overrides)
    setup_logging(
        level=config.log_level,
        quiet=quiet,
        verbose=verbose,
        log_file=config.log_file,
        log_format=config.log_format,
    )
    return config


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.FileError(str(path), hint=str(e)) from e


def _echo_stats(collection: TokenCollection) -> None:
    stats = get_token_stats(collection)
    click.echo(f"Collection: {collection.name} (v{collection.version})")
    click.echo(f"Total tokens: {stats.total}")
    click.echo("By type:")
    for type_name, count in stats.by_type.items():
        click.echo(f"   {type_name}: {count}")
    click.echo("By category:")
    for category, count in stats.by_category.items():
        click.echo(f"   {category}: {count}")


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Token Translator - normalize and export design tokens."""


@cli.command("detect")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@common_options
def detect_command(file: Path, verbose: bool, quiet: bool, config: Path | None) -> None:
    """Print the detected notation of FILE."""
    try:
        _prepare(verbose, quiet, config)
        notation = detect(_read(file), file.name)
    except TokenError as e:
        _fail(e)
        return
    click.echo(notation.value)


@cli.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", help="Collection name (overrides the detected name)")
@click.option(
    "--merge-with",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Existing token file to merge the import into",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the collection as JSON",
)
@common_options
def import_command(
    file: Path,
    name: str | None,
    merge_with: Path | None,
    output: Path | None,
    verbose: bool,
    quiet: bool,
    config: Path | None,
) -> None:
    """Import FILE and print a summary of its tokens."""
    try:
        settings = _prepare(verbose, quiet, config, collection_name=name)
        existing = None
        if merge_with is not None:
            existing = import_tokens(_read(merge_with), file_name=merge_with.name)
        collection = import_tokens(
            _read(file),
            file_name=file.name,
            collection_name=settings.collection_name,
            existing=existing,
            mode="merge" if existing is not None else "replace",
        )
    except TokenError as e:
        _fail(e)
        return

    if not quiet:
        _echo_stats(collection)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(dump_json(collection.to_dict()) + "\n", encoding="utf-8")
        if not quiet:
            click.echo(f"Wrote {output}")


@cli.command("export")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "formats",
    multiple=True,
    type=click.Choice(FORMAT_CHOICES),
    help="Target notation (repeatable)",
)
@click.option(
    "--type",
    "-t",
    "types",
    multiple=True,
    type=click.Choice(TYPE_CHOICES),
    help="Token type to include (repeatable, default: all)",
)
@click.option("--prefix", help="Prefix for CSS custom property names")
@click.option(
    "--docs/--no-docs", default=None, help="Include descriptions and header comments"
)
@click.option(
    "--resolve-references/--keep-references",
    default=None,
    help="Replace alias values with their target's value",
)
@click.option("--name", help="Collection name used in headers and the README")
@click.option(
    "--out-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Directory to write the export bundle into",
)
@common_options
def export_command(
    file: Path,
    formats: tuple[str, ...],
    types: tuple[str, ...],
    prefix: str | None,
    docs: bool | None,
    resolve_references: bool | None,
    name: str | None,
    out_dir: Path,
    verbose: bool,
    quiet: bool,
    config: Path | None,
) -> None:
    """Import FILE and export it into OUT_DIR in every requested notation."""
    try:
        settings = _prepare(
            verbose,
            quiet,
            config,
            default_formats=list(formats) or None,
            default_include_types=list(types) or None,
            css_prefix=prefix,
            generate_docs=docs,
            resolve_references=resolve_references,
            collection_name=name,
        )
        collection = import_tokens(
            _read(file),
            file_name=file.name,
            collection_name=settings.collection_name,
        )
        options = settings.to_export_options(generated_at=utc_timestamp())
        result = export_tokens(collection, options)
    except TokenError as e:
        _fail(e)
        return

    if not result.formats:
        for failure in result.failures:
            click.echo(f"Error: {failure.format_name}: {failure.reason}", err=True)
        sys.exit(1)

    for virtual_file in result.all_files():
        target = out_dir / virtual_file.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(virtual_file.content, encoding="utf-8")
        logger.debug(f"Wrote {target}", extra={"path": str(target)})

    if not quiet:
        click.echo(
            f"Exported {result.token_count} tokens to {len(result.formats)} format(s) "
            f"in {out_dir}"
        )
        for export_format in result.formats:
            count = result.format_token_counts.get(export_format, 0)
            click.echo(f"   {export_format.value}: {count} tokens")

    warning = result.warning
    if warning is not None:
        warnings.warn(warning, stacklevel=1)
        for failure in result.failures:
            click.echo(f"Failed: {failure.format_name}: {failure.reason}", err=True)
        sys.exit(PARTIAL_EXIT_CODE)


@cli.command("stats")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@common_options
def stats_command(file: Path, verbose: bool, quiet: bool, config: Path | None) -> None:
    """Print per-type and per-category token counts for FILE."""
    try:
        settings = _prepare(verbose, quiet, config)
        collection = import_tokens(
            _read(file), file_name=file.name, collection_name=settings.collection_name
        )
    except TokenError as e:
        _fail(e)
        return
    _echo_stats(collection)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
