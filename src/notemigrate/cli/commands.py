"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from notemigrate.config import Settings, load_config
from notemigrate.core.discover import discover
from notemigrate.core.errors import MigrationError
from notemigrate.core.pipeline import run_migration, validate_paths


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(levelname)s: %(message)s")


LogLevel = Annotated[str, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")]


def migrate_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Exported notes directory")] = None,
    posts: Annotated[Optional[str], typer.Option("--posts-dir", help="Output documents directory")] = None,
    media: Annotated[Optional[str], typer.Option("--media-dir", help="Shared media directory")] = None,
    metadata: Annotated[Optional[bool], typer.Option("--metadata/--no-metadata", help="Write YAML front matter")] = None,
    placeholder: Annotated[Optional[bool], typer.Option("--placeholder/--literal", help="Rewrite media references to the placeholder token")] = None,
    pretty: Annotated[Optional[bool], typer.Option("--prettify/--no-prettify", help="Pretty-print content")] = None,
    anchored: Annotated[Optional[bool], typer.Option("--anchored/--unanchored", help="Only rewrite folder names at path boundaries")] = None,
    index_policy: Annotated[Optional[str], typer.Option("--index-policy", help="exclude or include")] = None,
    on_error: Annotated[Optional[str], typer.Option("--on-error", help="abort or skip")] = None,
    keep_source: Annotated[bool, typer.Option("--keep-source", help="Do not delete the import directory")] = False,
    log_level: LogLevel = "INFO",
    ):
    """Convert every exported note, relocate media, and remove the source tree."""
    _configure_logging(log_level)
    overrides = {
        "import_path": path, "posts_path": posts, "media_path": media,
        "prettify": pretty, "anchored_rewrite": anchored,
        "index_policy": index_policy, "on_error": on_error,
    }
    if metadata is not None:
        overrides["metadata_mode"] = "frontmatter" if metadata else "none"
    if placeholder is not None:
        overrides["media_ref_mode"] = "placeholder" if placeholder else "path"
    if keep_source:
        overrides["cleanup"] = False
    settings = _settings(overrides=overrides)

    try:
        report = run_migration(settings)
    except MigrationError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Migration aborted", e)

    for src, out_file in report.written:
        typer.echo(f"  {src} -> {out_file}")
    for src, reason in report.failed:
        typer.echo(f"  failed: {src} ({reason})", err=True)
    typer.echo(
        f"Migrated {len(report.written)} document(s), "
        f"copied {len(report.copied)} media file(s), "
        f"skipped {len(report.skipped_media)}"
    )
    if report.failed:
        raise typer.Exit(1)


def scan_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Exported notes directory")] = None,
    index_policy: Annotated[Optional[str], typer.Option("--index-policy", help="exclude or include")] = None,
    log_level: LogLevel = "WARNING",
    ):
    """List what a migration would process without modifying anything."""
    _configure_logging(log_level)
    settings = _settings(overrides={"import_path": path, "index_policy": index_policy})
    try:
        validate_paths(settings, outputs=False)
    except MigrationError as e:
        _fail(str(e))

    import_set = discover(settings)
    for doc in import_set.documents:
        typer.echo(f"  document: {doc.name}")
    for folder in import_set.resource_folders:
        typer.echo(f"  resources: {folder.name}")
    if import_set.index is not None:
        typer.echo(f"  index (excluded): {import_set.index.name}")
    typer.echo(
        f"Found {len(import_set.documents)} document(s), "
        f"{len(import_set.resource_folders)} resource folder(s), "
        f"{len(import_set.resource_files)} resource file(s) in {Path(settings.import_path)}/"
    )
