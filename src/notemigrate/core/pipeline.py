"""Migration step functions: validate, transform, relocate media, and clean up"""

import logging
import shutil
from pathlib import Path

from notemigrate.config import Settings
from notemigrate.core.discover import discover, read_index
from notemigrate.core.errors import DocumentError, PreconditionError
from notemigrate.core.export import build_document, write_document
from notemigrate.core.extract.content import extract_content
from notemigrate.core.extract.metadata import extract_metadata
from notemigrate.core.models import ImportSet, MigrationReport
from notemigrate.core.parse import read_document


logger = logging.getLogger(__name__)


def validate_paths(settings: Settings, outputs: bool = True) -> None:
    """Raise PreconditionError naming every configured directory that does not exist."""
    configured = [settings.import_path]
    if outputs:
        configured += [settings.posts_path, settings.media_path]
    missing = [p for p in configured if not Path(p).is_dir()]
    if missing:
        raise PreconditionError(missing)


def transform_document(path: Path, import_set: ImportSet, settings: Settings) -> str:
    """Run one note through extraction, rewriting, and serialization."""
    doc = read_document(path)
    frontmatter = extract_metadata(doc) if settings.metadata_mode == 'frontmatter' else None
    fragment = extract_content(
        doc,
        import_set.resource_folders,
        settings.media_reference,
        container=settings.content_tag,
        anchored=settings.anchored_rewrite,
    )
    return build_document(frontmatter, fragment, pretty=settings.prettify)


def run_transform(
    import_set: ImportSet,
    settings: Settings,
    report: MigrationReport,
    ) -> list[tuple[Path, Path]]:
    """Write every document to posts_path. Returns (source, output) pairs.

    With on_error='abort' the first failure raises DocumentError; with 'skip'
    it is logged and recorded in report.failed.
    """
    posts_dir = Path(settings.posts_path)
    results = []
    for p in import_set.documents:
        logger.info("Extracting <%s> from %s", settings.content_tag, p)
        try:
            out_path = write_document(transform_document(p, import_set, settings), posts_dir, p)
        except Exception as e:
            if settings.on_error == 'abort':
                raise DocumentError(p, e) from e
            logger.error("Skipping %s: %s", p, e)
            report.failed.append((p, str(e)))
            continue
        results.append((p, out_path))
    report.written.extend(results)
    return results


def relocate_media(import_set: ImportSet, media_dir: Path, report: MigrationReport) -> list[Path]:
    """Copy resource files into media_dir; never overwrites. Returns copied destinations."""
    copied = []
    for folder in import_set.resource_folders:
        logger.info("Exporting media from %s to %s", folder, media_dir)
        for f in (p for p in import_set.resource_files if p.parent == folder):
            dest = media_dir / f.name
            if dest.exists():
                logger.warning("%s already exists and would be overwritten, skipping", dest)
                report.skipped_media.append(f)
                continue
            shutil.copyfile(f, dest)
            copied.append(dest)
    report.copied.extend(copied)
    return copied


def cleanup(import_set: ImportSet) -> None:
    """Delete the source tree: documents, resource files, resource folders, then the root."""
    logger.info("Removing the original import directory and included files")
    documents = import_set.documents + ((import_set.index,) if import_set.index else ())
    for p in documents + import_set.resource_files:
        p.unlink()
    for folder in import_set.resource_folders:
        folder.rmdir()
    import_set.root.rmdir()


def run_migration(settings: Settings) -> MigrationReport:
    """Execute a full migration run and return its report."""
    validate_paths(settings)
    import_set = discover(settings)
    report = MigrationReport()

    if import_set.index is not None:
        try:
            links = read_index(import_set.index)
        except Exception as e:
            if settings.on_error == 'abort':
                raise DocumentError(import_set.index, e) from e
            logger.error("Could not read index %s: %s", import_set.index, e)
        else:
            logger.info("Index %s lists %d note(s)", import_set.index, len(links))

    run_transform(import_set, settings, report)
    relocate_media(import_set, Path(settings.media_path), report)

    if not settings.cleanup:
        logger.info("Leaving import directory %s in place", import_set.root)
    elif report.failed:
        logger.warning(
            "%d document(s) failed, leaving import directory %s in place",
            len(report.failed), import_set.root,
        )
    else:
        cleanup(import_set)
        report.cleaned = True
    return report
