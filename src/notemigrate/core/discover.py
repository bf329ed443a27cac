"""Import directory discovery: classify notes, resource folders, and the index"""

import logging
from pathlib import Path

from notemigrate.config import Settings
from notemigrate.core.models import ImportSet
from notemigrate.core.parse import find_elements, read_document


logger = logging.getLogger(__name__)


def is_document(path: Path, suffix: str = '.html') -> bool:
    return path.is_file() and path.name.endswith(suffix)


def is_resource_folder(path: Path, suffix: str = '.resources') -> bool:
    return path.is_dir() and path.name.endswith(suffix)


def discover(settings: Settings) -> ImportSet:
    """List the import directory once and classify its immediate entries."""
    root = Path(settings.import_path)
    logger.info("Reading files from import directory %s", root)
    entries = sorted(root.iterdir())

    documents = [p for p in entries if is_document(p, settings.document_suffix)]
    folders = [p for p in entries if is_resource_folder(p, settings.resource_suffix)]

    index = None
    if settings.index_policy == 'exclude':
        index = next((p for p in documents if p.name == settings.index_name), None)
        if index is not None:
            documents.remove(index)
            logger.info("Excluding index document %s", index)

    files = [f for folder in folders for f in sorted(folder.iterdir()) if f.is_file()]

    logger.info("Found %d document(s)", len(documents))
    logger.info("Found %d resource folder(s)", len(folders))
    return ImportSet(
        root=root,
        documents=tuple(documents),
        resource_folders=tuple(folders),
        resource_files=tuple(files),
        index=index,
    )


def read_index(path: Path) -> list[str]:
    """Return the link targets listed by an exported index document."""
    doc = read_document(path)
    return [a['href'] for a in find_elements(doc.soup, 'a') if a.get('href')]
