"""Data models shared by the discovery, transform, and relocation steps"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from bs4 import BeautifulSoup


FrontMatter = dict[str, Union[str, list[str]]]


@dataclass(frozen=True)
class FieldSpec:
    """How one front matter field is located in an exported note."""
    name:         str                # front matter key
    tag:          str                # element to look for, e.g. 'meta'
    attr:         str                # attribute used to pick the element
    value:        str                # exact, case-sensitive value of attr
    content_attr: str = "content"    # attribute holding the field value
    normalize:    Optional[Callable[[str], Union[str, list[str]]]] = None


@dataclass(frozen=True)
class ImportSet:
    """Snapshot of the import directory, classified once per run."""
    root:             Path
    documents:        tuple[Path, ...] = ()
    resource_folders: tuple[Path, ...] = ()
    resource_files:   tuple[Path, ...] = ()    # files directly inside each folder, in folder order
    index:            Optional[Path] = None    # set only when the index is excluded


@dataclass
class ParsedDocument:
    """Internal parse result carrying the BeautifulSoup tree; not persisted."""
    path: Path
    raw:  str
    soup: BeautifulSoup


@dataclass
class MigrationReport:
    """Outcome of a migration run."""
    written:       list[tuple[Path, Path]] = field(default_factory=list)    # (source, output)
    copied:        list[Path] = field(default_factory=list)
    skipped_media: list[Path] = field(default_factory=list)
    failed:        list[tuple[Path, str]] = field(default_factory=list)
    cleaned:       bool = False
