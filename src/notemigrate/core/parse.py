"""HTML parsing and element lookup for exported notes"""

from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, Tag

from notemigrate.core.models import ParsedDocument


PARSER = "html.parser"


def parse_html(text: str) -> BeautifulSoup:
    """Parse raw markup without inserting <html>/<body> scaffolding."""
    return BeautifulSoup(text, PARSER)


def read_document(path: Path) -> ParsedDocument:
    """Read and parse a single exported note."""
    raw = path.read_text(encoding='utf-8')
    return ParsedDocument(path=path, raw=raw, soup=parse_html(raw))


def find_element(soup: BeautifulSoup | Tag, tag: str, attrs: dict[str, str] = None) -> Optional[Tag]:
    """Return the first tag matching name and exact attribute values, or None."""
    found = soup.find(tag, attrs=attrs or {})
    return found if isinstance(found, Tag) else None


def find_elements(soup: BeautifulSoup | Tag, tag: str, attrs: dict[str, str] = None) -> list[Tag]:
    """Return every matching tag in document order."""
    return [t for t in soup.find_all(tag, attrs=attrs or {}) if isinstance(t, Tag)]


def inner_html(tag: Tag) -> str:
    """Serialized markup of tag's children, without the tag itself."""
    return tag.decode_contents()
