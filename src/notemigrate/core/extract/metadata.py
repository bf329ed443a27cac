"""Front matter extraction from an exported note's <title> and <meta> tags"""

import logging

from notemigrate.core.models import FieldSpec, FrontMatter, ParsedDocument
from notemigrate.core.parse import find_element


logger = logging.getLogger(__name__)


def split_list(value: str) -> list[str]:
    """Split a comma-separated value into stripped, non-empty tokens, keeping order."""
    return [token.strip() for token in value.split(',') if token.strip()]


FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(name="created", tag="meta", attr="name", value="created"),
    FieldSpec(name="updated", tag="meta", attr="name", value="updated"),
    FieldSpec(name="author",  tag="meta", attr="name", value="author"),
    FieldSpec(name="tags",    tag="meta", attr="name", value="keywords", normalize=split_list),
)


def extract_title(doc: ParsedDocument) -> str | None:
    """Return the stripped <title> text, or None if missing or blank."""
    title = find_element(doc.soup, "title")
    if title is None:
        return None
    return title.get_text().strip() or None


def extract_field(doc: ParsedDocument, spec: FieldSpec):
    """Look up one field; returns None when the element or its value is absent."""
    element = find_element(doc.soup, spec.tag, {spec.attr: spec.value})
    if element is None:
        return None
    raw = element.get(spec.content_attr)
    if raw is None:
        return None
    value = spec.normalize(raw) if spec.normalize else raw.strip()
    return value or None


def extract_metadata(doc: ParsedDocument, specs: tuple[FieldSpec, ...] = FIELD_SPECS) -> FrontMatter:
    """Build the front matter mapping for a note; missing fields are logged and omitted."""
    fm: FrontMatter = {}

    title = extract_title(doc)
    if title is None:
        logger.warning("No <title> found in %s, omitting 'title'", doc.path)
    else:
        fm['title'] = title

    for spec in specs:
        value = extract_field(doc, spec)
        if value is None:
            logger.warning(
                "No <%s %s=%r> found in %s, omitting %r",
                spec.tag, spec.attr, spec.value, doc.path, spec.name,
            )
            continue
        fm[spec.name] = value
    return fm
