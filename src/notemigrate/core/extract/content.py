"""Content fragment extraction and resource-folder reference rewriting"""

import re
from pathlib import Path
from typing import Iterable

from notemigrate.core.errors import ContentNotFoundError
from notemigrate.core.models import ParsedDocument
from notemigrate.core.parse import find_element, inner_html
from notemigrate.core.utils.paths import encode_segment


# Characters allowed on either side of a folder name when matches are anchored.
_BEFORE = r"""(?<![^/"'=(\s])"""
_AFTER = r"""(?![^/"')\s])"""


def build_path_mapping(resource_folders: Iterable[Path], reference: str) -> dict[str, str]:
    """Map each folder's URL-encoded base name to reference, in discovery order."""
    return {encode_segment(Path(folder).name): reference for folder in resource_folders}


def rewrite_references(fragment: str, mapping: dict[str, str], anchored: bool = False) -> str:
    """Replace every occurrence of each encoded folder name with its reference.

    Unanchored replacement is plain substring substitution, so a folder name
    contained in a longer one is rewritten inside it too. With anchored=True a
    match must sit between path separators, quotes, whitespace or the ends of
    the text.
    """
    for encoded, reference in mapping.items():
        if anchored:
            pattern = re.compile(_BEFORE + re.escape(encoded) + _AFTER)
            fragment = pattern.sub(lambda _m: reference, fragment)
        else:
            fragment = fragment.replace(encoded, reference)
    return fragment


def extract_content(
    doc: ParsedDocument,
    resource_folders: Iterable[Path],
    reference: str,
    container: str = 'body',
    anchored: bool = False,
    ) -> str:
    """Return the container's inner HTML with resource folder references rewritten."""
    element = find_element(doc.soup, container)
    if element is None:
        raise ContentNotFoundError(f"No <{container}> element in {doc.path}")
    mapping = build_path_mapping(resource_folders, reference)
    return rewrite_references(inner_html(element), mapping, anchored=anchored)
