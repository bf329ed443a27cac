"""Filename sanitization and URL path-segment encoding"""

from pathlib import Path
from urllib.parse import quote


# Characters encodeURIComponent leaves untouched besides alphanumerics.
_SEGMENT_SAFE = "-_.!~*'()"


def sanitize_filename(path: str | Path) -> str:
    """Return the base name of path with every space replaced by a hyphen."""
    return Path(path).name.replace(' ', '-')


def encode_segment(name: str) -> str:
    """Percent-encode name the way a browser encodes a single URL path component."""
    return quote(name, safe=_SEGMENT_SAFE)
