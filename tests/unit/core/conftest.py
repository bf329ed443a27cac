"""Shared fixtures for core unit tests"""

from pathlib import Path

import pytest

from notemigrate.core.models import ParsedDocument
from notemigrate.core.parse import parse_html


SAMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head>
<title>  Trip Notes </title>
<meta name="created" content="2020-01-01 10:00:00 +0000"/>
<meta name="updated" content="2020-02-01 09:30:00 +0000"/>
<meta name="keywords" content="travel, food , ideas"/>
</head>
<body><div><p>Packing list</p><img src="Trip%20Notes.resources/map.png"/></div></body>
</html>
"""


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Wrap raw HTML in a ParsedDocument without touching disk."""
    def _make(raw: str, name: str = "note.html") -> ParsedDocument:
        return ParsedDocument(path=Path(name), raw=raw, soup=parse_html(raw))
    return _make


@pytest.fixture(name="sample_doc")
def sample_doc_fixture(make_doc):
    return make_doc(SAMPLE_HTML, "Trip Notes.html")
