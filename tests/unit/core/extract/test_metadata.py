"""Unit tests for core/extract/metadata.py"""

import logging

import pytest

from notemigrate.core.extract.metadata import FIELD_SPECS, extract_field, extract_metadata, split_list
from notemigrate.core.models import FieldSpec


@pytest.mark.parametrize("tokens", [
    ["one"],
    ["travel", "food"],
    ["a b", "c-d", "e.f", "g"],
])
def test_split_list_recovers_joined_tokens(tokens):
    """Splitting a comma-joined list of trimmed tokens yields the tokens in order."""
    assert split_list(",".join(tokens)) == tokens
    assert split_list(" , ".join(tokens)) == tokens


def test_split_list_drops_empty_tokens():
    assert split_list("a,, b ,") == ["a", "b"]


def test_extract_metadata_sample(sample_doc):
    """Title, dates and tags are read from the head."""
    fm = extract_metadata(sample_doc)
    assert fm == {
        "title": "Trip Notes",
        "created": "2020-01-01 10:00:00 +0000",
        "updated": "2020-02-01 09:30:00 +0000",
        "tags": ["travel", "food", "ideas"],
    }


def test_extract_metadata_field_order(sample_doc):
    """Keys follow title then the field table order."""
    assert list(extract_metadata(sample_doc)) == ["title", "created", "updated", "tags"]


def test_missing_field_is_logged_and_omitted(sample_doc, caplog):
    """A field with no matching element is skipped with a warning."""
    caplog.set_level(logging.WARNING)
    fm = extract_metadata(sample_doc)
    assert "author" not in fm
    assert "omitting 'author'" in caplog.text


def test_missing_title_is_omitted(make_doc, caplog):
    caplog.set_level(logging.WARNING)
    fm = extract_metadata(make_doc('<html><head></head><body></body></html>'))
    assert fm == {}
    assert "omitting 'title'" in caplog.text


def test_blank_values_are_omitted(make_doc):
    """Empty content and empty tag lists never produce entries."""
    doc = make_doc('<title> </title><meta name="author" content=""/><meta name="keywords" content=" , "/>')
    assert extract_metadata(doc) == {}


def test_first_matching_meta_wins(make_doc):
    doc = make_doc('<meta name="author" content="First"/><meta name="author" content="Second"/>')
    assert extract_metadata(doc)["author"] == "First"


def test_lookup_is_case_sensitive(make_doc):
    """<meta name="Author"> does not satisfy the 'author' field."""
    doc = make_doc('<meta name="Author" content="Someone"/>')
    assert "author" not in extract_metadata(doc)


def test_meta_without_content_attribute(make_doc):
    doc = make_doc('<meta name="created"/>')
    spec = next(s for s in FIELD_SPECS if s.name == "created")
    assert extract_field(doc, spec) is None


def test_custom_field_spec(make_doc):
    """Callers may pass their own field table."""
    doc = make_doc('<meta property="og:url" content="https://example.com/a"/>')
    specs = (FieldSpec(name="source", tag="meta", attr="property", value="og:url"),)
    fm = extract_metadata(doc, specs)
    assert fm["source"] == "https://example.com/a"
