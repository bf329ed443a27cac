"""Output assembly: front matter header, fragment pretty-printing, and file writing"""

import re
from pathlib import Path
from typing import Any, Optional

import yaml

from notemigrate.core.models import FrontMatter
from notemigrate.core.parse import parse_html
from notemigrate.core.utils.paths import sanitize_filename


DELIMITER = "---"
FRONTMATTER_RE = re.compile(r'^---[ \t]*\n(.*?)^---[ \t]*(?:\n|$)', re.DOTALL | re.MULTILINE)


def prettify(fragment: str) -> str:
    """Re-indent an HTML fragment one tag per line; applying it twice changes nothing."""
    return parse_html(fragment).prettify()


def build_header(frontmatter: Optional[FrontMatter]) -> str:
    """Return the delimited YAML block; bare delimiters when there is nothing to write."""
    if not frontmatter:
        return f"{DELIMITER}\n{DELIMITER}\n"
    body = yaml.safe_dump(
        dict(frontmatter), default_flow_style=False, allow_unicode=True, sort_keys=False,
    )
    return f"{DELIMITER}\n{body}{DELIMITER}\n"


def build_document(frontmatter: Optional[FrontMatter], fragment: str, pretty: bool = False) -> str:
    """Return the final output text: header followed by the (optionally prettified) fragment."""
    content = prettify(fragment) if pretty else fragment
    return build_header(frontmatter) + content


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) for text produced by build_document."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def write_document(text: str, posts_dir: Path, source: Path) -> Path:
    """Write text under posts_dir using the sanitized source file name. Overwrites."""
    out_path = posts_dir / sanitize_filename(source)
    out_path.write_text(text, encoding='utf-8')
    return out_path
