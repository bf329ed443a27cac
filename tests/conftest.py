"""Root test configuration: exported-notes directory factory"""

from pathlib import Path

import pytest

from notemigrate.config import Settings


NOTE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=UTF-8"/>
{head}
</head>
<body>{body}</body>
</html>
"""


def render_note(title: str = None, meta: dict[str, str] = None, body: str = "") -> str:
    """Render an exported note the way the HTML exporter lays it out."""
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    for name, content in (meta or {}).items():
        head.append(f'<meta name="{name}" content="{content}"/>')
    return NOTE_TEMPLATE.format(head="\n".join(head), body=body)


@pytest.fixture(name="note_html")
def note_html_fixture():
    """Expose render_note to tests."""
    return render_note


@pytest.fixture(name="workspace")
def workspace_fixture(tmp_path):
    """Create empty import, posts, and media directories; returns their paths."""
    dirs = {name: tmp_path / name for name in ("notes", "posts", "media")}
    for d in dirs.values():
        d.mkdir()
    return dirs


@pytest.fixture(name="make_settings")
def make_settings_fixture(workspace):
    """Build Settings pointing at the workspace directories."""
    def _make(**overrides) -> Settings:
        data = {
            "import_path": str(workspace["notes"]),
            "posts_path": str(workspace["posts"]),
            "media_path": str(workspace["media"]),
        }
        data.update(overrides)
        return Settings(**data)
    return _make


@pytest.fixture(name="add_note")
def add_note_fixture(workspace):
    """Write a note (and optional resource files) into the import directory."""
    def _add(name: str, html: str, resources: dict[str, bytes] = None) -> Path:
        path = workspace["notes"] / name
        path.write_text(html, encoding="utf-8")
        if resources is not None:
            folder = workspace["notes"] / f"{Path(name).stem}.resources"
            folder.mkdir(exist_ok=True)
            for fname, data in resources.items():
                (folder / fname).write_bytes(data)
        return path
    return _add
