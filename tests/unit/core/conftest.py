"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_FILES = {
    "2-foo.md": "# Foo\n",
    "0001-Bar Baz.md": "# Bar Baz\n",
    "xyz.md": "# XYZ\n",
    "notes.txt": "not a proposal\n",
}


@pytest.fixture(name="proposals")
def proposals_fixture(tmp_path):
    """A proposals directory with three markdown files and one non-markdown file."""
    d = tmp_path / "proposals"
    d.mkdir()
    for name, content in SAMPLE_FILES.items():
        (d / name).write_text(content)
    return d
