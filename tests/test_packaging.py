"""
Tests for project metadata.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


class TestProjectMetadata:
    """Test the declared package metadata."""

    def test_design_notes_not_used_as_readme(self):
        """Test that internal design notes are not published as the long description."""
        project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]

        assert project.get("readme") != "DESIGN.md"

    def test_runtime_dependencies(self):
        """Test that the runtime stack is declared."""
        project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
        names = {dep.split(">")[0].split("=")[0] for dep in project["dependencies"]}

        assert names == {"attrs", "pydantic"}
