"""
Shared test fixtures and utilities for the fieldtree test suite.
"""

import pytest

from fieldtree.structure.builder import FieldBuilder


@pytest.fixture
def project_builder():
    """Builder pre-loaded with a nested project selector.

    Usage:
        def test_something(project_builder):
            project_builder.add("project.custom.field2")
    """
    return FieldBuilder("id,project(id,name,custom(field1))")
