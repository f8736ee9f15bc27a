"""Shared test fixtures for ormdoc."""

import shutil
from pathlib import Path

import pytest

from ormdoc.config import load_config
from ormdoc.schema.loader import load_schema

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def project(tmp_path):
    """A writable copy of the fixture project."""
    target = tmp_path / "project"
    shutil.copytree(FIXTURES / "project", target)
    return target


@pytest.fixture
def schema(project):
    return load_schema(project / "_config" / "schema.yml", project=project)


@pytest.fixture
def config(project):
    return load_config(project / "_config" / "ormdoc.yml", project=project)
