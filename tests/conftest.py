"""Pytest fixtures for cine tests."""

import pytest

from cine import MOVIES, Config, SparqlEngine, create_graph

CONFIG_VARS = [
    "CINE_RDF_FILE",
    "CINE_RDF_FORMAT",
    "CINE_NAMESPACE",
    "CINE_RESOURCE_BASE",
    "MAX_COL_WIDTH",
    "SHOW_PROGRESS",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no cine settings in the environment."""
    for name in CONFIG_VARS:
        # setenv first so values loaded from .env files are undone afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(clean_env):
    """Default config writing its RDF file into a temp directory."""
    cfg = Config()
    cfg.rdf_file = str(clean_env / "cine.rdf")
    return cfg


@pytest.fixture
def graph():
    """Graph built from the demo catalogue."""
    return create_graph(MOVIES)


@pytest.fixture
def engine(graph):
    """SPARQL engine over the demo graph."""
    return SparqlEngine(graph)
