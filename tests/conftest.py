"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from search_server import SearchServer  # noqa: E402
from tests.fixtures.sample_corpus import SAMPLE_DOCUMENTS, SAMPLE_STOP_WORDS  # noqa: E402


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test with default settings: no SEARCH_SERVER_* variables, no .env file."""
    for key in list(os.environ):
        if key.upper().startswith("SEARCH_SERVER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def server() -> SearchServer:
    """Search server loaded with the four sample documents."""
    search_server = SearchServer(SAMPLE_STOP_WORDS)
    for doc_id, text, status, ratings in SAMPLE_DOCUMENTS:
        search_server.add_document(doc_id, text, status, ratings)
    return search_server
