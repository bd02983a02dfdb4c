"""Pytest configuration for the bundled test-vector corpus."""

from pathlib import Path
from typing import List

from dgc_testdata.corpus import CorpusEntry, load_corpus

VECTORS_DIR = Path(__file__).parent / "data"


def load_all_vectors() -> List[CorpusEntry]:
    """Load all bundled test vectors."""
    return load_corpus(VECTORS_DIR, "v*.json")


def pytest_generate_tests(metafunc):
    """Parametrize test_vector fixture with all vectors."""
    if "test_vector" in metafunc.fixturenames:
        vectors = load_all_vectors()
        metafunc.parametrize("test_vector", vectors, ids=[v.name for v in vectors])
