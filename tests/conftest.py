"""Shared pytest fixtures for the full prooftext test suite."""

from __future__ import annotations

import pytest

from prooftext.languages import Language, demo_language, get_language


@pytest.fixture
def german() -> Language:
    """Provide the built-in German capability."""

    return get_language("de")


@pytest.fixture
def portuguese() -> Language:
    """Provide the built-in Portuguese capability."""

    return get_language("pt")


@pytest.fixture
def french() -> Language:
    """Provide the built-in French capability."""

    return get_language("fr")


@pytest.fixture
def demo() -> Language:
    """Provide the neutral demo capability."""

    return demo_language()
