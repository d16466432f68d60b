"""Shared fixtures for segmentation tests."""

import itertools

import pytest


@pytest.fixture
def id_factory():
    """Deterministic identifiers: seg-0, seg-1, ..."""
    counter = itertools.count()
    return lambda: f"seg-{next(counter)}"
