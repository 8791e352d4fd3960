"""Shared fixtures for catalog, triage and job queue tests."""
import pytest

from helpers import FakeCatalog, make_movie


@pytest.fixture
def scenario_catalog():
    """One h264 candidate, one file already x265, one movie with no file."""
    return FakeCatalog([
        make_movie("alpha", 500, "h264"),
        make_movie("beta", 900, "x265"),
        make_movie("gamma"),
    ])
