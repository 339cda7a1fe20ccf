"""Shared test fixtures for favbrowse tests.

Created: 2026-10-19
"""

import pytest
from pathlib import Path

from favbrowse.config.settings import Settings
from favbrowse.core.favorites import FavoritesRegistry
from favbrowse.core.lister import DirectoryLister
from favbrowse.core.models import FavoriteEntry
from favbrowse.core.navigation import NavigationStateMachine
from favbrowse.core.projector import DetailProjector

from tests.utils import create_test_tree


@pytest.fixture
def sample_dir(tmp_path) -> Path:
    """Directory with one 5-byte file "a.txt" and one subdirectory "sub"."""
    return create_test_tree(tmp_path / "sample")


@pytest.fixture
def missing_dir(tmp_path) -> Path:
    """Path that does not exist."""
    return tmp_path / "does-not-exist"


@pytest.fixture
def favorites(sample_dir, missing_dir):
    """Registry with one readable and one missing favorite."""
    return FavoritesRegistry(
        [
            FavoriteEntry("Sample", str(sample_dir)),
            FavoriteEntry("Missing", str(missing_dir)),
        ]
    )


@pytest.fixture
def projector():
    """Projector over the real filesystem with default columns."""
    return DetailProjector(lister=DirectoryLister())


@pytest.fixture
def selections():
    """Collects items reported by the navigator."""
    return []


@pytest.fixture
def navigator(favorites, projector, selections):
    """Navigation state machine wired to the sample favorites."""
    return NavigationStateMachine(favorites, projector, on_item_selected=selections.append)


@pytest.fixture
def settings():
    """Default settings, independent of the user's config file."""
    return Settings()
