"""
Fixtures for profile settings tests.
"""

import pytest

from profiles.editor import SEED_DEFAULTS, ProfileEditor


@pytest.fixture
def editor():
    """A profile editor seeded with the default profile."""
    return ProfileEditor()


@pytest.fixture
def profile_data():
    """Valid form data for a full profile submission."""
    return dict(SEED_DEFAULTS)
