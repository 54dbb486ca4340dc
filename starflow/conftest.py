# starflow/conftest.py
import random
import sys
from datetime import date
from pathlib import Path

import pytest

# Make the repository root importable when running without an install
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from starflow.models.activity import ActivityDefinition, Targets  # noqa: E402
from starflow.models.document import UserDocument  # noqa: E402
from starflow.models.entry import SessionEntry  # noqa: E402


@pytest.fixture
def activities():
    """Small catalog: walk (20 min), yoga (30 min), meditate (10 min)."""
    return [
        ActivityDefinition(id="walk", label="Walking", min_duration_minutes=20, color="#6EC5FF"),
        ActivityDefinition(id="yoga", label="Yoga", min_duration_minutes=30, color="#9C8CFF"),
        ActivityDefinition(id="meditate", label="Meditation", min_duration_minutes=10),
    ]


@pytest.fixture
def targets():
    return Targets(weekly_star_target=3, monthly_target=5, monthly_stretch=8)


@pytest.fixture
def rng():
    """Seeded source so flavor text is reproducible."""
    return random.Random(42)


@pytest.fixture
def make_entry():
    def _make(day, activity_id="walk", minutes=25, mindful=False):
        if isinstance(day, str):
            day = date.fromisoformat(day)
        return SessionEntry(date=day, activity_id=activity_id, duration_minutes=minutes, mindful=mindful)

    return _make


@pytest.fixture
def make_document(activities, targets):
    def _make(entries=(), promises=None, claimed=None):
        return UserDocument(
            activities=activities,
            targets=targets,
            entries=list(entries),
            promises=promises or {},
            claimed=claimed or [],
        )

    return _make
