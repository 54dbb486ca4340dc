"""Onboarding activity presets and default targets."""

from typing import Iterable, List

from starflow.models.activity import ActivityDefinition, Targets


ACTIVITY_PRESETS: List[ActivityDefinition] = [
    ActivityDefinition(id="yoga", label="Yoga", min_duration_minutes=30, color="#9C8CFF"),
    ActivityDefinition(id="walk", label="Walking", min_duration_minutes=20, color="#6EC5FF"),
    ActivityDefinition(id="run", label="Running", min_duration_minutes=15, color="#6EFFC5"),
    ActivityDefinition(id="gym", label="Gym", min_duration_minutes=30, color="#FF9C6E"),
    ActivityDefinition(id="swim", label="Swimming", min_duration_minutes=20, color="#6ED8FF"),
    ActivityDefinition(id="cycle", label="Cycling", min_duration_minutes=20, color="#C5FF6E"),
    ActivityDefinition(id="meditate", label="Meditation", min_duration_minutes=10, color="#FF8CDB"),
    ActivityDefinition(id="dance", label="Dance", min_duration_minutes=20, color="#FFB86E"),
]

# Activities every pre-onboarding account tracked
LEGACY_ACTIVITY_IDS = ("yoga", "walk")


def presets_for(ids: Iterable[str]) -> List[ActivityDefinition]:
    """Presets matching ids, in preset order. Unknown ids are skipped."""
    wanted = set(ids)
    return [preset for preset in ACTIVITY_PRESETS if preset.id in wanted]


def default_targets(settings_obj=None) -> Targets:
    """Targets from configuration, used when a document has none."""
    if settings_obj is None:
        from starflow.core.config import settings as settings_obj
    return Targets(
        weekly_star_target=settings_obj.DEFAULT_WEEKLY_STAR_TARGET,
        monthly_target=settings_obj.DEFAULT_MONTHLY_TARGET,
        monthly_stretch=settings_obj.DEFAULT_MONTHLY_STRETCH,
    )
