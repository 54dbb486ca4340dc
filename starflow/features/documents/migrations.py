"""
starflow/features/documents/migrations.py

Versioned upcasting of persisted user documents.

Version detection:
- explicit "schemaVersion" wins
- legacy keys (snake_case entries, weeklyBronze tiers, tiered rewards) mark
  v2 when a "profile" is present, else v1
- an unversioned "profile" document, or one already using current keys,
  is the current shape
- anything else predates onboarding (v1)

Upcasters run in order (v1 -> v2 -> v3) and are pure dict -> dict
functions; the input is never modified.
"""

import copy
from typing import Any, Callable, Dict, List

from pydantic import ValidationError as PydanticValidationError

from starflow.core.errors import UnsupportedSchemaError, ValidationError
from starflow.core.logging import log_event
from starflow.features.catalog.presets import LEGACY_ACTIVITY_IDS, default_targets, presets_for
from starflow.models.document import CURRENT_SCHEMA_VERSION, UserDocument

Document = Dict[str, Any]

# Targets every v1 account was created with
V2_DEFAULT_TARGETS = {
    "dailyCap": 5,
    "weeklyBronze": 9,
    "weeklySilver": 12,
    "weeklyGold": 15,
    "monthlyTarget": 35,
    "monthlyStretch": 45,
}

V2_DEFAULT_REWARDS = {
    "bronze": ["Coffee Trip", "Mini Beauty Treat", "Fresh Flowers", "New Book", "Frozen Yogurt"],
    "silver": ["Workout Accessory", "Beauty Treat ($30)", "Movie Night", "Candle", "Spa Day"],
    "gold": ["Nice dinner out", "Shopping Trip ($100)", "Massage or Facial", "Day trip adventure", "New workout gear"],
}

REWARD_TIER_ORDER = ("bronze", "silver", "gold")

# v2 activity keys that have a first-class field in v3
_V2_ACTIVITY_FIELDS = {"id", "label", "minDuration", "color"}


def _dicts(items: Any) -> List[Dict[str, Any]]:
    return [item for item in items if isinstance(item, dict)] if isinstance(items, list) else []


def _has_legacy_keys(raw: Document) -> bool:
    """Keys only the v1/v2 shapes use: snake_case entries, tiered targets or rewards."""
    targets = raw.get("targets")
    if isinstance(targets, dict) and ("weeklyBronze" in targets or "dailyCap" in targets):
        return True
    if isinstance(raw.get("rewards"), dict):
        return True
    if any("activity_type" in entry or "duration_min" in entry for entry in _dicts(raw.get("entries"))):
        return True
    return any("minDuration" in activity for activity in _dicts(raw.get("activities")))


def _has_current_keys(raw: Document) -> bool:
    targets = raw.get("targets")
    if isinstance(targets, dict) and "weeklyStarTarget" in targets:
        return True
    if any("activityId" in entry for entry in _dicts(raw.get("entries"))):
        return True
    return any("minDurationMinutes" in activity for activity in _dicts(raw.get("activities")))


def detect_version(raw: Document) -> int:
    if "schemaVersion" in raw:
        version = raw["schemaVersion"]
        if isinstance(version, bool) or not isinstance(version, int):
            raise ValidationError(f"schemaVersion must be an integer, got {version!r}")
        return version
    if _has_legacy_keys(raw):
        return 2 if "profile" in raw else 1
    if "profile" in raw or _has_current_keys(raw):
        return CURRENT_SCHEMA_VERSION
    return 1


def _v1_to_v2(doc: Document) -> Document:
    """Pre-onboarding shape: yoga/walk only, two separate bonus flags."""
    entries = [
        {
            "date": entry.get("date"),
            "activity_type": entry.get("activity_type"),
            "duration_min": entry.get("duration_min", 0),
            "bonus_flag": bool(entry.get("intensity_flag") or entry.get("intentional_flag")),
        }
        for entry in doc.get("entries") or []
    ]
    activities = [
        {"id": preset.id, "label": preset.label, "color": preset.color, "minDuration": preset.min_duration_minutes}
        for preset in presets_for(LEGACY_ACTIVITY_IDS)
    ]
    return {
        "profile": {"displayName": "", "onboardingComplete": True, "createdAt": None},
        "activities": activities,
        "targets": dict(V2_DEFAULT_TARGETS),
        "rewards": copy.deepcopy(V2_DEFAULT_REWARDS),
        "entries": entries,
        "claimed": list(doc.get("claimed") or []),
    }


def _flatten_rewards(rewards: Any) -> List[str]:
    if isinstance(rewards, list):
        return [str(reward) for reward in rewards]
    if isinstance(rewards, dict):
        flat: List[str] = []
        tiers = [tier for tier in REWARD_TIER_ORDER if tier in rewards]
        tiers += [tier for tier in rewards if tier not in REWARD_TIER_ORDER]
        for tier in tiers:
            for reward in rewards.get(tier) or []:
                if reward not in flat:
                    flat.append(str(reward))
        return flat
    return []


def _v2_to_v3(doc: Document) -> Document:
    """Tiered targets collapse to one weekly goal; the bonus checkbox becomes the mindful flag."""
    activities = []
    for activity in doc.get("activities") or []:
        activities.append(
            {
                "id": activity.get("id"),
                "label": activity.get("label", ""),
                "minDurationMinutes": activity.get("minDuration", 0),
                "color": activity.get("color"),
                "metadata": {k: v for k, v in activity.items() if k not in _V2_ACTIVITY_FIELDS},
            }
        )

    entries = [
        {
            "date": entry.get("date"),
            "activityId": entry.get("activity_type"),
            "durationMinutes": entry.get("duration_min", 0),
            "mindful": bool(entry.get("bonus_flag")),
        }
        for entry in doc.get("entries") or []
    ]

    old_targets = doc.get("targets") or {}
    fallback = default_targets()
    targets = {
        "weeklyStarTarget": old_targets.get("weeklyBronze", fallback.weekly_star_target),
        "monthlyTarget": old_targets.get("monthlyTarget", fallback.monthly_target),
        "monthlyStretch": old_targets.get("monthlyStretch", fallback.monthly_stretch),
    }

    return {
        "schemaVersion": 3,
        "profile": doc.get("profile") or {},
        "activities": activities,
        "targets": targets,
        "rewards": _flatten_rewards(doc.get("rewards")),
        "entries": entries,
        "promises": dict(doc.get("promises") or {}),
        "claimed": list(doc.get("claimed") or []),
    }


UPCASTERS: Dict[int, Callable[[Document], Document]] = {
    1: _v1_to_v2,
    2: _v2_to_v3,
}


def upcast(raw: Document) -> Document:
    """
    Bring a raw document to the current schema version.

    Raises:
        UnsupportedSchemaError: version newer than this code or older than v1
    """
    if not isinstance(raw, dict):
        raise ValidationError("Document must be a JSON object")

    version = detect_version(raw)
    if version > CURRENT_SCHEMA_VERSION or version < 1:
        raise UnsupportedSchemaError(
            f"Unsupported schema version {version} (supported 1..{CURRENT_SCHEMA_VERSION})"
        )

    doc = copy.deepcopy(raw)
    start = version
    while version < CURRENT_SCHEMA_VERSION:
        doc = UPCASTERS[version](doc)
        version += 1
    doc["schemaVersion"] = CURRENT_SCHEMA_VERSION

    if start != CURRENT_SCHEMA_VERSION:
        log_event(
            "info",
            "document.upcast",
            event_type="upcast",
            extra={"from_version": start, "to_version": CURRENT_SCHEMA_VERSION},
        )
    return doc


def load_document(raw: Document) -> UserDocument:
    """Upcast then validate. Missing targets fall back to configured defaults."""
    doc = upcast(raw)
    if not doc.get("targets"):
        doc["targets"] = default_targets().model_dump(by_alias=True)
    try:
        return UserDocument.model_validate(doc)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"Invalid document at {location}: {first.get('msg')}") from exc
