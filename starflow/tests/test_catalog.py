from starflow.features.catalog.catalog import ActivityCatalog
from starflow.features.catalog.presets import ACTIVITY_PRESETS, LEGACY_ACTIVITY_IDS, presets_for
from starflow.models.activity import ActivityDefinition


def test_lookup(activities):
    catalog = ActivityCatalog(activities)
    assert catalog.get("walk").min_duration_minutes == 20
    assert catalog.get("swim") is None
    assert "yoga" in catalog
    assert catalog.ids() == ["walk", "yoga", "meditate"]
    assert len(catalog) == 3


def test_later_definition_wins():
    catalog = ActivityCatalog([
        ActivityDefinition(id="walk", min_duration_minutes=20),
        ActivityDefinition(id="walk", min_duration_minutes=45),
    ])
    assert len(catalog) == 1
    assert catalog.get("walk").min_duration_minutes == 45


def test_of_reuses_catalog(activities):
    catalog = ActivityCatalog(activities)
    assert ActivityCatalog.of(catalog) is catalog
    assert len(ActivityCatalog.of(None)) == 0


def test_presets():
    assert len(ACTIVITY_PRESETS) == 8
    assert len({p.id for p in ACTIVITY_PRESETS}) == 8
    assert [p.id for p in presets_for(LEGACY_ACTIVITY_IDS)] == ["yoga", "walk"]
    assert [p.id for p in presets_for(["dance", "unknown", "run"])] == ["run", "dance"]
