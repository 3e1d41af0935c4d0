"""
Unit tests for the in-memory meter store.
"""

from concurrent.futures import ThreadPoolExecutor

from meter_api.app.core.store import MeterStore, fixture_meters
from meter_api.app.schemas.meter import Meter


class TestMeterStore:
    """Tests for MeterStore."""

    def test_fixtures(self):
        store = MeterStore.with_fixtures()
        assert [m.id for m in store.all()] == ["1", "2", "3", "4", "5"]
        assert store.get_by_slug("whats-up").project_name == "whats up"

    def test_fixtures_are_fresh_copies(self):
        first = fixture_meters()
        first[0].project_name = "changed"
        assert fixture_meters()[0].project_name == "Hi"

    def test_add_assigns_unused_id(self):
        store = MeterStore.with_fixtures()
        meter = store.add(Meter(id="ignored", project_name="x"))
        assert meter.id == "6"
        assert store.get("6") is meter
        assert store.get("ignored") is None

    def test_add_skips_taken_ids(self):
        store = MeterStore([Meter(id="2")])
        assert store.add(Meter()).id == "1"
        assert store.add(Meter()).id == "3"

    def test_ids_not_reused_after_delete(self):
        store = MeterStore()
        first = store.add(Meter())
        store.remove(first.id)
        assert store.add(Meter()).id != first.id

    def test_slug_lookup_returns_first_match(self):
        store = MeterStore([Meter(id="a", slug="dup"), Meter(id="b", slug="dup")])
        assert store.get_by_slug("dup").id == "a"

    def test_replace_keeps_position_and_id(self):
        store = MeterStore.with_fixtures()
        updated = store.replace("3", Meter(id="other", project_name="new"))
        assert updated.id == "3"
        assert [m.id for m in store.all()] == ["1", "2", "3", "4", "5"]
        assert store.get("3").project_name == "new"

    def test_replace_missing(self):
        store = MeterStore.with_fixtures()
        assert store.replace("42", Meter()) is None
        assert len(store) == 5

    def test_remove_preserves_order(self):
        store = MeterStore.with_fixtures()
        removed = store.remove("2")
        assert removed.id == "2"
        assert [m.id for m in store.all()] == ["1", "3", "4", "5"]

    def test_remove_missing(self):
        store = MeterStore.with_fixtures()
        assert store.remove("42") is None
        assert len(store) == 5

    def test_all_returns_snapshot(self):
        store = MeterStore.with_fixtures()
        snapshot = store.all()
        store.remove("1")
        assert len(snapshot) == 5

    def test_concurrent_adds_get_unique_ids(self):
        store = MeterStore()
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: store.add(Meter()).id, range(200)))
        assert len(set(ids)) == 200
        assert len(store) == 200
