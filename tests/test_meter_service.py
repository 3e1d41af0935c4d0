"""
Unit tests for MeterService.
"""

from datetime import timedelta

import pytest

from meter_api.app.core.errors import InvalidRequestError, MeterNotFoundError
from meter_api.app.core.store import MeterStore
from meter_api.app.schemas.meter import MeterRequest
from meter_api.app.services.meter_service import MeterService


@pytest.fixture
def service() -> MeterService:
    return MeterService(MeterStore.with_fixtures())


def body(**fields) -> MeterRequest:
    return MeterRequest.model_validate(fields)


class TestResolve:
    """Tests for MeterService.resolve."""

    def test_by_id(self, service):
        assert service.resolve(meter_id="2").project_name == "sup"

    def test_by_slug(self, service):
        assert service.resolve(meter_slug="bonjour").id == "4"

    def test_id_takes_precedence(self, service):
        assert service.resolve(meter_id="1", meter_slug="sup").id == "1"

    def test_id_miss_does_not_fall_back_to_slug(self, service):
        with pytest.raises(MeterNotFoundError):
            service.resolve(meter_id="42", meter_slug="sup")

    def test_neither_given(self, service):
        with pytest.raises(MeterNotFoundError):
            service.resolve()


class TestMutations:
    """Tests for create, update and delete."""

    def test_create(self, service):
        meter = service.create_meter(body(id="x", project="Duration-Example", duration="1m"))
        assert meter.id not in {"x", "1", "2", "3", "4", "5"}
        assert meter.slug == "duration-example"
        assert meter.duration_value == timedelta(seconds=60)
        assert service.list_meters()[-1] is meter

    def test_create_bad_duration_leaves_store(self, service):
        with pytest.raises(InvalidRequestError, match="D1393"):
            service.create_meter(body(project="bad", duration="D1393"))
        assert len(service.list_meters()) == 5

    def test_default_duration_setting(self):
        service = MeterService(MeterStore(), default_duration="30s")
        assert service.create_meter(body(project="p")).duration == "30s"

    def test_update(self, service):
        current = service.get_meter("2")
        updated = service.update_meter(current, body(project="Renamed", user_id=7))
        assert updated.id == "2"
        assert updated.slug == "renamed"
        assert service.get_meter("2").user_id == 7

    def test_update_bad_duration_keeps_record(self, service):
        current = service.get_meter("2")
        with pytest.raises(InvalidRequestError):
            service.update_meter(current, body(duration="soon"))
        assert service.get_meter("2").duration == "1h"

    def test_update_vanished_meter(self, service):
        current = service.get_meter("2")
        service.delete_meter(current)
        with pytest.raises(InvalidRequestError):
            service.update_meter(current, body(project="late"))

    def test_delete(self, service):
        removed = service.delete_meter(service.get_meter("3"))
        assert removed.id == "3"
        with pytest.raises(MeterNotFoundError):
            service.get_meter("3")

    def test_delete_twice(self, service):
        current = service.get_meter("3")
        service.delete_meter(current)
        with pytest.raises(InvalidRequestError):
            service.delete_meter(current)
        assert len(service.list_meters()) == 4

    def test_search_is_list(self, service):
        assert service.search_meters() == service.list_meters()
