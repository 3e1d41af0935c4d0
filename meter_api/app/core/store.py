"""
In-memory meter store.

``MeterStore`` keeps meters in insertion order and is the only place
that touches that list.  Every method takes the store lock, so the
same instance can be shared by all requests of a process.  Nothing is
persisted: a restart brings back the fixtures (or an empty store).

IDs are strings produced by a monotonic counter.  The counter skips any
value already present in the store, so records loaded with explicit
IDs (the fixtures) never collide with generated ones.

The FastAPI application owns one store (``app.state.store``); handlers
receive it through the ``get_store`` dependency.
"""

import itertools
import threading
from datetime import timedelta
from typing import Iterable, List, Optional

from fastapi import Request

from ..schemas.meter import Meter


def fixture_meters() -> List[Meter]:
    """Return fresh copies of the demo meters."""
    hour = timedelta(hours=1)
    return [
        Meter(id="1", user_id=100, project_name="Hi", slug="hi", duration="1h", duration_value=hour),
        Meter(id="2", user_id=200, project_name="sup", slug="sup", duration="1h", duration_value=hour),
        Meter(id="3", user_id=300, project_name="alo", slug="alo", duration="1h", duration_value=hour),
        Meter(id="4", user_id=400, project_name="bonjour", slug="bonjour", duration="1h", duration_value=hour),
        Meter(id="5", user_id=500, project_name="whats up", slug="whats-up", duration="1h", duration_value=hour),
    ]


class MeterStore:
    """Ordered, lock-guarded collection of meters."""

    def __init__(self, meters: Optional[Iterable[Meter]] = None) -> None:
        self._lock = threading.Lock()
        self._meters: List[Meter] = list(meters or [])
        self._ids = itertools.count(1)

    @classmethod
    def with_fixtures(cls) -> "MeterStore":
        return cls(fixture_meters())

    def __len__(self) -> int:
        with self._lock:
            return len(self._meters)

    def all(self) -> List[Meter]:
        """Return a snapshot of every meter in store order."""
        with self._lock:
            return list(self._meters)

    def get(self, meter_id: str) -> Optional[Meter]:
        with self._lock:
            for meter in self._meters:
                if meter.id == meter_id:
                    return meter
        return None

    def get_by_slug(self, slug: str) -> Optional[Meter]:
        """Return the first meter whose slug equals ``slug``."""
        with self._lock:
            for meter in self._meters:
                if meter.slug == slug:
                    return meter
        return None

    def add(self, meter: Meter) -> Meter:
        """Assign a fresh ID to ``meter`` and append it."""
        with self._lock:
            taken = {m.id for m in self._meters}
            new_id = str(next(self._ids))
            while new_id in taken:
                new_id = str(next(self._ids))
            stored = meter.model_copy(update={"id": new_id})
            self._meters.append(stored)
            return stored

    def replace(self, meter_id: str, meter: Meter) -> Optional[Meter]:
        """Replace the meter stored under ``meter_id``; ``None`` if it is gone."""
        with self._lock:
            for i, current in enumerate(self._meters):
                if current.id == meter_id:
                    stored = meter.model_copy(update={"id": meter_id})
                    self._meters[i] = stored
                    return stored
        return None

    def remove(self, meter_id: str) -> Optional[Meter]:
        """Remove and return the meter stored under ``meter_id``; ``None`` if absent."""
        with self._lock:
            for i, current in enumerate(self._meters):
                if current.id == meter_id:
                    return self._meters.pop(i)
        return None


def get_store(request: Request) -> MeterStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
