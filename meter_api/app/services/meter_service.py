"""
Business logic for meters.

``MeterService`` wraps a :class:`MeterStore` and implements the
operations exposed by the API: listing, the search placeholder, lookups
by ID or slug, and create / update / delete.  Failures are reported by
raising the typed errors from ``core.errors``; the API layer never has
to inspect ``None`` results.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, Request

from ..core.errors import InvalidRequestError, MeterNotFoundError
from ..core.store import MeterStore, get_store
from ..schemas.meter import Meter, MeterRequest


logger = logging.getLogger(__name__)


class MeterService:
    """Service for managing meters held in a ``MeterStore``."""

    def __init__(self, store: MeterStore, default_duration: str = "1h") -> None:
        self.store = store
        self.default_duration = default_duration

    def list_meters(self) -> List[Meter]:
        """Return every meter in store order."""
        return self.store.all()

    def search_meters(self) -> List[Meter]:
        """Search placeholder: no filter is applied yet, so this is ``list_meters``."""
        return self.store.all()

    def get_meter(self, meter_id: str) -> Meter:
        meter = self.store.get(meter_id)
        if meter is None:
            raise MeterNotFoundError(f"meter {meter_id} not found")
        return meter

    def get_meter_by_slug(self, slug: str) -> Meter:
        meter = self.store.get_by_slug(slug)
        if meter is None:
            raise MeterNotFoundError(f"meter with slug {slug!r} not found")
        return meter

    def resolve(self, meter_id: Optional[str] = None, meter_slug: Optional[str] = None) -> Meter:
        """Look a meter up by ID, or by slug when no ID is given.

        The slug is only consulted when ``meter_id`` is empty; a miss on
        the ID is final.  With neither value the lookup fails as well.
        """
        if meter_id:
            return self.get_meter(meter_id)
        if meter_slug:
            return self.get_meter_by_slug(meter_slug)
        raise MeterNotFoundError("no meter id or slug given")

    def _bind(self, data: MeterRequest, base: Optional[Meter] = None) -> Meter:
        try:
            return data.bind(base, default_duration=self.default_duration)
        except ValueError as exc:
            logger.info("Rejected meter payload: %s", exc)
            raise InvalidRequestError(str(exc)) from exc

    def create_meter(self, data: MeterRequest) -> Meter:
        """Bind ``data`` and append it to the store under a new ID.

        Any ``id`` sent by the client is ignored.  Nothing is stored when
        binding fails.
        """
        meter = self.store.add(self._bind(data))
        logger.info("Created meter %s (%s)", meter.id, meter.project_name)
        return meter

    def update_meter(self, current: Meter, data: MeterRequest) -> Meter:
        """Overlay ``data`` on ``current`` and write the result back.

        Fields missing from ``data`` keep their stored values; the ID is
        always kept.  Raises ``InvalidRequestError`` when binding fails or
        when the meter was removed after it was resolved.
        """
        meter = self._bind(data, base=current)
        stored = self.store.replace(current.id, meter)
        if stored is None:
            raise InvalidRequestError(f"meter {current.id} not found")
        logger.info("Updated meter %s", stored.id)
        return stored

    def delete_meter(self, current: Meter) -> Meter:
        """Remove ``current`` from the store and return the removed record."""
        removed = self.store.remove(current.id)
        if removed is None:
            raise InvalidRequestError(f"meter {current.id} not found")
        logger.info("Deleted meter %s", removed.id)
        return removed


def get_meter_service(request: Request, store: MeterStore = Depends(get_store)) -> MeterService:
    """FastAPI dependency building a service around the application's store."""
    return MeterService(store, default_duration=request.app.state.settings.default_duration)
