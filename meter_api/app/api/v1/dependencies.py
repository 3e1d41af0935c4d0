"""
Resolver dependencies for meter routes.

Routes addressing a single meter declare one of these as a dependency
and receive the stored ``Meter`` as an ordinary parameter.  When the
lookup misses, ``MeterNotFoundError`` is raised and the route body
never runs; the client gets a 404 envelope.
"""

from fastapi import Depends

from meter_api.app.schemas.meter import Meter
from meter_api.app.services.meter_service import MeterService, get_meter_service


def meter_by_id(meter_id: str, service: MeterService = Depends(get_meter_service)) -> Meter:
    """Resolve the ``{meter_id}`` path segment."""
    return service.resolve(meter_id=meter_id)


def meter_by_slug(meter_slug: str, service: MeterService = Depends(get_meter_service)) -> Meter:
    """Resolve the ``{meter_slug}`` path segment."""
    return service.resolve(meter_slug=meter_slug)
