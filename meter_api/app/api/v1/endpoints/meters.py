"""
Meter endpoints for API v1.

These routes expose CRUD operations for meters.  Routes that address a
single meter get it from the resolver dependencies in
``api.v1.dependencies``, so a missing meter is answered with 404 before
the handler runs.  Create and update bodies go through
``MeterRequest.bind`` (see ``schemas.meter``); a bad ``duration`` is
rejected with 400.
"""

from typing import Iterable, List

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError

from meter_api.app.api.v1.dependencies import meter_by_id, meter_by_slug
from meter_api.app.core.errors import RenderError
from meter_api.app.schemas.meter import Meter, MeterRequest, MeterResponse
from meter_api.app.services.meter_service import MeterService, get_meter_service


router = APIRouter()


def render_meter(meter: Meter) -> MeterResponse:
    try:
        return MeterResponse.from_meter(meter)
    except ValidationError as exc:
        raise RenderError(str(exc)) from exc


def render_meter_list(meters: Iterable[Meter]) -> List[MeterResponse]:
    return [render_meter(meter) for meter in meters]


@router.get("", response_model=List[MeterResponse])
async def list_meters(service: MeterService = Depends(get_meter_service)) -> List[MeterResponse]:
    """Return all meters in the order they were added."""
    return render_meter_list(service.list_meters())


@router.get("/search", response_model=List[MeterResponse])
async def search_meters(service: MeterService = Depends(get_meter_service)) -> List[MeterResponse]:
    """Search meters.

    No filtering is implemented yet; every meter is returned.
    """
    return render_meter_list(service.search_meters())


@router.post("", response_model=MeterResponse, status_code=status.HTTP_201_CREATED)
async def create_meter(
    meter_in: MeterRequest,
    service: MeterService = Depends(get_meter_service),
) -> MeterResponse:
    """Create a meter and return it with its server-assigned ID."""
    return render_meter(service.create_meter(meter_in))


@router.get("/slug/{meter_slug}", response_model=MeterResponse)
async def get_meter_by_slug(meter: Meter = Depends(meter_by_slug)) -> MeterResponse:
    """Retrieve the first meter with the given slug."""
    return render_meter(meter)


@router.get("/{meter_id}", response_model=MeterResponse)
async def get_meter(meter: Meter = Depends(meter_by_id)) -> MeterResponse:
    """Retrieve a single meter by its ID."""
    return render_meter(meter)


@router.put("/{meter_id}", response_model=MeterResponse)
async def update_meter(
    meter_in: MeterRequest,
    meter: Meter = Depends(meter_by_id),
    service: MeterService = Depends(get_meter_service),
) -> MeterResponse:
    """Update a meter.

    Fields sent in the body replace the stored ones; the ID never
    changes and the slug follows the project name.
    """
    return render_meter(service.update_meter(meter, meter_in))


@router.delete("/{meter_id}", response_model=MeterResponse)
async def delete_meter(
    meter: Meter = Depends(meter_by_id),
    service: MeterService = Depends(get_meter_service),
) -> MeterResponse:
    """Delete a meter and return the removed record."""
    return render_meter(service.delete_meter(meter))
