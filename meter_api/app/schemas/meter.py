"""
Pydantic models for meter data.

``MeterPayload`` holds the fields shared by every representation and
fixes their JSON names (``project``, ``ora_conn`` ...).  ``Meter`` is the
record kept in the store; besides the public fields it carries the
parsed ``duration_value``, which is never serialized.  ``MeterRequest``
is what clients post: its ``bind`` step turns it into a ``Meter``.
``MeterResponse`` is what the API returns.

Keeping request and response payloads separate from the stored record
lets the API protect fields on input (the ID is always server-assigned,
the slug is always derived) and shape them on output.
"""

from datetime import timedelta
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from ..core.durations import parse_duration


class MeterPayload(BaseModel):
    id: str = Field("", examples=["1"])
    user_id: int = Field(0, description="Author of the meter", examples=[100])
    project_name: str = Field("", alias="project", examples=["Hi"])
    ora_connect_id: str = Field("", alias="ora_conn", description="Connection profile name")
    ora_user: str = Field("", description="Connection user")
    ora_password: str = Field("", description="Connection password")
    duration: str = Field("", description="Polling interval, e.g. 1h or 90s", examples=["1h"])
    slug: str = Field("", description="Lower-cased project name", examples=["hi"])


class Meter(MeterPayload):
    """A meter as held by the store."""

    duration_value: timedelta = Field(timedelta(0), exclude=True)

    # Server-side code builds records from attribute names.
    model_config = {
        "populate_by_name": True,
    }


class MeterRequest(MeterPayload):
    """Request payload for creating or replacing a meter.

    Clients may send ``id`` and ``slug`` but both are discarded by
    :meth:`bind`.  Only the JSON names are accepted (``project``, not
    ``project_name``) and a ``null`` value counts as not sent.
    """

    id: Optional[Union[str, int]] = None

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def bind(self, base: Optional[Meter] = None, default_duration: str = "1h") -> Meter:
        """Post-process the decoded body into a storable ``Meter``.

        When ``base`` is given (an update), fields the client did not
        send keep their stored values and the stored ID is kept.  On
        create the ID is left empty for the store to assign.  The slug
        is re-derived from the project name, a blank duration becomes
        ``default_duration`` and the duration is parsed.

        Raises ``ValueError`` if the duration cannot be parsed.
        """
        values = base.model_dump() if base is not None else {}
        values.update(self.model_dump(exclude_unset=True, exclude={"id", "slug"}))
        values["id"] = base.id if base is not None else ""
        values["slug"] = values.get("project_name", "").lower()
        if not values.get("duration"):
            values["duration"] = default_duration
        try:
            values["duration_value"] = parse_duration(values["duration"])
        except ValueError as exc:
            raise ValueError(f'Parse "{values["duration"]}" to duration failed: {exc}') from exc
        return Meter(**values)


class MeterResponse(MeterPayload):
    """Response payload for a single meter."""

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_meter(cls, meter: Meter) -> "MeterResponse":
        return cls.model_validate(meter.model_dump())
