from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.time import parse_start_at


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class CustomerRequest(_Request):
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=120)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=120)
    phone: str | None = Field(None, max_length=32)
    notes: str | None = None


class ReservationRequest(_Request):
    # the guest minimum and customer transfer are checked by the Reservation model itself
    num_guests: int = Field(..., alias="numGuests", strict=True)
    start_at: datetime = Field(..., alias="startAt")
    notes: str | None = None

    @field_validator("start_at", mode="before")
    @classmethod
    def coerce_start_at(cls, v):
        if isinstance(v, str):
            try:
                return parse_start_at(v)
            except ValueError:
                raise ValueError("Start time must be ISO 8601 or 'YYYY-MM-DD HH:mm AM/PM'.") from None
        return v


class ReservationUpdateRequest(ReservationRequest):
    customer_id: int | None = Field(None, alias="customerId")
