from datetime import datetime

from sqlalchemy import insert, select, update

from .. import store
from ..errors import BadRequestError, NotFoundError
from ..tables import reservations
from ..utils.time import db_naive, format_display, format_editable

_COLUMNS = (
    reservations.c.id.label("id"),
    reservations.c.customer_id.label("customer_id"),
    reservations.c.num_guests.label("num_guests"),
    reservations.c.start_at.label("start_at"),
    reservations.c.notes.label("notes"),
)


class Reservation:
    """A reservation for a party."""

    def __init__(self, customer_id, num_guests, start_at, notes="", id=None):
        self.id = id
        self._customer_id = None
        self.customer_id = customer_id
        self.num_guests = num_guests
        self.start_at = start_at
        self.notes = notes

    def __repr__(self):
        return f"<Reservation id={self.id} customer_id={self.customer_id} start_at={self.start_at}>"

    @classmethod
    def from_row(cls, row) -> "Reservation":
        return cls(
            id=row["id"],
            customer_id=row["customer_id"],
            num_guests=row["num_guests"],
            start_at=row["start_at"],
            notes=row["notes"],
        )

    # customer_id can only be set while it is still empty
    @property
    def customer_id(self):
        return self._customer_id

    @customer_id.setter
    def customer_id(self, value):
        if self._customer_id is not None:
            raise BadRequestError("Reservations are not transferable.")
        self._customer_id = value

    @property
    def num_guests(self):
        return self._num_guests

    @num_guests.setter
    def num_guests(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise BadRequestError("Number of guests must be a whole number.")
        if value < 1:
            raise BadRequestError("Cannot make reservation for less than 1 guest.")
        self._num_guests = value

    @property
    def start_at(self):
        return self._start_at

    @start_at.setter
    def start_at(self, value):
        if not isinstance(value, datetime):
            raise BadRequestError("Date must be a datetime object.")
        self._start_at = db_naive(value)

    @property
    def notes(self):
        return self._notes

    @notes.setter
    def notes(self, value):
        self._notes = value if value else ""

    def get_formatted_start_at(self) -> str:
        return format_display(self.start_at)

    def get_unformatted_start_at(self) -> str:
        return format_editable(self.start_at)

    @classmethod
    def get(cls, id: int) -> "Reservation":
        row = store.fetch_one(select(*_COLUMNS).where(reservations.c.id == id))
        if row is None:
            raise NotFoundError(f"No such reservation: {id}")
        return cls.from_row(row)

    @classmethod
    def get_reservations_for_customer(cls, customer_id: int) -> list["Reservation"]:
        rows = store.fetch_all(select(*_COLUMNS).where(reservations.c.customer_id == customer_id))
        return [cls.from_row(row) for row in rows]

    def save(self) -> None:
        values = dict(
            customer_id=self.customer_id,
            num_guests=self.num_guests,
            start_at=self.start_at,
            notes=self.notes,
        )
        if self.id is None:
            self.id = store.insert_returning_id(
                insert(reservations).values(**values).returning(reservations.c.id)
            )
        else:
            store.execute(update(reservations).where(reservations.c.id == self.id).values(**values))
