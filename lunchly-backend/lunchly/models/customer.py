from sqlalchemy import func, insert, select, update

from .. import store
from ..errors import NotFoundError
from ..tables import customers, reservations
from .reservation import Reservation

_COLUMNS = (
    customers.c.id.label("id"),
    customers.c.first_name.label("first_name"),
    customers.c.last_name.label("last_name"),
    customers.c.phone.label("phone"),
    customers.c.notes.label("notes"),
)


class Customer:
    """Customer of the restaurant."""

    def __init__(self, first_name, last_name, phone=None, notes=None, id=None, num_reservations=None):
        self.id = id
        self.first_name = first_name
        self.last_name = last_name
        self.full_name = f"{first_name} {last_name}"
        self.phone = phone
        self.notes = notes
        self.num_reservations = num_reservations

    def __repr__(self):
        return f"<Customer id={self.id} {self.full_name!r}>"

    @classmethod
    def from_row(cls, row) -> "Customer":
        return cls(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            notes=row["notes"],
            num_reservations=row.get("num_reservations"),
        )

    @classmethod
    def search_customers(cls, query: str | None = "") -> list["Customer"]:
        """
        Finds customers whose "first last" name contains ``query``, ignoring case.
        An empty query matches everyone. No match gives an empty list, not an error.
        """
        pattern = f"%{query}%" if query else "%"
        full_name = customers.c.first_name + " " + customers.c.last_name
        stmt = (
            select(*_COLUMNS)
            .where(full_name.ilike(pattern))
            .order_by(customers.c.last_name, customers.c.first_name)
        )
        return [cls.from_row(row) for row in store.fetch_all(stmt)]

    @classmethod
    def get(cls, id: int) -> "Customer":
        row = store.fetch_one(select(*_COLUMNS).where(customers.c.id == id))
        if row is None:
            raise NotFoundError(f"No such customer: {id}")
        return cls.from_row(row)

    @classmethod
    def get_top_ten_by_most_reservations(cls) -> list["Customer"]:
        num_reservations = func.count(reservations.c.customer_id)
        stmt = (
            select(*_COLUMNS, num_reservations.label("num_reservations"))
            .select_from(customers)
            .join(reservations, reservations.c.customer_id == customers.c.id)
            .group_by(customers.c.id)
            .order_by(num_reservations.desc())
            .limit(10)
        )
        return [cls.from_row(row) for row in store.fetch_all(stmt)]

    def get_reservations(self) -> list[Reservation]:
        return Reservation.get_reservations_for_customer(self.id)

    def save(self) -> None:
        values = dict(
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            notes=self.notes,
        )
        if self.id is None:
            self.id = store.insert_returning_id(
                insert(customers).values(**values).returning(customers.c.id)
            )
        else:
            store.execute(update(customers).where(customers.c.id == self.id).values(**values))
