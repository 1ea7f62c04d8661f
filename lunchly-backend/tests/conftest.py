from datetime import datetime

import pytest

from lunchly.app import create_app
from lunchly.extensions import db
from lunchly.models import Customer, Reservation


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_customer(first_name, last_name, phone=None, notes=None) -> Customer:
    customer = Customer(first_name=first_name, last_name=last_name, phone=phone, notes=notes)
    customer.save()
    return customer


def _make_reservation(customer, num_guests=2, start_at=None, notes="") -> Reservation:
    reservation = Reservation(
        customer_id=customer.id,
        num_guests=num_guests,
        start_at=start_at or datetime(2024, 4, 5, 18, 30),
        notes=notes,
    )
    reservation.save()
    return reservation


@pytest.fixture
def customers(app):
    """Four customers, saved in an order that differs from name order."""
    return {
        "anna": _make_customer("Anna", "Zimmer", "555-0101", "Allergic to nuts"),
        "bob": _make_customer("Bob", "Adams"),
        "carla": _make_customer("Carla", "Adams", "555-0103"),
        "dan": _make_customer("Dan", "Marino"),
    }


@pytest.fixture
def make_customer(app):
    return _make_customer


@pytest.fixture
def make_reservation(app):
    return _make_reservation
