import logging

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from ..http import jerror, json_body
from ..models import Customer, Reservation
from ..schemas import CustomerRequest, ReservationRequest
from .reservations import reservation_json

bp = Blueprint("customers", __name__)
logger = logging.getLogger(__name__)


def customer_json(customer: Customer) -> dict:
    data = {
        "id": customer.id,
        "firstName": customer.first_name,
        "lastName": customer.last_name,
        "fullName": customer.full_name,
        "phone": customer.phone,
        "notes": customer.notes,
    }
    if customer.num_reservations is not None:
        data["numReservations"] = customer.num_reservations
    return data


def _validated(schema):
    payload = json_body()
    if payload is None:
        return None, jerror(400, "INVALID_PAYLOAD", "Missing or invalid JSON payload.")
    try:
        return schema.model_validate(payload), None
    except ValidationError as e:
        return None, jerror(422, "VALIDATION_ERROR", "Invalid input.", details=e.errors(include_context=False))


@bp.get("")
def search_customers():
    customers = Customer.search_customers(request.args.get("search", "").strip())
    return jsonify(customers=[customer_json(c) for c in customers])


@bp.get("/top")
def top_customers():
    customers = Customer.get_top_ten_by_most_reservations()
    return jsonify(customers=[customer_json(c) for c in customers])


@bp.post("")
def create_customer():
    data, error = _validated(CustomerRequest)
    if error:
        return error

    customer = Customer(
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        notes=data.notes,
    )
    customer.save()

    logger.info("Created customer %s", customer.id)
    return jsonify(customer_json(customer)), 201


@bp.get("/<int:customer_id>")
def get_customer(customer_id: int):
    customer = Customer.get(customer_id)
    data = customer_json(customer)
    data["reservations"] = [reservation_json(r) for r in customer.get_reservations()]
    return jsonify(data)


@bp.put("/<int:customer_id>")
def update_customer(customer_id: int):
    data, error = _validated(CustomerRequest)
    if error:
        return error

    customer = Customer.get(customer_id)
    customer.first_name = data.first_name
    customer.last_name = data.last_name
    customer.phone = data.phone
    customer.notes = data.notes
    customer.save()

    logger.info("Updated customer %s", customer.id)
    # full_name is fixed at construction, reload to refresh it
    return jsonify(customer_json(Customer.get(customer.id)))


@bp.post("/<int:customer_id>/reservations")
def add_reservation(customer_id: int):
    data, error = _validated(ReservationRequest)
    if error:
        return error

    customer = Customer.get(customer_id)
    reservation = Reservation(
        customer_id=customer.id,
        num_guests=data.num_guests,
        start_at=data.start_at,
        notes=data.notes,
    )
    reservation.save()

    logger.info("Created reservation %s for customer %s", reservation.id, customer.id)
    return jsonify(reservation_json(reservation)), 201
