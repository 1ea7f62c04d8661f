import logging

from flask import Blueprint, jsonify
from pydantic import ValidationError

from ..http import jerror, json_body
from ..models import Reservation
from ..schemas import ReservationUpdateRequest

bp = Blueprint("reservations", __name__)
logger = logging.getLogger(__name__)


def reservation_json(reservation: Reservation) -> dict:
    return {
        "id": reservation.id,
        "customerId": reservation.customer_id,
        "numGuests": reservation.num_guests,
        "startAt": reservation.start_at.isoformat(),
        "startAtDisplay": reservation.get_formatted_start_at(),
        "startAtEditable": reservation.get_unformatted_start_at(),
        "notes": reservation.notes,
    }


@bp.get("/<int:reservation_id>")
def get_reservation(reservation_id: int):
    return jsonify(reservation_json(Reservation.get(reservation_id)))


@bp.put("/<int:reservation_id>")
def update_reservation(reservation_id: int):
    payload = json_body()
    if payload is None:
        return jerror(400, "INVALID_PAYLOAD", "Missing or invalid JSON payload.")

    try:
        data = ReservationUpdateRequest.model_validate(payload)
    except ValidationError as e:
        return jerror(422, "VALIDATION_ERROR", "Invalid input.", details=e.errors(include_context=False))

    reservation = Reservation.get(reservation_id)
    if data.customer_id is not None and data.customer_id != reservation.customer_id:
        # the setter refuses any reassignment
        reservation.customer_id = data.customer_id

    reservation.num_guests = data.num_guests
    reservation.start_at = data.start_at
    reservation.notes = data.notes
    reservation.save()

    logger.info("Updated reservation %s", reservation.id)
    return jsonify(reservation_json(reservation))
