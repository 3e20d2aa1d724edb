"""
Reservation Controller Module

Handles reservation requests:
- Public booking form submission
- Admin listing, status updates and deletion
"""

from flask import request, current_app
from restaurant_site.extensions import db
from restaurant_site.schemas.reservation_schema import (
    CreateReservationSchema,
    ReservationStatusSchema,
    ListReservationQuerySchema,
)
from restaurant_site.services.reservation_service import (
    create_reservation,
    list_reservations,
    get_reservation,
    update_status,
    delete_reservation,
)
from restaurant_site.utils.http import ok, error, paginated, json_body, validate_schema


def create_reservation_handler():
    """
    Body Parameters:
        - name (required)
        - email (required)
        - date (required): YYYY-MM-DD
        - guests (required): e.g. "2 People"
        - requirements (optional): Allergies, occasion, seating wishes
    """
    data, errors = validate_schema(CreateReservationSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Please check the reservation details", 400, errors=errors)

    try:
        reservation = create_reservation(data)
        return ok({"id": reservation.id}, 201, message="Reservation request received")
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Could not store reservation")
        return error("UNKNOWN_ERROR", str(e), 500)


def list_reservations_handler():
    """
    List reservations, newest first (admin view).

    Query Parameters:
        - page: Page number (default: 1)
        - per_page: Items per page (default: 20, max: 100)
        - status: pending, confirmed or cancelled
        - date: YYYY-MM-DD
    """
    raw = {k: v for k, v in request.args.items() if v.strip()}
    query, errors = validate_schema(ListReservationQuerySchema, raw)
    if errors:
        return error("VALIDATION_ERROR", "Invalid query parameters", 400, errors=errors)

    pagination = list_reservations(
        page=query["page"],
        per_page=query["per_page"],
        status=query.get("status"),
        on_date=query.get("date"),
    )
    return paginated([r.to_dict() for r in pagination.items], pagination)


def get_reservation_handler(reservation_id: int):
    reservation = get_reservation(reservation_id)
    if not reservation:
        return error("NOT_FOUND", "Reservation not found", 404)
    return ok(reservation)


def update_reservation_status_handler(reservation_id: int):
    data, errors = validate_schema(ReservationStatusSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Status must be 'pending', 'confirmed' or 'cancelled'", 400, errors=errors)

    try:
        result = update_status(reservation_id, data["status"])
        if not result:
            return error("NOT_FOUND", "Reservation not found", 404)
        return ok(result, message="Reservation updated")
    except ValueError as e:
        return error("VALIDATION_ERROR", str(e), 400)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_reservation_handler(reservation_id: int):
    try:
        if not delete_reservation(reservation_id):
            return error("NOT_FOUND", "Reservation not found", 404)
        return ok(None, message="Reservation deleted")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
