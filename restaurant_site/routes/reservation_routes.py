from flask import Blueprint
from restaurant_site.utils.auth import require_admin
from restaurant_site.controllers.reservation_controller import (
    create_reservation_handler,
    list_reservations_handler,
    get_reservation_handler,
    update_reservation_status_handler,
    delete_reservation_handler,
)

reservation_bp = Blueprint("reservations", __name__, url_prefix="/api/reservations")

@reservation_bp.post("")
def create_reservation():
    """Submit a reservation request (Public)"""
    return create_reservation_handler()


@reservation_bp.get("")
@require_admin
def list_reservations():
    return list_reservations_handler()


@reservation_bp.get("/<int:id>")
@require_admin
def get_reservation(id):
    return get_reservation_handler(id)


@reservation_bp.patch("/<int:id>")
@require_admin
def update_reservation_status(id):
    return update_reservation_status_handler(id)


@reservation_bp.delete("/<int:id>")
@require_admin
def delete_reservation(id):
    return delete_reservation_handler(id)
