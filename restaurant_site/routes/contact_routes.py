"""
Contact Routes Module

Single messages are addressed either as /api/contacts/<id> or, for older
clients, as /api/contacts?id=<id>.
"""

from flask import Blueprint
from restaurant_site.utils.auth import require_admin
from restaurant_site.utils.http import arg_int, error
from restaurant_site.controllers.contact_controller import (
    create_contact_handler,
    list_contacts_handler,
    get_contact_handler,
    update_contact_status_handler,
    delete_contact_handler,
)

contact_bp = Blueprint("contacts", __name__, url_prefix="/api/contacts")


def _query_id():
    value = arg_int("id", 0)
    return value if value > 0 else None


@contact_bp.post("")
def create_contact():
    """Submit the contact form (Public)"""
    return create_contact_handler()


@contact_bp.get("")
@require_admin
def list_contacts():
    contact_id = _query_id()
    if contact_id:
        return get_contact_handler(contact_id)
    return list_contacts_handler()


@contact_bp.patch("")
@require_admin
def update_contact_by_query():
    contact_id = _query_id()
    if not contact_id:
        return error("VALIDATION_ERROR", "id query parameter is required", 400)
    return update_contact_status_handler(contact_id)


@contact_bp.delete("")
@require_admin
def delete_contact_by_query():
    contact_id = _query_id()
    if not contact_id:
        return error("VALIDATION_ERROR", "id query parameter is required", 400)
    return delete_contact_handler(contact_id)


@contact_bp.get("/<int:id>")
@require_admin
def get_contact(id):
    return get_contact_handler(id)


@contact_bp.patch("/<int:id>")
@require_admin
def update_contact(id):
    return update_contact_status_handler(id)


@contact_bp.delete("/<int:id>")
@require_admin
def delete_contact(id):
    return delete_contact_handler(id)
