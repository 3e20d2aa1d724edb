from flask import request, current_app
from restaurant_site.extensions import db
from restaurant_site.schemas.contact_schema import CreateContactSchema, ContactStatusSchema
from restaurant_site.services.contact_service import (
    create_contact,
    list_contacts,
    get_contact,
    update_status,
    delete_contact,
)
from restaurant_site.utils.http import ok, error, paginated, json_body, validate_schema, arg_int


def create_contact_handler():
    data, errors = validate_schema(CreateContactSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Please check the contact form", 400, errors=errors)

    try:
        contact = create_contact(data)
        return ok({"id": contact.id}, 201, message="Message sent")
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Could not store contact message")
        return error("UNKNOWN_ERROR", str(e), 500)


def list_contacts_handler():
    """
    Query Parameters:
        - page: Page number (default: 1)
        - per_page: Items per page (default: 20, max: 100)
        - status: new, read or replied
    """
    page = arg_int("page", 1, min_value=1)
    per_page = arg_int("per_page", 20, min_value=1, max_value=100)
    status = (request.args.get("status") or "").strip() or None

    try:
        pagination = list_contacts(page=page, per_page=per_page, status=status)
    except ValueError as e:
        return error("VALIDATION_ERROR", str(e), 400)
    return paginated([c.to_dict() for c in pagination.items], pagination)


def get_contact_handler(contact_id: int):
    contact = get_contact(contact_id)
    if not contact:
        return error("NOT_FOUND", "Contact message not found", 404)
    return ok(contact)


def update_contact_status_handler(contact_id: int):
    data, errors = validate_schema(ContactStatusSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Status must be 'new', 'read' or 'replied'", 400, errors=errors)

    try:
        result = update_status(contact_id, data["status"])
        if not result:
            return error("NOT_FOUND", "Contact message not found", 404)
        return ok(result, message="Contact message updated")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_contact_handler(contact_id: int):
    try:
        if not delete_contact(contact_id):
            return error("NOT_FOUND", "Contact message not found", 404)
        return ok(None, message="Contact message deleted")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
