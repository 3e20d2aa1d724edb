from restaurant_site.extensions import db
from restaurant_site.schemas.faq_schema import CreateFAQSchema, UpdateFAQSchema
from restaurant_site.services.faq_service import list_faqs, create_faq, update_faq, delete_faq
from restaurant_site.utils.auth import bearer_token, current_admin
from restaurant_site.utils.http import ok, error, json_body, validate_schema, arg_bool


def list_faqs_handler():
    """
    Public: active FAQs only.
    With ?all=1 and an admin token: every FAQ including inactive ones.
    """
    if arg_bool("all"):
        if not bearer_token():
            return error("UNAUTHORIZED", "Missing Bearer token", 401)
        if current_admin() is None:
            return error("UNAUTHORIZED", "Invalid or expired token", 401)
        return ok(list_faqs(include_inactive=True))
    return ok(list_faqs())


def create_faq_handler():
    data, errors = validate_schema(CreateFAQSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Question and answer are required", 400, errors=errors)

    try:
        faq = create_faq(data)
        return ok(faq.to_dict(), 201, message="FAQ created")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def update_faq_handler(faq_id: int):
    data, errors = validate_schema(UpdateFAQSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid FAQ data", 400, errors=errors)

    try:
        result = update_faq(faq_id, data)
        if not result:
            return error("NOT_FOUND", "FAQ not found", 404)
        return ok(result, message="FAQ updated")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_faq_handler(faq_id: int):
    try:
        if not delete_faq(faq_id):
            return error("NOT_FOUND", "FAQ not found", 404)
        return ok(None, message="FAQ deleted")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
