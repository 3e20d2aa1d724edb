from flask import Blueprint
from restaurant_site.utils.auth import require_admin
from restaurant_site.controllers.faq_controller import (
    list_faqs_handler,
    create_faq_handler,
    update_faq_handler,
    delete_faq_handler,
)

faq_bp = Blueprint("faqs", __name__, url_prefix="/api/faqs")

@faq_bp.get("")
def list_faqs():
    """Active FAQs (Public); ?all=1 lists every FAQ (Admin only)"""
    return list_faqs_handler()


@faq_bp.post("")
@require_admin
def create_faq():
    return create_faq_handler()


@faq_bp.put("/<int:id>")
@require_admin
def update_faq(id):
    return update_faq_handler(id)


@faq_bp.delete("/<int:id>")
@require_admin
def delete_faq(id):
    return delete_faq_handler(id)
