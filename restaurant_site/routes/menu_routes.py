"""
Menu Routes Module

Defines URL mappings for menu endpoints:
- Menu PDFs under /api/menu
- Menu items under /api/menu-items
"""

from flask import Blueprint
from restaurant_site.utils.auth import require_admin
from restaurant_site.controllers.menu_controller import (
    list_menu_pdfs_handler,
    get_active_menu_pdf_handler,
    upload_menu_pdf_handler,
    update_menu_pdf_handler,
    delete_menu_pdf_handler,
    download_menu_pdf_handler,
    list_menu_items_handler,
    create_menu_item_handler,
    update_menu_item_handler,
    delete_menu_item_handler,
)

menu_bp = Blueprint("menu", __name__, url_prefix="/api")


# ============================================================================
# Menu PDFs
# ============================================================================

@menu_bp.get("/menu")
def list_menu_pdfs():
    """List uploaded menu PDFs (Public)"""
    return list_menu_pdfs_handler()


@menu_bp.get("/menu/active")
def get_active_menu_pdf():
    """The PDF shown on the menu page (Public)"""
    return get_active_menu_pdf_handler()


@menu_bp.get("/menu/download")
def download_menu_pdf():
    """Download the active menu PDF (Public)"""
    return download_menu_pdf_handler()


@menu_bp.post("/menu")
@require_admin
def upload_menu_pdf():
    """Upload a menu PDF (Admin only)"""
    return upload_menu_pdf_handler()


@menu_bp.put("/menu/<int:id>")
@require_admin
def update_menu_pdf(id):
    """Rename or (de)activate a menu PDF (Admin only)"""
    return update_menu_pdf_handler(id)


@menu_bp.delete("/menu/<int:id>")
@require_admin
def delete_menu_pdf(id):
    """Delete a menu PDF and its file (Admin only)"""
    return delete_menu_pdf_handler(id)


# ============================================================================
# Menu Items
# ============================================================================

@menu_bp.get("/menu-items")
def list_menu_items():
    return list_menu_items_handler()


@menu_bp.post("/menu-items")
@require_admin
def create_menu_item():
    return create_menu_item_handler()


@menu_bp.put("/menu-items/<int:id>")
@require_admin
def update_menu_item(id):
    return update_menu_item_handler(id)


@menu_bp.delete("/menu-items/<int:id>")
@require_admin
def delete_menu_item(id):
    return delete_menu_item_handler(id)
