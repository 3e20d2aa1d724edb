"""
Menu Controller Module

Handles menu-related HTTP requests:
- Menu PDFs (public listing/download, admin upload/activate/delete)
- Menu items (public listing, admin CRUD)
"""

from flask import request, current_app, send_file
from restaurant_site.extensions import db
from restaurant_site.schemas.menu_schema import MenuItemSchema, UpdateMenuPdfSchema
from restaurant_site.services.menu_service import (
    list_menu_items,
    create_menu_item,
    update_menu_item,
    delete_menu_item,
)
from restaurant_site.services.menu_pdf_service import (
    list_menu_pdfs,
    get_active_pdf,
    serialize,
    upload_menu_pdf,
    update_menu_pdf,
    delete_menu_pdf,
    active_pdf_path,
)
from restaurant_site.utils.http import ok, error, json_body, validate_schema


# ============================================================================
# Menu PDF Handlers
# ============================================================================

def list_menu_pdfs_handler():
    try:
        return ok(list_menu_pdfs())
    except Exception as e:
        return error("UNKNOWN_ERROR", str(e), 500)


def get_active_menu_pdf_handler():
    pdf = get_active_pdf()
    return ok(serialize(pdf) if pdf else None)


def upload_menu_pdf_handler():
    """
    Upload a menu PDF.

    Form Fields:
        - pdf (required): The PDF file
        - title (optional): Display title, defaults to the file name
        - set_active (optional): '1' (default) or '0'
    """
    file = request.files.get("pdf")
    if not file:
        return error("FILE_REQUIRED", "pdf file is required", 400)

    title = request.form.get("title")
    set_active = (request.form.get("set_active") or "1").strip().lower() not in ("0", "false", "no")

    try:
        result = upload_menu_pdf(file, title=title, set_active=set_active)
        return ok(result, 201, message="Menu PDF uploaded")
    except ValueError as e:
        return error("VALIDATION_ERROR", str(e), 400)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Menu PDF upload failed")
        return error("UNKNOWN_ERROR", str(e), 500)


def update_menu_pdf_handler(pdf_id: int):
    """
    Body Parameters (all optional):
        - title: New display title
        - is_active: true to make this the active menu, false to hide it
    """
    data, errors = validate_schema(UpdateMenuPdfSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid menu PDF data", 400, errors=errors)

    try:
        result = update_menu_pdf(pdf_id, title=data.get("title"), is_active=data.get("is_active"))
        if not result:
            return error("NOT_FOUND", "Menu PDF not found", 404)
        return ok(result, message="Menu PDF updated")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_menu_pdf_handler(pdf_id: int):
    try:
        if not delete_menu_pdf(pdf_id):
            return error("NOT_FOUND", "Menu PDF not found", 404)
        current_app.logger.info("Deleted menu PDF %s", pdf_id)
        return ok(None, message="Menu PDF deleted")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def download_menu_pdf_handler():
    active = active_pdf_path()
    if not active:
        return error("NOT_FOUND", "No active menu available", 404)
    return send_file(
        active["path"],
        mimetype="application/pdf",
        as_attachment=True,
        download_name=active["download_name"],
    )


# ============================================================================
# Menu Item Handlers
# ============================================================================

def list_menu_items_handler():
    category = (request.args.get("category") or "").strip() or None
    return ok(list_menu_items(category))


def create_menu_item_handler():
    data, errors = validate_schema(MenuItemSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid menu item data", 400, errors=errors)

    try:
        item = create_menu_item(data)
        return ok({"id": item.id}, 201, message="Menu item created")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def update_menu_item_handler(item_id: int):
    data, errors = validate_schema(MenuItemSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid menu item data", 400, errors=errors)

    try:
        result = update_menu_item(item_id, data)
        if not result:
            return error("NOT_FOUND", "Menu item not found", 404)
        return ok(result, message="Menu item updated")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_menu_item_handler(item_id: int):
    try:
        if not delete_menu_item(item_id):
            return error("NOT_FOUND", "Menu item not found", 404)
        return ok(None, message="Menu item deleted")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
