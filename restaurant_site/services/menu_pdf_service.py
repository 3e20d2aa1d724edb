"""
Menu PDF Service Module

Handles the downloadable menu PDFs:
- Upload with PDF validation and page counting (pypdf)
- Single active PDF invariant
- Rename, delete and lookup of the active PDF
"""

import logging
from typing import Any, Dict, List, Optional

from pypdf import PdfReader
from pypdf.errors import PdfReadError
from werkzeug.datastructures import FileStorage

from restaurant_site.extensions import db
from restaurant_site.models.menu_pdf import MenuPdf
from restaurant_site.services.storage_service import (
    PDF_EXTENSIONS,
    validate_upload,
    save_upload,
    delete_upload,
    file_path,
    public_url,
)

logger = logging.getLogger(__name__)

MENU_CATEGORY = "menus"


def serialize(pdf: MenuPdf) -> Dict[str, Any]:
    return pdf.to_dict(file_url=public_url(MENU_CATEGORY, pdf.filename))


def count_pages(stream) -> int:
    """
    Count the pages of a PDF stream.

    Raises:
        ValueError: If the stream is not a readable PDF
    """
    try:
        reader = PdfReader(stream)
        return len(reader.pages)
    except (PdfReadError, ValueError, KeyError, TypeError) as e:
        raise ValueError(f"File is not a valid PDF: {e}") from e


def _deactivate_all(except_id: Optional[int] = None) -> None:
    query = MenuPdf.query.filter(MenuPdf.is_active.is_(True))
    if except_id is not None:
        query = query.filter(MenuPdf.id != except_id)
    query.update({MenuPdf.is_active: False}, synchronize_session="fetch")


def list_menu_pdfs() -> List[Dict[str, Any]]:
    pdfs = MenuPdf.query.order_by(MenuPdf.uploaded_at.desc(), MenuPdf.id.desc()).all()
    return [serialize(p) for p in pdfs]


def get_active_pdf() -> Optional[MenuPdf]:
    return MenuPdf.query.filter_by(is_active=True).order_by(MenuPdf.id.desc()).first()


def upload_menu_pdf(file: FileStorage, title: Optional[str] = None, set_active: bool = True) -> Dict[str, Any]:
    """
    Store an uploaded menu PDF.

    Args:
        file: The uploaded file (form field "pdf")
        title: Display title, defaults to the original file name
        set_active: Make this the active menu, deactivating the others

    Raises:
        ValueError: If the upload is missing, not a .pdf, or not a readable PDF
    """
    validate_upload(file, PDF_EXTENSIONS)

    page_count = count_pages(file.stream)
    file.stream.seek(0)

    stored, size = save_upload(file, MENU_CATEGORY)

    pdf = MenuPdf(
        title=(title or "").strip() or file.filename,
        filename=stored,
        original_name=file.filename,
        file_size=size,
        page_count=page_count,
        is_active=set_active,
    )
    try:
        if set_active:
            _deactivate_all()
        db.session.add(pdf)
        db.session.commit()
    except Exception:
        db.session.rollback()
        delete_upload(MENU_CATEGORY, stored)
        raise

    logger.info("Uploaded menu PDF %s (%d pages, active=%s)", pdf.id, page_count, set_active)
    return serialize(pdf)


def update_menu_pdf(pdf_id: int, title: Optional[str] = None, is_active: Optional[bool] = None) -> Optional[Dict[str, Any]]:
    pdf = db.session.get(MenuPdf, pdf_id)
    if not pdf:
        return None

    if title is not None and title.strip():
        pdf.title = title.strip()

    if is_active is not None:
        if is_active:
            _deactivate_all(except_id=pdf.id)
        pdf.is_active = is_active

    db.session.commit()
    return serialize(pdf)


def delete_menu_pdf(pdf_id: int) -> bool:
    pdf = db.session.get(MenuPdf, pdf_id)
    if not pdf:
        return False

    stored = pdf.filename
    db.session.delete(pdf)
    db.session.commit()
    delete_upload(MENU_CATEGORY, stored)
    return True


def active_pdf_path() -> Optional[Dict[str, str]]:
    pdf = get_active_pdf()
    if not pdf:
        return None
    return {
        "path": file_path(MENU_CATEGORY, pdf.filename),
        "download_name": pdf.original_name,
    }
