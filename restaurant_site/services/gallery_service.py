"""
Gallery Service Module

Gallery images are either external URLs or files uploaded to
UPLOAD_FOLDER/gallery. Ordering is by sort_order, then id.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from werkzeug.datastructures import FileStorage

from restaurant_site.extensions import db
from restaurant_site.models.gallery_image import GalleryImage
from restaurant_site.services.storage_service import (
    IMAGE_EXTENSIONS,
    validate_upload,
    save_upload,
    delete_upload,
    public_url,
)

logger = logging.getLogger(__name__)

GALLERY_CATEGORY = "gallery"


def _next_sort_order() -> int:
    current = db.session.query(func.max(GalleryImage.sort_order)).scalar()
    return (current or 0) + 1


def list_images() -> List[Dict[str, Any]]:
    images = GalleryImage.query.order_by(GalleryImage.sort_order.asc(), GalleryImage.id.asc()).all()
    return [img.to_dict() for img in images]


def create_image(url: str, alt: str = "", title: str = "", sort_order: Optional[int] = None,
                 stored_filename: Optional[str] = None) -> GalleryImage:
    image = GalleryImage(
        url=url.strip(),
        alt=(alt or "").strip(),
        title=(title or "").strip(),
        sort_order=sort_order if sort_order is not None else _next_sort_order(),
        stored_filename=stored_filename,
    )
    db.session.add(image)
    db.session.commit()
    return image


def upload_image(file: FileStorage, alt: str = "", title: str = "") -> GalleryImage:
    """
    Raises:
        ValueError: If the upload is missing or not an allowed image type
    """
    validate_upload(file, IMAGE_EXTENSIONS)
    stored, _ = save_upload(file, GALLERY_CATEGORY)
    try:
        return create_image(public_url(GALLERY_CATEGORY, stored), alt, title, stored_filename=stored)
    except Exception:
        db.session.rollback()
        delete_upload(GALLERY_CATEGORY, stored)
        raise


def update_image(image_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    image = db.session.get(GalleryImage, image_id)
    if not image:
        return None

    for field in ("url", "alt", "title"):
        if field in data and data[field] is not None:
            setattr(image, field, data[field].strip())
    if data.get("sort_order") is not None:
        image.sort_order = data["sort_order"]

    db.session.commit()
    return image.to_dict()


def delete_image(image_id: int) -> bool:
    image = db.session.get(GalleryImage, image_id)
    if not image:
        return False

    stored = image.stored_filename
    db.session.delete(image)
    db.session.commit()
    if stored:
        delete_upload(GALLERY_CATEGORY, stored)
    return True
