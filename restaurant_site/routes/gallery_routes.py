from flask import Blueprint
from restaurant_site.utils.auth import require_admin
from restaurant_site.controllers.gallery_controller import (
    list_gallery_handler,
    create_gallery_image_handler,
    update_gallery_image_handler,
    delete_gallery_image_handler,
)

gallery_bp = Blueprint("gallery", __name__, url_prefix="/api/gallery")

@gallery_bp.get("")
def list_gallery():
    return list_gallery_handler()


@gallery_bp.post("")
@require_admin
def create_gallery_image():
    return create_gallery_image_handler()


@gallery_bp.put("/<int:id>")
@require_admin
def update_gallery_image(id):
    return update_gallery_image_handler(id)


@gallery_bp.delete("/<int:id>")
@require_admin
def delete_gallery_image(id):
    return delete_gallery_image_handler(id)
