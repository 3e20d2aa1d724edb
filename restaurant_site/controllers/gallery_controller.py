from flask import request, current_app
from restaurant_site.extensions import db
from restaurant_site.schemas.gallery_schema import CreateGalleryImageSchema, UpdateGalleryImageSchema
from restaurant_site.services.gallery_service import (
    list_images,
    create_image,
    upload_image,
    update_image,
    delete_image,
)
from restaurant_site.utils.http import ok, error, json_body, validate_schema


def list_gallery_handler():
    return ok(list_images())


def create_gallery_image_handler():
    """
    Add a gallery image.

    Accepts either multipart form data with an "image" file (plus optional
    "alt" and "title"), or a JSON body {url, alt?, title?, sort_order?}
    referencing an external image.
    """
    if "image" in request.files:
        try:
            image = upload_image(
                request.files["image"],
                alt=request.form.get("alt", ""),
                title=request.form.get("title", ""),
            )
            return ok({"id": image.id, "url": image.url}, 201, message="Image uploaded")
        except ValueError as e:
            return error("VALIDATION_ERROR", str(e), 400)
        except Exception as e:
            db.session.rollback()
            current_app.logger.exception("Gallery upload failed")
            return error("UNKNOWN_ERROR", str(e), 500)

    data, errors = validate_schema(CreateGalleryImageSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid gallery image data", 400, errors=errors)

    try:
        image = create_image(data["url"], data.get("alt", ""), data.get("title", ""), data.get("sort_order"))
        return ok({"id": image.id, "url": image.url}, 201, message="Image added")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def update_gallery_image_handler(image_id: int):
    data, errors = validate_schema(UpdateGalleryImageSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid gallery image data", 400, errors=errors)

    try:
        result = update_image(image_id, data)
        if not result:
            return error("NOT_FOUND", "Image not found", 404)
        return ok(result, message="Image updated")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_gallery_image_handler(image_id: int):
    try:
        if not delete_image(image_id):
            return error("NOT_FOUND", "Image not found", 404)
        current_app.logger.info("Deleted gallery image %s", image_id)
        return ok(None, message="Image deleted")
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
