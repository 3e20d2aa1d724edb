from restaurant_site.extensions import db
from restaurant_site.services.settings_service import get_settings, update_settings
from restaurant_site.utils.http import ok, error, json_body


def get_settings_handler():
    return ok(get_settings())


def update_settings_handler():
    data = json_body()
    if not data:
        return error("VALIDATION_ERROR", "No settings provided", 400)

    try:
        return ok(update_settings(data), message="Settings updated")
    except ValueError as e:
        return error("VALIDATION_ERROR", str(e), 400)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
