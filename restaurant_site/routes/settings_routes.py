from flask import Blueprint
from restaurant_site.utils.auth import require_admin
from restaurant_site.controllers.settings_controller import get_settings_handler, update_settings_handler

settings_bp = Blueprint("settings", __name__, url_prefix="/api/settings")

@settings_bp.get("")
def get_settings():
    return get_settings_handler()


@settings_bp.put("")
@require_admin
def update_settings():
    return update_settings_handler()
