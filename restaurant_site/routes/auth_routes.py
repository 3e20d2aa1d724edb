from flask import Blueprint
from restaurant_site.controllers.auth_controller import (
    login_handler,
    refresh_handler,
    logout_handler,
    me_handler,
    change_password_handler,
)
from restaurant_site.utils.auth import require_admin

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

@auth_bp.post("/login")
def login():
    return login_handler()


@auth_bp.post("/refresh")
def refresh():
    return refresh_handler()


@auth_bp.post("/logout")
@require_admin
def logout():
    return logout_handler()


@auth_bp.get("/me")
@require_admin
def me():
    return me_handler()


@auth_bp.post("/change-password")
@require_admin
def change_password():
    return change_password_handler()
