from flask import current_app, g
from restaurant_site.extensions import db
from restaurant_site.schemas.auth_schema import LoginSchema, RefreshSchema, ChangePasswordSchema
from restaurant_site.services.auth_service import (
    authenticate,
    issue_tokens,
    refresh_access_token,
    revoke_tokens,
    change_password,
)
from restaurant_site.utils.http import ok, error, json_body, validate_schema


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "username and password required", 400, errors=errors)

    try:
        user = authenticate(data["username"].strip(), data["password"])
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Login failed unexpectedly")
        return error("UNKNOWN_ERROR", str(e), 500)

    if not user:
        return error("INVALID_CREDENTIALS", "Invalid credentials", 401)

    return ok(issue_tokens(user), message="Login successful")


def refresh_handler():
    data, errors = validate_schema(RefreshSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "refresh_token required", 400, errors=errors)

    result = refresh_access_token(data["refresh_token"])
    if not result:
        return error("INVALID_TOKEN", "Invalid or expired refresh token", 401)

    return ok(result, message="Token refreshed")


def logout_handler():
    """
    Revoke every token issued to the current admin.
    The client drops its stored tokens regardless of the outcome.
    """
    try:
        revoke_tokens(g.admin_user)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(None, message="Logged out successfully")


def me_handler():
    return ok(g.admin_user.to_dict())


def change_password_handler():
    data, errors = validate_schema(ChangePasswordSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid password data", 400, errors=errors)

    try:
        tokens = change_password(g.admin_user, data["current_password"], data["new_password"])
        return ok(tokens, message="Password changed successfully")
    except ValueError as e:
        return error("VALIDATION_ERROR", str(e), 400)
    except Exception as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)
