"""
Auth Service Module

Admin authentication against the configured credentials:
- Bootstrapping the admin account from ADMIN_USERNAME / ADMIN_PASSWORD
- Issuing access/refresh token pairs
- Token revocation via token_version
- Password changes
"""

import logging
from typing import Any, Dict, Optional

from flask import current_app

from restaurant_site.extensions import db
from restaurant_site.models.admin_user import AdminUser
from restaurant_site.utils.auth import create_token, hash_password, check_password_hash, load_admin_from_token
from restaurant_site.utils.enums import AdminRole, TokenType

logger = logging.getLogger(__name__)


def ensure_admin_user() -> AdminUser:
    """
    Make sure the configured admin account exists.

    The configured password is only used when the row is first created;
    afterwards the stored hash wins so that change-password sticks.
    """
    username = current_app.config["ADMIN_USERNAME"]
    user = AdminUser.query.filter_by(username=username).first()
    if user:
        return user

    user = AdminUser(
        username=username,
        password=hash_password(current_app.config["ADMIN_PASSWORD"]),
        role=AdminRole.ADMIN.value,
    )
    db.session.add(user)
    db.session.commit()
    logger.info("Created admin user '%s'", username)
    return user


def issue_tokens(user: AdminUser) -> Dict[str, Any]:
    return {
        "access_token": create_token(user.id, user.role, TokenType.ACCESS, user.token_version),
        "refresh_token": create_token(user.id, user.role, TokenType.REFRESH, user.token_version),
        "token_type": "Bearer",
        "expires_in": current_app.config["JWT_ACCESS_TTL"],
        "user": user.to_dict(),
    }


def authenticate(username: str, password: str) -> Optional[AdminUser]:
    user = AdminUser.query.filter_by(username=username).first()
    if not user and username == current_app.config["ADMIN_USERNAME"]:
        # Configured account, first login under this name
        user = ensure_admin_user()

    if not user or not check_password_hash(user.password, password):
        logger.warning("Failed admin login for '%s'", username)
        return None
    return user


def refresh_access_token(refresh_token: str) -> Optional[Dict[str, Any]]:
    user = load_admin_from_token(refresh_token, TokenType.REFRESH)
    if user is None:
        return None
    return {
        "access_token": create_token(user.id, user.role, TokenType.ACCESS, user.token_version),
        "token_type": "Bearer",
        "expires_in": current_app.config["JWT_ACCESS_TTL"],
    }


def revoke_tokens(user: AdminUser) -> None:
    user.token_version = (user.token_version or 0) + 1
    db.session.commit()


def change_password(user: AdminUser, current_password: str, new_password: str) -> Dict[str, Any]:
    """
    Raises:
        ValueError: If the current password does not match
    """
    if not check_password_hash(user.password, current_password):
        raise ValueError("Current password is incorrect")

    user.password = hash_password(new_password)
    user.token_version = (user.token_version or 0) + 1
    db.session.commit()
    logger.info("Password changed for admin '%s'", user.username)
    return issue_tokens(user)
