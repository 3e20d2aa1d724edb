import datetime as dt
import logging
from functools import wraps
from typing import Optional

from flask import request, current_app, g
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from restaurant_site.extensions import db
from restaurant_site.models.admin_user import AdminUser
from restaurant_site.utils.enums import TokenType
from restaurant_site.utils.http import error

logger = logging.getLogger(__name__)


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: int, role: str, token_type: TokenType, version: int = 0) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    ttl_key = "JWT_ACCESS_TTL" if token_type == TokenType.ACCESS else "JWT_REFRESH_TTL"
    payload = {
        "sub": str(user_id),
        "role": role,
        "type": token_type.value,
        "ver": version,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(seconds=current_app.config[ttl_key])).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def bearer_token() -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    return auth_header.split(" ", 1)[1].strip() or None


def load_admin_from_token(token: str, expected_type: TokenType = TokenType.ACCESS):
    """Resolve a token to its AdminUser, or None when it is not acceptable.

    A token is rejected when its signature or expiry is bad, when its type
    does not match, or when its version predates the user's token_version
    (logout and password change bump it).
    """
    try:
        payload = decode_token(token)
    except jwt.PyJWTError as e:
        logger.info("Rejected %s token: %s", expected_type.value, e)
        return None

    if payload.get("type") != expected_type.value:
        return None

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None

    user = db.session.get(AdminUser, user_id)
    if not user or payload.get("ver", 0) != user.token_version:
        return None
    return user


def require_admin(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        token = bearer_token()
        if not token:
            return error("UNAUTHORIZED", "Missing Bearer token", 401)
        user = load_admin_from_token(token)
        if user is None:
            return error("UNAUTHORIZED", "Invalid or expired token", 401)
        g.admin_user = user
        request.user_id = user.id  # type: ignore
        request.user_role = user.role  # type: ignore
        return f(*args, **kwargs)
    return wrapper


def current_admin():
    """The admin resolved from an optional bearer token, or None."""
    token = bearer_token()
    if not token:
        return None
    return load_admin_from_token(token)


__all__ = [
    "hash_password",
    "create_token",
    "decode_token",
    "require_admin",
    "current_admin",
    "load_admin_from_token",
    "check_password_hash",
]
