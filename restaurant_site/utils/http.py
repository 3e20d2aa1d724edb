from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from flask import request, jsonify
from marshmallow import Schema, ValidationError


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def ok(payload: Any = None, status: int = 200, message: str = "OK"):
    return jsonify({
        "success": True,
        "message": message,
        "data": payload,
        "timestamp": _now_iso(),
    }), status


def paginated(items, pagination, message: str = "OK"):
    """Wrap a flask-sqlalchemy Pagination into the list envelope."""
    return jsonify({
        "success": True,
        "message": message,
        "data": items,
        "pagination": {
            "total": pagination.total,
            "page": pagination.page,
            "per_page": pagination.per_page,
            "total_pages": pagination.pages,
            "has_next": pagination.has_next,
            "has_prev": pagination.has_prev,
        },
        "timestamp": _now_iso(),
    }), 200


def error(code: str, message: str, status: int = 400, errors: Any = None, **extra):
    body: Dict[str, Any] = {
        "success": False,
        "message": message,
        "error": {"code": code},
        "errors": errors,
        "timestamp": _now_iso(),
    }
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, data: Dict[str, Any], partial: bool = False) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    schema: Schema = schema_cls()
    try:
        return schema.load(data, partial=partial), None
    except ValidationError as e:
        return {}, e.messages


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def arg_bool(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() in ("1", "true", "yes", "on")