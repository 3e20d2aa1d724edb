import os
from datetime import datetime, timezone

from flask import current_app, jsonify, send_from_directory
from restaurant_site.extensions import db
from restaurant_site.utils.http import ok


def home_index():
    dist = current_app.config.get("FRONTEND_DIST")
    if dist and os.path.isfile(os.path.join(dist, "index.html")):
        return send_from_directory(dist, "index.html")
    return jsonify({
        "message": "Restaurant site API is running",
    })


def frontend_asset(path: str):
    """Serve a file from the built frontend, falling back to index.html for client routes."""
    dist = current_app.config.get("FRONTEND_DIST")
    if not dist:
        return None
    if os.path.isfile(os.path.join(dist, path)):
        return send_from_directory(dist, path)
    if os.path.isfile(os.path.join(dist, "index.html")):
        return send_from_directory(dist, "index.html")
    return None


def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return ok({
        "status": "online",
        "database": db_status,
        "server_time": datetime.now(timezone.utc).isoformat(),
    })


def uploaded_file(filename: str):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
