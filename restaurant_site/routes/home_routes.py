from flask import Blueprint, abort
from restaurant_site.controllers.home_controller import home_index, frontend_asset, health_check, uploaded_file as serve_upload

health_bp = Blueprint("health", __name__, url_prefix="/api")
site_bp = Blueprint("site", __name__)


@health_bp.get("/health")
def health():
    return health_check()


@site_bp.get("/uploads/<path:filename>")
def uploaded_file(filename):
    return serve_upload(filename)


@site_bp.route("/")
def home():
    return home_index()


@site_bp.get("/<path:path>")
def frontend(path):
    # Unknown API paths must stay JSON 404s rather than the SPA shell
    if path.startswith("api/"):
        abort(404)
    response = frontend_asset(path)
    if response is None:
        abort(404)
    return response
