from dotenv import load_dotenv
import os

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///restaurant.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # SQLite does not pool connections across threads the way a server DB does,
    # so only the liveness check is kept here.
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # Admin credentials, materialised into admin_users on first use
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "password123")

    # Token lifetimes in seconds
    JWT_ACCESS_TTL = int(os.getenv("JWT_ACCESS_TTL", "3600"))
    JWT_REFRESH_TTL = int(os.getenv("JWT_REFRESH_TTL", str(7 * 24 * 3600)))

    # Uploads (menu PDFs, gallery images)
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(20 * 1024 * 1024)))

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

    # Built frontend bundle (index.html + assets); optional
    FRONTEND_DIST = os.getenv("FRONTEND_DIST")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
