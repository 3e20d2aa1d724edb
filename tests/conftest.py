import io

import pytest
from pypdf import PdfWriter

from restaurant_site import create_app
from restaurant_site.extensions import db


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SECRET_KEY": "test-secret",
        "ADMIN_USERNAME": "admin",
        "ADMIN_PASSWORD": "password123",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        "FRONTEND_DIST": None,
        "CORS_ORIGINS": ["http://localhost:5173"],
    })
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, username="admin", password="password123"):
    r = client.post("/api/auth/login", json={"username": username, "password": password})
    assert r.status_code == 200, r.data
    return r.get_json()["data"]


@pytest.fixture()
def tokens(client):
    return login(client)


@pytest.fixture()
def headers(tokens):
    return {"Authorization": f"Bearer {tokens['access_token']}"}


def make_pdf(pages=1):
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.fixture()
def pdf_bytes():
    return make_pdf
