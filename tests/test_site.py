from restaurant_site.services.seed_service import seed_defaults, DEFAULT_SETTINGS


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["status"] == "online"
    assert data["database"] == "healthy"


def test_root_without_frontend_build(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.get_json()["message"] == "Restaurant site API is running"


def test_unknown_api_path_is_json_404(client):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    body = r.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"


def test_frontend_build_is_served_with_fallback(client, app, tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>shell</html>")
    (dist / "assets" / "app.js").write_text("console.log('hi')")
    app.config["FRONTEND_DIST"] = str(dist)

    assert b"shell" in client.get("/").data
    assert b"console.log" in client.get("/assets/app.js").data
    # client-side routes fall back to the shell
    assert b"shell" in client.get("/admin/reservations").data
    assert client.get("/api/nothing").status_code == 404


def test_unknown_page_without_frontend_is_404(client):
    assert client.get("/gallery").status_code == 404


def test_cors_headers_on_api(client):
    r = client.get("/api/settings", headers={"Origin": "http://localhost:5173"})
    assert r.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_seed_defaults_is_idempotent(app, client):
    with app.app_context():
        first = seed_defaults()
        second = seed_defaults()

    assert first["settings"] == len(DEFAULT_SETTINGS)
    assert first["gallery_images"] == 4
    assert first["faqs"] > 0 and first["menu_items"] > 0
    assert set(second.values()) == {0}

    settings = client.get("/api/settings").get_json()["data"]
    assert settings == DEFAULT_SETTINGS
    assert len(client.get("/api/gallery").get_json()["data"]) == 4


def test_unexpected_error_is_json_500(client, monkeypatch):
    from sqlalchemy.exc import SQLAlchemyError
    from restaurant_site.controllers import gallery_controller

    def broken():
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(gallery_controller, "list_images", broken)
    r = client.get("/api/gallery")
    assert r.status_code == 500
    body = r.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "UNKNOWN_ERROR"
