import io
import os


def upload(client, headers, content, filename="menu.pdf", **form):
    data = {"pdf": (io.BytesIO(content), filename)}
    data.update(form)
    return client.post("/api/menu", headers=headers, data=data, content_type="multipart/form-data")


def stored_path(app, pdf):
    return os.path.join(app.config["UPLOAD_FOLDER"], "menus", pdf["filename"])


def test_upload_requires_admin(client, pdf_bytes):
    r = upload(client, {}, pdf_bytes())
    assert r.status_code == 401


def test_upload_and_list(client, headers, app, pdf_bytes):
    r = upload(client, headers, pdf_bytes(pages=2), title="Dinner Menu")
    assert r.status_code == 201, r.data
    pdf = r.get_json()["data"]
    assert pdf["title"] == "Dinner Menu"
    assert pdf["original_name"] == "menu.pdf"
    assert pdf["page_count"] == 2
    assert pdf["is_active"] is True
    assert pdf["file_size"] > 0
    assert "/uploads/menus/" in pdf["file_url"]
    assert os.path.exists(stored_path(app, pdf))

    r = client.get("/api/menu")
    assert r.status_code == 200
    assert [p["id"] for p in r.get_json()["data"]] == [pdf["id"]]


def test_title_defaults_to_file_name(client, headers, pdf_bytes):
    r = upload(client, headers, pdf_bytes(), filename="Summer Menu.pdf")
    assert r.get_json()["data"]["title"] == "Summer Menu.pdf"


def test_only_one_pdf_is_active(client, headers, pdf_bytes):
    first = upload(client, headers, pdf_bytes()).get_json()["data"]
    second = upload(client, headers, pdf_bytes()).get_json()["data"]
    third = upload(client, headers, pdf_bytes(), set_active="0").get_json()["data"]
    assert third["is_active"] is False

    pdfs = {p["id"]: p for p in client.get("/api/menu").get_json()["data"]}
    assert [pid for pid, p in pdfs.items() if p["is_active"]] == [second["id"]]

    r = client.put(f"/api/menu/{first['id']}", headers=headers, json={"is_active": True})
    assert r.status_code == 200
    pdfs = {p["id"]: p for p in client.get("/api/menu").get_json()["data"]}
    assert [pid for pid, p in pdfs.items() if p["is_active"]] == [first["id"]]

    r = client.get("/api/menu/active")
    assert r.get_json()["data"]["id"] == first["id"]


def test_rejects_non_pdf_uploads(client, headers):
    r = upload(client, headers, b"hello", filename="menu.txt")
    assert r.status_code == 400
    assert "Unsupported file type" in r.get_json()["message"]

    r = upload(client, headers, b"definitely not a pdf", filename="menu.pdf")
    assert r.status_code == 400
    assert "not a valid PDF" in r.get_json()["message"]

    r = client.post("/api/menu", headers=headers, data={}, content_type="multipart/form-data")
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "FILE_REQUIRED"


def test_rename_and_missing(client, headers, pdf_bytes):
    pdf = upload(client, headers, pdf_bytes()).get_json()["data"]

    r = client.put(f"/api/menu/{pdf['id']}", headers=headers, json={"title": "Lunch"})
    assert r.status_code == 200
    assert r.get_json()["data"]["title"] == "Lunch"
    assert r.get_json()["data"]["is_active"] is True

    r = client.put("/api/menu/999", headers=headers, json={"title": "x"})
    assert r.status_code == 404

    r = client.put(f"/api/menu/{pdf['id']}", headers=headers, json={"is_active": "maybe"})
    assert r.status_code == 400


def test_download_active_pdf(client, headers, pdf_bytes):
    r = client.get("/api/menu/download")
    assert r.status_code == 404
    assert r.get_json()["success"] is False

    content = pdf_bytes()
    upload(client, headers, content, filename="carte.pdf")
    r = client.get("/api/menu/download")
    assert r.status_code == 200
    assert r.mimetype == "application/pdf"
    assert r.data == content
    assert "carte.pdf" in r.headers["Content-Disposition"]


def test_delete_removes_file(client, headers, app, pdf_bytes):
    pdf = upload(client, headers, pdf_bytes()).get_json()["data"]
    path = stored_path(app, pdf)
    assert os.path.exists(path)

    r = client.delete(f"/api/menu/{pdf['id']}", headers=headers)
    assert r.status_code == 200
    assert not os.path.exists(path)
    assert client.get("/api/menu").get_json()["data"] == []

    r = client.delete(f"/api/menu/{pdf['id']}", headers=headers)
    assert r.status_code == 404


def test_uploaded_pdf_is_served(client, headers, pdf_bytes):
    content = pdf_bytes()
    pdf = upload(client, headers, content).get_json()["data"]
    r = client.get(f"/uploads/menus/{pdf['filename']}")
    assert r.status_code == 200
    assert r.data == content


def test_menu_item_crud(client, headers):
    r = client.post("/api/menu-items", headers=headers, json={
        "category": "Desserts",
        "name": "Tarte Tatin",
        "description": "Caramelised apples, crème fraîche",
        "price": 14,
    })
    assert r.status_code == 201, r.data
    item_id = r.get_json()["data"]["id"]

    client.post("/api/menu-items", headers=headers, json={"category": "Entrées", "name": "Oysters", "price": "24"})

    items = client.get("/api/menu-items").get_json()["data"]
    assert [i["category"] for i in items] == ["Desserts", "Entrées"]
    assert items[0]["price"] == "14"

    desserts = client.get("/api/menu-items?category=Desserts").get_json()["data"]
    assert [i["name"] for i in desserts] == ["Tarte Tatin"]

    r = client.put(f"/api/menu-items/{item_id}", headers=headers, json={"price": "16"})
    assert r.status_code == 200
    assert r.get_json()["data"]["price"] == "16"
    assert r.get_json()["data"]["name"] == "Tarte Tatin"

    r = client.delete(f"/api/menu-items/{item_id}", headers=headers)
    assert r.status_code == 200
    r = client.delete(f"/api/menu-items/{item_id}", headers=headers)
    assert r.status_code == 404


def test_menu_item_validation_and_auth(client, headers):
    r = client.post("/api/menu-items", json={"name": "Soup"})
    assert r.status_code == 401

    r = client.post("/api/menu-items", headers=headers, json={"category": "Soups"})
    assert r.status_code == 400
    assert "name" in r.get_json()["errors"]

    r = client.put("/api/menu-items/404", headers=headers, json={"name": "Ghost"})
    assert r.status_code == 404


def test_menu_item_round_trip_update(client, headers):
    client.post("/api/menu-items", headers=headers, json={"category": "Desserts", "name": "Soufflé", "price": "12"})
    item = client.get("/api/menu-items").get_json()["data"][0]

    item["price"] = "13"
    r = client.put(f"/api/menu-items/{item['id']}", headers=headers, json=item)
    assert r.status_code == 200, r.data
    assert r.get_json()["data"]["price"] == "13"
    assert r.get_json()["data"]["name"] == "Soufflé"
