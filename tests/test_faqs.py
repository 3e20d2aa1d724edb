def create(client, headers, question, **extra):
    body = {"question": question, "answer": f"Answer to {question}"}
    body.update(extra)
    r = client.post("/api/faqs", headers=headers, json=body)
    assert r.status_code == 201, r.data
    return r.get_json()["data"]


def test_public_listing_hides_inactive(client, headers):
    create(client, headers, "Parking?")
    hidden = create(client, headers, "Secret menu?", is_active=False)

    public = client.get("/api/faqs").get_json()["data"]
    assert [f["question"] for f in public] == ["Parking?"]
    assert set(public[0]) == {"id", "question", "answer"}

    everything = client.get("/api/faqs?all=1", headers=headers).get_json()["data"]
    assert [f["id"] for f in everything][-1] == hidden["id"]
    assert everything[-1]["is_active"] is False


def test_all_requires_admin(client):
    assert client.get("/api/faqs?all=1").status_code == 401
    r = client.get("/api/faqs?all=1", headers={"Authorization": "Bearer nonsense"})
    assert r.status_code == 401


def test_sort_order_appends_and_reorders(client, headers):
    a = create(client, headers, "A")
    b = create(client, headers, "B")
    assert (a["sort_order"], b["sort_order"]) == (1, 2)

    client.put(f"/api/faqs/{a['id']}", headers=headers, json={"sort_order": 2})
    client.put(f"/api/faqs/{b['id']}", headers=headers, json={"sort_order": 1})
    assert [f["question"] for f in client.get("/api/faqs").get_json()["data"]] == ["B", "A"]


def test_update_and_delete(client, headers):
    faq = create(client, headers, "Dress code?")

    r = client.put(f"/api/faqs/{faq['id']}", headers=headers, json={"answer": "Smart casual", "is_active": False})
    assert r.status_code == 200
    assert r.get_json()["data"]["answer"] == "Smart casual"
    assert client.get("/api/faqs").get_json()["data"] == []

    assert client.put("/api/faqs/99", headers=headers, json={"answer": "x"}).status_code == 404
    assert client.delete(f"/api/faqs/{faq['id']}", headers=headers).status_code == 200
    assert client.delete(f"/api/faqs/{faq['id']}", headers=headers).status_code == 404


def test_create_requires_question_and_answer(client, headers):
    r = client.post("/api/faqs", headers=headers, json={"question": "Only a question"})
    assert r.status_code == 400
    assert "answer" in r.get_json()["errors"]
    assert client.post("/api/faqs", json={"question": "q", "answer": "a"}).status_code == 401


def test_update_accepts_a_fetched_record(client, headers):
    create(client, headers, "Parking?")
    faq = client.get("/api/faqs?all=1", headers=headers).get_json()["data"][0]
    assert "created_at" in faq

    faq["answer"] = "Valet parking from 18:00"
    r = client.put(f"/api/faqs/{faq['id']}", headers=headers, json=faq)
    assert r.status_code == 200, r.data
    assert r.get_json()["data"]["answer"] == "Valet parking from 18:00"
