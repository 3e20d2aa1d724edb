import io
import json
import threading

import pytest
import requests

from restaurant_site.client import ApiClient, ApiError, RestaurantApi, TokenStore
from restaurant_site.client.resources import MenuPdfApi


BASE = "http://restaurant.test/api"


class FakeResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._raw is not None:
            return json.loads(self._raw)
        if self._body is None:
            raise ValueError("no body")
        return self._body


class FakeSession:
    """Routes session.request() calls to a handler and records them."""

    def __init__(self, handler):
        self.handler = handler
        self.calls = []
        self._lock = threading.Lock()

    def request(self, method, url, **kwargs):
        with self._lock:
            self.calls.append((method, url, kwargs))
        return self.handler(method, url, **kwargs)

    def count(self, method, suffix):
        return sum(1 for m, u, _ in self.calls if m == method and u.endswith(suffix))


def bearer(kwargs):
    return kwargs["headers"].get("Authorization", "").replace("Bearer ", "") or None


def make_client(handler, access="old", refresh="refresh-1", **kwargs):
    tokens = TokenStore()
    if access or refresh:
        tokens.set_tokens(access, refresh)
    session = FakeSession(handler)
    return ApiClient(BASE, tokens=tokens, session=session, **kwargs), session


def test_sends_bearer_and_returns_body():
    def handler(method, url, **kwargs):
        assert url == BASE + "/settings"
        assert bearer(kwargs) == "old"
        assert "json" not in kwargs
        return FakeResponse(200, {"success": True, "data": {"phone": "1"}})

    client, _ = make_client(handler)
    assert client.request("GET", "/settings")["data"] == {"phone": "1"}


def test_no_content_returns_empty_dict():
    client, _ = make_client(lambda m, u, **k: FakeResponse(204))
    assert client.request("DELETE", "/faqs/1") == {}


def test_error_uses_server_message_or_status():
    responses = iter([
        FakeResponse(400, {"success": False, "message": "Invalid FAQ data", "errors": {"answer": ["Missing"]}}),
        FakeResponse(500, raw="<html>oops</html>"),
    ])
    client, _ = make_client(lambda m, u, **k: next(responses))

    with pytest.raises(ApiError) as exc:
        client.request("POST", "/faqs", json={})
    assert exc.value.status == 400
    assert exc.value.message == "Invalid FAQ data"
    assert exc.value.errors == {"answer": ["Missing"]}

    with pytest.raises(ApiError) as exc:
        client.request("GET", "/faqs")
    assert str(exc.value) == "Request failed with status 500"


def test_network_error():
    def handler(method, url, **kwargs):
        raise requests.ConnectionError("refused")

    client, _ = make_client(handler)
    with pytest.raises(ApiError) as exc:
        client.request("GET", "/health")
    assert exc.value.status == 0
    assert exc.value.message == "Network error. Please check your connection."


def test_refreshes_and_retries_once():
    def handler(method, url, **kwargs):
        if url.endswith("/auth/refresh"):
            assert kwargs["json"] == {"refresh_token": "refresh-1"}
            return FakeResponse(200, {"data": {"access_token": "new"}})
        if bearer(kwargs) == "new":
            return FakeResponse(200, {"data": "fresh"})
        return FakeResponse(401, {"message": "Invalid or expired token"})

    client, session = make_client(handler)
    assert client.request("GET", "/auth/me")["data"] == "fresh"
    assert client.tokens.access_token == "new"
    assert client.tokens.refresh_token == "refresh-1"
    assert session.count("POST", "/auth/refresh") == 1
    assert session.count("GET", "/auth/me") == 2


def test_failed_refresh_clears_session():
    expired = []

    def handler(method, url, **kwargs):
        return FakeResponse(401, {"message": "Invalid or expired refresh token"})

    client, session = make_client(handler, on_session_expired=lambda: expired.append(True))
    with pytest.raises(ApiError) as exc:
        client.request("GET", "/reservations")

    assert exc.value.status == 401
    assert exc.value.message == "Session expired. Please login again."
    assert expired == [True]
    assert client.tokens.access_token is None
    assert client.tokens.refresh_token is None
    assert session.count("GET", "/reservations") == 1


def test_401_without_refresh_token_is_plain_error():
    client, session = make_client(
        lambda m, u, **k: FakeResponse(401, {"message": "Invalid credentials"}),
        access=None, refresh=None,
    )
    with pytest.raises(ApiError) as exc:
        client.request("POST", "/auth/login", json={"username": "a", "password": "b"})
    assert exc.value.message == "Invalid credentials"
    assert session.count("POST", "/auth/refresh") == 0


def test_concurrent_401s_share_one_refresh():
    barrier = threading.Barrier(2, timeout=5)

    def handler(method, url, **kwargs):
        if url.endswith("/auth/refresh"):
            return FakeResponse(200, {"data": {"access_token": "new"}})
        if bearer(kwargs) == "new":
            return FakeResponse(200, {"data": url})
        # both callers fail with the stale token before either refreshes
        barrier.wait()
        return FakeResponse(401, {})

    client, session = make_client(handler)
    results, failures = [], []

    def call(endpoint):
        try:
            results.append(client.request("GET", endpoint)["data"])
        except Exception as e:  # surfaced below
            failures.append(e)

    threads = [threading.Thread(target=call, args=(ep,)) for ep in ("/contacts", "/reservations")]
    for t in threads:
        t.start()
    for t in threads:
        t.join(10)

    assert failures == []
    assert sorted(results) == [BASE + "/contacts", BASE + "/reservations"]
    assert session.count("POST", "/auth/refresh") == 1


def test_uploads_are_rewound_before_retry():
    seen = []

    def handler(method, url, **kwargs):
        if url.endswith("/auth/refresh"):
            return FakeResponse(200, {"data": {"access_token": "new"}})
        _, fileobj, _ = kwargs["files"]["pdf"]
        seen.append(fileobj.read())
        if bearer(kwargs) == "new":
            return FakeResponse(201, {"data": {"id": 1}})
        return FakeResponse(401, {})

    client, _ = make_client(handler)
    assert MenuPdfApi(client).upload(io.BytesIO(b"%PDF-1.4 body"), "menu.pdf") == {"id": 1}
    assert seen == [b"%PDF-1.4 body", b"%PDF-1.4 body"]


def test_token_store_persists_and_clears_legacy_key(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"admin_token": "legacy"}))

    store = TokenStore(str(path))
    store.set_tokens("a", "r")
    assert TokenStore(str(path)).access_token == "a"
    assert TokenStore(str(path)).is_authenticated()

    store.clear()
    assert json.loads(path.read_text()) == {}
    assert not TokenStore(str(path)).is_authenticated()


def test_resources_unwrap_data_and_store_tokens():
    def handler(method, url, **kwargs):
        if url.endswith("/auth/login"):
            return FakeResponse(200, {"data": {"access_token": "a1", "refresh_token": "r1"}})
        if url.endswith("/faqs") and method == "GET":
            assert kwargs["params"] == {"all": "1"}
            return FakeResponse(200, {"data": [{"id": 7}, {"id": 8}, {"id": 9}]})
        return FakeResponse(200, {"data": None})

    session = FakeSession(handler)
    api = RestaurantApi(BASE, session=session)

    api.auth.login("admin", "password123")
    assert api.tokens.access_token == "a1"
    assert api.tokens.refresh_token == "r1"

    api.faqs.move(9, "up")
    updates = [(u.rsplit("/", 1)[1], k["json"]) for m, u, k in session.calls if m == "PUT"]
    assert updates == [("7", {"sort_order": 1}), ("9", {"sort_order": 2}), ("8", {"sort_order": 3})]

    session.calls.clear()
    api.faqs.move(7, "up")
    assert session.count("PUT", "") == 0

    api.auth.logout()
    assert not api.tokens.is_authenticated()


class FlaskSession:
    """Adapts Flask's test client to the subset of requests.Session the client uses."""

    def __init__(self, test_client):
        self.test_client = test_client

    def request(self, method, url, headers=None, timeout=None, json=None, params=None, files=None, data=None):
        path = url.replace("http://localhost", "", 1)
        kwargs = {"headers": headers, "query_string": params}
        if files:
            form = dict(data or {})
            for field, (filename, fileobj, *_) in files.items():
                form[field] = (fileobj, filename)
            kwargs["data"] = form
            kwargs["content_type"] = "multipart/form-data"
        elif json is not None:
            kwargs["json"] = json
        resp = self.test_client.open(path, method=method, **kwargs)
        return FakeResponse(resp.status_code, raw=resp.get_data(as_text=True) or "null")


def test_against_the_app(client, pdf_bytes):
    api = RestaurantApi("http://localhost/api", session=FlaskSession(client))

    assert api.health.check()["status"] == "online"

    api.auth.login("admin", "password123")
    assert api.auth.me()["username"] == "admin"

    pdf = api.menu_pdfs.upload(io.BytesIO(pdf_bytes(pages=3)), "menu.pdf", title="Autumn")
    assert pdf["page_count"] == 3
    assert api.menu_pdfs.active_pdf_url() == pdf["file_url"]

    api.reservations.create("Ana", "ana@example.com", "2031-01-05", "2 People")
    listing = api.reservations.list(status="pending")
    assert listing["pagination"]["total"] == 1

    api.settings.update({"phone": "+33 1 23"})
    assert api.settings.get()["phone"] == "+33 1 23"

    # a stale access token is refreshed with the stored refresh token
    api.tokens.set_access_token("expired-token")
    assert api.auth.me()["username"] == "admin"

    api.auth.logout()
    with pytest.raises(ApiError) as exc:
        api.auth.me()
    assert exc.value.status == 401


def test_corrupt_token_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json")

    store = TokenStore(str(path))
    assert not store.is_authenticated()
    store.set_tokens("a", "r")
    assert TokenStore(str(path)).access_token == "a"


def test_refresh_with_non_object_body_fails():
    def handler(method, url, **kwargs):
        if url.endswith("/auth/refresh"):
            return FakeResponse(200, ["unexpected"])
        return FakeResponse(401, {})

    client, _ = make_client(handler)
    with pytest.raises(ApiError) as exc:
        client.request("GET", "/auth/me")
    assert exc.value.message == "Session expired. Please login again."
    assert client.tokens.refresh_token is None
