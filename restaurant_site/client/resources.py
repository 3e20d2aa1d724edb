"""
Resource helpers over ApiClient, one per API area.

Every helper unwraps the success envelope and returns its "data" payload,
except the paginated listings which return the whole envelope so callers
can read "pagination".
"""

from typing import Any, BinaryIO, Dict, List, Optional

import requests

from restaurant_site.client.api_client import ApiClient
from restaurant_site.client.tokens import TokenStore


class _Resource:
    def __init__(self, client: ApiClient):
        self.client = client

    def _data(self, method: str, endpoint: str, **kwargs) -> Any:
        return self.client.request(method, endpoint, **kwargs).get("data")


class AuthApi(_Resource):
    def login(self, username: str, password: str) -> Dict[str, Any]:
        data = self._data("POST", "/auth/login", json={"username": username, "password": password})
        if data:
            self.client.tokens.set_tokens(data["access_token"], data["refresh_token"])
        return data

    def logout(self) -> None:
        try:
            self.client.request("POST", "/auth/logout")
        finally:
            self.client.tokens.clear()

    def me(self) -> Dict[str, Any]:
        return self._data("GET", "/auth/me")

    def change_password(self, current_password: str, new_password: str) -> None:
        data = self._data("POST", "/auth/change-password",
                          json={"current_password": current_password, "new_password": new_password})
        # The server revokes older tokens and hands back a fresh pair
        if data and data.get("access_token"):
            self.client.tokens.set_tokens(data["access_token"], data["refresh_token"])


class MenuPdfApi(_Resource):
    def list(self) -> List[Dict[str, Any]]:
        return self._data("GET", "/menu")

    def active_pdf_url(self) -> Optional[str]:
        active = next((p for p in self.list() if p.get("is_active")), None)
        return active["file_url"] if active else None

    def upload(self, fileobj: BinaryIO, filename: str, title: Optional[str] = None,
               set_active: bool = True) -> Dict[str, Any]:
        form = {"set_active": "1" if set_active else "0"}
        if title:
            form["title"] = title
        return self._data("POST", "/menu", files={"pdf": (filename, fileobj, "application/pdf")}, data=form)

    def set_active(self, pdf_id: int) -> None:
        self.client.request("PUT", f"/menu/{pdf_id}", json={"is_active": True})

    def update_title(self, pdf_id: int, title: str) -> None:
        self.client.request("PUT", f"/menu/{pdf_id}", json={"title": title})

    def delete(self, pdf_id: int) -> None:
        self.client.request("DELETE", f"/menu/{pdf_id}")

    def download_url(self) -> str:
        return self.client.url("/menu/download")


class MenuItemApi(_Resource):
    def list(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"category": category} if category else None
        return self._data("GET", "/menu-items", params=params)

    def create(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return self._data("POST", "/menu-items", json=item)

    def update(self, item_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self._data("PUT", f"/menu-items/{item_id}", json=changes)

    def delete(self, item_id: int) -> None:
        self.client.request("DELETE", f"/menu-items/{item_id}")


class GalleryApi(_Resource):
    def list(self) -> List[Dict[str, Any]]:
        return self._data("GET", "/gallery")

    def create(self, url: str, alt: str = "", title: str = "") -> Dict[str, Any]:
        return self._data("POST", "/gallery", json={"url": url, "alt": alt, "title": title})

    def upload(self, fileobj: BinaryIO, filename: str, alt: str = "", title: str = "") -> Dict[str, Any]:
        form = {}
        if alt:
            form["alt"] = alt
        if title:
            form["title"] = title
        return self._data("POST", "/gallery", files={"image": (filename, fileobj)}, data=form)

    def delete(self, image_id: int) -> None:
        self.client.request("DELETE", f"/gallery/{image_id}")


class ReservationApi(_Resource):
    def list(self, status: Optional[str] = None, date: Optional[str] = None,
             page: Optional[int] = None, per_page: Optional[int] = None) -> Dict[str, Any]:
        params = {k: v for k, v in
                  {"status": status, "date": date, "page": page, "per_page": per_page}.items() if v}
        return self.client.request("GET", "/reservations", params=params or None)

    def create(self, name: str, email: str, date: str, guests: str, requirements: str = "") -> Dict[str, Any]:
        return self._data("POST", "/reservations", json={
            "name": name,
            "email": email,
            "date": date,
            "guests": guests,
            "requirements": requirements,
        })

    def update_status(self, reservation_id: int, status: str) -> None:
        self.client.request("PATCH", f"/reservations/{reservation_id}", json={"status": status})

    def delete(self, reservation_id: int) -> None:
        self.client.request("DELETE", f"/reservations/{reservation_id}")


class SettingsApi(_Resource):
    def get(self) -> Dict[str, str]:
        return self._data("GET", "/settings")

    def update(self, values: Dict[str, Any]) -> None:
        self.client.request("PUT", "/settings", json=values)


class FaqApi(_Resource):
    def list(self, include_inactive: bool = False) -> List[Dict[str, Any]]:
        params = {"all": "1"} if include_inactive else None
        return self._data("GET", "/faqs", params=params)

    def create(self, question: str, answer: str, is_active: bool = True) -> Dict[str, Any]:
        return self._data("POST", "/faqs", json={"question": question, "answer": answer, "is_active": is_active})

    def update(self, faq_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self._data("PUT", f"/faqs/{faq_id}", json=changes)

    def move(self, faq_id: int, direction: str) -> None:
        """Swap an FAQ with its neighbour and renumber sort_order 1..n."""
        faqs = self.list(include_inactive=True)
        ids = [f["id"] for f in faqs]
        index = ids.index(faq_id)
        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(ids):
            return
        ids[index], ids[target] = ids[target], ids[index]
        for position, fid in enumerate(ids, start=1):
            self.update(fid, {"sort_order": position})

    def delete(self, faq_id: int) -> None:
        self.client.request("DELETE", f"/faqs/{faq_id}")


class ContactApi(_Resource):
    def create(self, name: str, email: str, subject: str, message: str, phone: str = "") -> Dict[str, Any]:
        return self._data("POST", "/contacts", json={
            "name": name,
            "email": email,
            "phone": phone,
            "subject": subject,
            "message": message,
        })

    def list(self, page: int = 1, per_page: int = 20, status: Optional[str] = None) -> Dict[str, Any]:
        params = {"page": page, "per_page": per_page}
        if status:
            params["status"] = status
        return self.client.request("GET", "/contacts", params=params)

    def get(self, contact_id: int) -> Dict[str, Any]:
        return self._data("GET", f"/contacts/{contact_id}")

    def update_status(self, contact_id: int, status: str) -> None:
        self.client.request("PATCH", f"/contacts/{contact_id}", json={"status": status})

    def delete(self, contact_id: int) -> None:
        self.client.request("DELETE", f"/contacts/{contact_id}")


class HealthApi(_Resource):
    def check(self) -> Dict[str, Any]:
        return self._data("GET", "/health")


class RestaurantApi:
    """Entry point bundling the transport and every resource helper."""

    def __init__(self, base_url: str, tokens: Optional[TokenStore] = None,
                 session: Optional[requests.Session] = None, **kwargs):
        self.client = ApiClient(base_url, tokens=tokens, session=session, **kwargs)
        self.tokens = self.client.tokens
        self.auth = AuthApi(self.client)
        self.menu_pdfs = MenuPdfApi(self.client)
        self.menu_items = MenuItemApi(self.client)
        self.gallery = GalleryApi(self.client)
        self.reservations = ReservationApi(self.client)
        self.settings = SettingsApi(self.client)
        self.faqs = FaqApi(self.client)
        self.contacts = ContactApi(self.client)
        self.health = HealthApi(self.client)
