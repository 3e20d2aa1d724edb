"""
FAQ Service Module

FAQs are shown publicly when active, ordered by sort_order then id.
Admins see every FAQ and reorder them by rewriting sort_order.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func

from restaurant_site.extensions import db
from restaurant_site.models.faq import FAQ


def list_faqs(include_inactive: bool = False) -> List[Dict[str, Any]]:
    query = FAQ.query
    if not include_inactive:
        query = query.filter_by(is_active=True)
    faqs = query.order_by(FAQ.sort_order.asc(), FAQ.id.asc()).all()
    return [f.to_dict(public=not include_inactive) for f in faqs]


def create_faq(data: Dict[str, Any]) -> FAQ:
    sort_order = data.get("sort_order")
    if sort_order is None:
        current = db.session.query(func.max(FAQ.sort_order)).scalar()
        sort_order = (current or 0) + 1

    faq = FAQ(
        question=data["question"].strip(),
        answer=data["answer"].strip(),
        is_active=data.get("is_active", True),
        sort_order=sort_order,
    )
    db.session.add(faq)
    db.session.commit()
    return faq


def update_faq(faq_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    faq = db.session.get(FAQ, faq_id)
    if not faq:
        return None

    if data.get("question"):
        faq.question = data["question"].strip()
    if data.get("answer"):
        faq.answer = data["answer"].strip()
    if "is_active" in data:
        faq.is_active = data["is_active"]
    if "sort_order" in data:
        faq.sort_order = data["sort_order"]

    db.session.commit()
    return faq.to_dict()


def delete_faq(faq_id: int) -> bool:
    faq = db.session.get(FAQ, faq_id)
    if not faq:
        return False
    db.session.delete(faq)
    db.session.commit()
    return True
