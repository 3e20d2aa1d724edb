import logging
from typing import Any, Dict, Optional

from restaurant_site.extensions import db
from restaurant_site.models.contact import Contact
from restaurant_site.utils.enums import ContactStatus

logger = logging.getLogger(__name__)


def create_contact(data: Dict[str, Any]) -> Contact:
    contact = Contact(
        name=data["name"].strip(),
        email=data["email"].strip().lower(),
        phone=(data.get("phone") or "").strip(),
        subject=data["subject"].strip(),
        message=data["message"].strip(),
        status=ContactStatus.NEW.value,
    )
    db.session.add(contact)
    db.session.commit()
    logger.info("New contact message %s: %s", contact.id, contact.subject)
    return contact


def list_contacts(page: int = 1, per_page: int = 20, status: Optional[str] = None):
    """Newest first; returns a flask-sqlalchemy Pagination."""
    query = Contact.query
    if status:
        if status not in [s.value for s in ContactStatus]:
            raise ValueError("Status must be 'new', 'read' or 'replied'")
        query = query.filter_by(status=status)
    query = query.order_by(Contact.created_at.desc(), Contact.id.desc())
    return query.paginate(page=page, per_page=per_page, error_out=False)


def get_contact(contact_id: int) -> Optional[Dict[str, Any]]:
    contact = db.session.get(Contact, contact_id)
    return contact.to_dict() if contact else None


def update_status(contact_id: int, status: str) -> Optional[Dict[str, Any]]:
    contact = db.session.get(Contact, contact_id)
    if not contact:
        return None
    contact.status = status
    db.session.commit()
    return contact.to_dict()


def delete_contact(contact_id: int) -> bool:
    contact = db.session.get(Contact, contact_id)
    if not contact:
        return False
    db.session.delete(contact)
    db.session.commit()
    return True
