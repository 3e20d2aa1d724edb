"""
Menu Service Module

CRUD for the a-la-carte menu items shown alongside the menu PDF.
"""

from typing import Any, Dict, List, Optional

from restaurant_site.extensions import db
from restaurant_site.models.menu_item import MenuItem


def list_menu_items(category: Optional[str] = None) -> List[Dict[str, Any]]:
    query = MenuItem.query
    if category:
        query = query.filter_by(category=category)
    items = query.order_by(MenuItem.category.asc(), MenuItem.id.asc()).all()
    return [item.to_dict() for item in items]


def create_menu_item(data: Dict[str, Any]) -> MenuItem:
    item = MenuItem(
        category=(data.get("category") or "").strip(),
        name=data["name"].strip(),
        description=(data.get("description") or "").strip(),
        price=(data.get("price") or "").strip(),
    )
    db.session.add(item)
    db.session.commit()
    return item


def update_menu_item(item_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    item = db.session.get(MenuItem, item_id)
    if not item:
        return None

    for field in ("category", "name", "description", "price"):
        if field in data and data[field] is not None:
            setattr(item, field, data[field].strip())

    db.session.commit()
    return item.to_dict()


def delete_menu_item(item_id: int) -> bool:
    item = db.session.get(MenuItem, item_id)
    if not item:
        return False
    db.session.delete(item)
    db.session.commit()
    return True
