"""
Reservation Service Module

Handles table reservation requests:
- Public creation (always starts as pending)
- Admin listing with status/date filters and pagination
- Status transitions and deletion
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from restaurant_site.extensions import db
from restaurant_site.models.reservation import Reservation
from restaurant_site.utils.enums import ReservationStatus

logger = logging.getLogger(__name__)


def create_reservation(data: Dict[str, Any]) -> Reservation:
    reservation = Reservation(
        name=data["name"].strip(),
        email=data["email"].strip().lower(),
        date=data["date"],
        guests=data["guests"].strip(),
        requirements=(data.get("requirements") or "").strip(),
        status=ReservationStatus.PENDING.value,
    )
    db.session.add(reservation)
    db.session.commit()
    logger.info("New reservation %s for %s on %s", reservation.id, reservation.guests, reservation.date)
    return reservation


def list_reservations(page: int = 1, per_page: int = 20, status: Optional[str] = None,
                      on_date: Optional[date] = None):
    """
    List reservations, newest first.

    Returns:
        A flask-sqlalchemy Pagination of Reservation rows
    """
    query = Reservation.query

    if status:
        query = query.filter_by(status=status)

    if on_date:
        query = query.filter_by(date=on_date)

    query = query.order_by(Reservation.created_at.desc(), Reservation.id.desc())
    return query.paginate(page=page, per_page=per_page, error_out=False)


def get_reservation(reservation_id: int) -> Optional[Dict[str, Any]]:
    reservation = db.session.get(Reservation, reservation_id)
    return reservation.to_dict() if reservation else None


def update_status(reservation_id: int, status: str) -> Optional[Dict[str, Any]]:
    """
    Raises:
        ValueError: If status is not pending, confirmed or cancelled
    """
    if status not in [s.value for s in ReservationStatus]:
        raise ValueError("Status must be 'pending', 'confirmed' or 'cancelled'")

    reservation = db.session.get(Reservation, reservation_id)
    if not reservation:
        return None

    reservation.status = status
    db.session.commit()
    return reservation.to_dict()


def delete_reservation(reservation_id: int) -> bool:
    reservation = db.session.get(Reservation, reservation_id)
    if not reservation:
        return False
    db.session.delete(reservation)
    db.session.commit()
    return True
