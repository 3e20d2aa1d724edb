from restaurant_site.extensions import db
from datetime import datetime

class Reservation(db.Model):
    __tablename__ = "reservations"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    guests = db.Column(db.String(50), nullable=False)  # e.g. "2 People", "8+ People"
    requirements = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default="pending", index=True)  # pending, confirmed, cancelled
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "date": self.date.isoformat() if self.date else None,
            "guests": self.guests,
            "requirements": self.requirements or "",
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Reservation {self.id}: {self.name} {self.date}>"
