from restaurant_site.extensions import db
from datetime import datetime

class MenuPdf(db.Model):
    __tablename__ = "menu_pdfs"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    filename = db.Column(db.String(255), nullable=False, unique=True)  # stored name under uploads/menus
    original_name = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.Integer, nullable=False, default=0)
    page_count = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=False, index=True)
    uploaded_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self, file_url=None):
        return {
            "id": self.id,
            "title": self.title,
            "filename": self.filename,
            "original_name": self.original_name,
            "file_url": file_url,
            "file_size": self.file_size,
            "page_count": self.page_count,
            "is_active": bool(self.is_active),
            "uploaded_at": self.uploaded_at.isoformat() if self.uploaded_at else None,
        }

    def __repr__(self):
        return f"<MenuPdf {self.id}: {self.title}>"
