from restaurant_site.extensions import db
from datetime import datetime

class GalleryImage(db.Model):
    __tablename__ = "gallery_images"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    url = db.Column(db.String(1000), nullable=False)
    alt = db.Column(db.String(255), nullable=True, default="")
    title = db.Column(db.String(255), nullable=True, default="")
    sort_order = db.Column(db.Integer, nullable=False, default=0, index=True)
    # Set only for images stored under uploads/gallery
    stored_filename = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "url": self.url,
            "alt": self.alt or "",
            "title": self.title or "",
            "sort_order": self.sort_order,
        }
