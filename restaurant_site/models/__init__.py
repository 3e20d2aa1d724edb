from restaurant_site.models.admin_user import AdminUser
from restaurant_site.models.menu_item import MenuItem
from restaurant_site.models.menu_pdf import MenuPdf
from restaurant_site.models.gallery_image import GalleryImage
from restaurant_site.models.reservation import Reservation
from restaurant_site.models.setting import Setting
from restaurant_site.models.faq import FAQ
from restaurant_site.models.contact import Contact

__all__ = [
    "AdminUser",
    "MenuItem",
    "MenuPdf",
    "GalleryImage",
    "Reservation",
    "Setting",
    "FAQ",
    "Contact",
]
