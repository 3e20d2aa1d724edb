"""
Seed Service Module

Default content for a fresh database. Each table is only seeded while it is
empty, so running the seeder twice is harmless.
"""

import logging
from typing import Dict

from restaurant_site.extensions import db
from restaurant_site.models.menu_item import MenuItem
from restaurant_site.models.gallery_image import GalleryImage
from restaurant_site.models.setting import Setting
from restaurant_site.models.faq import FAQ

logger = logging.getLogger(__name__)

DEFAULT_MENU_ITEMS = [
    ("Entrées", "Smoked Atlantic Scallops", "With fermented parsnip purée and brown butter emulsion", "28"),
    ("Plats Principaux", "Wagyu Beef Rossini", "Foie gras, truffle jus, and local heritage carrots", "64"),
    ("Plats Principaux", "Roasted Wild Sea Bass", "Champagne velouté, caviar, and sea succulents", "48"),
]

_IMG = "https://lh3.googleusercontent.com/aida-public/"

DEFAULT_GALLERY = [
    (_IMG + "AB6AXuBgfW82niTFxVqPjDWA4M90BNMM_gBK4B4-49VTMqvydcALqWZ5ribPD_78VPU_RlZ69ld1rNaR9WpR7hnVkyuqUGZMT8Acf_rOjL3LGUY_Bn76zDhIyWURFFO-4RC2VrnuE8Xbch8jk7NdGo9ZBNxdACGEKV9WR-hmQuyArlKPEgbS2Z3I2rgmfBgZC6g_0-klyIknMU1f1P-dKWTJAf4y0HC0YlL6xj1KRo8kuvMdMgJaolcxk19MvgpjaiRn4j7870vJA3-0UTsE",
     "Gourmet dish presentation", "Signature Sea Bass"),
    (_IMG + "AB6AXuCQ6tnjdHZT7fp-suIXFoaJasIol7zbGoO695N9yupDvzDOqKgQOtYbFcz8nz2E2CfqRBy17xKPMPk8k0exaPSYlAofRQwTHGe22-INOrekE3zEYC5tpF1X0VzhKoYITEennXqmduJo2SwfWGZA-boMbNkw7xgaQNyXEvAEm75i6oaU21vSnN4xwKMF2Vef4KRy4Hb5ILXtaFXNsWAJFdtPhct0yDyroMPoO6-O300BxkEuWXVukAA5avm8_7iwZvuOJHwumiKr46bX",
     "Restaurant interior seating", ""),
    (_IMG + "AB6AXuD5RUptQJCmqc1KTW9TXQP027wdLHNTIhiu8O8g9l47Ly7GlRcLOhBidflrJk_B1NEa_nxZmInrioQwK_eEuHXUIgjztL4u2sO898dtK6R4tt0nMTygcvfA6b5F0fH1EZmP3_rg4zYwKaHcAG2BH7ZVP7u3FzIWrFhquhhbD0lKn5Mfxw15rbUr_C4mHMhIQ1AUd4K22KMp_tvwOn6BUgadNNyqHpT18mxC0zSoQ-BhKZhXo4RxaqoJRTI7Th8_sr5ibhVMp6t_Ewds",
     "Chef plating food", ""),
    (_IMG + "AB6AXuB0FDxe4lGS8ef940eqXVBbpZtardqbe1HfI4sz45fxYzy_N2u19USe0uytat3V3qxPCQ3fFsMmd2r5eKF6YsMVXBoffw_64kuClSed4g_AqSigJi0mgp4ds8zeN1w8XfwQtSTh_X2DMjmgqugVFSNFjViPAynrXBv7Ezh20Q96-aZ1S0SK1za2iAAMphYyChdEMdEv5DqQaAAXbS6NZBJFD5NyCsUkJnimxvTLW-FIQT6IVxigc-wf7x4lcpYSkCusZR6jDZdecEO_",
     "Cocktails at the bar", ""),
]

DEFAULT_SETTINGS = {
    "address": "128 Noir Boulevard, Gastronomy District, Paris 75001",
    "phone": "+33 (0) 1 23 45 67 89",
    "email": "contact@easternoriental.com",
    "hours_mon_thu": "17:00 - 23:00",
    "hours_fri_sat": "17:00 - 01:00",
    "hours_sun": "Closed",
}

DEFAULT_FAQS = [
    ("Do I need a reservation?",
     "Reservations are strongly recommended, especially on Friday and Saturday evenings. Walk-ins are seated when tables are available."),
    ("Do you cater for dietary requirements?",
     "Yes. Let us know about allergies or dietary preferences in the reservation form and the kitchen will adapt the menu."),
    ("Is there a dress code?",
     "Smart casual. We kindly ask guests to avoid sportswear."),
]


def seed_defaults() -> Dict[str, int]:
    """Seed empty tables and return how many rows were added per table."""
    added = {"menu_items": 0, "gallery_images": 0, "settings": 0, "faqs": 0}

    if MenuItem.query.count() == 0:
        for category, name, description, price in DEFAULT_MENU_ITEMS:
            db.session.add(MenuItem(category=category, name=name, description=description, price=price))
            added["menu_items"] += 1

    if GalleryImage.query.count() == 0:
        for position, (url, alt, title) in enumerate(DEFAULT_GALLERY, start=1):
            db.session.add(GalleryImage(url=url, alt=alt, title=title, sort_order=position))
            added["gallery_images"] += 1

    if Setting.query.count() == 0:
        for key, value in DEFAULT_SETTINGS.items():
            db.session.add(Setting(key=key, value=value))
            added["settings"] += 1

    if FAQ.query.count() == 0:
        for position, (question, answer) in enumerate(DEFAULT_FAQS, start=1):
            db.session.add(FAQ(question=question, answer=answer, sort_order=position, is_active=True))
            added["faqs"] += 1

    db.session.commit()
    logger.info("Seeded defaults: %s", added)
    return added
