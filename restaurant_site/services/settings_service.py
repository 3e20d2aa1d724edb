from typing import Any, Dict

from restaurant_site.extensions import db
from restaurant_site.models.setting import Setting

MAX_KEY_LENGTH = 100


def get_settings() -> Dict[str, str]:
    return {s.key: s.value for s in Setting.query.order_by(Setting.key).all()}


def update_settings(values: Dict[str, Any]) -> Dict[str, str]:
    """
    Upsert every key in values. Non-string values are stored as text,
    None as an empty string.

    Raises:
        ValueError: If a key is empty or longer than MAX_KEY_LENGTH
    """
    for key in values:
        if not isinstance(key, str) or not key.strip() or len(key) > MAX_KEY_LENGTH:
            raise ValueError(f"Invalid setting key: {key!r}")

    for key, value in values.items():
        text = "" if value is None else str(value)
        setting = db.session.get(Setting, key)
        if setting:
            setting.value = text
        else:
            db.session.add(Setting(key=key, value=text))

    db.session.commit()
    return get_settings()
