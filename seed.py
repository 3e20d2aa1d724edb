from restaurant_site import create_app
from restaurant_site.extensions import db
from restaurant_site.services.auth_service import ensure_admin_user
from restaurant_site.services.seed_service import seed_defaults

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()
    added = seed_defaults()
    for table, count in added.items():
        print(f"{table}: {count} row(s) added")
    admin = ensure_admin_user()
    print(f"Admin user: {admin.username}")
