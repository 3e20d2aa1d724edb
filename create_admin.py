from restaurant_site import create_app
from restaurant_site.extensions import db
from restaurant_site.models.admin_user import AdminUser
from restaurant_site.services.auth_service import ensure_admin_user

app = create_app()

with app.app_context():
    db.create_all()
    username = app.config['ADMIN_USERNAME']
    if AdminUser.query.filter_by(username=username).first():
        print('Admin user already exists')
    else:
        ensure_admin_user()
        print(f"Created admin user '{username}'")
