from .home_routes import site_bp, health_bp
from .auth_routes import auth_bp
from .menu_routes import menu_bp
from .gallery_routes import gallery_bp
from .reservation_routes import reservation_bp
from .settings_routes import settings_bp
from .faq_routes import faq_bp
from .contact_routes import contact_bp

def register_routes(app):
    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(menu_bp)
    app.register_blueprint(gallery_bp)
    app.register_blueprint(reservation_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(faq_bp)
    app.register_blueprint(contact_bp)
    # Registered last: its catch-all route serves the frontend bundle
    app.register_blueprint(site_bp)
