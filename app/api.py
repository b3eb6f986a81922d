from app.routes import (
    category_bp,
    item_bp,
    variant_bp,
    service_bp,
    tax_bp,
    menu_csv_bp,
    image_bp,
)

MENU_BLUEPRINTS = (
    category_bp,
    item_bp,
    variant_bp,
    service_bp,
    tax_bp,
    menu_csv_bp,
    image_bp,
)


def register_api(app):
    """Register the menu management blueprints at the root path."""
    for bp in MENU_BLUEPRINTS:
        app.register_blueprint(bp)
    app.logger.debug("registered %d blueprints", len(MENU_BLUEPRINTS))
