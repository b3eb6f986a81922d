from .category import category_bp
from .item import item_bp
from .variant import variant_bp
from .service import service_bp
from .tax import tax_bp
from .menu_csv import menu_csv_bp
from .images import image_bp


__all__ = [
    'category_bp',
    'item_bp',
    'variant_bp',
    'service_bp',
    'tax_bp',
    'menu_csv_bp',
    'image_bp',
]
