from datetime import datetime
import uuid

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

ACTIVE = "Active"
INACTIVE = "Inactive"


def new_id() -> str:
    """Store-generated identifier, exposed to clients as ``_id``."""
    return uuid.uuid4().hex


class Document:
    """Columns shared by every menu record."""

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def timestamps(self) -> dict:
        return {
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


class Toggleable(Document):
    status = db.Column(db.String(10), nullable=False, default=ACTIVE)

    def toggle_status(self) -> str:
        self.status = INACTIVE if self.status == ACTIVE else ACTIVE
        return self.status


# Re-export common models for convenience
from .category import Category  # noqa: F401,E402
from .item import Item  # noqa: F401,E402
from .variant import VariantTitle, VariantItem  # noqa: F401,E402
from .service_type import ServiceType  # noqa: F401,E402
from .tax import Tax  # noqa: F401,E402
