from models import db, Toggleable


class VariantTitle(Toggleable, db.Model):
    """Variant group of an item, e.g. "Size"."""

    __tablename__ = "variant_title"

    category_id = db.Column(db.String(32), nullable=False, index=True)
    item_id = db.Column(db.String(32), nullable=True, index=True)
    variant_name = db.Column(db.String(120), nullable=False)

    mid = db.Column(db.String(64), nullable=False, index=True)
    sid = db.Column(db.String(64), nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": self.id,
            "categoryId": self.category_id,
            "itemId": self.item_id,
            "variantName": self.variant_name,
            "status": self.status,
            "MID": self.mid,
            "SID": self.sid,
            **self.timestamps(),
        }


class VariantItem(Toggleable, db.Model):
    """Option inside a variant group, e.g. "Large"."""

    __tablename__ = "variant_item"

    category_id = db.Column(db.String(32), nullable=False, index=True)
    item_id = db.Column(db.String(32), nullable=True, index=True)
    variant_title_id = db.Column(db.String(32), nullable=True, index=True)
    variant_item = db.Column(db.String(120), nullable=False)
    variant_item_price = db.Column(db.String(32), nullable=False)

    mid = db.Column(db.String(64), nullable=False, index=True)
    sid = db.Column(db.String(64), nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": self.id,
            "categoryId": self.category_id,
            "itemId": self.item_id,
            "variantTitleId": self.variant_title_id,
            "variantItem": self.variant_item,
            "variantItemPrice": self.variant_item_price,
            "status": self.status,
            "MID": self.mid,
            "SID": self.sid,
            **self.timestamps(),
        }
