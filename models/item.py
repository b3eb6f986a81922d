from models import db, Toggleable


class Item(Toggleable, db.Model):
    __tablename__ = "item"

    category_id = db.Column(db.String(32), nullable=False, index=True)

    # Core details
    item_name = db.Column(db.String(120), nullable=False)
    item_description = db.Column(db.Text, nullable=True, default="")
    item_price = db.Column(db.String(32), nullable=False)        # kept as sent, e.g. "120.50"
    tag = db.Column(db.String(100), nullable=True, default="")   # e.g. "veg", "spicy"

    # Media
    image_url = db.Column(db.String(255), nullable=True, default="")

    # Tenant scope
    mid = db.Column(db.String(64), nullable=False, index=True)
    sid = db.Column(db.String(64), nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": self.id,
            "categoryId": self.category_id,
            "itemName": self.item_name,
            "itemDescription": self.item_description or "",
            "itemPrice": self.item_price,
            "tag": self.tag or "",
            "imageUrl": self.image_url or "",
            "status": self.status,
            "MID": self.mid,
            "SID": self.sid,
            **self.timestamps(),
        }
