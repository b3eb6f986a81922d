from models import db, Toggleable

SERVICE_TYPES = ("Takeaway", "Dinein", "Delivery", "All")


class Category(Toggleable, db.Model):
    __tablename__ = "category"

    category_name = db.Column(db.String(120), nullable=False)
    service_type = db.Column(db.String(20), nullable=False)

    # Tenant scope
    mid = db.Column(db.String(64), nullable=False, index=True)
    sid = db.Column(db.String(64), nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": self.id,
            "categoryName": self.category_name,
            "status": self.status,
            "serviceType": self.service_type,
            "MID": self.mid,
            "SID": self.sid,
            **self.timestamps(),
        }
