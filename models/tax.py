from models import db, Document


class Tax(Document, db.Model):
    __tablename__ = "tax"

    tax_name = db.Column(db.String(80), nullable=False)
    tax_value = db.Column(db.Float, nullable=False)
    value_type = db.Column(db.String(20), nullable=False)   # e.g. "percentage", "fixed"
    mid = db.Column(db.String(64), nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": self.id,
            "taxName": self.tax_name,
            "taxValue": self.tax_value,
            "valueType": self.value_type,
            "MID": self.mid,
            **self.timestamps(),
        }
