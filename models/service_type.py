from models import db, Document


class ServiceType(Document, db.Model):
    __tablename__ = "service_type"

    service_type = db.Column(db.String(50), nullable=False)
    mid = db.Column(db.String(64), nullable=False, index=True)

    def to_dict(self):
        return {"_id": self.id, "serviceType": self.service_type, "MID": self.mid, **self.timestamps()}
