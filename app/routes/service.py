from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from models import db, ServiceType
from app.schemas.menu import MerchantRef, ServiceTypeCreate
from app.utils import document, error, store_error_response, transactional, validate_schema, scoped

service_bp = Blueprint("service", __name__)


@service_bp.route("/add-service", methods=["POST"])
@validate_schema(ServiceTypeCreate, message="serviceType and MID are required")
def add_service():
    """Add a service type tag for a merchant."""
    data = request.validated_data
    service = ServiceType(service_type=data.service_type, mid=data.mid)
    try:
        with transactional("Failed to save service type"):
            db.session.add(service)
    except SQLAlchemyError as e:
        return store_error_response("saving service type", e)
    return document(service.to_dict(), status=201)


@service_bp.route("/get-service", methods=["GET"])
@validate_schema(MerchantRef, source="args", message="MID is required")
def get_service():
    try:
        services = scoped(ServiceType, request.validated_data.mid).all()
    except SQLAlchemyError as e:
        return store_error_response("retrieving service types", e)
    return document([s.to_dict() for s in services])


@service_bp.route("/delete-service/<service_id>", methods=["DELETE"])
def delete_service(service_id):
    try:
        service = db.session.get(ServiceType, service_id)
        if not service:
            return error("Service type not found", status=404)
        with transactional("Failed to delete service type"):
            db.session.delete(service)
    except SQLAlchemyError as e:
        return store_error_response("deleting service type", e)
    return document({"message": "Service type deleted successfully"})
