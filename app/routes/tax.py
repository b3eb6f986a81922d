from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from models import db, Tax
from app.schemas.menu import TaxCreate
from app.utils import document, error, store_error_response, transactional, validate_schema, scoped

tax_bp = Blueprint("tax", __name__)


@tax_bp.route("/savetax", methods=["POST"])
@validate_schema(TaxCreate, message="taxName, taxValue, valueType and MID are required")
def save_tax():
    data = request.validated_data
    tax = Tax(
        tax_name=data.tax_name,
        tax_value=data.tax_value,
        value_type=data.value_type,
        mid=data.mid,
    )
    try:
        with transactional("Failed to save tax"):
            db.session.add(tax)
    except SQLAlchemyError as e:
        return store_error_response("saving tax", e)
    return document(tax.to_dict(), status=201)


@tax_bp.route("/gettaxes/<mid>", methods=["GET"])
def get_taxes(mid):
    try:
        taxes = scoped(Tax, mid).all()
    except SQLAlchemyError as e:
        return store_error_response("retrieving taxes", e)
    return document([t.to_dict() for t in taxes])


@tax_bp.route("/removetax/<tax_id>", methods=["DELETE"])
def remove_tax(tax_id):
    try:
        tax = db.session.get(Tax, tax_id)
        if not tax:
            return error("Tax not found", status=404)
        with transactional("Failed to remove tax"):
            db.session.delete(tax)
    except SQLAlchemyError as e:
        return store_error_response("removing tax", e)
    return document({"message": "Tax removed successfully"})
