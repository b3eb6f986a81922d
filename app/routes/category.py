from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from models import db, Category
from app.schemas.menu import CategoryCreate, CategoryQuery, CategorySearch, CategoryStatus, CategoryUpdate, Scope
from app.services import catalog
from app.utils import (
    document,
    error,
    store_error_response,
    transactional,
    validate_schema,
    scoped,
    contains_ignore_case,
)

category_bp = Blueprint("category", __name__)


@category_bp.route("/category", methods=["POST"])
@validate_schema(CategoryCreate, message="All fields are required")
def create_category():
    """Create a category for a merchant store."""
    data = request.validated_data
    category = Category(
        category_name=data.category_name,
        status=data.status,
        service_type=data.service_type,
        mid=data.mid,
        sid=data.sid,
    )
    try:
        with transactional("Failed to save category"):
            db.session.add(category)
    except SQLAlchemyError as e:
        return store_error_response("saving category", e)
    return document(category.to_dict(), status=201)


@category_bp.route("/get-category", methods=["GET"])
@validate_schema(CategoryQuery, source="args", message="MID, SID, and serviceType are required")
def get_category():
    """Categories of one service type; 404 when the store has none."""
    q = request.validated_data
    try:
        categories = scoped(Category, q.mid, q.sid).filter_by(service_type=q.service_type).all()
    except SQLAlchemyError as e:
        return store_error_response("retrieving categories", e)
    if not categories:
        return error("No categories found for the provided MID and SID", status=404)
    return document([
        {"_id": c.id, "categoryName": c.category_name, "status": c.status}
        for c in categories
    ])


@category_bp.route("/get-all-category", methods=["GET"])
@validate_schema(Scope, source="args", message="MID and SID are required")
def get_all_category():
    q = request.validated_data
    try:
        categories = scoped(Category, q.mid, q.sid).all()
    except SQLAlchemyError as e:
        return store_error_response("retrieving categories", e)
    return document([c.to_dict() for c in categories])


@category_bp.route("/search-category", methods=["GET"])
@validate_schema(CategorySearch, source="args", message="MID, SID, and categoryName are required")
def search_category():
    """Case-insensitive substring search on the category name."""
    q = request.validated_data
    try:
        categories = (
            scoped(Category, q.mid, q.sid)
            .filter(contains_ignore_case(Category.category_name, q.category_name))
            .all()
        )
    except SQLAlchemyError as e:
        return store_error_response("searching categories", e)
    return document([c.to_dict() for c in categories])


@category_bp.route("/update-status", methods=["PUT"])
@validate_schema(CategoryStatus, message="Category ID is required")
def update_status():
    """Toggle a category between Active and Inactive."""
    category_id = request.validated_data.category_id
    try:
        category = db.session.get(Category, category_id)
        if not category:
            return error("Category not found", status=404)
        with transactional("Failed to update category status"):
            category.toggle_status()
    except SQLAlchemyError as e:
        return store_error_response("updating status", e)
    return document({"categoryName": category.category_name, "status": category.status})


@category_bp.route("/update-category", methods=["PUT"])
@validate_schema(CategoryUpdate, message="Category ID, categoryName, and serviceType are required")
def update_category():
    data = request.validated_data
    try:
        category = db.session.get(Category, data.category_id)
        if not category:
            return error("Category not found", status=404)
        with transactional("Failed to update category"):
            category.category_name = data.category_name
            category.service_type = data.service_type
    except SQLAlchemyError as e:
        return store_error_response("updating category", e)
    return document({
        "_id": category.id,
        "categoryName": category.category_name,
        "serviceType": category.service_type,
        "status": category.status,
    })


@category_bp.route("/delete-category/<category_id>", methods=["DELETE"])
def delete_category(category_id):
    """Delete a category together with its items and variants."""
    try:
        deleted = catalog.delete_category(category_id)
    except SQLAlchemyError as e:
        return store_error_response("deleting category", e)
    if not deleted:
        return error("Category not found", status=404)
    return document({"message": "Category deleted successfully"})
