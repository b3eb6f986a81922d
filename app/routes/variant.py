from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from models import db, VariantTitle, VariantItem
from app.schemas.menu import (
    CategoryRef,
    ItemRef,
    Scope,
    VariantItemCreate,
    VariantItemRef,
    VariantItemUpdate,
    VariantTitleCreate,
    VariantTitleRef,
    VariantTitleUpdate,
)
from app.services import catalog
from app.utils import document, error, store_error_response, transactional, validate_schema, scoped

variant_bp = Blueprint("variant", __name__)


def _listing(query, action):
    try:
        return document([r.to_dict() for r in query.all()])
    except SQLAlchemyError as e:
        return store_error_response(action, e)


# Variant titles -------------

@variant_bp.route("/create-variant-title", methods=["POST"])
@validate_schema(VariantTitleCreate, message="categoryId, variantName, status, MID and SID are required")
def create_variant_title():
    data = request.validated_data
    title = VariantTitle(
        category_id=data.category_id,
        item_id=data.item_id,
        variant_name=data.variant_name,
        status=data.status,
        mid=data.mid,
        sid=data.sid,
    )
    try:
        with transactional("Failed to save variant title"):
            db.session.add(title)
    except SQLAlchemyError as e:
        return store_error_response("saving variant title", e)
    return document(title.to_dict(), status=201)


@variant_bp.route("/get-variantstitle", methods=["GET"])
@validate_schema(Scope, source="args", message="MID and SID are required")
def get_variant_titles():
    q = request.validated_data
    return _listing(scoped(VariantTitle, q.mid, q.sid), "retrieving variant titles")


@variant_bp.route("/get-variantstitle-itemid", methods=["GET"])
@validate_schema(ItemRef, source="args", message="Item ID is required")
def get_variant_titles_by_item():
    query = VariantTitle.query.filter_by(item_id=request.validated_data.item_id).order_by(VariantTitle.created_at)
    return _listing(query, "retrieving variant titles")


@variant_bp.route("/get-variantstitle-categoryid", methods=["GET"])
@validate_schema(CategoryRef, source="args", message="Category ID is required")
def get_variant_titles_by_category():
    query = VariantTitle.query.filter_by(
        category_id=request.validated_data.category_id
    ).order_by(VariantTitle.created_at)
    return _listing(query, "retrieving variant titles")


@variant_bp.route("/update-variant-title-status", methods=["PUT"])
@validate_schema(VariantTitleRef, message="Variant title ID is required")
def update_variant_title_status():
    try:
        title = db.session.get(VariantTitle, request.validated_data.variant_title_id)
        if not title:
            return error("Variant title not found", status=404)
        with transactional("Failed to update variant title status"):
            title.toggle_status()
    except SQLAlchemyError as e:
        return store_error_response("updating variant title status", e)
    return document({"variantName": title.variant_name, "status": title.status})


@variant_bp.route("/update-variant-title", methods=["PUT"])
@validate_schema(VariantTitleUpdate, message="Variant title ID and variantName are required")
def update_variant_title():
    data = request.validated_data
    try:
        title = db.session.get(VariantTitle, data.variant_title_id)
        if not title:
            return error("Variant title not found", status=404)
        with transactional("Failed to update variant title"):
            title.variant_name = data.variant_name
    except SQLAlchemyError as e:
        return store_error_response("updating variant title", e)
    return document(title.to_dict())


@variant_bp.route("/delete-variant-title/<variant_title_id>", methods=["DELETE"])
def delete_variant_title(variant_title_id):
    """Delete a variant title and its variant items."""
    try:
        deleted = catalog.delete_variant_title(variant_title_id)
    except SQLAlchemyError as e:
        return store_error_response("deleting variant title", e)
    if not deleted:
        return error("Variant title not found", status=404)
    return document({"message": "Variant title deleted successfully"})


# Variant items -------------

@variant_bp.route("/create-variant-item", methods=["POST"])
@validate_schema(
    VariantItemCreate,
    message="categoryId, variantItem, variantItemPrice, status, MID and SID are required",
)
def create_variant_item():
    data = request.validated_data
    option = VariantItem(
        category_id=data.category_id,
        item_id=data.item_id,
        variant_title_id=data.variant_title_id,
        variant_item=data.variant_item,
        variant_item_price=data.variant_item_price,
        status=data.status,
        mid=data.mid,
        sid=data.sid,
    )
    try:
        with transactional("Failed to save variant item"):
            db.session.add(option)
    except SQLAlchemyError as e:
        return store_error_response("saving variant item", e)
    return document(option.to_dict(), status=201)


@variant_bp.route("/get-variant-items", methods=["GET"])
@validate_schema(Scope, source="args", message="MID and SID are required")
def get_variant_items():
    q = request.validated_data
    return _listing(scoped(VariantItem, q.mid, q.sid), "retrieving variant items")


@variant_bp.route("/get-variant-item-titleid", methods=["GET"])
@validate_schema(VariantTitleRef, source="args", message="Variant title ID is required")
def get_variant_items_by_title():
    query = VariantItem.query.filter_by(
        variant_title_id=request.validated_data.variant_title_id
    ).order_by(VariantItem.created_at)
    return _listing(query, "retrieving variant items")


@variant_bp.route("/get-variant-item-itemid", methods=["GET"])
@validate_schema(ItemRef, source="args", message="Item ID is required")
def get_variant_items_by_item():
    query = VariantItem.query.filter_by(item_id=request.validated_data.item_id).order_by(VariantItem.created_at)
    return _listing(query, "retrieving variant items")


@variant_bp.route("/update-variant-item-status", methods=["PUT"])
@validate_schema(VariantItemRef, message="Variant item ID is required")
def update_variant_item_status():
    try:
        option = db.session.get(VariantItem, request.validated_data.variant_item_id)
        if not option:
            return error("Variant item not found", status=404)
        with transactional("Failed to update variant item status"):
            option.toggle_status()
    except SQLAlchemyError as e:
        return store_error_response("updating variant item status", e)
    return document({"variantItem": option.variant_item, "status": option.status})


@variant_bp.route("/update-variant-item", methods=["PUT"])
@validate_schema(VariantItemUpdate, message="Variant item ID is required")
def update_variant_item():
    data = request.validated_data
    try:
        option = db.session.get(VariantItem, data.variant_item_id)
        if not option:
            return error("Variant item not found", status=404)
        with transactional("Failed to update variant item"):
            for attr in ("variant_item", "variant_item_price", "variant_title_id"):
                value = getattr(data, attr)
                if value:
                    setattr(option, attr, value)
    except SQLAlchemyError as e:
        return store_error_response("updating variant item", e)
    return document(option.to_dict())


@variant_bp.route("/delete-variant-item/<variant_item_id>", methods=["DELETE"])
def delete_variant_item(variant_item_id):
    try:
        option = db.session.get(VariantItem, variant_item_id)
        if not option:
            return error("Variant item not found", status=404)
        with transactional("Failed to delete variant item"):
            db.session.delete(option)
    except SQLAlchemyError as e:
        return store_error_response("deleting variant item", e)
    return document({"message": "Variant item deleted successfully"})
