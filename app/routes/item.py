from flask import Blueprint, request
from sqlalchemy.exc import SQLAlchemyError

from models import db, Item
from app.schemas.menu import CategoryRef, ItemCreate, ItemRef, ItemSearch, ItemUpdate, Scope
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

item_bp = Blueprint("item", __name__)

# request field -> model attribute, for partial updates
ITEM_UPDATABLE = (
    "category_id",
    "item_name",
    "item_description",
    "item_price",
    "tag",
    "image_url",
)


@item_bp.route("/create-item", methods=["POST"])
@validate_schema(ItemCreate, message="categoryId, itemName, itemPrice, status, MID and SID are required")
def create_item():
    """Create a menu item under a category."""
    data = request.validated_data
    item = Item(
        category_id=data.category_id,
        item_name=data.item_name,
        item_description=data.item_description,
        item_price=data.item_price,
        tag=data.tag,
        image_url=data.image_url,
        status=data.status,
        mid=data.mid,
        sid=data.sid,
    )
    try:
        with transactional("Failed to save item"):
            db.session.add(item)
    except SQLAlchemyError as e:
        return store_error_response("saving item", e)
    return document(item.to_dict(), status=201)


@item_bp.route("/get-items", methods=["GET"])
@validate_schema(Scope, source="args", message="MID and SID are required")
def get_items():
    q = request.validated_data
    try:
        items = scoped(Item, q.mid, q.sid).all()
    except SQLAlchemyError as e:
        return store_error_response("retrieving items", e)
    return document([i.to_dict() for i in items])


@item_bp.route("/search-item", methods=["GET"])
@validate_schema(ItemSearch, source="args", message="MID, SID, and itemName are required")
def search_item():
    q = request.validated_data
    try:
        items = (
            scoped(Item, q.mid, q.sid)
            .filter(contains_ignore_case(Item.item_name, q.item_name))
            .all()
        )
    except SQLAlchemyError as e:
        return store_error_response("searching items", e)
    return document([i.to_dict() for i in items])


@item_bp.route("/get-item-id", methods=["GET"])
@validate_schema(ItemRef, source="args", message="Item ID is required")
def get_item_by_id():
    try:
        item = db.session.get(Item, request.validated_data.item_id)
    except SQLAlchemyError as e:
        return store_error_response("retrieving item", e)
    if not item:
        return error("Item not found", status=404)
    return document(item.to_dict())


@item_bp.route("/get-item-categoryid", methods=["GET"])
@validate_schema(CategoryRef, source="args", message="Category ID is required")
def get_items_by_category():
    """Items of a category; an unknown category yields an empty list."""
    try:
        items = (
            Item.query.filter_by(category_id=request.validated_data.category_id)
            .order_by(Item.created_at)
            .all()
        )
    except SQLAlchemyError as e:
        return store_error_response("retrieving items", e)
    return document([i.to_dict() for i in items])


@item_bp.route("/update-item-status", methods=["PUT"])
@validate_schema(ItemRef, message="Item ID is required")
def update_item_status():
    try:
        item = db.session.get(Item, request.validated_data.item_id)
        if not item:
            return error("Item not found", status=404)
        with transactional("Failed to update item status"):
            item.toggle_status()
    except SQLAlchemyError as e:
        return store_error_response("updating item status", e)
    return document({"itemName": item.item_name, "status": item.status})


@item_bp.route("/update-item", methods=["PUT"])
@validate_schema(ItemUpdate, message="Item ID is required")
def update_item():
    """Update the item fields present in the body."""
    data = request.validated_data
    try:
        item = db.session.get(Item, data.item_id)
        if not item:
            return error("Item not found", status=404)
        with transactional("Failed to update item"):
            for attr in ITEM_UPDATABLE:
                value = getattr(data, attr)
                if value:
                    setattr(item, attr, value)
    except SQLAlchemyError as e:
        return store_error_response("updating item", e)
    return document(item.to_dict())


@item_bp.route("/delete-item/<item_id>", methods=["DELETE"])
def delete_item(item_id):
    """Delete an item together with its variant titles and variant items."""
    try:
        deleted = catalog.delete_item(item_id)
    except SQLAlchemyError as e:
        return store_error_response("deleting item", e)
    if not deleted:
        return error("Item not found", status=404)
    return document({"message": "Item deleted successfully"})
