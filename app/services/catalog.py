"""Cascade deletes across the menu hierarchy.

Referential fields are plain identifier copies, so every delete removes the
dependants explicitly before the record itself.
"""
import logging
from typing import Optional

from models import db, Category, Item, VariantTitle, VariantItem
from app.utils.db import transactional, delete_where

logger = logging.getLogger(__name__)


def delete_category(category_id: str) -> Optional[Category]:
    category = db.session.get(Category, category_id)
    if category is None:
        return None
    with transactional("Failed to delete category"):
        variant_items = delete_where(VariantItem, category_id=category_id)
        variant_titles = delete_where(VariantTitle, category_id=category_id)
        items = delete_where(Item, category_id=category_id)
        db.session.delete(category)
    logger.info(
        "category %s deleted with %d items, %d variant titles, %d variant items",
        category_id, items, variant_titles, variant_items,
    )
    return category


def delete_item(item_id: str) -> Optional[Item]:
    item = db.session.get(Item, item_id)
    if item is None:
        return None
    with transactional("Failed to delete item"):
        variant_items = delete_where(VariantItem, item_id=item_id)
        variant_titles = delete_where(VariantTitle, item_id=item_id)
        db.session.delete(item)
    logger.info(
        "item %s deleted with %d variant titles, %d variant items",
        item_id, variant_titles, variant_items,
    )
    return item


def delete_variant_title(variant_title_id: str) -> Optional[VariantTitle]:
    title = db.session.get(VariantTitle, variant_title_id)
    if title is None:
        return None
    with transactional("Failed to delete variant title"):
        delete_where(VariantItem, variant_title_id=variant_title_id)
        db.session.delete(title)
    return title


def clear_menu(mid: str, sid: str) -> None:
    """Remove the whole category/item/variant tree of a store."""
    with transactional("Failed to clear menu"):
        for model in (VariantItem, VariantTitle, Item, Category):
            removed = delete_where(model, mid=mid, sid=sid)
            logger.debug("cleared %d %s rows", removed, model.__tablename__)
