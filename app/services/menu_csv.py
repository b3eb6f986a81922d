"""Bulk CSV import/export of a store's menu.

The CSV is the flattened menu: one row per variant item (or per item when it
has no variants), repeating the parent columns on every row. Import rebuilds
the four collections level by level, since each level needs the identifiers
generated for its parents; natural-key tuples collapse the repeated parents.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

import pandas as pd

from models import db, INACTIVE, Category, Item, VariantTitle, VariantItem
from models.category import SERVICE_TYPES
from app.metrics import IMPORTED_RECORDS
from app.services.catalog import clear_menu
from app.utils.db import transactional, scoped

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "CategoryName",
    "ServiceType",
    "ItemName",
    "ItemDescription",
    "ItemPrice",
    "ItemTag",
    "VariantTitle",
    "VariantItemName",
    "VariantItemPrice",
]
REQUIRED_COLUMNS = CSV_COLUMNS[:6]

Row = Dict[str, str]


class MenuFileError(ValueError):
    """The uploaded file cannot be read as a menu CSV."""


class MenuImportError(Exception):
    """A row references a parent that does not exist."""


@dataclass
class ImportSummary:
    categories: int = 0
    items: int = 0
    variant_titles: int = 0
    variant_items: int = 0

    def to_dict(self):
        data = asdict(self)
        return {
            "categories": data["categories"],
            "items": data["items"],
            "variantTitles": data["variant_titles"],
            "variantItems": data["variant_items"],
        }


def read_menu_csv(source) -> List[Row]:
    """Decode a menu CSV (path or file object) into rows of stripped strings."""
    try:
        frame = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise MenuFileError(f"File read error: {e}") from e
    frame.columns = [str(c).strip() for c in frame.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise MenuFileError(f"Missing columns: {', '.join(missing)}")
    for column in CSV_COLUMNS:
        if column not in frame.columns:
            frame[column] = ""
    frame = frame[CSV_COLUMNS].copy()
    for column in CSV_COLUMNS:
        frame[column] = frame[column].astype(str).str.strip()
    return frame.to_dict("records")


# ---- natural-key lookups ----

def _find_category(row: Row, mid: str, sid: str) -> Optional[Category]:
    return Category.query.filter_by(
        category_name=row["CategoryName"],
        service_type=row["ServiceType"],
        mid=mid,
        sid=sid,
    ).first()


def _find_item(row: Row, category: Category, mid: str, sid: str) -> Optional[Item]:
    return Item.query.filter_by(
        item_name=row["ItemName"],
        item_description=row["ItemDescription"],
        item_price=row["ItemPrice"],
        tag=row["ItemTag"],
        category_id=category.id,
        mid=mid,
        sid=sid,
    ).first()


def _find_variant_title(row: Row, category: Category, item: Item) -> Optional[VariantTitle]:
    return VariantTitle.query.filter_by(
        variant_name=row["VariantTitle"],
        category_id=category.id,
        item_id=item.id,
    ).first()


def _require(record, what: str, line: int):
    if record is None:
        raise MenuImportError(f"line {line}: {what} not found")
    return record


def _line(index: int) -> int:
    # header is line 1
    return index + 2


# ---- passes ----

def _import_categories(rows: List[Row], mid: str, sid: str) -> int:
    seen = set()
    created = 0
    with transactional("Failed to import categories"):
        for index, row in enumerate(rows):
            key = (row["CategoryName"], row["ServiceType"], mid, sid)
            if key in seen:
                continue
            seen.add(key)
            if not row["CategoryName"] or row["ServiceType"] not in SERVICE_TYPES:
                raise MenuImportError(
                    f"line {_line(index)}: invalid category {row['CategoryName']!r}/{row['ServiceType']!r}"
                )
            if _find_category(row, mid, sid) is None:
                db.session.add(Category(
                    category_name=row["CategoryName"],
                    service_type=row["ServiceType"],
                    status=INACTIVE,
                    mid=mid,
                    sid=sid,
                ))
                created += 1
    return created


def _import_items(rows: List[Row], mid: str, sid: str) -> int:
    seen = set()
    created = 0
    with transactional("Failed to import items"):
        for index, row in enumerate(rows):
            if not row["ItemName"]:
                continue
            category = _require(_find_category(row, mid, sid), "category", _line(index))
            key = (
                row["ItemName"], row["ItemDescription"], row["ItemPrice"], row["ItemTag"],
                category.id, mid, sid,
            )
            if key in seen:
                continue
            seen.add(key)
            if _find_item(row, category, mid, sid) is None:
                db.session.add(Item(
                    category_id=category.id,
                    item_name=row["ItemName"],
                    item_description=row["ItemDescription"],
                    item_price=row["ItemPrice"],
                    tag=row["ItemTag"],
                    image_url="",
                    status=INACTIVE,
                    mid=mid,
                    sid=sid,
                ))
                created += 1
    return created


def _import_variant_titles(rows: List[Row], mid: str, sid: str) -> int:
    seen = set()
    created = 0
    with transactional("Failed to import variant titles"):
        for index, row in enumerate(rows):
            if not row["VariantTitle"]:
                continue
            line = _line(index)
            category = _require(_find_category(row, mid, sid), "category", line)
            item = _require(_find_item(row, category, mid, sid), "item", line)
            key = (row["VariantTitle"], category.id, item.id)
            if key in seen:
                continue
            seen.add(key)
            if _find_variant_title(row, category, item) is None:
                db.session.add(VariantTitle(
                    category_id=category.id,
                    item_id=item.id,
                    variant_name=row["VariantTitle"],
                    status=INACTIVE,
                    mid=mid,
                    sid=sid,
                ))
                created += 1
    return created


def _import_variant_items(rows: List[Row], mid: str, sid: str) -> int:
    seen = set()
    created = 0
    with transactional("Failed to import variant items"):
        for index, row in enumerate(rows):
            if not row["VariantItemName"]:
                continue
            line = _line(index)
            category = _require(_find_category(row, mid, sid), "category", line)
            item = _require(_find_item(row, category, mid, sid), "item", line)
            title = _require(_find_variant_title(row, category, item), "variant title", line)
            key = (row["VariantItemName"], row["VariantItemPrice"], category.id, item.id, title.id)
            if key in seen:
                continue
            seen.add(key)
            exists = VariantItem.query.filter_by(
                variant_item=row["VariantItemName"],
                variant_item_price=row["VariantItemPrice"],
                category_id=category.id,
                item_id=item.id,
                variant_title_id=title.id,
            ).first()
            if exists is None:
                db.session.add(VariantItem(
                    category_id=category.id,
                    item_id=item.id,
                    variant_title_id=title.id,
                    variant_item=row["VariantItemName"],
                    variant_item_price=row["VariantItemPrice"],
                    status=INACTIVE,
                    mid=mid,
                    sid=sid,
                ))
                created += 1
    return created


def import_menu(rows: List[Row], mid: str, sid: str) -> ImportSummary:
    """Replace the store's menu with ``rows``.

    Each pass commits on its own: a failing row leaves the earlier passes in
    place and the later ones unapplied.
    """
    clear_menu(mid, sid)
    summary = ImportSummary()
    summary.categories = _import_categories(rows, mid, sid)
    summary.items = _import_items(rows, mid, sid)
    summary.variant_titles = _import_variant_titles(rows, mid, sid)
    summary.variant_items = _import_variant_items(rows, mid, sid)
    for collection, count in summary.to_dict().items():
        IMPORTED_RECORDS.labels(collection).inc(count)
    logger.info({"event": "menu_import", "rows": len(rows), **summary.to_dict()})
    return summary


# ---- export ----

def export_rows(mid: str, sid: str) -> List[Row]:
    """Flatten the store's menu back into CSV rows.

    Every variant item of a title gets its own row; titles without options and
    items without titles produce a row with the missing columns blank.
    """
    categories = {c.id: c for c in scoped(Category, mid, sid)}
    items = scoped(Item, mid, sid).all()
    titles = scoped(VariantTitle, mid, sid).all()
    options = scoped(VariantItem, mid, sid).all()

    rows = []
    for item in items:
        category = categories.get(item.category_id)
        if category is None:
            logger.warning("skipping item %s: category %s is gone", item.id, item.category_id)
            continue
        base = {
            "CategoryName": category.category_name,
            "ServiceType": category.service_type,
            "ItemName": item.item_name,
            "ItemDescription": item.item_description or "",
            "ItemPrice": item.item_price,
            "ItemTag": item.tag or "",
            "VariantTitle": "",
            "VariantItemName": "",
            "VariantItemPrice": "",
        }
        item_titles = [t for t in titles if t.item_id == item.id]
        if not item_titles:
            rows.append(base)
            continue
        for title in item_titles:
            title_options = [o for o in options if o.variant_title_id == title.id]
            if not title_options:
                rows.append({**base, "VariantTitle": title.variant_name})
            for option in title_options:
                rows.append({
                    **base,
                    "VariantTitle": title.variant_name,
                    "VariantItemName": option.variant_item,
                    "VariantItemPrice": option.variant_item_price,
                })
    return rows


def write_menu_csv(mid: str, sid: str, target) -> int:
    """Write the store's menu as CSV to ``target`` (path or buffer); returns the row count."""
    rows = export_rows(mid, sid)
    pd.DataFrame(rows, columns=CSV_COLUMNS).to_csv(target, index=False)
    return len(rows)
