import io

import pandas as pd

from models import Category, Item, VariantTitle, VariantItem
from app.services.menu_csv import CSV_COLUMNS, read_menu_csv

MENU_ROWS = [
    ["Starters", "Dinein", "Soup", "Hot", "90", "veg", "Size", "Large", "120"],
    ["Starters", "Dinein", "Soup", "Hot", "90", "veg", "Spice", "Extra", "10"],
    ["Starters", "Dinein", "Salad", "Fresh", "80", "veg", "", "", ""],
    ["Mains", "Takeaway", "Curry", "Rich", "200", "", "", "", ""],
    ["Mains", "Takeaway", "Rice", "", "60", "", "", "", ""],
]


def csv_upload(rows, columns=CSV_COLUMNS, filename="menu.csv"):
    df = pd.DataFrame(rows, columns=columns)
    buf = io.BytesIO()
    buf.write(df.to_csv(index=False).encode())
    buf.seek(0)
    return buf, filename


def upload(client, rows, mid="M1", sid="S1", **kwargs):
    return client.post(
        "/upload",
        data={"file": csv_upload(rows, **kwargs), "MID": mid, "SID": sid},
        content_type="multipart/form-data",
    )


def exported_rows(client, mid="M1", sid="S1"):
    resp = client.get(f"/download-csv?MID={mid}&SID={sid}")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "menu.csv" in resp.headers["Content-Disposition"]
    df = pd.read_csv(io.BytesIO(resp.data), dtype=str, keep_default_na=False)
    assert list(df.columns) == CSV_COLUMNS
    return sorted(tuple(r) for r in df.values.tolist())


def test_import_builds_hierarchy(client, app):
    resp = upload(client, MENU_ROWS)
    assert resp.status_code == 200
    assert resp.get_json()["imported"] == {
        "categories": 2, "items": 4, "variantTitles": 2, "variantItems": 2,
    }

    starters = Category.query.filter_by(category_name="Starters").one()
    assert starters.status == "Inactive"
    soup = Item.query.filter_by(item_name="Soup").one()
    assert soup.category_id == starters.id
    assert soup.status == "Inactive"
    assert soup.image_url == ""
    size = VariantTitle.query.filter_by(variant_name="Size").one()
    assert size.item_id == soup.id
    large = VariantItem.query.filter_by(variant_item="Large").one()
    assert (large.variant_title_id, large.item_id, large.category_id) == (size.id, soup.id, starters.id)
    assert large.variant_item_price == "120"


def test_import_then_export_round_trip(client, app):
    upload(client, MENU_ROWS)
    assert exported_rows(client) == sorted(tuple(r) for r in MENU_ROWS)


def test_export_emits_every_option_of_a_title(client, app):
    rows = [
        ["Pizza", "Delivery", "Margherita", "", "300", "", "Size", "Small", "250"],
        ["Pizza", "Delivery", "Margherita", "", "300", "", "Size", "Large", "450"],
    ]
    upload(client, rows)
    assert exported_rows(client) == sorted(tuple(r) for r in rows)


def test_duplicate_rows_are_collapsed(client, app):
    row = ["Starters", "Dinein", "Soup", "Hot", "90", "veg", "Size", "Large", "120"]
    resp = upload(client, [row, row])
    assert resp.status_code == 200
    assert Category.query.filter_by(mid="M1", sid="S1").count() == 1
    assert Item.query.count() == 1
    assert VariantTitle.query.count() == 1
    assert VariantItem.query.count() == 1


def test_natural_keys_do_not_collide_on_separators(client, app):
    rows = [
        ["Tea", "Dinein", "Tea-Hot", "Cup", "30", "", "", "", ""],
        ["Tea", "Dinein", "Tea", "Hot-Cup", "30", "", "", "", ""],
    ]
    upload(client, rows)
    assert Item.query.count() == 2


def test_import_replaces_previous_menu_of_the_store_only(client, app):
    upload(client, MENU_ROWS)
    upload(client, MENU_ROWS, sid="S2")
    resp = upload(client, [["Drinks", "All", "Lassi", "", "70", "", "", "", ""]])
    assert resp.status_code == 200

    assert [c.category_name for c in Category.query.filter_by(sid="S1")] == ["Drinks"]
    assert Item.query.filter_by(sid="S1").count() == 1
    assert VariantItem.query.filter_by(sid="S1").count() == 0
    assert Category.query.filter_by(sid="S2").count() == 2


def test_import_rejects_bad_files_without_touching_data(client, app):
    upload(client, MENU_ROWS)

    missing = upload(client, [["Starters", "Soup"]], columns=["CategoryName", "ItemName"])
    assert missing.status_code == 400
    assert "Missing columns" in missing.get_json()["message"]

    wrong_type = upload(client, MENU_ROWS, filename="menu.txt")
    assert wrong_type.status_code == 400
    assert wrong_type.get_json()["message"] == "Unsupported file type"

    no_file = client.post("/upload", data={"MID": "M1", "SID": "S1"}, content_type="multipart/form-data")
    assert no_file.status_code == 400

    no_scope = client.post("/upload", data={"file": csv_upload(MENU_ROWS)}, content_type="multipart/form-data")
    assert no_scope.status_code == 400

    assert Category.query.count() == 2


def test_row_without_parent_fails_after_earlier_passes(client, app):
    rows = [
        ["Starters", "Dinein", "Soup", "Hot", "90", "veg", "", "Large", "120"],
    ]
    resp = upload(client, rows)
    assert resp.status_code == 500
    assert resp.get_json()["status"] == "error"
    # categories and items were committed before the variant passes failed
    assert Category.query.count() == 1
    assert Item.query.count() == 1
    assert VariantItem.query.count() == 0


def test_uploaded_file_is_removed(client, app, tmp_path, monkeypatch):
    monkeypatch.setitem(app.config, "UPLOAD_TMP_DIR", str(tmp_path))
    assert upload(client, MENU_ROWS).status_code == 200
    assert upload(client, [["Starters", "Dinein", "Soup", "", "9", "", "", "X", "1"]]).status_code == 500
    assert list(tmp_path.iterdir()) == []


def test_export_requires_scope_and_handles_empty_store(client, app):
    assert client.get("/download-csv?MID=M1").status_code == 400
    assert exported_rows(client) == []


def test_read_menu_csv_fills_optional_columns():
    data = "CategoryName,ServiceType,ItemName,ItemDescription,ItemPrice,ItemTag\n Starters ,Dinein,Soup,,90,\n"
    rows = read_menu_csv(io.StringIO(data))
    assert rows == [{
        "CategoryName": "Starters",
        "ServiceType": "Dinein",
        "ItemName": "Soup",
        "ItemDescription": "",
        "ItemPrice": "90",
        "ItemTag": "",
        "VariantTitle": "",
        "VariantItemName": "",
        "VariantItemPrice": "",
    }]


def test_cli_import_and_export(app, tmp_path):
    source = tmp_path / "in.csv"
    pd.DataFrame(MENU_ROWS, columns=CSV_COLUMNS).to_csv(source, index=False)
    runner = app.test_cli_runner()

    result = runner.invoke(args=["import-menu", str(source), "--mid", "M9", "--sid", "S9"])
    assert result.exit_code == 0, result.output
    assert "Imported 5 rows" in result.output
    assert Category.query.filter_by(mid="M9").count() == 2

    target = tmp_path / "out.csv"
    result = runner.invoke(args=["export-menu", str(target), "--mid", "M9", "--sid", "S9"])
    assert result.exit_code == 0, result.output
    df = pd.read_csv(target, dtype=str, keep_default_na=False)
    assert sorted(tuple(r) for r in df.values.tolist()) == sorted(tuple(r) for r in MENU_ROWS)
