from models import db, VariantTitle, VariantItem


def setup_item(client):
    category_id = client.post("/category", json={
        "categoryName": "Pizza", "status": "Active", "serviceType": "Delivery", "MID": "M1", "SID": "S1",
    }).get_json()["_id"]
    item_id = client.post("/create-item", json={
        "categoryId": category_id, "itemName": "Margherita", "itemPrice": "300",
        "status": "Active", "MID": "M1", "SID": "S1",
    }).get_json()["_id"]
    return category_id, item_id


def add_title(client, category_id, item_id, name="Size"):
    return client.post("/create-variant-title", json={
        "categoryId": category_id, "itemId": item_id, "variantName": name,
        "status": "Active", "MID": "M1", "SID": "S1",
    })


def add_option(client, category_id, item_id, title_id, name="Large", price=450):
    return client.post("/create-variant-item", json={
        "categoryId": category_id, "itemId": item_id, "variantTitleId": title_id,
        "variantItem": name, "variantItemPrice": price, "status": "Active", "MID": "M1", "SID": "S1",
    })


def test_variant_title_crud(client, app):
    category_id, item_id = setup_item(client)
    resp = add_title(client, category_id, item_id)
    assert resp.status_code == 201
    title = resp.get_json()
    assert title["variantName"] == "Size"
    assert title["itemId"] == item_id

    assert len(client.get("/get-variantstitle?MID=M1&SID=S1").get_json()) == 1
    assert client.get(f"/get-variantstitle-itemid?itemId={item_id}").get_json()[0]["_id"] == title["_id"]
    assert len(client.get(f"/get-variantstitle-categoryid?categoryId={category_id}").get_json()) == 1

    toggled = client.put("/update-variant-title-status", json={"variantTitleId": title["_id"]})
    assert toggled.get_json() == {"variantName": "Size", "status": "Inactive"}

    renamed = client.put("/update-variant-title", json={"variantTitleId": title["_id"], "variantName": "Crust"})
    assert renamed.status_code == 200
    assert renamed.get_json()["variantName"] == "Crust"


def test_variant_title_without_item_and_missing_fields(client, app):
    category_id, _ = setup_item(client)
    resp = client.post("/create-variant-title", json={
        "categoryId": category_id, "variantName": "Spice level", "status": "Active", "MID": "M1", "SID": "S1",
    })
    assert resp.status_code == 201
    assert resp.get_json()["itemId"] is None

    missing = client.post("/create-variant-title", json={"categoryId": category_id, "MID": "M1", "SID": "S1"})
    assert missing.status_code == 400


def test_variant_item_crud(client, app):
    category_id, item_id = setup_item(client)
    title_id = add_title(client, category_id, item_id).get_json()["_id"]
    resp = add_option(client, category_id, item_id, title_id)
    assert resp.status_code == 201
    option = resp.get_json()
    assert option["variantItem"] == "Large"
    assert option["variantItemPrice"] == "450"
    add_option(client, category_id, item_id, title_id, "Small", "250")

    assert len(client.get("/get-variant-items?MID=M1&SID=S1").get_json()) == 2
    by_title = client.get(f"/get-variant-item-titleid?variantTitleId={title_id}").get_json()
    assert {o["variantItem"] for o in by_title} == {"Large", "Small"}
    assert len(client.get(f"/get-variant-item-itemid?itemId={item_id}").get_json()) == 2

    toggled = client.put("/update-variant-item-status", json={"variantItemId": option["_id"]})
    assert toggled.get_json()["status"] == "Inactive"

    updated = client.put("/update-variant-item", json={"variantItemId": option["_id"], "variantItemPrice": "475"})
    assert updated.get_json()["variantItemPrice"] == "475"
    assert updated.get_json()["variantItem"] == "Large"

    assert client.delete(f"/delete-variant-item/{option['_id']}").status_code == 200
    assert client.delete(f"/delete-variant-item/{option['_id']}").status_code == 404
    assert VariantItem.query.count() == 1


def test_variant_item_missing_price(client, app):
    category_id, item_id = setup_item(client)
    title_id = add_title(client, category_id, item_id).get_json()["_id"]
    assert add_option(client, category_id, item_id, title_id, price="").status_code == 400
    assert VariantItem.query.count() == 0


def test_delete_variant_title_cascades(client, app):
    category_id, item_id = setup_item(client)
    size_id = add_title(client, category_id, item_id).get_json()["_id"]
    crust_id = add_title(client, category_id, item_id, "Crust").get_json()["_id"]
    add_option(client, category_id, item_id, size_id)
    add_option(client, category_id, item_id, size_id, "Small", 250)
    add_option(client, category_id, item_id, crust_id, "Thin", 0.5)

    resp = client.delete(f"/delete-variant-title/{size_id}")
    assert resp.status_code == 200
    assert db.session.get(VariantTitle, size_id) is None
    assert VariantItem.query.filter_by(variant_title_id=size_id).count() == 0
    assert VariantItem.query.filter_by(variant_title_id=crust_id).count() == 1
    assert client.delete(f"/delete-variant-title/{size_id}").status_code == 404


def test_update_variant_item_ignores_empty_values(client, app):
    category_id, item_id = setup_item(client)
    title_id = add_title(client, category_id, item_id).get_json()["_id"]
    option_id = add_option(client, category_id, item_id, title_id).get_json()["_id"]

    resp = client.put("/update-variant-item", json={
        "variantItemId": option_id, "variantItem": "", "variantItemPrice": "500",
    })
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["variantItem"] == "Large"
    assert data["variantItemPrice"] == "500"
    assert data["createdAt"] and data["updatedAt"]
