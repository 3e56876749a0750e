import json

import pytest

from stock_ledger.database.repositories import (
    EntityStore,
    Product,
    ProductsRepo,
    Sale,
    SalesRepo,
    StockReceipt,
)
from stock_ledger.errors import NotFound

TENANT = "tenant-1"


def test_register_creates_five_empty_collections(conn):
    store = EntityStore(conn)
    store.register_tenant("t-new", "New Shop")

    rows = conn.execute(
        "SELECT collection, payload FROM tenant_collections WHERE tenant_id=? ORDER BY collection",
        ("t-new",),
    ).fetchall()
    assert [r["collection"] for r in rows] == ["buyers", "products", "sales", "stock", "suppliers"]
    assert all(r["payload"] == "[]" for r in rows)
    assert store.has_tenant("t-new")
    assert store.display_name("t-new") == "New Shop"


def test_register_twice_keeps_existing_data(store):
    store.save(TENANT, "products", [{"id": "p1", "name": "Rice"}])
    store.register_tenant(TENANT, "Corner Shop")
    assert store.load(TENANT, "products") == [{"id": "p1", "name": "Rice"}]


def test_load_unknown_tenant_is_empty(store):
    assert store.load("nobody", "sales") == []
    assert not store.has_tenant("nobody")


def test_unknown_collection_rejected(store):
    with pytest.raises(ValueError):
        store.load(TENANT, "invoices")
    with pytest.raises(ValueError):
        store.save(TENANT, "invoices", [])


def test_save_overwrites_whole_collection(store):
    store.save(TENANT, "buyers", [{"name": "A", "phone": "1"}, {"name": "B", "phone": "2"}])
    store.save(TENANT, "buyers", [{"name": "C", "phone": "3"}])
    assert store.load(TENANT, "buyers") == [{"name": "C", "phone": "3"}]


def test_tenants_are_isolated(store):
    store.register_tenant("tenant-2", "Other Shop")
    store.save(TENANT, "sales", [{"id": "s1"}])
    assert store.load("tenant-2", "sales") == []


def test_payload_is_readable_json_with_public_field_names(conn, store):
    repo = SalesRepo(store, TENANT)
    repo.append(
        Sale(
            id="s1", date="2025-08-01", product_name="Rice", category="Grain", unit="kg",
            quantity=2, sell_price=3.5, total_amount=7.0, payment_mode="mpesa", buyer="Amina",
        )
    )
    raw = conn.execute(
        "SELECT payload FROM tenant_collections WHERE tenant_id=? AND collection='sales'",
        (TENANT,),
    ).fetchone()["payload"]
    data = json.loads(raw)
    assert data[0]["productName"] == "Rice"
    assert data[0]["totalAmount"] == 7.0
    assert data[0]["paymentMode"] == "mpesa"


def test_old_records_still_readable(store):
    # legacy product key + extra fields written by some other client
    store.save(TENANT, "products", [{"id": "p1", "name": "Soap", "sellPrice": 1.5, "colour": "red"}])
    store.save(TENANT, "stock", [{"id": "r1", "date": "2025-08-01", "productName": "Soap", "quantity": 4}])

    (p,) = ProductsRepo(store, TENANT).list_products()
    assert p.default_sell_price == 1.5
    assert p.category == ""

    (r,) = [StockReceipt.from_dict(d) for d in store.load(TENANT, "stock")]
    assert r.quantity == 4.0
    assert r.buy_price == 0.0
    assert r.supplier == ""


def test_replace_keeps_id_and_position(store):
    repo = ProductsRepo(store, TENANT)
    repo.append(Product("p1", "Rice", "Grain", "kg", 3.0))
    repo.append(Product("p2", "Beans", "Grain", "kg", 4.0))

    repo.replace("p1", Product(None, "Rice (local)", "Grain", "kg", 3.5))

    products = repo.list_products()
    assert [p.id for p in products] == ["p1", "p2"]
    assert products[0].name == "Rice (local)"


def test_replace_missing_id_raises_not_found(store):
    repo = ProductsRepo(store, TENANT)
    with pytest.raises(NotFound):
        repo.replace("nope", Product(None, "X", "", "", 0.0))


def test_module_is_documented():
    from stock_ledger.database.repositories import entity_store

    assert entity_store.__doc__ and "Per-tenant record storage" in entity_store.__doc__
