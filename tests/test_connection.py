from stock_ledger import Ledger, get_connection


def test_memory_connection_has_schema():
    conn = get_connection(":memory:")
    try:
        names = {
            r["name"]
            for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
        }
        assert {"tenants", "tenant_collections"} <= names
        assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1
    finally:
        conn.close()


def test_file_connection_persists_between_ledgers(tmp_path):
    db = tmp_path / "nested" / "ledger.db"
    first = Ledger(get_connection(db))
    first.register_tenant("t-1", "Corner Shop").add_product("Sugar")
    first.close()

    second = Ledger(get_connection(db))
    try:
        assert [p.name for p in second.tenant("t-1").list_products()] == ["Sugar"]
    finally:
        second.close()
