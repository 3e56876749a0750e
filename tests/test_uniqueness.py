from stock_ledger.database.repositories import Buyer, Product, Supplier
from stock_ledger.errors import DuplicateContact, DuplicateProduct
from stock_ledger.modules.uniqueness import check_contact, check_product


def test_product_name_clash_ignores_case():
    existing = [Product("p1", "Sugar", "Grocery", "kg", 2.0)]
    err = check_product("sugar", existing)
    assert isinstance(err, DuplicateProduct)
    assert str(err) == 'Product "Sugar" already exists!'


def test_product_distinct_name_is_fine():
    assert check_product("Salt", [Product("p1", "Sugar", "", "", 0.0)]) is None


def test_product_rename_may_keep_own_name():
    existing = [Product("p1", "Sugar", "", "", 0.0), Product("p2", "Salt", "", "", 0.0)]
    assert check_product("SUGAR", existing, exclude_id="p1") is None
    assert isinstance(check_product("salt", existing, exclude_id="p1"), DuplicateProduct)


def test_contact_phone_clash():
    existing = [Buyer("Amina", "0700111222")]
    err = check_contact(Buyer("Brian", "0700111222"), existing, kind="buyer")
    assert isinstance(err, DuplicateContact)
    assert err.name == "Amina"
    assert err.kind == "buyer"
    assert str(err) == 'Phone/Email belongs to "Amina"!'


def test_contact_email_clash():
    existing = [Supplier("s1", "Mills Ltd", "0711000000", "orders@mills.co")]
    err = check_contact(
        Supplier(None, "Mills Depot", "0722000000", "orders@mills.co"), existing, kind="supplier"
    )
    assert err is not None and err.record is existing[0]


def test_contact_missing_email_never_clashes_on_email():
    existing = [Buyer("Amina", "0700111222", None)]
    assert check_contact(Buyer("Brian", "0700333444", None), existing) is None


def test_same_name_different_contact_is_allowed():
    existing = [Buyer("Amina", "0700111222")]
    assert check_contact(Buyer("Amina", "0700999888"), existing) is None


def test_phone_clash_wins_over_different_emails():
    existing = [Buyer("Amina", "0700111222", "a@x.co")]
    err = check_contact(Buyer("Brian", "0700111222", "b@x.co"), existing, kind="buyer")
    assert isinstance(err, DuplicateContact)
    assert err.record is existing[0]
