import json

from catalog import DEFAULT_PRODUCTS, CatalogStore, display_price, filter_products, format_money
from storage import PRODUCTS_KEY, persist_hook


def _store(storage, notifier):
    s = CatalogStore.load(storage, PRODUCTS_KEY, notifier)
    s.on_commit(persist_hook(storage, PRODUCTS_KEY))
    return s


def test_seeded_with_defaults_when_storage_empty(storage, notifier):
    s = _store(storage, notifier)
    assert [p.name for p in s.products] == [p.name for p in DEFAULT_PRODUCTS]
    assert s.get("6").sold_out is True


def test_unparseable_snapshot_means_defaults(storage, notifier):
    storage.set_item(PRODUCTS_KEY, "oops")
    assert len(_store(storage, notifier).products) == 6
    storage.set_item(PRODUCTS_KEY, json.dumps([{"name": "no id"}]))
    assert len(_store(storage, notifier).products) == 6


def test_add_prepends_and_notifies(storage, notifier, product_factory):
    s = _store(storage, notifier)
    s.add(product_factory("new", "Fresh Bag"))
    assert s.products[0].id == "new"
    assert notifier.current().text == "Product added successfully"
    assert notifier.current().severity == "success"


def test_update_replaces_in_place(storage, notifier, product_factory):
    s = _store(storage, notifier)
    before = [p.id for p in s.products]
    s.update(product_factory("3", "Espresso Clutch v2", 130))
    assert [p.id for p in s.products] == before
    assert s.get("3").price == 130
    assert s.get("2").name == "Chestnut Crossbody"
    assert notifier.current().text == "Product updated"


def test_delete_notifies_info(storage, notifier):
    s = _store(storage, notifier)
    s.delete("1")
    assert s.get("1") is None
    assert len(s.products) == 5
    assert notifier.current().severity == "info"


def test_snapshot_round_trips_through_storage(storage, notifier, product_factory):
    s = _store(storage, notifier)
    s.add(product_factory("x", "Woven Tote", 42.5, image="data:image/png;base64,AAAA", is_new=True))
    s.update(product_factory("2", "Chestnut Crossbody", 70, category="Women", sold_out=True))
    s.delete("5")
    reloaded = CatalogStore.load(storage, PRODUCTS_KEY)
    assert reloaded.products == s.products


def test_stored_json_uses_camel_case_keys(storage, notifier):
    _store(storage, notifier).delete("6")
    first = json.loads(storage.get_item(PRODUCTS_KEY))[0]
    assert set(first) == {"id", "name", "price", "description", "image", "category", "isNew", "soldOut"}


def test_filter_by_category_and_search(storage, notifier):
    products = _store(storage, notifier).products
    assert len(filter_products(products, "All", "")) == 6
    assert [p.id for p in filter_products(products, "Men")] == ["4"]
    # search hits name or description, case-insensitive
    assert [p.id for p in filter_products(products, "All", "CANVAS")] == ["1", "4"]
    assert [p.id for p in filter_products(products, "All", "velvet")] == ["3"]
    # AND-combined with the category
    assert filter_products(products, "Women", "canvas") == []


def test_filter_unknown_category_matches_nothing(storage, notifier):
    assert filter_products(_store(storage, notifier).products, "Travel") == []


def test_money_formatting(product_factory):
    assert format_money(205) == "$205"
    assert format_money(42.5) == "$42.50"
    assert display_price(product_factory(price=65)) == "$65"
