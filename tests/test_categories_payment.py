import json

from categories import DEFAULT_CATEGORIES, CategoryStore
from catalog import CatalogStore
from models import PaymentDetails
from payment import DEFAULT_PAYMENT, PaymentSettingsStore
from storage import CATEGORIES_KEY, PAYMENT_KEY, persist_hook


def _categories(storage, notifier):
    s = CategoryStore.load(storage, CATEGORIES_KEY, notifier)
    s.on_commit(persist_hook(storage, CATEGORIES_KEY))
    return s


def test_defaults(storage):
    assert CategoryStore.load(storage, CATEGORIES_KEY).labels == DEFAULT_CATEGORIES


def test_add_appends_and_notifies(storage, notifier):
    s = _categories(storage, notifier)
    assert s.add("Travel") is True
    assert s.labels[-1] == "Travel"
    assert notifier.current().text == 'Category "Travel" added'


def test_duplicate_add_is_silent(storage, notifier):
    s = _categories(storage, notifier)
    assert s.add("Women") is False
    assert s.labels == DEFAULT_CATEGORIES
    assert notifier.current() is None
    # exact match only
    assert s.add("women") is True


def test_delete_leaves_products_alone(storage, notifier):
    s = _categories(storage, notifier)
    catalog = CatalogStore(notifier=notifier)
    before = [p.to_dict() for p in catalog.products]
    s.delete("Women")
    assert "Women" not in s.labels
    assert notifier.current().text == 'Category "Women" removed'
    assert notifier.current().severity == "info"
    assert [p.to_dict() for p in catalog.products] == before
    assert catalog.get("2").category == "Women"


def test_categories_round_trip(storage, notifier):
    s = _categories(storage, notifier)
    s.add("Travel")
    s.delete("Men")
    assert CategoryStore.load(storage, CATEGORIES_KEY).labels == s.labels
    assert json.loads(storage.get_item(CATEGORIES_KEY)) == ["Women", "Unisex", "Travel"]


def test_payment_defaults_and_update_round_trip(storage, notifier):
    s = PaymentSettingsStore.load(storage, PAYMENT_KEY, notifier)
    s.on_commit(persist_hook(storage, PAYMENT_KEY))
    assert s.details == DEFAULT_PAYMENT
    new = PaymentDetails("Clay Credit Union", "Fifi Studio", "999-000", "")
    s.update(new)
    assert notifier.current().text == "Payment settings saved"
    assert PaymentSettingsStore.load(storage, PAYMENT_KEY).details == new
    assert json.loads(storage.get_item(PAYMENT_KEY))["bankName"] == "Clay Credit Union"
