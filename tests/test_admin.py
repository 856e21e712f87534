import pytest

from admin import AdminSurface, check_admin_password, coerce_price
from catalog import CatalogStore
from categories import CategoryStore
from payment import PaymentSettingsStore


@pytest.fixture
def admin(notifier):
    return AdminSurface(
        CatalogStore(notifier=notifier),
        CategoryStore(notifier=notifier),
        PaymentSettingsStore(notifier=notifier),
        notifier,
    )


def test_new_product_form_submits_to_front_of_catalog(admin, notifier):
    form = admin.open_new()
    assert form.data.category == "Women"
    form.set_fields(name="Terracotta Sling", price="48", description="Small sling bag")
    assert admin.submit_form()
    first = admin.catalog.products[0]
    assert (first.name, first.price, first.id) == ("Terracotta Sling", 48.0, form.data.id)
    assert admin.form is None
    assert notifier.current().text == "Product added successfully"


def test_missing_required_fields_refuse_submit(admin):
    form = admin.open_new()
    form.set_fields(name="Only a name")
    assert form.missing_fields() == ["price", "description"]
    assert admin.submit_form() is False
    assert len(admin.catalog.products) == 6


@pytest.mark.parametrize("raw,expected", [("12.5", 12.5), ("abc", 0.0), ("-3", 0.0), (None, 0.0), ("nan", 0.0)])
def test_price_coercion(raw, expected):
    assert coerce_price(raw) == expected


def test_non_numeric_price_saved_as_zero(admin):
    form = admin.open_new()
    form.set_fields(name="Mystery", price="free", description="?")
    admin.submit_form()
    assert admin.catalog.products[0].price == 0


def test_edit_updates_in_place(admin, notifier):
    form = admin.open_edit(admin.catalog.get("4"))
    form.set_fields(price="99", sold_out=True)
    assert admin.submit_form()
    p = admin.catalog.get("4")
    assert (p.price, p.sold_out) == (99.0, True)
    assert admin.catalog.products[3].id == "4"
    assert notifier.current().text == "Product updated"


def test_cancel_form_changes_nothing(admin):
    form = admin.open_edit(admin.catalog.get("4"))
    form.set_fields(name="Changed")
    admin.cancel_form()
    assert admin.catalog.get("4").name == "Sandstone Backpack"


def test_image_upload_becomes_data_url(admin, notifier):
    form = admin.open_new()
    pending = form.start_image_upload("bag.png", b"\x89PNG", "image/png")
    assert admin.finish_image_upload(pending)
    assert form.data.image == "data:image/png;base64,iVBORw=="
    assert notifier.current().text == "Image uploaded"


def test_upload_dropped_after_form_closes(admin, notifier):
    form = admin.open_new()
    pending = form.start_image_upload("bag.png", b"abc", "image/png")
    admin.cancel_form()
    assert admin.finish_image_upload(pending) is False
    assert form.data.image == ""
    assert notifier.current() is None


def test_pasted_url_wins_over_pending_upload(admin):
    form = admin.open_new()
    pending = form.start_image_upload("bag.png", b"abc", "image/png")
    form.paste_image_url(" https://example.com/bag.jpg ")
    assert admin.finish_image_upload(pending) is False
    assert form.data.image == "https://example.com/bag.jpg"


def test_newer_upload_replaces_older_one(admin):
    form = admin.open_new()
    old = form.start_image_upload("a.png", b"a", "image/png")
    new = form.start_image_upload("b.png", b"b", "image/png")
    assert admin.finish_image_upload(old) is False
    assert admin.finish_image_upload(new) is True


def test_delete_requires_confirmation(admin, notifier):
    admin.request_delete_product("1")
    assert admin.catalog.get("1") is not None
    admin.cancel_delete()
    assert admin.confirm_delete() is False
    admin.request_delete_product("1")
    assert admin.confirm_delete()
    assert admin.catalog.get("1") is None
    assert notifier.current().severity == "info"


def test_category_delete_confirmed_keeps_product_labels(admin):
    admin.request_delete_category("Men")
    assert admin.confirm_delete()
    assert "Men" not in admin.categories.labels
    assert admin.catalog.get("4").category == "Men"


def test_add_category_trims_and_ignores_blank(admin):
    assert admin.add_category("  Travel ")
    assert admin.categories.labels[-1] == "Travel"
    assert admin.add_category("   ") is False


def test_payment_draft_saved_as_whole_record(admin, notifier):
    admin.edit_payment(bank_name="Clay Bank", account_number="42")
    assert admin.payment.details.bank_name == "Earth Trust Bank"
    admin.save_payment()
    assert admin.payment.details.bank_name == "Clay Bank"
    assert admin.payment.details.account_name == "Fifi Bags Official"
    assert notifier.current().text == "Payment settings saved"


@pytest.mark.parametrize("entered,ok", [("brown", True), ("BROWN", True), (" brown ", True), ("green", False), ("", False)])
def test_admin_password_is_case_insensitive(entered, ok):
    assert check_admin_password(entered, "brown") is ok


def test_url_pasted_again_after_upload_wins(admin):
    form = admin.open_edit(admin.catalog.get("4"))
    assert form.take_url("https://x.example/a.jpg")
    assert form.upload_round == 1
    pending = form.take_upload("a.png:3", "a.png", b"abc", "image/png")
    assert admin.finish_image_upload(pending)
    assert form.data.image.startswith("data:image/png")
    # the upload emptied the URL box, so typing the same URL counts again
    assert form.url_round == 1
    assert form.take_url("https://x.example/a.jpg")
    assert form.data.image == "https://x.example/a.jpg"


def test_same_upload_is_taken_once_until_removed(admin):
    form = admin.open_new()
    assert form.take_upload("a.png:3", "a.png", b"abc", "image/png") is not None
    assert form.take_upload("a.png:3", "a.png", b"abc", "image/png") is None
    form.take_upload(None)
    assert form.take_upload("a.png:3", "a.png", b"abc", "image/png") is not None


def test_clearing_url_box_lets_same_url_apply_again(admin):
    form = admin.open_new()
    assert form.take_url("https://x.example/a.jpg")
    assert form.take_url("https://x.example/a.jpg") is False
    form.set_fields(image="")
    assert form.take_url("") is False
    assert form.take_url("https://x.example/a.jpg")
    assert form.data.image == "https://x.example/a.jpg"


def test_reopened_form_gets_fresh_widget_keys(admin):
    first = admin.open_edit(admin.catalog.get("4"))
    admin.cancel_form()
    second = admin.open_edit(admin.catalog.get("4"))
    assert first.key != second.key
    assert second.url_seen == "" and second.upload_seen is None
