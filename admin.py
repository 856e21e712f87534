import logging
import math
from dataclasses import dataclass, replace

import streamlit as st

from catalog import display_price
from models import Product
from utils import image_source, new_id, to_data_url

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "description")


def check_admin_password(entered: str, expected: str) -> bool:
    # Cosmetic gate only. Anyone reading the page source can get in; a real
    # deployment needs server-side auth in front of the admin view.
    return bool(entered) and entered.strip().lower() == expected.lower()


def coerce_price(raw) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass
class PendingImage:
    token: str
    filename: str
    data: bytes
    mime: str | None


class ProductForm:
    """Working copy of one product while it is being added or edited."""

    def __init__(self, product: Product, editing: bool):
        self.data = product
        self.editing = editing
        self.price_text = "" if not editing else str(product.price)
        self.is_open = True
        self.pending_image = None
        # widget keys are unique per opened form; a round bump empties that input
        self.key = new_id()
        self.upload_round = 0
        self.url_round = 0
        self.upload_seen = None
        self.url_seen = ""

    def set_fields(self, **fields):
        if "price" in fields:
            self.price_text = fields.pop("price")
        self.data = replace(self.data, **fields)

    def missing_fields(self):
        values = {"name": self.data.name, "price": self.price_text, "description": self.data.description}
        return [f for f in REQUIRED_FIELDS if not str(values[f]).strip()]

    def build_product(self) -> Product:
        return replace(self.data, price=coerce_price(self.price_text))

    def start_image_upload(self, filename: str, data: bytes, mime: str | None = None) -> PendingImage:
        # one slot: a newer upload replaces whatever was waiting
        self.pending_image = PendingImage(token=new_id(), filename=filename, data=data, mime=mime)
        return self.pending_image

    def finish_image_upload(self, pending: PendingImage) -> bool:
        if not self.is_open or self.pending_image is None or self.pending_image.token != pending.token:
            return False
        self.data = replace(self.data, image=to_data_url(pending.data, pending.mime))
        self.pending_image = None
        self.url_round += 1
        self.url_seen = ""
        return True

    def paste_image_url(self, url: str):
        self.pending_image = None
        self.data = replace(self.data, image=url.strip())
        self.upload_round += 1
        self.upload_seen = None

    def take_upload(self, source, filename="", data=b"", mime=None):
        """Starts an upload when the uploader holds a file it did not hold on the last rerun."""
        if source is None or source == self.upload_seen:
            self.upload_seen = source
            return None
        self.upload_seen = source
        return self.start_image_upload(filename, data, mime)

    def take_url(self, url: str) -> bool:
        if url == self.url_seen:
            return False
        self.url_seen = url
        if not url.strip():
            return False
        self.paste_image_url(url)
        return True

    def close(self):
        self.is_open = False
        self.pending_image = None


class AdminSurface:
    """Back-office actions over the catalog, category and payment stores."""

    def __init__(self, catalog, categories, payment, notifier=None):
        self.catalog = catalog
        self.categories = categories
        self.payment = payment
        self.notifier = notifier
        self.form = None
        self.pending_delete = None
        self.payment_draft = replace(payment.details)

    def _notify(self, text: str, severity: str):
        if self.notifier is not None:
            self.notifier.notify(text, severity)

    # products

    def open_new(self) -> ProductForm:
        labels = self.categories.labels
        blank = Product(id=new_id(), name="", price=0, description="", category=labels[0] if labels else "")
        self.form = ProductForm(blank, editing=False)
        return self.form

    def open_edit(self, product: Product) -> ProductForm:
        self.form = ProductForm(product.copy(), editing=True)
        return self.form

    def submit_form(self) -> bool:
        form = self.form
        if form is None or form.missing_fields():
            return False
        product = form.build_product()
        if form.editing:
            self.catalog.update(product)
        else:
            self.catalog.add(product)
        form.close()
        self.form = None
        return True

    def cancel_form(self):
        if self.form is not None:
            self.form.close()
        self.form = None

    def finish_image_upload(self, pending: PendingImage) -> bool:
        form = self.form
        if form is None or not form.finish_image_upload(pending):
            logger.debug("Dropped image upload %s for a closed or replaced form", pending.filename)
            return False
        self._notify("Image uploaded", "info")
        return True

    # deletes need a second click

    def request_delete_product(self, product_id: str):
        self.pending_delete = ("product", product_id)

    def request_delete_category(self, label: str):
        self.pending_delete = ("category", label)

    def confirm_delete(self) -> bool:
        if self.pending_delete is None:
            return False
        kind, target = self.pending_delete
        self.pending_delete = None
        if kind == "product":
            self.catalog.delete(target)
        else:
            self.categories.delete(target)
        return True

    def cancel_delete(self):
        self.pending_delete = None

    # categories and payment

    def add_category(self, raw: str) -> bool:
        label = (raw or "").strip()
        if not label:
            return False
        return self.categories.add(label)

    def edit_payment(self, **fields):
        self.payment_draft = replace(self.payment_draft, **fields)

    def save_payment(self):
        self.payment.update(replace(self.payment_draft))


def _confirm_box(admin: AdminSurface, kind: str, target: str, prompt: str):
    if admin.pending_delete != (kind, target):
        return
    st.warning(prompt)
    c1, c2 = st.columns(2)
    if c1.button("Yes, delete", key=f"confirm_{kind}_{target}", type="primary"):
        admin.confirm_delete()
        st.rerun()
    if c2.button("Cancel", key=f"cancel_{kind}_{target}"):
        admin.cancel_delete()
        st.rerun()


def _render_product_form(admin: AdminSurface):
    form = admin.form
    k = form.key
    st.subheader("Edit Product" if form.editing else "Add New Product")

    name = st.text_input("Name", value=form.data.name, key=f"pf_name_{k}")
    price = st.text_input("Price ($)", value=form.price_text, key=f"pf_price_{k}")
    labels = admin.categories.labels
    options = labels if form.data.category in labels else labels + [form.data.category]
    category = st.selectbox("Category", options, index=options.index(form.data.category), key=f"pf_cat_{k}")
    description = st.text_area("Description", value=form.data.description, key=f"pf_desc_{k}")
    form.set_fields(name=name, price=price, category=category, description=description)

    upload = st.file_uploader("Upload image", type=["png", "jpg", "jpeg", "webp"], key=f"pf_file_{k}_{form.upload_round}")
    if upload is None:
        form.take_upload(None)
    else:
        pending = form.take_upload(f"{upload.name}:{upload.size}", upload.name, upload.getvalue(), upload.type)
        if pending is not None:
            admin.finish_image_upload(pending)

    # an applied upload bumps url_round, so this box renders empty again
    url = st.text_input("Or paste image URL", key=f"pf_url_{k}_{form.url_round}")
    form.take_url(url)
    if form.data.image:
        st.image(image_source(form.data.image), width=200)

    c1, c2 = st.columns(2)
    sold_out = c1.checkbox("Sold out", value=form.data.sold_out, key=f"pf_sold_{k}")
    is_new = c2.checkbox("New arrival", value=form.data.is_new, key=f"pf_new_{k}")
    form.set_fields(sold_out=sold_out, is_new=is_new)

    missing = form.missing_fields()
    if missing:
        st.warning("Required: " + ", ".join(missing))

    c1, c2 = st.columns(2)
    if c1.button("Cancel", key=f"pf_cancel_{k}"):
        admin.cancel_form()
        st.rerun()
    if c2.button("Save Product", key=f"pf_save_{k}", type="primary", disabled=bool(missing)):
        admin.submit_form()
        st.rerun()


def _render_products_tab(admin: AdminSurface):
    if admin.form is not None:
        _render_product_form(admin)
        return

    if st.button("+ Add New Bag", type="primary"):
        admin.open_new()
        st.rerun()

    for p in admin.catalog.products:
        with st.container(border=True):
            c1, c2, c3, c4 = st.columns([1, 3, 1, 1])
            if p.image:
                c1.image(image_source(p.image), width=64)
            c2.markdown(f"**{p.name}** · {p.category or 'Unassigned'}")
            c2.caption(f"{display_price(p)}" + (" · SOLD OUT" if p.sold_out else ""))
            if c3.button("Edit", key=f"edit_{p.id}"):
                admin.open_edit(p)
                st.rerun()
            if c4.button("Delete", key=f"del_{p.id}"):
                admin.request_delete_product(p.id)
                st.rerun()
            _confirm_box(admin, "product", p.id, "Are you sure you want to delete this bag?")


def _render_categories_tab(admin: AdminSurface):
    with st.form("category_form", clear_on_submit=True):
        label = st.text_input("New category", placeholder="e.g. Travel")
        if st.form_submit_button("Add"):
            admin.add_category(label)
    for c in admin.categories.labels:
        c1, c2 = st.columns([4, 1])
        c1.write(c)
        if c2.button("Delete", key=f"delcat_{c}"):
            admin.request_delete_category(c)
            st.rerun()
        _confirm_box(admin, "category", c, f'Delete category "{c}"?')


def _render_payment_tab(admin: AdminSurface):
    d = admin.payment_draft
    with st.form("payment_form"):
        bank = st.text_input("Bank Name", value=d.bank_name)
        account_name = st.text_input("Account Name", value=d.account_name)
        account_number = st.text_input("Account Number", value=d.account_number)
        instructions = st.text_area("Instructions for Customer", value=d.instructions)
        if st.form_submit_button("Save Settings", type="primary"):
            admin.edit_payment(
                bank_name=bank,
                account_name=account_name,
                account_number=account_number,
                instructions=instructions,
            )
            admin.save_payment()


def page_admin(admin: AdminSurface, on_exit):
    c1, c2 = st.columns([4, 1])
    c1.header("Admin Dashboard")
    if c2.button("Exit Dashboard"):
        admin.cancel_form()
        admin.cancel_delete()
        on_exit()
        st.rerun()

    tabs = st.tabs(["Products", "Categories", "Payment settings"])
    with tabs[0]:
        _render_products_tab(admin)
    with tabs[1]:
        _render_categories_tab(admin)
    with tabs[2]:
        _render_payment_tab(admin)
