import logging

import streamlit as st

from admin import AdminSurface
from assistant import AssistantWidget
from cart import Cart
from catalog import CatalogStore
from categories import CategoryStore
from checkout import CheckoutFlow
from gemini_client import chat_service
from notifications import Notifier
from payment import PaymentSettingsStore
from settings import get_cfg, shop_timezone, supabase_configured
from storage import CATEGORIES_KEY, PAYMENT_KEY, PRODUCTS_KEY, SessionStorage, SupabaseStorage, persist_hook
from supabase_client import get_client

logger = logging.getLogger(__name__)

SAVE_FAILED = "Couldn't save changes. They will be lost on reload."


def get_storage():
    if supabase_configured():
        return SupabaseStorage(get_client(), get_cfg("STOREFRONT_TABLE"))
    logger.info("Supabase not configured; keeping shop data in this browser session")
    return SessionStorage(st.session_state)


def build_state(storage, notifier, chat=chat_service):
    """Wires the stores, cart and widgets for one session. Returns them in a dict."""

    def _save_failed(key):
        notifier.notify(SAVE_FAILED, "error")

    catalog = CatalogStore.load(storage, PRODUCTS_KEY, notifier)
    catalog.on_commit(persist_hook(storage, PRODUCTS_KEY, _save_failed))
    categories = CategoryStore.load(storage, CATEGORIES_KEY, notifier)
    categories.on_commit(persist_hook(storage, CATEGORIES_KEY, _save_failed))
    payment = PaymentSettingsStore.load(storage, PAYMENT_KEY, notifier)
    payment.on_commit(persist_hook(storage, PAYMENT_KEY, _save_failed))

    cart = Cart(notifier)
    return {
        "notifier": notifier,
        "catalog": catalog,
        "categories": categories,
        "payment": payment,
        "cart": cart,
        "checkout": CheckoutFlow(cart, payment, notifier),
        "admin": AdminSurface(catalog, categories, payment, notifier),
        "assistant": AssistantWidget(chat, catalog),
    }


def init_state():
    if "shop" not in st.session_state:
        notifier = Notifier(zone=shop_timezone())
        st.session_state.shop = build_state(get_storage(), notifier)
    if "view" not in st.session_state:
        st.session_state.view = "Home"
    return st.session_state.shop
