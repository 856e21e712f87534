import logging

import streamlit as st

from about import page_about
from admin import check_admin_password, page_admin
from assistant import render_assistant
from checkout import render_checkout
from home import page_home
from notifications import render_toast
from settings import admin_password
from shop import page_shop
from state import init_state
from ui_text import FOOTER_ABOUT, SHOP_NAME

logger = logging.getLogger(__name__)

VIEWS = ["Home", "Shop", "About"]


def set_view(view: str):
    st.session_state.view = view


def admin_login(entered: str, notifier, expected: str) -> bool:
    if check_admin_password(entered, expected):
        set_view("Admin")
        notifier.notify("Welcome back, Fifi!", "success")
        logger.info("Admin view unlocked")
        return True
    if entered:
        notifier.notify("Incorrect password", "error")
        logger.info("Admin password rejected")
    return False


def admin_logout(notifier):
    set_view("Home")
    notifier.notify("Logged out of Admin", "info")


def subscribe(email: str, notifier) -> bool:
    email = (email or "").strip()
    if not email:
        return False
    notifier.notify(f"Subscribed with {email}! 🍂", "success")
    return True


def _footer(shop):
    st.divider()
    c1, c2 = st.columns(2)
    with c1:
        st.markdown("**About Us**")
        st.caption(FOOTER_ABOUT)
    with c2:
        with st.form("newsletter", clear_on_submit=True):
            email = st.text_input("Stay connected", placeholder="Enter your email")
            if st.form_submit_button("Join"):
                subscribe(email, shop["notifier"])

    with st.expander("🤎"):
        pin = st.text_input("Enter Admin Password (hint: brown)", type="password")
        if st.button("Unlock admin"):
            if admin_login(pin, shop["notifier"], admin_password()):
                st.rerun()
    st.caption(f"© 2024 {SHOP_NAME}. Handcrafted in the Studio.")


def run_app():
    shop = init_state()
    view = st.session_state.view

    if view == "Admin":
        page_admin(shop["admin"], on_exit=lambda: admin_logout(shop["notifier"]))
        render_toast(shop["notifier"])
        return

    st.sidebar.title(SHOP_NAME)
    page = st.sidebar.radio("Menu", VIEWS, index=VIEWS.index(view))
    if page != view:
        set_view(page)
        st.rerun()

    if view == "Home":
        page_home(shop["catalog"], shop["cart"], go_shop=lambda: set_view("Shop"))
    elif view == "Shop":
        page_shop(shop["catalog"], shop["categories"], shop["cart"])
    else:
        page_about()

    _footer(shop)
    render_checkout(shop["checkout"])
    render_assistant(shop["assistant"])
    render_toast(shop["notifier"])
