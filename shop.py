import streamlit as st

from catalog import filter_products
from home import render_grid


def _clear_filters():
    st.session_state.shop_category = "All"
    st.session_state.shop_search = ""


def page_shop(catalog, categories, cart):
    st.header("All Products")

    options = ["All"] + categories.labels
    if st.session_state.get("shop_category") not in options:
        st.session_state.shop_category = "All"

    col1, col2 = st.columns([2, 1])
    with col1:
        selected = st.radio("Category", options, horizontal=True, key="shop_category")
    with col2:
        q = st.text_input("Search", placeholder="Search bags...", key="shop_search")

    prods = filter_products(catalog.products, selected, q.strip() if q else "")
    if not prods:
        st.info("No bags found matching your search. 👜")
        st.button("Clear filters", on_click=_clear_filters)
        return

    render_grid(prods, cart, "shop", per_row=4)
