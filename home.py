import streamlit as st

from catalog import display_price
from ui_text import HERO_SUB, HERO_TITLE
from utils import image_source


def render_product_card(p, cart, key_prefix: str = "card"):
    with st.container(border=True):
        if p.image:
            st.image(image_source(p.image), use_container_width=True)
        badge = " · 🔖 SOLD OUT" if p.sold_out else (" · ✨ NEW" if p.is_new else "")
        st.markdown(f"**{p.name}**{badge}")
        st.caption(p.category or "")
        st.metric("Price", display_price(p))
        with st.expander("Details"):
            st.write(p.description)
        label = "Out of Stock" if p.sold_out else "Add to Cart"
        if st.button(label, key=f"{key_prefix}_add_{p.id}", disabled=p.sold_out, use_container_width=True):
            cart.add(p)
            st.rerun()


def render_grid(products, cart, key_prefix: str, per_row: int = 3):
    for i in range(0, len(products), per_row):
        cols = st.columns(per_row)
        for col, p in zip(cols, products[i:i + per_row]):
            with col:
                render_product_card(p, cart, key_prefix)


def page_home(catalog, cart, go_shop):
    st.header("👜 " + HERO_TITLE)
    st.write(HERO_SUB)
    if st.button("Shop Now", type="primary"):
        go_shop()
        st.rerun()

    st.divider()
    st.subheader("Featured Collections")
    st.caption("Hand-picked selections crafted for durability and style.")
    render_grid(catalog.featured(3), cart, "home")
