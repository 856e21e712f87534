import streamlit as st

from ui_text import ABOUT_STORY, SOCIAL_LINKS

ABOUT_IMAGE = "https://images.unsplash.com/photo-1590736969955-71cc94801759?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"


def page_about():
    c1, c2 = st.columns(2)
    with c1:
        st.image(ABOUT_IMAGE, use_container_width=True)
    with c2:
        st.markdown(ABOUT_STORY)
        st.subheader("Follow the Journey")
        st.caption("See behind-the-scenes creation and new drops first!")
        for name, url in SOCIAL_LINKS.items():
            st.link_button(name, url)
