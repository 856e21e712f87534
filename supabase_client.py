from __future__ import annotations
import streamlit as st
from supabase import create_client, Client

from settings import get_cfg


@st.cache_resource(show_spinner=False)
def get_client() -> Client:
    # No auth sessions here, so one client per process is fine
    url = get_cfg("SUPABASE_URL", required=True)
    anon = get_cfg("SUPABASE_ANON_KEY", required=True)
    return create_client(url, anon)
