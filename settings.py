import os
import streamlit as st
from streamlit.errors import StreamlitAPIException

DEFAULTS = {
    "STOREFRONT_TABLE": "storefront_state",
    "GEMINI_MODEL": "gemini-2.5-flash",
    "ADMIN_PASSWORD": "brown",
    "SHOP_TIMEZONE": "Europe/London",
    "LOG_LEVEL": "INFO",
}


def _from_secrets(key: str):
    try:
        if key in st.secrets:
            return str(st.secrets[key])
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml; fall through to env vars
        return None
    return None


def get_cfg(key: str, default: str | None = None, required: bool = False) -> str | None:
    v = _from_secrets(key) or os.getenv(key)
    if v:
        return v
    if default is None:
        default = DEFAULTS.get(key)
    if default is None and required:
        raise RuntimeError(f"Missing config: {key}. Add it to Streamlit secrets or env vars.")
    return default


def admin_password() -> str:
    return get_cfg("ADMIN_PASSWORD")


def gemini_api_key() -> str:
    # API_KEY is the name the original web build used
    return get_cfg("GEMINI_API_KEY") or get_cfg("API_KEY", required=True)


def gemini_model() -> str:
    return get_cfg("GEMINI_MODEL")


def shop_timezone() -> str:
    return get_cfg("SHOP_TIMEZONE")


def log_level() -> str:
    return get_cfg("LOG_LEVEL").upper()


def supabase_configured() -> bool:
    return bool(get_cfg("SUPABASE_URL") and get_cfg("SUPABASE_ANON_KEY"))
