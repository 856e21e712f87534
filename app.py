import logging

import streamlit as st

from app_shell import run_app
from settings import log_level

logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s %(message)s")

st.set_page_config(page_title="FIFI-Bags", page_icon="👜", layout="wide")

run_app()
