# site_ui.py
"""Session-scoped objects shared by the Streamlit pages."""

from html import escape

import streamlit as st

from client.admin import DeletionGate, TabController
from client.api import ApiClient
from client.public import SiteClient
from client.sync import SyncService
from config import configure_logging

CARD_HEIGHT_PX = 140


def setup_page(title):
    configure_logging()
    st.set_page_config(page_title=title, layout="wide")


def get_api():
    if "api" not in st.session_state:
        st.session_state.api = ApiClient()
    return st.session_state.api


def get_site():
    if "site" not in st.session_state:
        st.session_state.site = SiteClient(get_api())
    return st.session_state.site


def get_admin():
    """(sync, tabs, deletion gate) for this browser session; first call loads the initial tab."""
    if "sync" not in st.session_state:
        sync = SyncService(get_api())
        tabs = TabController(sync)
        tabs.mount()
        st.session_state.sync = sync
        st.session_state.tabs = tabs
        st.session_state.deletion = DeletionGate()
        st.session_state.form_version = {}
    return st.session_state.sync, st.session_state.tabs, st.session_state.deletion


def form_version(key):
    """Widget-key suffix; bumping it makes form widgets pick up a new buffer."""
    return st.session_state.form_version.get(key, 0)


def bump_form(key):
    st.session_state.form_version[key] = form_version(key) + 1


def product_card(p):
    name_html = escape(str(p.get("name") or ""))
    tagline_html = escape(str(p.get("tagline") or ""))
    category_html = escape(str(p.get("category") or "-"))
    price_val = p.get("price")
    price_html = f"{price_val:,.0f}" if isinstance(price_val, (int, float)) else "-"
    st.markdown(f"""
    <div style="height:{CARD_HEIGHT_PX}px; padding:6px 8px; border-radius:8px;">
      <div style="font-weight:600; font-size:16px; white-space:nowrap; overflow:hidden; text-overflow:ellipsis;">{name_html}</div>
      <div style="margin-top:4px; font-size:13px; color:#555;">{tagline_html}</div>
      <div style="margin-top:6px; font-size:13px; color:#333;">Category: {category_html}</div>
      <div style="font-size:13px; color:#333;">Price: {price_html}</div>
    </div>
    """, unsafe_allow_html=True)


def subscribe_box(container=None):
    box = container or st.sidebar
    box.header("Newsletter")
    with box.form("subscribe_form", clear_on_submit=True):
        email = st.text_input("Email")
        submitted = st.form_submit_button("Subscribe")
    if submitted:
        if not email:
            box.error("Email is required.")
            return
        outcome = get_site().subscribe(email)
        (box.success if outcome.ok else box.error)(outcome.message)
