# pages/3_Awards.py
import streamlit as st

from client.api import ApiError
from config import ConfigurationError
from site_ui import get_site, setup_page

setup_page("Awards & Media")
site = get_site()

GRID = 4


def gallery(title, loader, url_field):
    st.header(title)
    try:
        items = loader()
    except (ApiError, ConfigurationError) as e:
        st.error(f"Error: {e}")
        return
    if not items:
        st.info(f"No {title.lower()} yet.")
        return
    cols = st.columns(GRID)
    for i, item in enumerate(items):
        if item.get(url_field):
            cols[i % GRID].image(item[url_field])


gallery("Awards", site.list_awards, "image_url")
gallery("In the media", site.list_media, "url")
