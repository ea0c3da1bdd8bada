# streamlit_app.py
import streamlit as st

from client.api import ApiError
from config import ConfigurationError
from site_ui import get_site, product_card, setup_page, subscribe_box

setup_page("Electric Mobility")
st.title("Electric tractors & utility vehicles")
st.write("Cut running costs and emissions with a fleet that runs on electricity.")

site = get_site()

# ---------------- Catalog ----------------
st.header("Our products")
try:
    products = site.list_products()
except (ApiError, ConfigurationError) as e:
    st.error(f"Could not load products: {e}")
    products = []

cols = st.columns(3)
for i, p in enumerate(products):
    with cols[i % 3]:
        if p.get("main_image_url"):
            st.image(p["main_image_url"])
        product_card(p)
        if st.button("View details", key=f"view_{p.get('id')}"):
            st.session_state.selected_product_id = p.get("id")
            st.switch_page("pages/1_Product_Details.py")

if not products:
    st.info("No products to show yet.")

# ---------------- Q&A (accordion) ----------------
st.header("Frequently asked questions")
try:
    qna = site.list_qna()
except (ApiError, ConfigurationError) as e:
    st.error(f"Could not load Q&A: {e}")
    qna = []

for item in qna:
    with st.expander(item.get("question") or ""):
        st.write(item.get("answer") or "")

subscribe_box()
