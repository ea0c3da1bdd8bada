# pages/1_Product_Details.py
import streamlit as st

from client.api import ApiError
from config import ConfigurationError
from site_ui import get_site, product_card, setup_page
from tco import HOURS_MAX, HOURS_MIN, HOURS_STEP, calculate_savings

setup_page("Product details")
site = get_site()

try:
    products = site.list_products()
except (ApiError, ConfigurationError) as e:
    st.error(f"Error: {e}")
    st.stop()

if not products:
    st.info("No products available.")
    st.stop()

ids = [p["id"] for p in products]
names = {p["id"]: p.get("name") or f"#{p['id']}" for p in products}
selected = st.session_state.get("selected_product_id")
product_id = st.selectbox(
    "Product", ids, index=ids.index(selected) if selected in ids else 0,
    format_func=lambda i: names[i],
)
st.session_state.selected_product_id = product_id

try:
    product, related = site.product_detail(product_id)
except (ApiError, ConfigurationError) as e:
    st.error(f"Error: {e}")
    st.stop()

st.title(product.get("name") or "")
if product.get("tagline"):
    st.subheader(product["tagline"])

# ---------------- Image carousel ----------------
images = [u for u in [product.get("main_image_url")] + (product.get("image_urls") or []) if u]
if images:
    pos_key = f"carousel_{product_id}"
    pos = st.session_state.get(pos_key, 0) % len(images)
    st.image(images[pos])
    if len(images) > 1:
        prev_col, count_col, next_col = st.columns([1, 2, 1])
        if prev_col.button("◀", key=f"prev_{product_id}"):
            st.session_state[pos_key] = (pos - 1) % len(images)
            st.rerun()
        count_col.write(f"{pos + 1} / {len(images)}")
        if next_col.button("▶", key=f"next_{product_id}"):
            st.session_state[pos_key] = (pos + 1) % len(images)
            st.rerun()

if product.get("description"):
    st.write(product["description"])
if product.get("price") is not None:
    st.metric("Price", f"{product['price']:,.0f}")

features_tab, video_tab, tco_tab, specs_tab = st.tabs(["Features", "Video", "TCO Savings", "Specifications"])

with features_tab:
    st.write(product.get("features_text") or "No features listed.")

with video_tab:
    if product.get("video_url"):
        st.video(product["video_url"])
    else:
        st.write("No video available.")

with tco_tab:
    if product.get("tco_savings_text"):
        st.write(product["tco_savings_text"])
    if product.get("tco_savings_image_url"):
        st.image(product["tco_savings_image_url"])
    annual_hours = st.slider("Annual operating hours", HOURS_MIN, HOURS_MAX, 1000, HOURS_STEP)
    diesel_cost = st.number_input("Diesel cost per hour", value=400, step=10)
    electricity_cost = st.number_input("Electricity cost per hour", value=100, step=10)
    tco = calculate_savings(annual_hours, diesel_cost, electricity_cost)
    c1, c2 = st.columns(2)
    c1.metric("Diesel annual cost", f"{tco.diesel_annual_cost:,.0f}")
    c2.metric("Electric annual cost", f"{tco.electricity_annual_cost:,.0f}")
    c1.metric("Annual savings", f"{tco.annual_savings:,.0f}")
    c2.metric("7-year savings", f"{tco.seven_year_savings:,.0f}")

with specs_tab:
    specs = product.get("specifications") or {}
    if not specs:
        st.write("No specifications available.")
    for section, rows in specs.items():
        st.markdown(f"**{section}**")
        if isinstance(rows, list):
            st.table([
                {"Parameter": r.get("parameter") or r.get("feature") or "", "Value": r.get("value") or ""}
                for r in rows if isinstance(r, dict)
            ])

# ---------------- You may also like ----------------
if related:
    st.header("You may also like")
    cols = st.columns(len(related))
    for col, p in zip(cols, related):
        with col:
            if p.get("main_image_url"):
                st.image(p["main_image_url"])
            product_card(p)
            if st.button("View", key=f"related_{p['id']}"):
                st.session_state.selected_product_id = p["id"]
                st.rerun()
