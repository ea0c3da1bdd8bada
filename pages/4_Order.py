# pages/4_Order.py
import streamlit as st

from client.api import ApiError
from config import ConfigurationError
from site_ui import get_site, setup_page

setup_page("Order or book a demo")
site = get_site()

st.title("Order or book a demo")

try:
    products = site.list_products()
    product_error = None
except (ApiError, ConfigurationError) as e:
    products = []
    product_error = str(e)

request_type = st.radio("I want to", ["order", "demo"], horizontal=True,
                        format_func=lambda t: "Place an order" if t == "order" else "Book a demo")
buyer_type = st.radio("Buying as", ["individual", "company"], horizontal=True,
                      format_func=str.capitalize)

if product_error:
    st.error(f"Could not load products: {product_error}")

with st.form("request_form", clear_on_submit=True):
    product_names = [p.get("name") for p in products if p.get("name")]
    product_name = st.selectbox("Product", product_names) if product_names else ""
    full_name = st.text_input("Full name *")
    c1, c2 = st.columns(2)
    email = c1.text_input("Email *")
    phone_number = c2.text_input("Phone number *")
    address = st.text_area("Address")
    c3, c4, c5, c6 = st.columns(4)
    country = c3.text_input("Country")
    state = c4.text_input("State")
    city = c5.text_input("City")
    pincode = c6.text_input("Pincode")
    if buyer_type == "company":
        company_name = st.text_input("Company name *")
        aadhar_number = ""
    else:
        company_name = ""
        aadhar_number = st.text_input("Aadhar number")
    pan_number = st.text_input("PAN number (optional)")
    quantity = st.number_input("Quantity", min_value=1, value=1, step=1) if request_type == "order" else 1
    message = st.text_area("Message")
    submitted = st.form_submit_button("Submit order request" if request_type == "order" else "Book demo")

if submitted:
    missing = [label for label, value in (("Full name", full_name), ("Email", email), ("Phone number", phone_number))
               if not value]
    if buyer_type == "company" and not company_name:
        missing.append("Company name")
    if missing:
        st.error("Required: " + ", ".join(missing))
    else:
        form = {
            "product_name": product_name,
            "full_name": full_name,
            "email": email,
            "phone_number": phone_number,
            "address": address,
            "country": country,
            "state": state,
            "city": city,
            "pincode": pincode,
            "company_name": company_name,
            "aadhar_number": aadhar_number,
            "pan_number": pan_number,
            "quantity": int(quantity),
            "message": message,
        }
        outcome = site.submit_request(form, request_type=request_type, buyer_type=buyer_type)
        (st.success if outcome.ok else st.error)(outcome.message)
