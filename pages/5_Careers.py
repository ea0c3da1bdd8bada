# pages/5_Careers.py
import streamlit as st

from site_ui import get_site, setup_page, subscribe_box

setup_page("Careers")
site = get_site()

OPEN_POSITIONS = [
    {"title": "Embedded Systems Engineer", "location": "Bengaluru", "type": "Full-time"},
    {"title": "Battery Pack Design Engineer", "location": "Bengaluru", "type": "Full-time"},
    {"title": "Field Service Technician", "location": "On site", "type": "Full-time"},
    {"title": "Sales Executive", "location": "Remote", "type": "Full-time"},
]

if "apply_position" not in st.session_state:
    st.session_state.apply_position = None

st.title("Careers")
st.write("Help us electrify farms, warehouses and job sites.")

st.header("Current open positions")
for job in OPEN_POSITIONS:
    c1, c2 = st.columns([4, 1])
    c1.markdown(f"**{job['title']}**  \n{job['location']} · {job['type']}")
    if c2.button("Apply", key=f"apply_{job['title']}"):
        st.session_state.apply_position = job["title"]
        st.rerun()

if st.button("General application"):
    st.session_state.apply_position = ""
    st.rerun()


@st.dialog("Apply")
def apply_dialog(position):
    st.subheader(f"Apply for {position or 'a Position'}")
    with st.form("apply_form"):
        name = st.text_input("Name *")
        email = st.text_input("Email *")
        if not position:
            position = st.text_input("Position *")
        submitted = st.form_submit_button("Submit application")
    if submitted:
        if not (name and email and position):
            st.error("Name, email and position are required.")
            return
        outcome = site.apply(name, email, position)
        if outcome.ok:
            st.success(outcome.message)
            st.session_state.apply_position = None
        else:
            st.error(outcome.message)
    if st.button("Close"):
        st.session_state.apply_position = None
        st.rerun()


if st.session_state.apply_position is not None:
    apply_dialog(st.session_state.apply_position)

subscribe_box()
