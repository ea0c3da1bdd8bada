# pages/6_Admin.py
import streamlit as st

from client.admin import TABS
from client.resources import (
    RESOURCES, join_list, parse_id_list, parse_specifications, parse_url_list, specifications_text,
)
from site_ui import bump_form, form_version, get_admin, setup_page

setup_page("Admin Dashboard")
st.title("Admin Dashboard")

sync, tabs, deletion = get_admin()

# Simple forms: resource -> [(field, label, widget)]
SIMPLE_FORMS = {
    "qna": [("question", "Question", "text"), ("answer", "Answer", "area")],
    "awards": [("image_url", "Image URL", "text")],
    "media": [("url", "URL", "text")],
}

# Read-only tables: resource -> [(field, header)]
TABLE_COLUMNS = {
    "products": [("id", "ID"), ("name", "Name"), ("price", "Price"), ("description", "Description")],
    "qna": [("id", "ID"), ("question", "Question"), ("answer", "Answer")],
    "awards": [("id", "ID"), ("image_url", "Image")],
    "media": [("id", "ID"), ("url", "URL")],
    "requests": [("id", "ID"), ("request_type", "Type"), ("product_name", "Product Name"),
                 ("full_name", "Full Name"), ("email", "Email"), ("phone_number", "Phone"),
                 ("company_name", "Company"), ("status", "Status")],
    "applications": [("id", "ID"), ("name", "Name"), ("email", "Email"), ("position", "Position"),
                     ("created_at", "Applied")],
}

IMAGE_FIELDS = {"image_url"}


def widget_key(key, field):
    return f"{key}_{field}_{form_version(key)}"


def after_change(key):
    bump_form(key)
    st.rerun()


# ---------------- Forms ----------------

def product_form():
    form = sync.forms["products"]
    editing = form.get("id") is not None
    st.subheader("Edit Product" if editing else "Add New Product")
    with st.form(f"product_form_{form_version('products')}"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Name *", value=form.get("name") or "", key=widget_key("products", "name"))
        tagline = c2.text_input("Tagline", value=form.get("tagline") or "", key=widget_key("products", "tagline"))
        price = c1.text_input("Price", value=str(form.get("price") if form.get("price") is not None else ""),
                              key=widget_key("products", "price"))
        category = c2.text_input("Category", value=form.get("category") or "", key=widget_key("products", "category"))
        description = st.text_area("Description", value=form.get("description") or "",
                                   key=widget_key("products", "description"))
        features_text = st.text_area("Features Text", value=form.get("features_text") or "",
                                     key=widget_key("products", "features_text"))
        tco_savings_text = st.text_area("TCO Savings Text", value=form.get("tco_savings_text") or "",
                                        key=widget_key("products", "tco_savings_text"))
        c3, c4 = st.columns(2)
        main_image_url = c3.text_input("Main Image URL", value=form.get("main_image_url") or "",
                                       key=widget_key("products", "main_image_url"))
        tco_savings_image_url = c4.text_input("TCO Savings Image URL", value=form.get("tco_savings_image_url") or "",
                                              key=widget_key("products", "tco_savings_image_url"))
        video_url = st.text_input("Video URL", value=form.get("video_url") or "", key=widget_key("products", "video_url"))
        image_urls = st.text_input("Image URLs (comma-separated)", value=join_list(form.get("image_urls")),
                                   key=widget_key("products", "image_urls"))
        related_ids = st.text_input("Related Product IDs (comma-separated)",
                                    value=join_list(form.get("related_products_ids")),
                                    key=widget_key("products", "related_products_ids"))
        specifications = st.text_area("Specifications (JSON string)",
                                      value=specifications_text(form.get("specifications")),
                                      height=160, key=widget_key("products", "specifications"))
        submitted = st.form_submit_button("Update Product" if editing else "Add Product",
                                          disabled=sync.state("products").loading)

    if submitted:
        buffer = {
            **form,
            "name": name,
            "tagline": tagline,
            "price": price,
            "category": category,
            "description": description,
            "features_text": features_text,
            "tco_savings_text": tco_savings_text,
            "main_image_url": main_image_url,
            "tco_savings_image_url": tco_savings_image_url,
            "video_url": video_url,
            "image_urls": parse_url_list(image_urls),
            "related_products_ids": parse_id_list(related_ids),
            "specifications": parse_specifications(specifications),
        }
        sync.forms["products"] = buffer
        if not name:
            st.error("Name is required.")
        elif not isinstance(buffer["specifications"], dict):
            st.error("Specifications must be a JSON object, e.g. {\"Battery\": [{\"parameter\": \"Capacity\", \"value\": \"20 kWh\"}]}")
        elif sync.save("products"):
            after_change("products")

    if editing and st.button("Cancel Edit", key="cancel_products"):
        sync.cancel_edit("products")
        after_change("products")


def simple_form(key):
    resource = RESOURCES[key]
    form = sync.forms[key]
    editing = form.get("id") is not None
    singular = resource.label.rstrip("s")
    st.subheader(f"Edit {singular}" if editing else f"Add New {singular}")
    values = {}
    with st.form(f"{key}_form_{form_version(key)}"):
        for field, label, widget in SIMPLE_FORMS[key]:
            current = form.get(field) or ""
            if widget == "area":
                values[field] = st.text_area(label, value=current, key=widget_key(key, field))
            else:
                values[field] = st.text_input(label, value=current, key=widget_key(key, field))
        submitted = st.form_submit_button(f"Update {singular}" if editing else f"Add {singular}",
                                          disabled=sync.state(key).loading)

    if submitted:
        sync.forms[key] = {**form, **values}
        missing = [label for field, label, _ in SIMPLE_FORMS[key] if not values[field]]
        if missing:
            st.error("Required: " + ", ".join(missing))
        elif sync.save(key):
            after_change(key)

    if editing and st.button("Cancel Edit", key=f"cancel_{key}"):
        sync.cancel_edit(key)
        after_change(key)


# ---------------- Tables ----------------

def render_list(key, empty_message):
    resource = RESOURCES[key]
    state = sync.state(key)
    if state.loading:
        st.info(f"Loading {resource.label.lower()}...")
        return
    if state.error:
        st.error(f"Error: {state.error}")
        return
    if not state.items:
        st.info(empty_message)
        return

    columns = TABLE_COLUMNS[key]
    widths = [1 if field == "id" else 3 for field, _ in columns] + [1, 1]
    header = st.columns(widths)
    for col, (_, title) in zip(header, columns):
        col.markdown(f"**{title}**")

    for row in state.items:
        cells = st.columns(widths)
        for col, (field, _) in zip(cells, columns):
            value = row.get(field)
            if field in IMAGE_FIELDS and value:
                col.image(value, width=80)
            else:
                col.write("" if value is None else value)
        row_id = row.get("id")
        if resource.editable and cells[-2].button("✏️", key=f"edit_{key}_{row_id}"):
            sync.edit(key, row)
            after_change(key)
        if cells[-1].button("🗑️", key=f"delete_{key}_{row_id}"):
            deletion.request(row, resource.endpoint)
            st.rerun()


# ---------------- Deletion modal ----------------

# closing with X or Esc counts as Cancel
@st.dialog("Confirm Deletion", on_dismiss=deletion.cancel)
def confirm_deletion():
    st.write("Are you sure you want to delete this item?")
    c1, c2 = st.columns(2)
    if c1.button("Cancel"):
        deletion.cancel()
        st.rerun()
    if c2.button("Delete", type="primary"):
        deletion.confirm(sync)
        st.rerun()


# ---------------- Tab controller ----------------

choice = st.radio("Manage", TABS, index=TABS.index(tabs.active), horizontal=True,
                  format_func=lambda k: RESOURCES[k].label, label_visibility="collapsed")
if choice != tabs.active:
    tabs.activate(choice)

active = tabs.active
st.header(f"Manage {RESOURCES[active].label}")
if active == "products":
    product_form()
elif active in SIMPLE_FORMS:
    simple_form(active)

render_list(active, {
    "products": "No products found. Add some above!",
    "qna": "No Q&A found. Add some above!",
    "awards": "No awards found. Add some above!",
    "media": "No media found. Add some above!",
    "requests": "No requests found.",
    "applications": "No applications found.",
}[active])

if deletion.is_pending:
    confirm_deletion()
