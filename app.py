import logging
from pathlib import Path

import streamlit as st
from PIL import Image

from colcal_quote import company
from colcal_quote.export import export_pdf
from colcal_quote.form import QuotationForm
from colcal_quote.images import ImageDecodeError, to_data_uri
from colcal_quote.preview import PREVIEW_CSS, render_preview_body
from colcal_quote.pricing import coerce_price, coerce_quantity, format_currency, line_items_frame

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("colcal_quote.app")

# --- App Configuration ---
LOGO_PATH = Path(__file__).parent / "assets" / "colcal-logo.png"
IMAGE_TYPES = ["png", "jpg", "jpeg", "webp", "gif"]

# --- Page Configuration & Logo ---
try:
    page_icon_img = Image.open(LOGO_PATH)
except FileNotFoundError:
    page_icon_img = "📄"

st.set_page_config(
    page_title="Colcal Quotation Generator",
    page_icon=page_icon_img,
    layout="wide"
)

# --- App Styling ---
st.markdown("""
<style>
    .stApp { background-color: #f8f9fa; font-family: 'Inter', sans-serif; }
    h1, h2, h3 { color: #343a40; }
    .stButton > button { background-color: #a0c4ff; color: #002b6e !important; border: 1px solid #a0c4ff !important; border-radius: 0.375rem; font-weight: 600; }
    .stButton > button:hover { background-color: #8ab4f8; border-color: #8ab4f8; color: #002b6e !important; }
    .stButton > button[kind="primary"] { background-color: #a7d7c5; border-color: #a7d7c5; color: #003e29 !important; }
    .stButton > button[kind="primary"]:hover { background-color: #8abbac; border-color: #8abbac; color: #003e29 !important; }
    [data-testid="stFileUploader"] { padding: 0.5rem; background-color: #f1f3f5; border-radius: 0.5rem; }
</style>
""", unsafe_allow_html=True)


# --- Callback Functions ---
def _form() -> QuotationForm:
    return st.session_state.form

def update_customer(field):
    _form().update_customer(field, st.session_state[f"customer_{field}"])

def update_sales_rep(field):
    _form().update_sales_rep(field, st.session_state[f"rep_{field}"])

def update_project(field):
    _form().update_project(field, st.session_state[f"project_{field}"])

def update_item_text(item_id, field):
    _form().update_line_item(item_id, field, st.session_state[f"item_{field}_{item_id}"])

def update_item_quantity(item_id):
    _form().update_line_item(item_id, "quantity", coerce_quantity(st.session_state[f"item_quantity_{item_id}"]))

def update_item_price(item_id):
    _form().update_line_item(item_id, "unit_price", coerce_price(st.session_state[f"item_unit_price_{item_id}"]))

def upload_item_image(item_id):
    upload = st.session_state.get(f"item_image_{item_id}")
    if upload is None:
        _form().clear_line_item_image(item_id)
        return
    try:
        _form().attach_line_item_image(item_id, upload)
    except ImageDecodeError as e:
        st.error(f"Error reading image `{upload.name}`: {e}")

def upload_signature():
    upload = st.session_state.get("rep_signature_upload")
    if upload is None:
        _form().clear_signature()
        return
    try:
        _form().attach_signature(upload)
    except ImageDecodeError as e:
        st.error(f"Error reading signature `{upload.name}`: {e}")

def add_item():
    _form().add_line_item()

def remove_item(item_id):
    _form().remove_line_item(item_id)

def update_installation():
    _form().set_installation_cost(coerce_price(st.session_state.installation_cost))

def toggle_tax():
    _form().set_include_tax(st.session_state.include_tax)


# --- Session State Initialization ---
if "form" not in st.session_state:
    st.session_state.form = QuotationForm()
    logger.info("Started quotation %s", st.session_state.form.meta.number)
if "company_logo_uri" not in st.session_state:
    try:
        st.session_state.company_logo_uri = to_data_uri(LOGO_PATH.read_bytes())
    except (FileNotFoundError, ImageDecodeError):
        st.session_state.company_logo_uri = None

form = _form()
line_totals = line_items_frame(form.line_items)["LINE_TOTAL"]

# --- Main App UI ---
col1, col2 = st.columns([1, 4], vertical_alignment="center")
if st.session_state.company_logo_uri:
    col1.image(st.session_state.company_logo_uri, width=150)
col2.title("Create New Quotation")
st.caption(f"Quotation {form.meta.number} · {form.meta.date}")
st.divider()

# --- Customer Information ---
with st.container(border=True):
    st.header("Customer Information")
    c1, c2 = st.columns(2)
    c1.text_input("Customer Name", value=form.customer.name, placeholder="John Doe", key="customer_name", on_change=update_customer, args=("name",))
    c2.text_input("Company/Organization", value=form.customer.company, placeholder="ABC Limited", key="customer_company", on_change=update_customer, args=("company",))
    c1.text_input("Location/Site", value=form.customer.location, placeholder="Nairobi, Kenya", key="customer_location", on_change=update_customer, args=("location",))
    c2.text_input("Phone Number", value=form.customer.phone, placeholder="0700 000000", key="customer_phone", on_change=update_customer, args=("phone",))
    c1.text_input("Email Address", value=form.customer.email, placeholder="customer@example.com", key="customer_email", on_change=update_customer, args=("email",))

# --- Project Details ---
with st.container(border=True):
    st.header("Project Details")
    st.text_input("Project/System Name", value=form.project.title, placeholder="e.g., 50kW Solar Power System", key="project_title", on_change=update_project, args=("title",))
    st.text_area("Introduction Text", value=form.project.intro, height=100, key="project_intro", on_change=update_project, args=("intro",))

# --- Products ---
with st.container(border=True):
    h1, h2 = st.columns([4, 1], vertical_alignment="center")
    h1.header("Products/Systems")
    h2.button("➕ Add Product", use_container_width=True, key="add_item", on_click=add_item)

    for index, item in enumerate(form.line_items):
        with st.container(border=True):
            t1, t2 = st.columns([4, 1], vertical_alignment="center")
            t1.subheader(f"Product {index + 1}")
            if len(form.line_items) > 1:
                t2.button("🗑️ Remove", use_container_width=True, key=f"remove_{item.id}", on_click=remove_item, args=(item.id,))
            c1, c2 = st.columns(2)
            c1.text_input("Product Name", value=item.name, placeholder="50kW Solar Kit", key=f"item_name_{item.id}", on_change=update_item_text, args=(item.id, "name"))
            c2.number_input("Quantity", value=item.quantity, min_value=1, step=1, key=f"item_quantity_{item.id}", on_change=update_item_quantity, args=(item.id,))
            st.text_area("Description", value=item.description, placeholder="Detailed description of product and components", height=80, key=f"item_description_{item.id}", on_change=update_item_text, args=(item.id, "description"))
            i1, i2 = st.columns([4, 1], vertical_alignment="center")
            i1.file_uploader("Product Image", type=IMAGE_TYPES, key=f"item_image_{item.id}", on_change=upload_item_image, args=(item.id,))
            if item.image:
                i2.image(item.image, width=64)
            c1, c2 = st.columns(2)
            c1.number_input(f"Unit Price ({company.CURRENCY})", value=float(item.unit_price), min_value=0.0, step=1000.0, format="%.2f", key=f"item_unit_price_{item.id}", on_change=update_item_price, args=(item.id,))
            c2.markdown(f"**Total Price ({company.CURRENCY})**  \n{format_currency(line_totals.iloc[index])}")

# --- Additional Costs ---
with st.container(border=True):
    st.header("Additional Costs")
    c1, c2 = st.columns(2, vertical_alignment="bottom")
    c1.number_input(f"Installation Cost ({company.CURRENCY})", value=float(form.pricing.installation_cost), min_value=0.0, step=1000.0, format="%.2f", key="installation_cost", on_change=update_installation)
    c2.checkbox(f"Include {company.VAT_LABEL} - applied to products only, not installation", value=form.pricing.include_tax, key="include_tax", on_change=toggle_tax)

# --- Sales Representative ---
with st.container(border=True):
    st.header("Sales Representative")
    c1, c2 = st.columns(2)
    c1.text_input("Name", value=form.sales_rep.name, placeholder="Sales Rep Name", key="rep_name", on_change=update_sales_rep, args=("name",))
    c2.text_input("Position", value=form.sales_rep.position, placeholder=company.DEFAULT_POSITION, key="rep_position", on_change=update_sales_rep, args=("position",))
    c1.text_input("Phone", value=form.sales_rep.phone, placeholder="0700 000000", key="rep_phone", on_change=update_sales_rep, args=("phone",))
    c2.text_input("Email", value=form.sales_rep.email, placeholder="rep@colcalmachinery.co.ke", key="rep_email", on_change=update_sales_rep, args=("email",))
    s1, s2 = st.columns([4, 1], vertical_alignment="center")
    s1.file_uploader("E-Signature", type=IMAGE_TYPES, key="rep_signature_upload", on_change=upload_signature)
    if form.sales_rep.signature:
        s2.image(form.sales_rep.signature, width=120)

# --- Totals & PDF ---
with st.container(border=True):
    st.header("Review Totals & Generate PDF")
    totals = form.totals()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Subtotal", f"{company.CURRENCY} {format_currency(totals.subtotal)}")
    c2.metric("Installation", f"{company.CURRENCY} {format_currency(totals.installation)}")
    c3.metric(company.VAT_LABEL, f"{company.CURRENCY} {format_currency(totals.tax)}")
    c4.metric("Total Payable", f"{company.CURRENCY} {format_currency(totals.total)}")

    if st.button("Generate PDF Quotation", type="primary", use_container_width=True, key="generate_pdf"):
        st.toast("Generating PDF... Please wait while we prepare your quotation.")
        result = export_pdf(form, st.session_state.company_logo_uri)
        if result.ok:
            st.download_button(
                label="✅ Download Quotation PDF", data=result.data, file_name=result.file_name,
                mime="application/pdf", use_container_width=True
            )
            st.success(f"PDF Generated! {result.message}")
        else:
            st.error(result.message)

# --- Preview ---
st.divider()
st.header("Preview")
st.html(f"<style>{PREVIEW_CSS}</style>" + render_preview_body(form, st.session_state.company_logo_uri))
