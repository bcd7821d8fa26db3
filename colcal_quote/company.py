"""Static company details printed on every quotation."""

BRAND = "Colcal"
COMPANY_NAME = "Colcal Machinery"
TAGLINE = "Powering Homes, Businesses & Industries Across East Africa"
CURRENCY = "KES"

# --- Tax ---
VAT_RATE = 0.16
VAT_LABEL = "VAT (16%)"

# --- Quotation numbering ---
QUOTE_PREFIX = "COL"
QUOTE_SERIES = "GEN"

# --- Contact ---
CONTACT = {
    "email": "sales@colcalmachinery.co.ke",
    "phone": "0701 652100",
    "website": "www.colcalmachinery.co.ke",
    "address": "Barkat Biashara Mall, Kumasi Road, Opp SBM Bank, Nairobi, Kenya",
}

# --- Form defaults ---
DEFAULT_POSITION = "Sales Engineer"
DEFAULT_INTRO = (
    "Thank you for choosing Colcal Machinery. Below is our quotation for the requested system. "
    "We guarantee reliable equipment, professional installation, and full after-sales support "
    "across Kenya and East Africa."
)

# --- Marketing copy ---
VALUE_HEADING = "Why Choose Colcal Machinery?"
VALUE_TEXT = (
    "Colcal Machinery specializes in reliable power and machinery solutions across Kenya and "
    "East Africa. We offer complete installation, testing, and commissioning services handled "
    "by certified technicians. Every project is delivered on time, professionally executed, "
    "and backed by after-sales support."
)
VALUE_POINTS = (
    "Trusted brands like Perkins, Cummins, Jinko, SRNE, and Premier",
    "Expert installation and training",
    "5-year warranty on solar systems",
    "24/7 technical support and spare parts availability",
)

# --- Payment ---
MPESA = (
    ("Business Number", "400200"),
    ("Account Number", "889545"),
)
BANK = (
    ("Bank Name", "CO-OPERATIVE BANK OF KENYA"),
    ("Account Name", "COLCAL MACHINERY AND EQUIPMENT COMPANY"),
    ("Account Number", "01101384733002"),
    ("SWIFT Code", "KCOOKENA"),
    ("Bank Code", "11000"),
    ("Branch Code", "11135 (Tom Mboya Branch)"),
)

# --- Footer ---
FOOTER_LINES = (
    "For reliable solar, generator, and machinery solutions \u2014 trust Colcal machinery",
    "Delivering power across Kenya & East Africa",
)
