from __future__ import annotations

from html import escape

from . import company
from .form import QuotationForm
from .pricing import format_currency, line_items_frame

PREVIEW_CSS = """
.quote { background: #ffffff; color: #1f2937; font-family: 'Inter', 'Helvetica', sans-serif; font-size: 13px; line-height: 1.45; padding: 32px; }
.quote h1 { font-size: 28px; margin: 0; color: #0b3d91; letter-spacing: 1px; }
.quote h2 { font-size: 16px; margin: 0 0 8px 0; color: #0b3d91; }
.quote h3 { font-size: 15px; margin: 0 0 8px 0; color: #0b3d91; }
.quote .header { display: flex; justify-content: space-between; align-items: flex-start; border-bottom: 3px solid #0b3d91; padding-bottom: 16px; margin-bottom: 16px; }
.quote .brand img { height: 64px; }
.quote .brand .mark { font-size: 24px; font-weight: 700; color: #0b3d91; }
.quote .tagline { font-size: 12px; color: #6b7280; margin: 4px 0 0 0; }
.quote .meta { text-align: right; }
.quote .meta p { margin: 2px 0; }
.quote .contact { display: flex; flex-wrap: wrap; gap: 16px; font-size: 12px; background: #f3f4f6; padding: 10px 12px; border-radius: 6px; margin-bottom: 16px; }
.quote .contact p { margin: 0; }
.quote .label { font-weight: 600; color: #374151; }
.quote .block { margin-bottom: 16px; }
.quote .block p { margin: 2px 0; }
.quote table.items { width: 100%; border-collapse: collapse; margin-bottom: 16px; }
.quote table.items th { background: #0b3d91; color: #ffffff; text-align: left; padding: 6px 8px; }
.quote table.items td { border-bottom: 1px solid #e5e7eb; padding: 6px 8px; vertical-align: top; }
.quote table.items .num { text-align: right; white-space: nowrap; }
.quote table.items img { height: 40px; width: 40px; object-fit: cover; border-radius: 4px; margin-right: 6px; vertical-align: middle; }
.quote .summary { display: flex; justify-content: flex-end; margin-bottom: 16px; }
.quote .summary table { width: 45%; border-collapse: collapse; }
.quote .summary td { padding: 4px 8px; }
.quote .summary td.amount { text-align: right; }
.quote .summary tr.total td { border-top: 2px solid #0b3d91; font-weight: 700; font-size: 15px; }
.quote .value { background: #eef2ff; padding: 12px; border-radius: 6px; margin-bottom: 16px; }
.quote .value ul { list-style: none; padding: 0; margin: 8px 0 0 0; }
.quote .value li::before { content: "\\2713  "; color: #16a34a; font-weight: 700; }
.quote .payment { display: flex; gap: 32px; border: 1px solid #e5e7eb; padding: 12px; border-radius: 6px; margin-bottom: 16px; }
.quote .payment .title { font-weight: 700; margin-bottom: 4px; }
.quote .signoff { display: flex; justify-content: space-between; margin-bottom: 16px; }
.quote .signature img { max-height: 64px; }
.quote .signature .line { border-bottom: 1px solid #9ca3af; width: 200px; height: 48px; }
.quote .footer { text-align: center; font-size: 12px; color: #6b7280; border-top: 1px solid #e5e7eb; padding-top: 12px; }
.quote .footer p { margin: 2px 0; }
"""


def _text(value: str, placeholder: str = "") -> str:
    return escape(value) if value else escape(placeholder)


def _multiline(value: str, placeholder: str = "") -> str:
    return _text(value, placeholder).replace("\n", "<br>")


def _pairs_html(pairs) -> str:
    return "".join(f'<p><span class="label">{escape(k)}:</span> {escape(v)}</p>' for k, v in pairs)


def _header_html(form: QuotationForm, logo_uri: str | None) -> str:
    brand_mark = (
        f'<img src="{escape(logo_uri)}" alt="{escape(company.COMPANY_NAME)}">'
        if logo_uri
        else f'<div class="mark">{escape(company.COMPANY_NAME.upper())}</div>'
    )
    contact = company.CONTACT
    return f"""
<div class="header">
<div class="brand">{brand_mark}<p class="tagline">{escape(company.TAGLINE)}</p></div>
<div class="meta"><h1>QUOTATION</h1>
<p><span class="label">No:</span> {escape(form.meta.number)}</p>
<p><span class="label">Date:</span> {escape(form.meta.date)}</p></div>
</div>
<div class="contact">
<p><span class="label">Email:</span> {escape(contact['email'])}</p>
<p><span class="label">Phone:</span> {escape(contact['phone'])}</p>
<p><span class="label">Website:</span> {escape(contact['website'])}</p>
<p><span class="label">Address:</span> {escape(contact['address'])}</p>
</div>"""


def _customer_html(form: QuotationForm) -> str:
    c = form.customer
    return f"""
<div class="block">
<h2>Bill To:</h2>
<p><span class="label">Name:</span> {_text(c.name, '[Customer Name]')}</p>
<p><span class="label">Company:</span> {_text(c.company, '[Company]')}</p>
<p><span class="label">Location:</span> {_text(c.location, '[Location]')}</p>
<p><span class="label">Phone:</span> {_text(c.phone, '[Phone]')}</p>
<p><span class="label">Email:</span> {_text(c.email, '[Email]')}</p>
</div>"""


def _project_html(form: QuotationForm) -> str:
    title_html = f"<h2>Quotation for {escape(form.project.title)}</h2>\n" if form.project.title else ""
    return f"""
<div class="block">
{title_html}<p>{_multiline(form.project.intro)}</p>
</div>"""


def _items_html(form: QuotationForm) -> str:
    line_totals = line_items_frame(form.line_items)["LINE_TOTAL"]
    rows = ""
    for i, item in enumerate(form.line_items):
        thumb = f'<img src="{escape(item.image)}" alt="{escape(item.name)}">' if item.image else ""
        rows += (
            f'<tr><td>{i + 1}</td>'
            f'<td>{thumb}<strong>{_text(item.name, "[Product Name]")}</strong></td>'
            f'<td>{_multiline(item.description, "[Description]")}</td>'
            f'<td class="num">{escape(str(item.quantity))}</td>'
            f'<td class="num">{format_currency(item.unit_price)}</td>'
            f'<td class="num">{format_currency(line_totals.iloc[i])}</td></tr>\n'
        )
    cur = company.CURRENCY
    return f"""
<table class="items">
<thead><tr><th>#</th><th>Product</th><th>Description</th><th class="num">Qty</th><th class="num">Unit Price ({cur})</th><th class="num">Total ({cur})</th></tr></thead>
<tbody>
{rows}</tbody>
</table>"""


def _summary_html(form: QuotationForm) -> str:
    totals = form.totals()
    cur = company.CURRENCY
    tax_row = (
        f'<tr class="tax"><td>{company.VAT_LABEL}:</td><td class="amount">{cur} {format_currency(totals.tax)}</td></tr>\n'
        if totals.include_tax
        else ""
    )
    return f"""
<div class="summary"><table>
<tr><td>Subtotal:</td><td class="amount">{cur} {format_currency(totals.subtotal)}</td></tr>
<tr><td>Installation:</td><td class="amount">{cur} {format_currency(totals.installation)}</td></tr>
{tax_row}<tr class="total"><td>Total Payable:</td><td class="amount">{cur} {format_currency(totals.total)}</td></tr>
</table></div>"""


def _static_html() -> str:
    points = "".join(f"<li>{escape(p)}</li>" for p in company.VALUE_POINTS)
    return f"""
<div class="value">
<h3>{escape(company.VALUE_HEADING)}</h3>
<p>{escape(company.VALUE_TEXT)}</p>
<ul>{points}</ul>
</div>
<div class="block"><h3>Payment Details</h3>
<div class="payment">
<div><p class="title">LIPA NA MPESA</p>{_pairs_html(company.MPESA)}</div>
<div><p class="title">BANKING DETAILS</p>{_pairs_html(company.BANK)}</div>
</div></div>"""


def _sales_rep_html(form: QuotationForm) -> str:
    rep = form.sales_rep
    signature = (
        f'<img src="{escape(rep.signature)}" alt="Signature">' if rep.signature else '<div class="line"></div>'
    )
    return f"""
<div class="block"><h3>Quotation Prepared By:</h3>
<div class="signoff">
<div>
<p><span class="label">Name:</span> {_text(rep.name, '[Sales Rep Name]')}</p>
<p><span class="label">Position:</span> {_text(rep.position)}</p>
<p><span class="label">Phone:</span> {_text(rep.phone, '[Phone]')}</p>
<p><span class="label">Email:</span> {_text(rep.email, '[Email]')}</p>
</div>
<div class="signature"><p class="label">Authorized Signature:</p>{signature}<p>Date: {escape(form.meta.date)}</p></div>
</div></div>"""


def _footer_html() -> str:
    contact = company.CONTACT
    lines = "".join(f"<p>{escape(line)}</p>" for line in company.FOOTER_LINES)
    return f"""
<div class="footer">{lines}
<p>{escape(contact['website'])} | {escape(contact['email'])} | Tel: {escape(contact['phone'])}</p>
</div>"""


def render_preview_body(form: QuotationForm, logo_uri: str | None = None) -> str:
    """The quotation as an HTML fragment wrapped in a ``.quote`` container."""
    return (
        '<div class="quote">'
        + _header_html(form, logo_uri)
        + _customer_html(form)
        + _project_html(form)
        + _items_html(form)
        + _summary_html(form)
        + _static_html()
        + _sales_rep_html(form)
        + _footer_html()
        + "\n</div>"
    )


def render_preview(form: QuotationForm, logo_uri: str | None = None) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>Quotation {escape(form.meta.number)}</title>
<style>{PREVIEW_CSS}</style></head>
<body>
{render_preview_body(form, logo_uri)}
</body></html>"""
