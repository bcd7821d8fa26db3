from colcal_quote.preview import render_preview


PLACEHOLDERS = ["[Customer Name]", "[Company]", "[Location]", "[Phone]", "[Email]", "[Product Name]", "[Description]", "[Sales Rep Name]"]


def test_default_form_shows_placeholders(form):
    html = render_preview(form)
    for placeholder in PLACEHOLDERS:
        assert placeholder in html
    assert form.meta.number in html
    assert "Quotation for" not in html


def test_filled_fields_replace_placeholders(priced_form):
    priced_form.update_customer("name", "Jane Wanjiru")
    priced_form.update_sales_rep("name", "Peter Otieno")
    priced_form.update_project("title", "50kW Solar Power System")
    html = render_preview(priced_form)
    assert "Jane Wanjiru" in html and "[Customer Name]" not in html
    assert "Peter Otieno" in html and "[Sales Rep Name]" not in html
    assert "Solar Kit" in html and "[Product Name]" not in html
    assert "Quotation for 50kW Solar Power System" in html


def test_user_text_is_escaped(form):
    form.update_customer("company", "<script>alert(1)</script>")
    html = render_preview(form)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_pricing_summary(priced_form):
    priced_form.set_include_tax(True)
    html = render_preview(priced_form)
    assert "KES 100,000" in html
    assert "KES 10,000" in html
    assert "VAT (16%):" in html
    assert "KES 16,000" in html
    assert "KES 126,000" in html


def test_tax_line_hidden_when_disabled(priced_form):
    html = render_preview(priced_form)
    assert "VAT (16%):" not in html
    assert "KES 110,000" in html


def test_toggling_tax_changes_only_tax_and_total(priced_form):
    before = render_preview(priced_form).splitlines()
    priced_form.set_include_tax(True)
    after = render_preview(priced_form).splitlines()

    removed = [line for line in before if line not in after]
    added = [line for line in after if line not in before]
    assert len(removed) == 1 and "Total Payable" in removed[0]
    assert len(added) == 2
    assert any("VAT (16%)" in line for line in added)
    assert any("Total Payable" in line for line in added)


def test_static_blocks_present(form):
    html = render_preview(form)
    for text in ["Why Choose Colcal Machinery?", "400200", "889545", "CO-OPERATIVE BANK OF KENYA", "01101384733002", "KCOOKENA", "11135 (Tom Mboya Branch)", "sales@colcalmachinery.co.ke"]:
        assert text in html


def test_images_are_embedded(form, png_bytes):
    form.attach_line_item_image(form.line_items[0].id, png_bytes)
    form.attach_signature(png_bytes)
    html = render_preview(form)
    assert html.count("data:image/png;base64,") == 2


def test_unvalidated_numbers_render_like_the_totals(form):
    first = form.line_items[0]
    form.update_line_item(first.id, "quantity", "2")
    form.update_line_item(first.id, "unit_price", 50000.0)
    second = form.add_line_item()
    form.update_line_item(second.id, "unit_price", None)

    html = render_preview(form)
    assert form.totals().subtotal == 100000
    assert '<td class="num">100,000</td></tr>' in html
    assert '<td class="num">0</td><td class="num">0</td></tr>' in html
    assert "KES 100,000" in html
