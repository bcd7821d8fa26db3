import random
import re
from datetime import date

import pytest

from colcal_quote.images import ImageDecodeError
from colcal_quote.models import QuotationMeta


def test_default_state(form):
    assert len(form.line_items) == 1
    item = form.line_items[0]
    assert (item.quantity, item.unit_price, item.image) == (1, 0.0, "")
    assert form.sales_rep.position == "Sales Engineer"
    assert form.pricing.include_tax is False
    assert form.project.intro.startswith("Thank you for choosing Colcal Machinery.")


def test_meta_format():
    meta = QuotationMeta.generate(today=date(2024, 1, 5), rng=random.Random(1))
    assert re.fullmatch(r"COL/GEN/2024/\d{4}", meta.number)
    assert 1 <= int(meta.number[-4:]) <= 9999
    assert meta.date == "05/01/2024"


def test_meta_is_fixed_for_the_form(form):
    number = form.meta.number
    form.add_line_item()
    form.update_customer("name", "Jane")
    assert form.meta.number == number


def test_add_and_remove_sequence(form):
    form.add_line_item()
    form.add_line_item()
    assert len(form.line_items) == 3
    form.remove_line_item(form.line_items[0].id)
    assert len(form.line_items) == 2
    form.remove_line_item(form.line_items[-1].id)
    assert len(form.line_items) == 1
    last = form.line_items[0]
    form.remove_line_item(last.id)
    form.remove_line_item(last.id)
    assert form.line_items == (last,)


def test_added_ids_are_unique(form):
    for _ in range(20):
        form.add_line_item()
    ids = [i.id for i in form.line_items]
    assert len(set(ids)) == len(ids)


def test_remove_unknown_id_is_noop(form):
    form.add_line_item()
    before = form.line_items
    form.remove_line_item("missing")
    assert form.line_items == before


def test_update_replaces_records_instead_of_mutating(form):
    customer = form.customer
    items = form.line_items
    form.update_customer("company", "ABC Limited")
    form.update_line_item(items[0].id, "name", "Generator")
    assert customer.company == ""
    assert items[0].name == ""
    assert form.customer.company == "ABC Limited"
    assert form.line_items[0].name == "Generator"


def test_update_line_item_accepts_any_value(form):
    item_id = form.line_items[0].id
    form.update_line_item(item_id, "unit_price", -250.0)
    assert form.line_item(item_id).unit_price == -250.0


def test_update_unknown_field_raises(form):
    with pytest.raises(KeyError):
        form.update_line_item(form.line_items[0].id, "colour", "red")
    with pytest.raises(KeyError):
        form.update_customer("fax", "123")


def test_update_unknown_item_is_noop(form):
    before = form.line_items
    form.update_line_item("missing", "name", "x")
    assert form.line_items == before


def test_totals_follow_state(priced_form):
    assert priced_form.totals().total == pytest.approx(110000)
    priced_form.set_include_tax(True)
    assert priced_form.totals().tax == pytest.approx(16000)
    assert priced_form.totals().total == pytest.approx(126000)


def test_attach_images(form, png_bytes):
    item_id = form.line_items[0].id
    form.attach_line_item_image(item_id, png_bytes)
    form.attach_signature(png_bytes)
    assert form.line_item(item_id).image.startswith("data:image/png;base64,")
    assert form.sales_rep.signature.startswith("data:image/png;base64,")


def test_bad_image_leaves_state_unchanged(form):
    item_id = form.line_items[0].id
    with pytest.raises(ImageDecodeError):
        form.attach_line_item_image(item_id, b"not an image")
    assert form.line_item(item_id).image == ""


def test_item_id_cannot_be_edited(form):
    first = form.line_items[0]
    second = form.add_line_item()
    with pytest.raises(KeyError):
        form.update_line_item(second.id, "id", first.id)
    assert [i.id for i in form.line_items] == [first.id, second.id]


def test_removal_never_empties_the_list(form):
    form.add_line_item()
    only_id = form.line_items[0].id
    # two items sharing an id can only be built directly
    form.line_items = (form.line_items[0], form.line_items[0])
    form.remove_line_item(only_id)
    assert len(form.line_items) == 2


def test_clearing_images(form, png_bytes):
    item_id = form.line_items[0].id
    form.attach_line_item_image(item_id, png_bytes)
    form.attach_signature(png_bytes)
    form.clear_line_item_image(item_id)
    form.clear_signature()
    assert form.line_item(item_id).image == ""
    assert form.sales_rep.signature == ""
