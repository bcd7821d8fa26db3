from datetime import date
from io import BytesIO
import random

import pytest
from PIL import Image

from colcal_quote.form import QuotationForm
from colcal_quote.models import QuotationMeta


@pytest.fixture
def meta():
    return QuotationMeta.generate(today=date(2025, 3, 14), rng=random.Random(7))


@pytest.fixture
def form(meta):
    return QuotationForm(meta=meta)


@pytest.fixture
def png_bytes():
    buffered = BytesIO()
    Image.new("RGB", (32, 16), "red").save(buffered, format="PNG")
    return buffered.getvalue()


@pytest.fixture
def priced_form(form):
    """One item, qty 2 at 50,000 plus 10,000 installation."""
    item = form.line_items[0]
    form.update_line_item(item.id, "name", "Solar Kit")
    form.update_line_item(item.id, "quantity", 2)
    form.update_line_item(item.id, "unit_price", 50000.0)
    form.set_installation_cost(10000.0)
    return form
