from __future__ import annotations

import logging
from dataclasses import replace

from .images import to_data_uri
from .models import (
    CustomerInfo,
    LineItem,
    PricingState,
    ProjectInfo,
    QuotationMeta,
    SalesRepInfo,
    field_names,
)
from .pricing import Totals, calculate_totals

logger = logging.getLogger(__name__)


class QuotationForm:
    """
    In-memory state of one quotation while the screen is open.

    Every edit swaps the owning record for a new one; records are frozen and
    the line items are held as a tuple, so a reference taken before an edit
    never changes underneath its holder.
    """

    def __init__(self, meta: QuotationMeta | None = None):
        self.meta = meta or QuotationMeta.generate()
        self.customer = CustomerInfo()
        self.sales_rep = SalesRepInfo()
        self.project = ProjectInfo()
        self.pricing = PricingState()
        self.line_items: tuple[LineItem, ...] = (LineItem(),)

    # --- Line items ---
    def line_item(self, item_id: str) -> LineItem | None:
        return next((i for i in self.line_items if i.id == item_id), None)

    def add_line_item(self) -> LineItem:
        existing = {i.id for i in self.line_items}
        item = LineItem()
        while item.id in existing:
            item = LineItem()
        self.line_items = self.line_items + (item,)
        logger.debug("Added line item %s (%d items)", item.id, len(self.line_items))
        return item

    def remove_line_item(self, item_id: str) -> None:
        remaining = tuple(i for i in self.line_items if i.id != item_id)
        if not remaining:
            return
        self.line_items = remaining
        logger.debug("Removed line item %s (%d items)", item_id, len(self.line_items))

    def update_line_item(self, item_id: str, field: str, value) -> None:
        # ids are assigned by add_line_item only
        if field == "id" or field not in field_names(LineItem):
            raise KeyError(field)
        self.line_items = tuple(
            replace(i, **{field: value}) if i.id == item_id else i for i in self.line_items
        )

    def attach_line_item_image(self, item_id: str, upload) -> None:
        self.update_line_item(item_id, "image", to_data_uri(upload))

    def clear_line_item_image(self, item_id: str) -> None:
        self.update_line_item(item_id, "image", "")

    # --- Records ---
    def update_customer(self, field: str, value: str) -> None:
        self.customer = self._replace_field(self.customer, field, value)

    def update_sales_rep(self, field: str, value: str) -> None:
        self.sales_rep = self._replace_field(self.sales_rep, field, value)

    def update_project(self, field: str, value: str) -> None:
        self.project = self._replace_field(self.project, field, value)

    def attach_signature(self, upload) -> None:
        self.update_sales_rep("signature", to_data_uri(upload))

    def clear_signature(self) -> None:
        self.update_sales_rep("signature", "")

    @staticmethod
    def _replace_field(record, field, value):
        if field not in field_names(type(record)):
            raise KeyError(field)
        return replace(record, **{field: value})

    # --- Pricing ---
    def set_installation_cost(self, value: float) -> None:
        self.pricing = replace(self.pricing, installation_cost=value)

    def set_include_tax(self, flag: bool) -> None:
        self.pricing = replace(self.pricing, include_tax=bool(flag))

    def totals(self) -> Totals:
        return calculate_totals(self.line_items, self.pricing.installation_cost, self.pricing.include_tax)
