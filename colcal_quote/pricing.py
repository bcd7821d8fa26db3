from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

import pandas as pd

from .company import VAT_RATE
from .models import LineItem

FRAME_COLUMNS = ["ID", "NAME", "DESCRIPTION", "QTY", "UNIT_PRICE", "LINE_TOTAL"]


@dataclass(frozen=True)
class Totals:
    subtotal: float
    installation: float
    tax: float
    total: float
    include_tax: bool


# --- Input coercion ---
def coerce_quantity(value) -> int:
    """Unparsable or zero quantities fall back to 1; fractions truncate."""
    num = pd.to_numeric(pd.Series([value], dtype="object"), errors="coerce").iloc[0]
    if pd.isna(num) or not math.isfinite(num) or int(num) == 0:
        return 1
    return int(num)


def coerce_price(value) -> float:
    num = pd.to_numeric(pd.Series([value], dtype="object"), errors="coerce").iloc[0]
    if pd.isna(num) or not math.isfinite(num) or num == 0:
        return 0.0
    return float(num)


# --- Calculations ---
def line_items_frame(items: Iterable[LineItem]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {"ID": i.id, "NAME": i.name, "DESCRIPTION": i.description, "QTY": i.quantity, "UNIT_PRICE": i.unit_price}
            for i in items
        ],
        columns=FRAME_COLUMNS[:-1],
    )
    for col in ["QTY", "UNIT_PRICE"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0).astype(float)
    df["LINE_TOTAL"] = df["QTY"] * df["UNIT_PRICE"]
    return df


def calculate_subtotal(items: Iterable[LineItem]) -> float:
    return float(line_items_frame(items)["LINE_TOTAL"].sum())


def calculate_tax(subtotal: float, include_tax: bool, rate: float = VAT_RATE) -> float:
    # Installation is never part of the tax base.
    if not include_tax:
        return 0.0
    return subtotal * rate


def calculate_totals(items: Iterable[LineItem], installation_cost: float, include_tax: bool) -> Totals:
    subtotal = calculate_subtotal(items)
    tax = calculate_tax(subtotal, include_tax)
    return Totals(
        subtotal=subtotal,
        installation=installation_cost,
        tax=tax,
        total=subtotal + installation_cost + tax,
        include_tax=include_tax,
    )


def format_currency(num) -> str:
    """Whole currency units with thousands separators, e.g. 126000 -> '126,000'."""
    if num is None or pd.isna(num):
        return "0"
    try:
        rounded = Decimal(str(num)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return "0"
    return f"{rounded:,}"
