from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field, fields
from datetime import date

from .company import DEFAULT_INTRO, DEFAULT_POSITION, QUOTE_PREFIX, QUOTE_SERIES


def new_item_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LineItem:
    id: str = field(default_factory=new_item_id)
    name: str = ""
    description: str = ""
    image: str = ""
    quantity: int = 1
    unit_price: float = 0.0


@dataclass(frozen=True)
class CustomerInfo:
    name: str = ""
    company: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""


@dataclass(frozen=True)
class SalesRepInfo:
    name: str = ""
    position: str = DEFAULT_POSITION
    phone: str = ""
    email: str = ""
    signature: str = ""


@dataclass(frozen=True)
class ProjectInfo:
    title: str = ""
    intro: str = DEFAULT_INTRO


@dataclass(frozen=True)
class PricingState:
    installation_cost: float = 0.0
    include_tax: bool = False


@dataclass(frozen=True)
class QuotationMeta:
    number: str
    date: str

    @classmethod
    def generate(cls, today: date | None = None, rng: random.Random | None = None) -> "QuotationMeta":
        """Quotation number COL/GEN/<year>/<0001-9999> and a dd/mm/yyyy date."""
        today = today or date.today()
        serial = (rng or random).randint(1, 9999)
        number = f"{QUOTE_PREFIX}/{QUOTE_SERIES}/{today.year}/{serial:04d}"
        return cls(number=number, date=today.strftime("%d/%m/%Y"))


def field_names(record_type) -> tuple[str, ...]:
    return tuple(f.name for f in fields(record_type))
