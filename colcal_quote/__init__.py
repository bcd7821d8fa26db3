from .form import QuotationForm
from .models import CustomerInfo, LineItem, PricingState, ProjectInfo, QuotationMeta, SalesRepInfo
from .pricing import Totals, calculate_totals, format_currency

__all__ = [
    "CustomerInfo",
    "LineItem",
    "PricingState",
    "ProjectInfo",
    "QuotationForm",
    "QuotationMeta",
    "SalesRepInfo",
    "Totals",
    "calculate_totals",
    "format_currency",
]
