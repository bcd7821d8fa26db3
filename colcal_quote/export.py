from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from . import company
from .form import QuotationForm
from .preview import render_preview

try:
    from weasyprint import CSS, HTML
    WEASYPRINT_AVAILABLE = True
except (ImportError, OSError):
    WEASYPRINT_AVAILABLE = False

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate PDF. Please try again."
SUCCESS_MESSAGE = "Your quotation is ready to download."

PDF_CSS = """@page { size: A4; margin: 0; }
body { margin: 0; }
.quote { padding: 1.2cm 1.2cm; }
.quote .header, .quote .contact, .quote .payment, .quote .signoff { display: flex; }
thead { display: table-header-group; }
tr { page-break-inside: avoid !important; }
.summary, .value, .payment, .signoff, .footer { page-break-inside: avoid; }"""


class ExportStatus(enum.Enum):
    IDLE = "idle"
    GENERATING = "generating"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ExportResult:
    status: ExportStatus
    file_name: str
    message: str
    data: bytes | None = None

    @property
    def ok(self) -> bool:
        return self.status is ExportStatus.SUCCESS


def export_file_name(form: QuotationForm) -> str:
    return f"{company.BRAND}_Quotation_{form.meta.number.replace('/', '_')}.pdf"


def render_pdf(form: QuotationForm, logo_uri: str | None = None) -> bytes:
    if not WEASYPRINT_AVAILABLE:
        raise RuntimeError("WeasyPrint is not available")
    return HTML(string=render_preview(form, logo_uri)).write_pdf(stylesheets=[CSS(string=PDF_CSS)])


def export_pdf(form: QuotationForm, logo_uri: str | None = None, on_status=None) -> ExportResult:
    """
    Renders the quotation to a multi-page A4 PDF.

    ``on_status`` is called with each ExportStatus the export passes through,
    ending with IDLE. Any rendering error yields a FAILED result carrying only
    the generic failure message; no partial bytes are returned.
    """
    file_name = export_file_name(form)

    def _notify(status):
        if on_status is not None:
            on_status(status)

    _notify(ExportStatus.GENERATING)
    try:
        pdf_bytes = render_pdf(form, logo_uri)
    except Exception:
        logger.exception("PDF export failed for %s", form.meta.number)
        result = ExportResult(ExportStatus.FAILED, file_name, FAILURE_MESSAGE)
    else:
        logger.info("Exported %s (%d bytes)", file_name, len(pdf_bytes))
        result = ExportResult(ExportStatus.SUCCESS, file_name, SUCCESS_MESSAGE, pdf_bytes)
    _notify(result.status)
    _notify(ExportStatus.IDLE)
    return result
