from __future__ import annotations

import logging
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from naijatax.core.config import settings
from naijatax.core.exceptions import NoResultToExportError
from naijatax.models.tax_models import TaxResult
from naijatax.services.localization import STATE_LABELS, TAXPAYER_LABELS, format_naira, option_label, translate

logger = logging.getLogger(__name__)

PDF_TITLE = "Nigeria Tax Calculation Summary"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


class PDFService:
    def __init__(self, language: str | None = None):
        self.language = language or settings.DEFAULT_LANGUAGE

    def summary_lines(self, result: TaxResult) -> list[str]:
        """Body lines in print order: date, type, state, income, allowance,
        annual tax, monthly estimate, VAT, withholding, capital gains, net pay.

        Net pay is left out for company categories.
        """
        t = lambda key: translate(key, self.language)  # noqa: E731
        lines = [
            f"Date: {result.computed_at.strftime(DATE_FORMAT).strip()}",
            f"{t('taxpayer_type')}: {option_label(TAXPAYER_LABELS, result.taxpayer_category)}",
            f"State: {option_label(STATE_LABELS, result.state_code)}",
            f"Annual Income: {format_naira(result.income)}",
            f"State Allowance: {format_naira(result.state_allowance)}",
            f"{t('annual_tax')}: {format_naira(result.annual_tax)}",
            f"{t('monthly_pay')}: {format_naira(result.monthly_tax)}",
            f"{t('vat_amount')}: {format_naira(result.vat)}",
            f"{t('wht_amount')}: {format_naira(result.withholding_tax)}",
            f"{t('cgt_amount')}: {format_naira(result.capital_gains_tax)}",
        ]
        if result.has_net_pay:
            lines.append(f"{t('net_pay')}: {format_naira(result.net_pay)}")
        return lines

    def generate_tax_summary_pdf(self, result: TaxResult | None) -> bytes:
        """Render one result as a single-page A4 PDF and return the bytes."""
        if result is None:
            raise NoResultToExportError("pdf")

        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=A4)
        c.setTitle(PDF_TITLE)
        c.setFont("Helvetica-Bold", 16)
        c.drawString(40, 800, PDF_TITLE)
        c.setFont("Helvetica", 12)
        y = 770
        for line in self.summary_lines(result):
            c.drawString(40, y, line)
            y -= 20
        # Watermark (diagonal) if enabled
        if settings.PDF_WATERMARK_ENABLED:
            c.saveState()
            c.setFont("Helvetica", 60)
            c.setFillColorRGB(0.7, 0.85, 1.0)
            c.translate(300, 400)
            c.rotate(30)
            c.drawString(-200, 0, settings.PDF_WATERMARK_TEXT[:30])
            c.restoreState()
        c.setFont("Helvetica-Oblique", 9)
        c.drawString(
            40,
            y - 10,
            "Estimates only. Consult a licensed tax professional before filing.",
        )
        c.showPage()
        c.save()
        pdf_bytes = buf.getvalue()
        logger.info("Generated tax summary PDF (%d bytes) lang=%s", len(pdf_bytes), self.language)
        return pdf_bytes
