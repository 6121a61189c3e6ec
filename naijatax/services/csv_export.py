"""CSV export of the calculation history."""
from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP
from io import StringIO

from naijatax.core.config import settings
from naijatax.models.tax_models import TaxResult

CSV_HEADERS = [
    "Date", "State", "Type", "Income", "Annual Tax", "Monthly Tax",
    "VAT", "WHT", "CGT", "Net Pay",
]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _amount(value: Decimal | None) -> str:
    if value is None:
        return ""
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"


def _text(value: str) -> str:
    # Unknown state/category codes are free text; quote them RFC 4180 style
    if any(ch in value for ch in ',"\n'):
        return '"' + value.replace('"', '""') + '"'
    return value


def history_row(result: TaxResult) -> list[str]:
    return [
        result.computed_at.strftime(DATE_FORMAT),
        _text(result.state_code),
        _text(result.taxpayer_category),
        _amount(result.income),
        _amount(result.annual_tax),
        _amount(result.monthly_tax),
        _amount(result.vat),
        _amount(result.withholding_tax),
        _amount(result.capital_gains_tax),
        _amount(result.net_pay),
    ]


def generate_history_csv(history: Iterable[TaxResult]) -> bytes:
    """Serialize history (kept in the given order, newest first) to CSV bytes."""
    buf = StringIO()
    buf.write(",".join(CSV_HEADERS) + "\n")
    for result in history:
        buf.write(",".join(history_row(result)) + "\n")
    return buf.getvalue().encode("utf-8")


def csv_filename() -> str:
    return settings.CSV_EXPORT_FILENAME
