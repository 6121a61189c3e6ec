"""Turn raw form values into a TaxInput.

Form fields arrive as strings (or numbers from JSON clients). Presence and
non-negativity are checked here so the user gets the same message the form
shows; the engine repeats the numeric checks on whatever it receives.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from naijatax.core.exceptions import InvalidIncomeError, InvalidVATAmountError, ValidationError
from naijatax.models.tax_models import TaxInput

# Ten trillion Naira; kobo survives a JSON float round trip below this
MAX_AMOUNT = Decimal("1e13")


def parse_amount(
    raw: Any,
    error_cls: type[ValidationError],
    *,
    required: bool,
) -> Decimal | None:
    """Parse one amount field.

    Empty input is "missing" (an error when ``required``, else ``None``).
    Thousands separators are accepted ("1,000,000"). Amounts of MAX_AMOUNT
    or more are rejected as "too large".
    """
    if raw is None:
        if required:
            raise error_cls(raw, "missing")
        return None
    if isinstance(raw, bool):
        raise error_cls(raw, "not a number")
    if isinstance(raw, (int, Decimal)):
        value = Decimal(raw)
    elif isinstance(raw, float):
        value = Decimal(str(raw))
    else:
        text = str(raw).strip().replace(",", "").replace("₦", "")
        if not text:
            if required:
                raise error_cls(raw, "missing")
            return None
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise error_cls(raw, "not a number") from exc
    if not value.is_finite():
        raise error_cls(raw, "not finite")
    if value < 0:
        raise error_cls(raw, "negative")
    if value >= MAX_AMOUNT:
        raise error_cls(raw, "too large")
    return value


def _code(raw: Any, default: str) -> str:
    text = "" if raw is None else str(raw).strip().lower()
    return text or default


def parse_tax_input(
    income: Any,
    taxpayer_category: Any = "individual",
    state_code: Any = "default",
    vat_amount: Any = None,
    withholding_category: Any = "dividend",
) -> TaxInput:
    """Build a TaxInput from raw form values.

    Raises:
        InvalidIncomeError: income empty, non-numeric, negative or too large
        InvalidVATAmountError: VAT given but non-numeric or negative
    """
    return TaxInput(
        annual_income=parse_amount(income, InvalidIncomeError, required=True),
        taxpayer_category=_code(taxpayer_category, "individual"),
        state_code=_code(state_code, "default"),
        vat_taxable_amount=parse_amount(vat_amount, InvalidVATAmountError, required=False),
        withholding_category=_code(withholding_category, "dividend"),
    )
