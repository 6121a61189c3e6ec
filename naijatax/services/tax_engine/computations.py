"""Tax computation functions.

Pure computation logic for the Nigerian calculator: progressive PIT,
company flat rates, VAT, withholding tax, capital gains and net pay.
Nothing here touches history, exports or the network.
"""
import logging
import math
from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from naijatax.core.exceptions import (
    InvalidIncomeError,
    InvalidVATAmountError,
    TaxBandConfigurationError,
    ValidationError,
)
from naijatax.models.tax_models import TaxBand, TaxInput, TaxpayerCategory, TaxResult, code_value

from .constants import (
    LARGE_COMPANY_CGT_RATE,
    LARGE_COMPANY_CIT_RATE,
    MONTHS_PER_YEAR,
    PERSONAL_CATEGORIES,
    PIT_BANDS,
    STATE_ALLOWANCES,
    VAT_RATE,
    WHT_RATES,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def validate_bands(bands: Sequence[TaxBand]) -> None:
    """Raise TaxBandConfigurationError unless ``bands`` is a usable schedule.

    A usable schedule is non-empty, strictly increasing in upper limit, has
    rates in [0, 1] and ends with an unbounded band.
    """
    if not bands:
        raise TaxBandConfigurationError("schedule has no bands")
    previous = ZERO
    for index, band in enumerate(bands):
        if band.upper_limit.is_nan() or band.upper_limit <= previous:
            raise TaxBandConfigurationError(
                f"band {index} upper limit {band.upper_limit} is not above {previous}"
            )
        if not (ZERO <= band.rate <= Decimal("1")):
            raise TaxBandConfigurationError(f"band {index} rate {band.rate} outside [0, 1]")
        previous = band.upper_limit
    if not bands[-1].is_unbounded:
        raise TaxBandConfigurationError("last band must be unbounded")


def compute_progressive_tax(taxable_amount: Any, bands: Sequence[TaxBand] = PIT_BANDS) -> Decimal:
    """
    Apply a marginal band schedule to ``taxable_amount``.

    Each band taxes the slice of the amount between the previous band's upper
    limit and its own. Amounts at or below zero owe nothing.

    Args:
        taxable_amount: Amount after allowances (int, float or Decimal)
        bands: Ascending schedule; defaults to the PIT bands

    Returns:
        Total tax as Decimal
    """
    validate_bands(bands)
    amount = _as_decimal(taxable_amount)
    if amount <= 0:
        return ZERO

    tax = ZERO
    previous_limit = ZERO
    for band in bands:
        if amount <= previous_limit:
            break
        taxable_in_band = min(amount, band.upper_limit) - previous_limit
        tax += taxable_in_band * band.rate
        previous_limit = band.upper_limit
    return tax


def marginal_rate(taxable_amount: Any, bands: Sequence[TaxBand] = PIT_BANDS) -> Decimal:
    """Rate of the band containing ``taxable_amount`` (band limits are inclusive)."""
    validate_bands(bands)
    amount = _as_decimal(taxable_amount)
    for band in bands:
        if amount <= band.upper_limit:
            return band.rate
    return bands[-1].rate


def resolve_state_allowance(state_code: Any) -> Decimal:
    """State deduction for ``state_code``; unknown states get nothing."""
    return STATE_ALLOWANCES.get(_normalize_code(state_code), ZERO)


def resolve_withholding_rate(category: Any) -> Decimal:
    """WHT rate for ``category``; unknown categories are not withheld."""
    return WHT_RATES.get(_normalize_code(category), ZERO)


def compute_tax_summary(tax_input: TaxInput, *, now: datetime | None = None) -> TaxResult:
    """
    Compute every liability for one set of inputs.

    Steps:
    1. Validate income (and the VAT base when given)
    2. Remove the state allowance to get the taxable base
    3. Income tax: PIT bands for individuals/freelancers, 0 for small
       companies, 34% flat for large companies
    4. VAT 7.5% of the VAT base, WHT on income by category
    5. CGT: 30% for large companies, the PIT bands for everyone else
    6. Net pay for individuals/freelancers only

    Args:
        tax_input: The calculation inputs
        now: Timestamp to stamp on the result (defaults to current UTC time)

    Returns:
        Frozen TaxResult

    Raises:
        InvalidIncomeError / InvalidVATAmountError: bad numeric input
    """
    income = _validated_amount(tax_input.annual_income, InvalidIncomeError, required=True)
    vat_base = _validated_amount(tax_input.vat_taxable_amount, InvalidVATAmountError, required=False)

    category = _normalize_code(tax_input.taxpayer_category)
    state = _normalize_code(tax_input.state_code)
    wht_category = _normalize_code(tax_input.withholding_category)

    allowance = resolve_state_allowance(state)
    taxable_base = max(income - allowance, ZERO)

    annual_tax = ZERO
    monthly_tax = ZERO
    if category in PERSONAL_CATEGORIES:
        annual_tax = compute_progressive_tax(taxable_base)
        monthly_tax = annual_tax / MONTHS_PER_YEAR
    elif category == TaxpayerCategory.SMALL_COMPANY.value:
        # Small companies are exempt
        annual_tax = ZERO
        monthly_tax = ZERO
    elif category == TaxpayerCategory.LARGE_COMPANY.value:
        annual_tax = income * LARGE_COMPANY_CIT_RATE
        monthly_tax = annual_tax / MONTHS_PER_YEAR

    vat = vat_base * VAT_RATE if vat_base is not None else ZERO
    withholding_tax = income * resolve_withholding_rate(wht_category)

    if category == TaxpayerCategory.LARGE_COMPANY.value:
        capital_gains_tax = income * LARGE_COMPANY_CGT_RATE
    else:
        # Everyone else reuses the personal schedule on the same taxable base
        capital_gains_tax = compute_progressive_tax(taxable_base)

    net_pay = None
    if category in PERSONAL_CATEGORIES:
        net_pay = income - annual_tax - vat - withholding_tax

    logger.debug(
        "Tax summary computed category=%s state=%s income=%s annual_tax=%s",
        category, state, income, annual_tax,
    )
    return TaxResult(
        income=income,
        taxpayer_category=category,
        state_code=state,
        state_allowance=allowance,
        withholding_category=wht_category,
        annual_tax=annual_tax,
        monthly_tax=monthly_tax,
        vat=vat,
        withholding_tax=withholding_tax,
        capital_gains_tax=capital_gains_tax,
        net_pay=net_pay,
        computed_at=now or datetime.now(timezone.utc),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _normalize_code(code: Any) -> str:
    return code_value(code).strip().lower()


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _validated_amount(
    value: Any,
    error_cls: type[ValidationError],
    *,
    required: bool,
) -> Decimal | None:
    """Coerce a numeric input to Decimal, raising ``error_cls`` if unusable."""
    if value is None:
        if required:
            raise error_cls(value, "missing")
        return None
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise error_cls(value, "not a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise error_cls(value, "not finite")
    amount = _as_decimal(value)
    if not amount.is_finite():
        raise error_cls(value, "not finite")
    if amount < 0:
        raise error_cls(value, "negative")
    return amount
