"""
Calculator Routes.

Handles tax summary calculation, the progressive-tax helper and the
reference rate tables.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from naijatax.api.dependencies import get_session_store
from naijatax.core.exceptions import InvalidIncomeError
from naijatax.services.history import SessionStore
from naijatax.services.input_parser import parse_amount
from naijatax.services.localization import STATE_LABELS, TAXPAYER_LABELS, WHT_LABELS
from naijatax.services.tax_engine import (
    LARGE_COMPANY_CGT_RATE,
    LARGE_COMPANY_CIT_RATE,
    PIT_BANDS,
    STATE_ALLOWANCES,
    VAT_RATE,
    WHT_RATES,
    compute_progressive_tax,
    marginal_rate,
)

from .schemas import (
    ProgressiveTaxOut,
    TaxBandOut,
    TaxCalculationRequest,
    TaxReferenceOut,
    TaxResultOut,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _percent(rate: Decimal) -> float:
    return float(rate * 100)


@router.post("/calculate", response_model=TaxResultOut)
async def calculate_tax(
    payload: TaxCalculationRequest,
    store: SessionStore = Depends(get_session_store),
):
    """
    Calculate annual/monthly income tax, VAT, WHT, CGT and net pay.

    The result is added to the top of the session history.
    Invalid income or VAT amounts return 400 with a localized message.
    """
    result = store.calculate(
        payload.income,
        taxpayer_category=payload.taxpayer_category,
        state_code=payload.state_code,
        vat_amount=payload.vat_amount,
        withholding_category=payload.withholding_category,
    )
    return TaxResultOut.from_result(result)


@router.get("/progressive", response_model=ProgressiveTaxOut)
async def progressive_tax(
    amount: float = Query(..., ge=0, description="Taxable amount in Naira (after allowances)"),
):
    """Apply the PIT bands to an amount that already has allowances removed.

    Non-finite or oversized amounts return 400 like the calculator form.
    """
    taxable = parse_amount(amount, InvalidIncomeError, required=True)
    tax = compute_progressive_tax(taxable)
    effective = (tax / taxable * 100) if taxable > 0 else Decimal("0")
    return {
        "amount": amount,
        "tax": float(tax),
        "marginal_rate_percent": _percent(marginal_rate(taxable)),
        "effective_rate_percent": float(effective.quantize(Decimal("0.01"))),
    }


@router.get("/reference", response_model=TaxReferenceOut)
async def tax_reference():
    """Bands, allowances and flat rates the calculator uses."""
    return {
        "pit_bands": [
            TaxBandOut(
                upper_limit=None if band.is_unbounded else float(band.upper_limit),
                rate_percent=_percent(band.rate),
            )
            for band in PIT_BANDS
        ],
        "state_allowances": {code: float(amount) for code, amount in STATE_ALLOWANCES.items()},
        "withholding_rates_percent": {code: _percent(rate) for code, rate in WHT_RATES.items()},
        "vat_rate_percent": _percent(VAT_RATE),
        "large_company_cit_rate_percent": _percent(LARGE_COMPANY_CIT_RATE),
        "large_company_cgt_rate_percent": _percent(LARGE_COMPANY_CGT_RATE),
        "options": {
            "taxpayer_category": dict(TAXPAYER_LABELS),
            "state_code": dict(STATE_LABELS),
            "withholding_category": dict(WHT_LABELS),
        },
    }
