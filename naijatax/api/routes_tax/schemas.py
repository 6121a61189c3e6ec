"""
Shared Pydantic schemas for tax-related routes.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from naijatax.models.tax_models import TaxResult


class TaxCalculationRequest(BaseModel):
    """Raw calculator form values.

    Amounts are kept as text so the input parser can apply the form's own
    presence/positivity rules (numbers from JSON clients are accepted too).
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    income: str | None = Field(None, description="Annual income / profit in Naira")
    taxpayer_category: str = Field(
        "individual",
        description="individual, freelancer, small_company or large_company",
    )
    state_code: str = Field("default", description="lagos, abuja, kano or default")
    vat_amount: str | None = Field(None, description="VAT taxable amount in Naira (optional)")
    withholding_category: str = Field(
        "dividend", description="dividend, interest, rent or service"
    )


class TaxResultOut(BaseModel):
    """One tax calculation."""

    income: float
    taxpayer_category: str
    state_code: str
    state_allowance: float
    withholding_category: str
    annual_tax: float
    monthly_tax: float
    vat: float
    withholding_tax: float
    capital_gains_tax: float
    net_pay: float | None
    computed_at: str

    @classmethod
    def from_result(cls, result: TaxResult) -> TaxResultOut:
        # Decimal amounts coerce to float in lax mode
        return cls(**result.as_dict())


class HistoryOut(BaseModel):
    count: int
    items: list[TaxResultOut]


class ProgressiveTaxOut(BaseModel):
    amount: float
    tax: float
    marginal_rate_percent: float
    effective_rate_percent: float


class TaxBandOut(BaseModel):
    upper_limit: float | None  # None = unbounded
    rate_percent: float


class TaxReferenceOut(BaseModel):
    pit_bands: list[TaxBandOut]
    state_allowances: dict[str, float]
    withholding_rates_percent: dict[str, float]
    vat_rate_percent: float
    large_company_cit_rate_percent: float
    large_company_cgt_rate_percent: float
    options: dict[str, dict[str, str]]  # selector code -> display label


class MessageOut(BaseModel):
    message: str
