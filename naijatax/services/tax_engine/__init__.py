"""
Tax Engine.

Stateless calculation core. Callers build a TaxInput, call
compute_tax_summary and own whatever they do with the TaxResult.

Sub-modules:
- constants: bands, allowances, withholding and flat rates
- computations: progressive tax, summary, table lookups
"""
from .computations import (
    compute_progressive_tax,
    compute_tax_summary,
    marginal_rate,
    resolve_state_allowance,
    resolve_withholding_rate,
    validate_bands,
)
from .constants import (
    LARGE_COMPANY_CGT_RATE,
    LARGE_COMPANY_CIT_RATE,
    PIT_BANDS,
    STATE_ALLOWANCES,
    VAT_RATE,
    WHT_RATES,
)

__all__ = [
    "compute_progressive_tax",
    "compute_tax_summary",
    "marginal_rate",
    "resolve_state_allowance",
    "resolve_withholding_rate",
    "validate_bands",
    "PIT_BANDS",
    "STATE_ALLOWANCES",
    "WHT_RATES",
    "VAT_RATE",
    "LARGE_COMPANY_CIT_RATE",
    "LARGE_COMPANY_CGT_RATE",
]
