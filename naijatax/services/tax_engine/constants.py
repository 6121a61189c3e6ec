"""Nigerian tax rates and lookup tables used by the engine.

All amounts are annual Naira. Tables are read-only mappings; lookups that miss
fall back to zero instead of erroring (see computations.resolve_*).
"""
from decimal import Decimal
from types import MappingProxyType

from naijatax.models.tax_models import (
    StateCode,
    TaxBand,
    TaxpayerCategory,
    WithholdingCategory,
)

INFINITY = Decimal("Infinity")

# Personal Income Tax (PIT) bands
# Applied to income AFTER the state allowance is removed
PIT_BANDS: tuple[TaxBand, ...] = (
    TaxBand(Decimal("800000"), Decimal("0.00")),     # First ₦800,000: 0%
    TaxBand(Decimal("3000000"), Decimal("0.15")),    # ₦800K-₦3M: 15%
    TaxBand(Decimal("12000000"), Decimal("0.18")),   # ₦3M-₦12M: 18%
    TaxBand(Decimal("25000000"), Decimal("0.21")),   # ₦12M-₦25M: 21%
    TaxBand(Decimal("50000000"), Decimal("0.23")),   # ₦25M-₦50M: 23%
    TaxBand(INFINITY, Decimal("0.25")),              # Above ₦50M: 25%
)

# State-level deductions subtracted before the PIT bands apply
STATE_ALLOWANCES = MappingProxyType({
    StateCode.LAGOS.value: Decimal("200000"),
    StateCode.ABUJA.value: Decimal("150000"),
    StateCode.KANO.value: Decimal("100000"),
    StateCode.DEFAULT.value: Decimal("0"),
})

# Withholding tax, charged on the full income
WHT_RATES = MappingProxyType({
    WithholdingCategory.DIVIDEND.value: Decimal("0.10"),
    WithholdingCategory.INTEREST.value: Decimal("0.10"),
    WithholdingCategory.RENT.value: Decimal("0.10"),
    WithholdingCategory.SERVICE.value: Decimal("0.05"),
})

VAT_RATE = Decimal("0.075")  # 7.5%

# Medium / large companies pay flat rates on the whole profit
LARGE_COMPANY_CIT_RATE = Decimal("0.34")
LARGE_COMPANY_CGT_RATE = Decimal("0.30")

MONTHS_PER_YEAR = 12

# Categories taxed on the PIT bands and entitled to a net pay figure
PERSONAL_CATEGORIES = frozenset({
    TaxpayerCategory.INDIVIDUAL.value,
    TaxpayerCategory.FREELANCER.value,
})
