"""Domain records for the tax engine.

Plain frozen dataclasses: the engine never mutates a record after building it.
Category and state codes are ``str`` enums so that both ``StateCode.LAGOS`` and
the bare string ``"lagos"`` work as lookup keys.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


class TaxpayerCategory(str, enum.Enum):
    INDIVIDUAL = "individual"  # PAYE employee
    FREELANCER = "freelancer"
    SMALL_COMPANY = "small_company"
    LARGE_COMPANY = "large_company"  # medium / large company


class StateCode(str, enum.Enum):
    LAGOS = "lagos"
    ABUJA = "abuja"
    KANO = "kano"
    DEFAULT = "default"


class WithholdingCategory(str, enum.Enum):
    DIVIDEND = "dividend"
    INTEREST = "interest"
    RENT = "rent"
    SERVICE = "service"  # professional service


def code_value(code: Any) -> str:
    """Return the plain string behind an enum member or raw code."""
    if isinstance(code, enum.Enum):
        return str(code.value)
    return str(code)


@dataclass(frozen=True)
class TaxBand:
    upper_limit: Decimal  # Decimal("Infinity") for the top band
    rate: Decimal         # marginal rate, e.g. Decimal("0.15")

    @property
    def is_unbounded(self) -> bool:
        return self.upper_limit.is_infinite()


@dataclass(frozen=True)
class TaxInput:
    annual_income: Any
    taxpayer_category: TaxpayerCategory | str = TaxpayerCategory.INDIVIDUAL
    state_code: StateCode | str = StateCode.DEFAULT
    vat_taxable_amount: Any = None
    withholding_category: WithholdingCategory | str = WithholdingCategory.DIVIDEND


@dataclass(frozen=True)
class TaxResult:
    """One calculation, as shown on screen and written to CSV/PDF."""

    income: Decimal
    taxpayer_category: str
    state_code: str
    state_allowance: Decimal
    withholding_category: str
    annual_tax: Decimal
    monthly_tax: Decimal
    vat: Decimal
    withholding_tax: Decimal
    capital_gains_tax: Decimal
    net_pay: Decimal | None
    computed_at: datetime

    @property
    def has_net_pay(self) -> bool:
        return self.net_pay is not None

    def as_dict(self) -> dict[str, Any]:
        """Field values with the timestamp as ISO text; amounts stay Decimal."""
        return {
            "income": self.income,
            "taxpayer_category": self.taxpayer_category,
            "state_code": self.state_code,
            "state_allowance": self.state_allowance,
            "withholding_category": self.withholding_category,
            "annual_tax": self.annual_tax,
            "monthly_tax": self.monthly_tax,
            "vat": self.vat,
            "withholding_tax": self.withholding_tax,
            "capital_gains_tax": self.capital_gains_tax,
            "net_pay": self.net_pay,
            "computed_at": self.computed_at.isoformat(),
        }
