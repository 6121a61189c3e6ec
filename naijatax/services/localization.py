"""Display strings for English and Nigerian Pidgin.

Presentation only: nothing in the tax engine reads these tables.
"""
from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType

from naijatax.core.config import SUPPORTED_LANGUAGES
from naijatax.core.exceptions import UnsupportedLanguageError

FALLBACK_LANGUAGE = "en"

TRANSLATIONS = MappingProxyType({
    "en": MappingProxyType({
        "title": "🇳🇬 Nigeria Tax Calculator",
        "select_state": "Select State",
        "taxpayer_type": "Taxpayer Type",
        "income": "Annual income / profit (₦)",
        "vat": "VAT taxable amount (₦)",
        "wht": "Withholding Tax Type",
        "calculate": "Calculate",
        "export_csv": "Export CSV",
        "export_pdf": "Export PDF",
        "net_pay": "Net Pay",
        "annual_tax": "Annual Income Tax",
        "monthly_pay": "Monthly PAYE Estimate",
        "vat_amount": "VAT (7.5%)",
        "wht_amount": "Withholding Tax",
        "cgt_amount": "Capital Gains Tax",
        "history": "Calculation History",
        "dark_mode": "Dark Mode",
        "light_mode": "Light Mode",
        "error_invalid_input": "Please enter a valid positive number",
        "error_nothing_to_export": "Nothing to export yet. Run a calculation first.",
    }),
    "pg": MappingProxyType({
        "title": "🇳🇬 Naija Tax Calculator",
        "select_state": "Choose State",
        "taxpayer_type": "Wetin You dey Pay Tax For",
        "income": "How Much You Dey Earn (₦)",
        "vat": "VAT Amount (₦)",
        "wht": "Wetin Tax Cover",
        "calculate": "Calculate",
        "export_csv": "Download CSV",
        "export_pdf": "Download PDF",
        "net_pay": "Wetin You Go Take Home",
        "annual_tax": "Total Tax for Year",
        "monthly_pay": "Monthly Tax",
        "vat_amount": "VAT (7.5%)",
        "wht_amount": "Withholding Tax",
        "cgt_amount": "Capital Gains Tax",
        "history": "Past Calculation",
        "dark_mode": "Dark Mode",
        "light_mode": "Light Mode",
        "error_invalid_input": "Abeg enter correct positive number",
        "error_nothing_to_export": "Nothing dey to download. Calculate first.",
    }),
})

# Labels for the category and state selectors
TAXPAYER_LABELS = MappingProxyType({
    "individual": "PAYE Employee",
    "freelancer": "Freelancer",
    "small_company": "Small Company",
    "large_company": "Medium / Large Company",
})

STATE_LABELS = MappingProxyType({
    "lagos": "Lagos",
    "abuja": "Abuja",
    "kano": "Kano",
    "default": "Other",
})

WHT_LABELS = MappingProxyType({
    "dividend": "Dividend (10%)",
    "interest": "Interest (10%)",
    "rent": "Rent (10%)",
    "service": "Professional Service (5%)",
})


def normalize_language(language: str | None) -> str:
    """Return a supported language code or raise UnsupportedLanguageError."""
    code = (language or "").strip().lower()
    if code not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(code, SUPPORTED_LANGUAGES)
    return code


def translate(key: str, language: str | None = FALLBACK_LANGUAGE) -> str:
    """Look up ``key`` for ``language``.

    Unknown languages fall back to English, unknown keys to the key itself.
    """
    table = TRANSLATIONS.get((language or "").lower(), TRANSLATIONS[FALLBACK_LANGUAGE])
    if key in table:
        return table[key]
    return TRANSLATIONS[FALLBACK_LANGUAGE].get(key, key)


def option_label(labels: Mapping[str, str], code: str) -> str:
    """Display label for a selector code; unknown codes are shown as-is."""
    return labels.get(code, code)


def next_language(language: str) -> str:
    """Language the toggle switches to (en <-> pg)."""
    return "pg" if language == "en" else "en"


def format_naira(amount: Decimal | None, placeholder: str = "N/A") -> str:
    if amount is None:
        return placeholder
    rounded = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"₦{rounded:,.2f}"
