"""Custom exception hierarchy for NaijaTax.

Every error the calculator raises on purpose derives from NaijaTaxException,
so callers (the HTTP layer, the CLI) can catch one type and render it.

Error codes follow pattern: [CATEGORY][NUMBER]
- TAX: Tax input / computation errors (300-399)
- EXP: Export errors (400-499)
- SES: Session / preference errors (500-599)

Messages that end up in front of a user also carry a ``message_key`` so the
caller can swap in the localized string for the active language.
"""

from __future__ import annotations

from typing import Any


class NaijaTaxException(Exception):
    """Base exception for all NaijaTax application errors."""

    message_key: str | None = None

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with user-friendly message and metadata.

        Args:
            message: User-friendly error message
            code: Unique error code (e.g., "TAX300")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self, message: str | None = None) -> dict[str, Any]:
        """Convert exception to API response format.

        ``message`` overrides the stored message (used for localization).
        """
        return {
            "error": {
                "message": message or self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# TAX INPUT / COMPUTATION ERRORS (TAX300-399)
# ============================================================================

class TaxError(NaijaTaxException):
    """Base class for tax input and computation errors."""
    pass


class ValidationError(TaxError):
    """Input rejected before any computation happens.

    No result is produced and nothing is recorded in history.
    """

    message_key = "error_invalid_input"

    def __init__(
        self,
        field: str,
        value: Any = None,
        reason: str | None = None,
        code: str = "TAX300",
    ):
        message = f"Please enter a valid positive number for {field}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            code=code,
            status_code=400,
            details={"field": field, "value": None if value is None else str(value), "reason": reason},
        )
        self.field = field


class InvalidIncomeError(ValidationError):
    """Income is missing, non-numeric, non-finite or negative."""

    def __init__(self, value: Any = None, reason: str | None = None):
        super().__init__(field="income", value=value, reason=reason, code="TAX300")


class InvalidVATAmountError(ValidationError):
    """A VAT taxable amount was supplied but is non-numeric, non-finite or negative."""

    def __init__(self, value: Any = None, reason: str | None = None):
        super().__init__(field="vat_taxable_amount", value=value, reason=reason, code="TAX301")


class TaxBandConfigurationError(TaxError):
    """A progressive band schedule is malformed (not strictly increasing, bad rate)."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid tax band schedule: {reason}",
            code="TAX310",
            status_code=500,
            details={"reason": reason},
        )


# ============================================================================
# EXPORT ERRORS (EXP400-499)
# ============================================================================

class ExportError(NaijaTaxException):
    """Base class for CSV/PDF export errors."""
    pass


class NoResultToExportError(ExportError):
    """Export requested before any calculation was made."""

    message_key = "error_nothing_to_export"

    def __init__(self, export_format: str = "pdf"):
        super().__init__(
            message="Nothing to export yet. Run a calculation first.",
            code="EXP400",
            status_code=404,
            details={"format": export_format},
        )


# ============================================================================
# SESSION ERRORS (SES500-599)
# ============================================================================

class SessionError(NaijaTaxException):
    """Base class for session preference errors."""
    pass


class UnsupportedLanguageError(SessionError):
    """Requested display language has no translation table."""

    def __init__(self, language: str, supported: tuple[str, ...]):
        super().__init__(
            message=f"Unsupported language '{language}'. Choose one of: {', '.join(supported)}",
            code="SES500",
            status_code=400,
            details={"language": language, "supported": list(supported)},
        )
