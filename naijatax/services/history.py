"""
Session state and calculation history.

SessionState is immutable; the transition functions return a new state.
SessionStore is the one mutable holder the API/CLI keeps per process.

Single Responsibility: session bookkeeping (no computation, no rendering)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Callable

from naijatax import metrics
from naijatax.core.config import settings
from naijatax.core.exceptions import ValidationError
from naijatax.models.tax_models import TaxResult
from naijatax.services.input_parser import parse_tax_input
from naijatax.services.localization import next_language, normalize_language
from naijatax.services.tax_engine import compute_tax_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    history: tuple[TaxResult, ...] = ()  # newest first
    language: str = "en"
    dark_mode: bool = False

    @property
    def latest(self) -> TaxResult | None:
        return self.history[0] if self.history else None


# ---------------------------------------------------------------------------
# Pure transitions
# ---------------------------------------------------------------------------

def record_result(state: SessionState, result: TaxResult) -> SessionState:
    return replace(state, history=(result, *state.history))


def clear_history(state: SessionState) -> SessionState:
    return replace(state, history=())


def set_language(state: SessionState, language: str) -> SessionState:
    return replace(state, language=normalize_language(language))


def toggle_language(state: SessionState) -> SessionState:
    return replace(state, language=next_language(state.language))


def toggle_theme(state: SessionState) -> SessionState:
    return replace(state, dark_mode=not state.dark_mode)


# ---------------------------------------------------------------------------
# Mutable holder
# ---------------------------------------------------------------------------

class SessionStore:
    """Owns the current SessionState for one in-memory session."""

    def __init__(self, state: SessionState | None = None):
        self._state = state or SessionState(language=settings.DEFAULT_LANGUAGE)

    @property
    def state(self) -> SessionState:
        return self._state

    def apply(self, transition: Callable[..., SessionState], *args: Any) -> SessionState:
        self._state = transition(self._state, *args)
        return self._state

    def calculate(
        self,
        income: Any,
        taxpayer_category: Any = "individual",
        state_code: Any = "default",
        vat_amount: Any = None,
        withholding_category: Any = "dividend",
        *,
        now: datetime | None = None,
    ) -> TaxResult:
        """Parse raw form values, compute, and push the result onto history.

        On ValidationError nothing is recorded and the error propagates.
        """
        try:
            tax_input = parse_tax_input(
                income,
                taxpayer_category=taxpayer_category,
                state_code=state_code,
                vat_amount=vat_amount,
                withholding_category=withholding_category,
            )
            result = compute_tax_summary(tax_input, now=now)
        except ValidationError as exc:
            metrics.validation_failure_record(exc.field)
            logger.info("Rejected tax input field=%s reason=%s", exc.field, exc.details.get("reason"))
            raise
        self.apply(record_result, result)
        metrics.tax_calculation_record(result.taxpayer_category)
        logger.info(
            "Recorded tax calculation category=%s state=%s history_size=%d",
            result.taxpayer_category, result.state_code, len(self._state.history),
        )
        return result

    def reset(self) -> None:
        self._state = SessionState(language=settings.DEFAULT_LANGUAGE)
