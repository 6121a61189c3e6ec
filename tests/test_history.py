from decimal import Decimal

import pytest

from naijatax.core.exceptions import InvalidIncomeError, UnsupportedLanguageError
from naijatax.models.tax_models import TaxInput
from naijatax.services.history import (
    SessionState,
    clear_history,
    record_result,
    set_language,
    toggle_language,
    toggle_theme,
)
from naijatax.services.tax_engine import compute_tax_summary


def _result(income):
    return compute_tax_summary(TaxInput(annual_income=income))


def test_record_result_is_newest_first_and_pure():
    empty = SessionState()
    first = record_result(empty, _result(1_000))
    second = record_result(first, _result(2_000))

    assert empty.history == ()
    assert [r.income for r in first.history] == [Decimal("1000")]
    assert [r.income for r in second.history] == [Decimal("2000"), Decimal("1000")]
    assert second.latest.income == Decimal("2000")


def test_latest_is_none_when_empty():
    assert SessionState().latest is None


def test_clear_history_keeps_preferences():
    state = record_result(SessionState(language="pg", dark_mode=True), _result(5))
    cleared = clear_history(state)
    assert cleared.history == ()
    assert cleared.language == "pg"
    assert cleared.dark_mode is True


def test_language_transitions():
    state = SessionState()
    assert toggle_language(state).language == "pg"
    assert toggle_language(toggle_language(state)).language == "en"
    assert set_language(state, " PG ").language == "pg"
    with pytest.raises(UnsupportedLanguageError):
        set_language(state, "fr")


def test_theme_toggle():
    state = SessionState()
    assert toggle_theme(state).dark_mode is True
    assert toggle_theme(toggle_theme(state)).dark_mode is False


def test_store_calculate_records(session_store, fixed_now):
    result = session_store.calculate("1000000", state_code="lagos", now=fixed_now)
    assert result.net_pay == Decimal("900000")
    assert session_store.state.latest is result
    session_store.calculate("2000000")
    assert len(session_store.state.history) == 2
    assert session_store.state.history[1] is result


def test_store_rejects_without_recording(session_store):
    with pytest.raises(InvalidIncomeError):
        session_store.calculate("-10")
    assert session_store.state.history == ()


def test_store_reset(session_store):
    session_store.calculate("10")
    session_store.apply(toggle_theme)
    session_store.reset()
    assert session_store.state.history == ()
    assert session_store.state.dark_mode is False
