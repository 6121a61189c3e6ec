"""
History and Export Routes.

Handles the session history list and its CSV / PDF downloads.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from naijatax import metrics
from naijatax.api.dependencies import get_session_store
from naijatax.core.config import settings
from naijatax.services.csv_export import csv_filename, generate_history_csv
from naijatax.services.history import SessionStore, clear_history
from naijatax.services.pdf_service import PDFService

from .schemas import HistoryOut, MessageOut, TaxResultOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/history", response_model=HistoryOut)
async def get_history(store: SessionStore = Depends(get_session_store)):
    """Calculations made in this session, newest first."""
    history = store.state.history
    return {
        "count": len(history),
        "items": [TaxResultOut.from_result(result) for result in history],
    }


@router.delete("/history", response_model=MessageOut)
async def delete_history(store: SessionStore = Depends(get_session_store)):
    store.apply(clear_history)
    return {"message": "History cleared"}


@router.get("/history/csv")
async def download_history_csv(store: SessionStore = Depends(get_session_store)):
    """Download the whole history as CSV (header row only when empty)."""
    csv_data = generate_history_csv(store.state.history)
    metrics.export_record("csv")
    return Response(
        content=csv_data,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{csv_filename()}"'},
    )


@router.get("/summary/pdf")
async def download_summary_pdf(store: SessionStore = Depends(get_session_store)):
    """Download the most recent calculation as PDF (404 when there is none)."""
    state = store.state
    pdf_bytes = PDFService(state.language).generate_tax_summary_pdf(state.latest)
    metrics.export_record("pdf")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{settings.PDF_EXPORT_FILENAME}"'},
    )
