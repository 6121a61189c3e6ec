"""
Tax API Routes Module.

All routes are prefixed with /tax.

Sub-modules:
- calculator: Tax summary calculation, progressive tax helper, reference rates
- exports: Session history, CSV and PDF downloads
"""
from __future__ import annotations

from fastapi import APIRouter

from .calculator import router as calculator_router
from .exports import router as exports_router

# Main router with /tax prefix
router = APIRouter(prefix="/tax", tags=["tax"])

# Include all sub-routers
router.include_router(calculator_router)
router.include_router(exports_router)

__all__ = ["router"]
