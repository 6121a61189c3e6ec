"""Metrics facade.

Service code should ONLY call the semantic helpers here so we can change
backend freely.

Metrics:
- tax_calculations_total{category}        Successful tax summaries (unknown categories as "other")
- tax_validation_failures_total{field}    Inputs rejected by validation
- tax_exports_total{format}               CSV / PDF exports served
"""

from __future__ import annotations

import logging

from prometheus_client import Counter

from naijatax.models.tax_models import TaxpayerCategory

logger = logging.getLogger("metrics")

_TAX_CALCULATIONS = Counter(
    "tax_calculations_total", "Tax summaries computed", ["category"]
)
_VALIDATION_FAILURES = Counter(
    "tax_validation_failures_total", "Tax inputs rejected by validation", ["field"]
)
_EXPORTS = Counter("tax_exports_total", "History/summary exports served", ["format"])

_KNOWN_CATEGORIES = frozenset(c.value for c in TaxpayerCategory)


def category_label(category: str) -> str:
    """Label value for a taxpayer category; free text collapses to "other"."""
    return category if category in _KNOWN_CATEGORIES else "other"


def tax_calculation_record(category: str):
    """Record a completed tax summary."""
    label = category_label(category)
    _TAX_CALCULATIONS.labels(category=label).inc()
    logger.debug("metric tax_calculations_total[category=%s] += 1", label)


def validation_failure_record(field: str):
    """Record an input rejected before computation."""
    _VALIDATION_FAILURES.labels(field=field).inc()
    logger.debug("metric tax_validation_failures_total[field=%s] += 1", field)


def export_record(export_format: str):
    """Record a CSV or PDF export."""
    _EXPORTS.labels(format=export_format).inc()
    logger.debug("metric tax_exports_total[format=%s] += 1", export_format)


__all__ = [
    "category_label",
    "tax_calculation_record",
    "validation_failure_record",
    "export_record",
]
