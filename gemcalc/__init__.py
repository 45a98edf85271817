"""Standard Hebrew gematria with overflow-checked accumulation."""

from __future__ import annotations

from .gematria import (
    INT_BITS,
    INT_MAX,
    INT_MIN,
    GematriaOverflowError,
    checked_add,
    value,
)
from .table import FINAL_TO_BASE, WEIGHTS, weight_of

__version__ = "0.1.0"

__all__ = [
    "FINAL_TO_BASE",
    "GematriaOverflowError",
    "INT_BITS",
    "INT_MAX",
    "INT_MIN",
    "WEIGHTS",
    "checked_add",
    "value",
    "weight_of",
]
