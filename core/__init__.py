"""
Core package: configuration, the target car catalog, and shared helpers.
No business logic lives here.
"""

from .config import CalculatorConfig, MAX_PROJECTION_MONTHS
from .schema import LAMBO_MODELS, LamboModel, get_model
from .utils import add_months, annual_to_monthly_rate, is_positive, round_half_away

__all__ = [
    "CalculatorConfig",
    "MAX_PROJECTION_MONTHS",
    "LAMBO_MODELS",
    "LamboModel",
    "get_model",
    "add_months",
    "annual_to_monthly_rate",
    "is_positive",
    "round_half_away",
]
