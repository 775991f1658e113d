"""Calculation services for calorie intake."""

from .bmr_service import BMRService
from .estimator import CalorieEstimator, EstimateResult, estimate, lean_body_mass, parse_number
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "CalorieEstimator",
    "EstimateResult",
    "estimate",
    "lean_body_mass",
    "parse_number",
]
