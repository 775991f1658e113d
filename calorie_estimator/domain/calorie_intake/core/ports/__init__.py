"""Ports for calorie intake calculations."""

from .calculators import IBMRCalculator, ITDEECalculator

__all__ = ["IBMRCalculator", "ITDEECalculator"]
