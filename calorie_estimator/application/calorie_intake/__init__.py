"""Calorie intake use cases."""

from .estimate_calories import EstimateCaloriesCommand, EstimateCaloriesHandler

__all__ = ["EstimateCaloriesCommand", "EstimateCaloriesHandler"]
