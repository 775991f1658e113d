"""Calorie intake domain: BMR, TDEE and goal-adjusted recommendations."""
