"""Shared fixtures for calorie estimator tests."""

import pytest
import structlog

from calorie_estimator.domain.calorie_intake.core.value_objects import (
    ActivityLevel,
    CalorieInput,
    Gender,
    Goal,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure done by the code under test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def male_input() -> CalorieInput:
    """Male, 30y, 80 kg, 180 cm, moderate activity, maintenance."""
    return CalorieInput(
        gender=Gender.MALE,
        age=30,
        weight=80.0,
        height=180.0,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.MAINTENANCE,
    )


@pytest.fixture
def female_lean_input() -> CalorieInput:
    """Female, 25y, 50 kg, 160 cm, 25% body fat, sedentary, fat loss."""
    return CalorieInput(
        gender=Gender.FEMALE,
        age=25,
        weight=50.0,
        height=160.0,
        body_fat_percentage=25.0,
        activity_level=ActivityLevel.SEDENTARY,
        goal=Goal.FAT_LOSS,
    )
