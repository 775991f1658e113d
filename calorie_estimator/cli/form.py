"""
Calorie form model.

Raw field values as typed into the calculator form, cleaned up and
mapped to the domain input.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calorie_estimator.domain.calorie_intake.core.value_objects import CalorieInput


class CalorieForm(BaseModel):
    """
    Calculator form fields.

    Numbers stay as text: the estimator decides whether they parse.
    Blank fields become ``None`` and select values are lower-cased.

    Example:
        >>> form = CalorieForm(gender="Male ", age=" 30", weight="80", height="180",
        ...                    activity_level="moderate", goal="maintenance")
        >>> form.to_input().gender
        'male'
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    gender: Optional[str] = Field(None, description="male or female")
    age: Optional[Union[float, str]] = Field(None, description="Age in years")
    weight: Optional[Union[float, str]] = Field(None, description="Body weight")
    weight_unit: str = Field("kg", description="kg or lbs")
    height: Optional[Union[float, str]] = Field(None, description="Height")
    height_unit: str = Field("cm", description="cm or inches")
    body_fat_percentage: Optional[Union[float, str]] = Field(
        None, description="Body fat %, optional"
    )
    activity_level: Optional[str] = Field(None, description="Activity level")
    goal: Optional[str] = Field(None, description="Goal")

    @field_validator(
        "gender",
        "age",
        "weight",
        "height",
        "body_fat_percentage",
        "activity_level",
        "goal",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        """Treat empty or whitespace-only text as a missing field."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("gender", "weight_unit", "height_unit", "activity_level", "goal")
    @classmethod
    def lower_choice(cls, v: Optional[str]) -> Optional[str]:
        """Select values are matched case-insensitively."""
        if v is None:
            return v
        return v.lower()

    def to_input(self) -> CalorieInput:
        """Map the form onto the estimator input."""
        return CalorieInput(
            gender=self.gender,
            age=self.age,
            weight=self.weight,
            weight_unit=self.weight_unit,
            height=self.height,
            height_unit=self.height_unit,
            body_fat_percentage=self.body_fat_percentage,
            activity_level=self.activity_level,
            goal=self.goal,
        )
