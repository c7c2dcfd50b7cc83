"""User model and body-mass helpers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DEFAULT_WEIGHT_GRAMS = 70000
DEFAULT_HEIGHT_CM = 170


class BMIClass(str, Enum):
    """WHO body-mass index categories."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESITY_I = "Obesity class I"
    OBESITY_II = "Obesity class II"
    OBESITY_III = "Obesity class III"


def calculate_bmi(weight_grams: int, height_cm: int) -> float:
    """Body-mass index from grams and centimetres, rounded to one decimal."""
    weight_kg = weight_grams / 1000
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def bmi_classification(bmi: float) -> BMIClass:
    """Map a BMI value to its category."""
    if bmi < 18.5:
        return BMIClass.UNDERWEIGHT
    if bmi < 25:
        return BMIClass.NORMAL
    if bmi < 30:
        return BMIClass.OVERWEIGHT
    if bmi < 35:
        return BMIClass.OBESITY_I
    if bmi < 40:
        return BMIClass.OBESITY_II
    return BMIClass.OBESITY_III


@dataclass
class User:
    """A registered user and their body measurements."""

    username: str
    full_name: str | None = None
    age: int | None = None
    weight: int = DEFAULT_WEIGHT_GRAMS  # grams
    height: int = DEFAULT_HEIGHT_CM  # cm
    id: int | None = None
    created_at: datetime | None = None

    @property
    def bmi(self) -> float:
        return calculate_bmi(self.weight, self.height)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        bmi = self.bmi
        return {
            "id": self.id,
            "username": self.username,
            "fullName": self.full_name,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "bmi": bmi,
            "bmiClassification": bmi_classification(bmi).value,
        }
