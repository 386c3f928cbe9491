"""
Cholesterol and triglyceride unit conversion.

All lipid values are stored in mg/dL. mmol/L is an input/display concern only.
Cholesterol and triglycerides use different factors because their molar
masses differ.
"""
from enum import Enum

CHOLESTEROL_MGDL_PER_MMOL = 38.67
TRIGLYCERIDE_MGDL_PER_MMOL = 88.57


class CholesterolUnit(str, Enum):
    MGDL = 'mg/dL'
    MMOL = 'mmol/L'

    @property
    def factor(self) -> float:
        return 1.0 if self is CholesterolUnit.MGDL else CHOLESTEROL_MGDL_PER_MMOL

    def to_mgdl(self, value: float) -> float:
        return value * self.factor

    def from_mgdl(self, value: float) -> float:
        return value / self.factor


class TriglycerideUnit(str, Enum):
    MGDL = 'mg/dL'
    MMOL = 'mmol/L'

    @property
    def factor(self) -> float:
        return 1.0 if self is TriglycerideUnit.MGDL else TRIGLYCERIDE_MGDL_PER_MMOL

    def to_mgdl(self, value: float) -> float:
        return value * self.factor

    def from_mgdl(self, value: float) -> float:
        return value / self.factor


def to_canonical(value: float, unit) -> float:
    """Convert a value entered in `unit` to canonical mg/dL."""
    return unit.to_mgdl(value)


def from_canonical(value: float, unit) -> float:
    """Convert a canonical mg/dL value to `unit` for display."""
    return unit.from_mgdl(value)
