"""
Lipid panel derivations and categories.

Every function here works on canonical mg/dL values. Unit conversion for
display happens in `units`, never in categorization.
"""
from enum import Enum
from typing import Optional

from .colors import SeverityColor

# Friedewald is not valid at or above this triglyceride level.
FRIEDEWALD_MAX_TRIGLYCERIDES = 400


def calculated_ldl(total: float, hdl: float, ldl_measured: Optional[float] = None,
                   triglycerides: Optional[float] = None) -> Optional[float]:
    """
    Measured LDL if present, otherwise the Friedewald estimate.

    Returns None when LDL cannot be determined (no triglycerides, or
    triglycerides >= 400 mg/dL). None means unavailable, never zero.
    """
    if ldl_measured is not None:
        return ldl_measured
    if triglycerides is None or triglycerides >= FRIEDEWALD_MAX_TRIGLYCERIDES:
        return None
    return total - hdl - triglycerides / 5.0


def non_hdl(total: float, hdl: float) -> float:
    return total - hdl


def total_hdl_ratio(total: float, hdl: float) -> float:
    """Total cholesterol / HDL, or 0 when HDL is not positive."""
    if hdl <= 0:
        return 0.0
    return total / hdl


class _LipidCategory(str, Enum):
    """Shared display behaviour; subclasses register hints and colors."""

    @property
    def label(self) -> str:
        return _LABELS.get(self.value, self.value.capitalize())

    @property
    def hint(self) -> str:
        return _HINTS[type(self)][self]

    @property
    def color(self) -> SeverityColor:
        return _COLORS[type(self)][self]


class TotalCholesterolCategory(_LipidCategory):
    DESIRABLE = 'desirable'
    BORDERLINE = 'borderline'
    HIGH = 'high'


class HDLCategory(_LipidCategory):
    # Higher is better.
    LOW = 'low'
    ACCEPTABLE = 'acceptable'
    OPTIMAL = 'optimal'


class LDLCategory(_LipidCategory):
    OPTIMAL = 'optimal'
    NEAR_OPTIMAL = 'nearOptimal'
    BORDERLINE = 'borderline'
    HIGH = 'high'
    VERY_HIGH = 'veryHigh'


class TriglyceridesCategory(_LipidCategory):
    NORMAL = 'normal'
    BORDERLINE = 'borderline'
    HIGH = 'high'
    VERY_HIGH = 'veryHigh'


class RatioCategory(str, Enum):
    OPTIMAL = 'optimal'
    BORDERLINE = 'borderline'
    HIGH = 'high'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _RATIO_DESCRIPTIONS[self]

    @property
    def color(self) -> SeverityColor:
        return _RATIO_COLORS[self]


_LABELS = {
    'nearOptimal': 'Near Optimal',
    'veryHigh': 'Very High',
}

# Keyed by category class first: members of different classes compare equal
# when their values match.
_HINTS = {
    TotalCholesterolCategory: {
        TotalCholesterolCategory.DESIRABLE: '< 200 mg/dL (< 5.2 mmol/L)',
        TotalCholesterolCategory.BORDERLINE: '200-239 mg/dL (5.2-6.2 mmol/L)',
        TotalCholesterolCategory.HIGH: '>= 240 mg/dL (>= 6.2 mmol/L)',
    },
    HDLCategory: {
        HDLCategory.LOW: '< 40 mg/dL (< 1.0 mmol/L)',
        HDLCategory.ACCEPTABLE: '40-59 mg/dL (1.0-1.5 mmol/L)',
        HDLCategory.OPTIMAL: '>= 60 mg/dL (>= 1.6 mmol/L)',
    },
    LDLCategory: {
        LDLCategory.OPTIMAL: '< 100 mg/dL (< 2.6 mmol/L)',
        LDLCategory.NEAR_OPTIMAL: '100-129 mg/dL (2.6-3.3 mmol/L)',
        LDLCategory.BORDERLINE: '130-159 mg/dL (3.4-4.1 mmol/L)',
        LDLCategory.HIGH: '160-189 mg/dL (4.1-4.9 mmol/L)',
        LDLCategory.VERY_HIGH: '>= 190 mg/dL (>= 4.9 mmol/L)',
    },
    TriglyceridesCategory: {
        TriglyceridesCategory.NORMAL: '< 150 mg/dL (< 1.7 mmol/L)',
        TriglyceridesCategory.BORDERLINE: '150-199 mg/dL (1.7-2.2 mmol/L)',
        TriglyceridesCategory.HIGH: '200-499 mg/dL (2.3-5.6 mmol/L)',
        TriglyceridesCategory.VERY_HIGH: '>= 500 mg/dL (>= 5.6 mmol/L)',
    },
}

_COLORS = {
    TotalCholesterolCategory: {
        TotalCholesterolCategory.DESIRABLE: SeverityColor.GREEN,
        TotalCholesterolCategory.BORDERLINE: SeverityColor.ORANGE,
        TotalCholesterolCategory.HIGH: SeverityColor.RED,
    },
    HDLCategory: {
        HDLCategory.LOW: SeverityColor.RED,
        HDLCategory.ACCEPTABLE: SeverityColor.ORANGE,
        HDLCategory.OPTIMAL: SeverityColor.GREEN,
    },
    LDLCategory: {
        LDLCategory.OPTIMAL: SeverityColor.GREEN,
        LDLCategory.NEAR_OPTIMAL: SeverityColor.GREEN,
        LDLCategory.BORDERLINE: SeverityColor.ORANGE,
        LDLCategory.HIGH: SeverityColor.RED,
        LDLCategory.VERY_HIGH: SeverityColor.RED,
    },
    TriglyceridesCategory: {
        TriglyceridesCategory.NORMAL: SeverityColor.GREEN,
        TriglyceridesCategory.BORDERLINE: SeverityColor.ORANGE,
        TriglyceridesCategory.HIGH: SeverityColor.RED,
        TriglyceridesCategory.VERY_HIGH: SeverityColor.RED,
    },
}

_RATIO_DESCRIPTIONS = {
    RatioCategory.OPTIMAL: 'Good cardiovascular health indicator',
    RatioCategory.BORDERLINE: 'Consider lifestyle modifications',
    RatioCategory.HIGH: 'Consult your healthcare provider',
}

_RATIO_COLORS = {
    RatioCategory.OPTIMAL: SeverityColor.GREEN,
    RatioCategory.BORDERLINE: SeverityColor.ORANGE,
    RatioCategory.HIGH: SeverityColor.RED,
}


def classify_total_cholesterol(value: float) -> TotalCholesterolCategory:
    if value < 200:
        return TotalCholesterolCategory.DESIRABLE
    if value < 240:
        return TotalCholesterolCategory.BORDERLINE
    return TotalCholesterolCategory.HIGH


def classify_hdl(value: float) -> HDLCategory:
    if value < 40:
        return HDLCategory.LOW
    if value < 60:
        return HDLCategory.ACCEPTABLE
    return HDLCategory.OPTIMAL


def classify_ldl(value: float) -> LDLCategory:
    if value < 100:
        return LDLCategory.OPTIMAL
    if value < 130:
        return LDLCategory.NEAR_OPTIMAL
    if value < 160:
        return LDLCategory.BORDERLINE
    if value < 190:
        return LDLCategory.HIGH
    return LDLCategory.VERY_HIGH


def classify_triglycerides(value: float) -> TriglyceridesCategory:
    if value < 150:
        return TriglyceridesCategory.NORMAL
    if value < 200:
        return TriglyceridesCategory.BORDERLINE
    if value < 500:
        return TriglyceridesCategory.HIGH
    return TriglyceridesCategory.VERY_HIGH


def classify_total_hdl_ratio(ratio: float) -> RatioCategory:
    if ratio < 3.5:
        return RatioCategory.OPTIMAL
    if ratio < 5.0:
        return RatioCategory.BORDERLINE
    return RatioCategory.HIGH
