"""
Fractional pulse pressure categories and BP-aware interpretation.
"""
from enum import Enum

from .blood_pressure import BPCategory
from .colors import SeverityColor

FPP_ELEVATED_THRESHOLD = 0.40
FPP_HIGH_THRESHOLD = 0.50


class FPPCategory(str, Enum):
    NORMAL = 'normal'
    ELEVATED = 'elevated'
    HIGH = 'high'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _FPP_DESCRIPTIONS[self]

    @property
    def color(self) -> SeverityColor:
        return _FPP_COLORS[self]


_FPP_DESCRIPTIONS = {
    FPPCategory.NORMAL: '< 0.40 - Good vascular health',
    FPPCategory.ELEVATED: '0.40-0.50 - Moderate arterial stiffness',
    FPPCategory.HIGH: '> 0.50 - Increased arterial stiffness',
}

_FPP_COLORS = {
    FPPCategory.NORMAL: SeverityColor.GREEN,
    FPPCategory.ELEVATED: SeverityColor.ORANGE,
    FPPCategory.HIGH: SeverityColor.RED,
}


def classify_fpp(fpp: float) -> FPPCategory:
    if fpp < FPP_ELEVATED_THRESHOLD:
        return FPPCategory.NORMAL
    if fpp < FPP_HIGH_THRESHOLD:
        return FPPCategory.ELEVATED
    return FPPCategory.HIGH


def interpret_fpp(fpp: float, bp_category: BPCategory) -> str:
    """
    Combine the fPP category with the BP category into one narrative.

    Severe BP (stage 2 or crisis) takes clinical priority: the message is
    about blood pressure and fPP is only mentioned as secondary. Stage 1 gets
    a note appended about the co-existing elevated BP.
    """
    category = classify_fpp(fpp)

    if bp_category is BPCategory.HYPERTENSIVE_CRISIS:
        return ('Your blood pressure is in the hypertensive crisis range. '
                'Blood pressure control takes priority; arterial stiffness '
                'assessment is secondary until your blood pressure is under control.')

    if bp_category is BPCategory.HYPERTENSION_STAGE_2:
        return (f'Your blood pressure is in the Stage 2 range. Controlling blood '
                f'pressure takes priority over the arterial stiffness reading '
                f'(fPP {fpp:.3f}, {category.label.lower()}), which is harder to '
                f'interpret while blood pressure is this high.')

    if bp_category is BPCategory.HYPERTENSION_STAGE_1:
        return (f'{category.description}. Note: your blood pressure is also '
                f'elevated (Stage 1), which adds to cardiovascular strain.')

    return category.description
