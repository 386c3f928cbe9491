"""
Blood pressure classification per AHA/ACC thresholds.
"""
from enum import Enum

from .colors import SeverityColor


class BPCategory(str, Enum):
    """Ordered from least to most severe."""
    NORMAL = 'normal'
    ELEVATED = 'elevated'
    HYPERTENSION_STAGE_1 = 'hypertensionStage1'
    HYPERTENSION_STAGE_2 = 'hypertensionStage2'
    HYPERTENSIVE_CRISIS = 'hypertensiveCrisis'

    @property
    def label(self) -> str:
        return _BP_LABELS[self]

    @property
    def description(self) -> str:
        return _BP_DESCRIPTIONS[self]

    @property
    def color(self) -> SeverityColor:
        return _BP_COLORS[self]

    @property
    def severity(self) -> int:
        return list(BPCategory).index(self)

    @property
    def is_urgent(self) -> bool:
        return self is BPCategory.HYPERTENSIVE_CRISIS

    @property
    def overrides_fpp(self) -> bool:
        """True when BP itself should take precedence over arterial stiffness."""
        return self in (BPCategory.HYPERTENSIVE_CRISIS, BPCategory.HYPERTENSION_STAGE_2)


_BP_LABELS = {
    BPCategory.NORMAL: 'Normal',
    BPCategory.ELEVATED: 'Elevated',
    BPCategory.HYPERTENSION_STAGE_1: 'High BP Stage 1',
    BPCategory.HYPERTENSION_STAGE_2: 'High BP Stage 2',
    BPCategory.HYPERTENSIVE_CRISIS: 'Hypertensive Crisis',
}

_BP_DESCRIPTIONS = {
    BPCategory.NORMAL: 'Systolic below 120 and diastolic below 80 mmHg.',
    BPCategory.ELEVATED: 'Systolic 120-129 with diastolic below 80 mmHg. '
                         'Lifestyle changes can help prevent hypertension.',
    BPCategory.HYPERTENSION_STAGE_1: 'Systolic 130-139 or diastolic 80-89 mmHg. '
                                     'Discuss lifestyle changes and treatment with your doctor.',
    BPCategory.HYPERTENSION_STAGE_2: 'Systolic 140 or higher or diastolic 90 or higher. '
                                     'Medical treatment is usually recommended.',
    BPCategory.HYPERTENSIVE_CRISIS: 'Systolic 180 or higher or diastolic 120 or higher. '
                                    'Wait a few minutes and measure again. If it stays this high, '
                                    'seek medical care immediately.',
}

_BP_COLORS = {
    BPCategory.NORMAL: SeverityColor.GREEN,
    BPCategory.ELEVATED: SeverityColor.YELLOW,
    BPCategory.HYPERTENSION_STAGE_1: SeverityColor.ORANGE,
    BPCategory.HYPERTENSION_STAGE_2: SeverityColor.RED,
    BPCategory.HYPERTENSIVE_CRISIS: SeverityColor.PURPLE,
}


def classify_blood_pressure(systolic: int, diastolic: int) -> BPCategory:
    """Classify a reading. The more severe of systolic/diastolic wins."""
    if systolic >= 180 or diastolic >= 120:
        return BPCategory.HYPERTENSIVE_CRISIS
    if systolic >= 140 or diastolic >= 90:
        return BPCategory.HYPERTENSION_STAGE_2
    if systolic >= 130 or diastolic >= 80:
        return BPCategory.HYPERTENSION_STAGE_1
    if systolic >= 120:
        return BPCategory.ELEVATED
    return BPCategory.NORMAL
