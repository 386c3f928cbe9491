"""
Framingham-derived cardiovascular risk models.

Two independent, sex-stratified models:

- 10-year general CVD risk (D'Agostino et al., 2008), log-linear in age,
  total cholesterol, HDL and systolic BP. Valid for ages 30-79.
- 30-year risk, an additive point score over categorical bands pushed
  through an exponential. This is an illustrative approximation in the
  spirit of Pencina et al. (2009), not a reproduction of the published
  coefficients, and has not been validated the way the 10-year model has.

Inputs must be strictly positive for the 10-year model; math.log raises
ValueError otherwise. Callers gate on RiskProfile.is_complete first.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .colors import SeverityColor

if TYPE_CHECKING:
    from cvrtracker.models.lipid_panel import LipidPanel

MIN_TEN_YEAR_AGE = 30
MAX_TEN_YEAR_AGE = 79


class Sex(str, Enum):
    MALE = 'male'
    FEMALE = 'female'


class RiskCategory(str, Enum):
    LOW = 'low'
    INTERMEDIATE = 'intermediate'
    HIGH = 'high'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _RISK_DESCRIPTIONS[self]

    @property
    def color(self) -> SeverityColor:
        return _RISK_COLORS[self]


_RISK_DESCRIPTIONS = {
    RiskCategory.LOW: 'Lower than average risk',
    RiskCategory.INTERMEDIATE: 'Moderate risk - lifestyle changes recommended',
    RiskCategory.HIGH: 'Higher risk - consult your healthcare provider',
}

_RISK_COLORS = {
    RiskCategory.LOW: SeverityColor.GREEN,
    RiskCategory.INTERMEDIATE: SeverityColor.ORANGE,
    RiskCategory.HIGH: SeverityColor.RED,
}


TEN_YEAR_COEFFICIENTS = {
    Sex.MALE: {
        'ln_age': 3.06117,
        'ln_total_cholesterol': 1.12370,
        'ln_hdl': -0.93263,
        'ln_sbp_untreated': 1.93303,
        'ln_sbp_treated': 1.99881,
        'smoker': 0.65451,
        'diabetic': 0.57367,
        'mean_score': 23.9802,
        'baseline_survival': 0.88936,
    },
    Sex.FEMALE: {
        'ln_age': 2.32888,
        'ln_total_cholesterol': 1.20904,
        'ln_hdl': -0.70833,
        'ln_sbp_untreated': 2.76157,
        'ln_sbp_treated': 2.82263,
        'smoker': 0.52873,
        'diabetic': 0.69154,
        'mean_score': 26.1931,
        'baseline_survival': 0.95012,
    },
}

THIRTY_YEAR_COEFFICIENTS = {
    Sex.MALE: {
        'per_year_over_20': 0.04826,
        'total_cholesterol_over_240': 0.27168,
        'total_cholesterol_over_200': 0.13579,
        'hdl_under_40': 0.41415,
        'hdl_under_50': 0.19212,
        'sbp_160': 0.47179,
        'sbp_140': 0.34821,
        'sbp_120': 0.17892,
        'treated': 0.24903,
        'smoker': 0.62429,
        'diabetic': 0.66575,
        'base_risk': 15.0,
        'offset': 1.0,
    },
    Sex.FEMALE: {
        'per_year_over_20': 0.04177,
        'total_cholesterol_over_240': 0.23186,
        'total_cholesterol_over_200': 0.11593,
        'hdl_under_40': 0.35782,
        'hdl_under_50': 0.16891,
        'sbp_160': 0.41563,
        'sbp_140': 0.30692,
        'sbp_120': 0.15782,
        'treated': 0.21894,
        'smoker': 0.55167,
        'diabetic': 0.58923,
        'base_risk': 10.0,
        'offset': 0.8,
    },
}


@dataclass(frozen=True)
class RiskProfile:
    """Demographics and risk factors, with lipid values in mg/dL."""
    age: int
    sex: Sex
    total_cholesterol: float
    hdl: float
    on_hypertension_treatment: bool = False
    is_smoker: bool = False
    has_diabetes: bool = False

    @property
    def is_complete(self) -> bool:
        return (MIN_TEN_YEAR_AGE <= self.age <= MAX_TEN_YEAR_AGE
                and self.total_cholesterol > 0
                and self.hdl > 0)

    @classmethod
    def from_lipid_panel(cls, panel: 'LipidPanel', age: int, sex: Union[Sex, str],
                         on_hypertension_treatment: bool = False, is_smoker: bool = False,
                         has_diabetes: bool = False) -> 'RiskProfile':
        """Build a profile from the latest lipid panel plus stored profile fields."""
        return cls(
            age=age,
            sex=Sex(sex),
            total_cholesterol=panel.total_cholesterol,
            hdl=panel.hdl,
            on_hypertension_treatment=on_hypertension_treatment,
            is_smoker=is_smoker,
            has_diabetes=has_diabetes,
        )

    def to_dict(self):
        return {
            'age': self.age,
            'sex': self.sex.value,
            'totalCholesterol': self.total_cholesterol,
            'hdl': self.hdl,
            'onTreatment': self.on_hypertension_treatment,
            'smoker': self.is_smoker,
            'diabetic': self.has_diabetes,
            'isComplete': self.is_complete,
        }


@dataclass(frozen=True)
class RiskResult:
    risk_percent: float
    category: RiskCategory

    def to_dict(self):
        return {
            'riskPercent': round(self.risk_percent, 2),
            'category': self.category.value,
            'label': self.category.label,
            'description': self.category.description,
            'color': self.category.color.value,
        }


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def categorize_ten_year(risk_percent: float) -> RiskCategory:
    if risk_percent < 10:
        return RiskCategory.LOW
    if risk_percent < 20:
        return RiskCategory.INTERMEDIATE
    return RiskCategory.HIGH


def categorize_thirty_year(risk_percent: float) -> RiskCategory:
    if risk_percent < 12:
        return RiskCategory.LOW
    if risk_percent < 40:
        return RiskCategory.INTERMEDIATE
    return RiskCategory.HIGH


def ten_year_score(profile: RiskProfile, systolic: int) -> float:
    """Sex-specific linear predictor before centering."""
    c = TEN_YEAR_COEFFICIENTS[profile.sex]
    sbp_coefficient = c['ln_sbp_treated'] if profile.on_hypertension_treatment else c['ln_sbp_untreated']
    return (c['ln_age'] * math.log(profile.age)
            + c['ln_total_cholesterol'] * math.log(profile.total_cholesterol)
            + c['ln_hdl'] * math.log(profile.hdl)
            + sbp_coefficient * math.log(systolic)
            + (c['smoker'] if profile.is_smoker else 0.0)
            + (c['diabetic'] if profile.has_diabetes else 0.0))


def framingham_ten_year(profile: RiskProfile, systolic: int) -> RiskResult:
    """
    10-year CVD risk.

    risk% = (1 - S0 ** exp(score - mean_score)) * 100, clamped to [0, 100].

    Args:
        profile: Risk profile (age, sex, lipids in mg/dL, risk factors)
        systolic: Latest systolic blood pressure in mmHg

    Returns:
        RiskResult with the clamped percentage and its 10-year category
    """
    c = TEN_YEAR_COEFFICIENTS[profile.sex]
    score = ten_year_score(profile, systolic)
    risk = (1 - c['baseline_survival'] ** math.exp(score - c['mean_score'])) * 100
    return RiskResult(risk_percent=_clamp_percent(risk), category=categorize_ten_year(risk))


def thirty_year_score(profile: RiskProfile, systolic: int) -> float:
    """Additive point score over categorical bands."""
    c = THIRTY_YEAR_COEFFICIENTS[profile.sex]
    score = (profile.age - 20) * c['per_year_over_20']

    if profile.total_cholesterol > 240:
        score += c['total_cholesterol_over_240']
    elif profile.total_cholesterol > 200:
        score += c['total_cholesterol_over_200']

    if profile.hdl < 40:
        score += c['hdl_under_40']
    elif profile.hdl < 50:
        score += c['hdl_under_50']

    if systolic >= 160:
        score += c['sbp_160']
    elif systolic >= 140:
        score += c['sbp_140']
    elif systolic >= 120:
        score += c['sbp_120']

    if profile.on_hypertension_treatment:
        score += c['treated']
    if profile.is_smoker:
        score += c['smoker']
    if profile.has_diabetes:
        score += c['diabetic']
    return score


def framingham_thirty_year(profile: RiskProfile, systolic: int) -> RiskResult:
    """30-year CVD risk: base_risk * exp(score - offset), clamped to [0, 100]."""
    c = THIRTY_YEAR_COEFFICIENTS[profile.sex]
    risk = c['base_risk'] * math.exp(thirty_year_score(profile, systolic) - c['offset'])
    return RiskResult(risk_percent=_clamp_percent(risk), category=categorize_thirty_year(risk))


def calculate_risk_scores(profile: RiskProfile, systolic: int):
    """Return (ten_year, thirty_year) results for one profile and SBP."""
    return framingham_ten_year(profile, systolic), framingham_thirty_year(profile, systolic)
