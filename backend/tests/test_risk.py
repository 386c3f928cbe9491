"""
Framingham 10-year and 30-year risk models.
"""

import math

import pytest

from cvrtracker.calculations.risk import (
    RiskCategory, RiskProfile, Sex,
    categorize_ten_year, categorize_thirty_year,
    framingham_ten_year, framingham_thirty_year, calculate_risk_scores,
)
from cvrtracker.models import LipidPanel


def _profile(**overrides):
    values = dict(age=55, sex=Sex.MALE, total_cholesterol=220, hdl=45,
                  on_hypertension_treatment=True, is_smoker=False, has_diabetes=False)
    values.update(overrides)
    return RiskProfile(**values)


class TestTenYearModel:

    def test_male_golden_profile(self):
        score = (3.06117 * math.log(55) + 1.12370 * math.log(220)
                 - 0.93263 * math.log(45) + 1.99881 * math.log(140))
        expected = (1 - 0.88936 ** math.exp(score - 23.9802)) * 100

        result = framingham_ten_year(_profile(), 140)
        assert result.risk_percent == pytest.approx(expected, abs=1e-6)
        assert result.category is categorize_ten_year(expected)

    def test_female_uses_own_coefficients(self):
        profile = _profile(sex=Sex.FEMALE, on_hypertension_treatment=False,
                           is_smoker=True, has_diabetes=True)
        score = (2.32888 * math.log(55) + 1.20904 * math.log(220)
                 - 0.70833 * math.log(45) + 2.76157 * math.log(140)
                 + 0.52873 + 0.69154)
        expected = (1 - 0.95012 ** math.exp(score - 26.1931)) * 100
        assert framingham_ten_year(profile, 140).risk_percent == pytest.approx(expected, abs=1e-6)

    def test_treatment_raises_risk(self):
        treated = framingham_ten_year(_profile(on_hypertension_treatment=True), 140)
        untreated = framingham_ten_year(_profile(on_hypertension_treatment=False), 140)
        assert treated.risk_percent > untreated.risk_percent

    def test_result_is_within_bounds(self):
        result = framingham_ten_year(_profile(age=79, total_cholesterol=320, hdl=25,
                                              is_smoker=True, has_diabetes=True), 200)
        assert 0 <= result.risk_percent <= 100
        assert result.category is RiskCategory.HIGH

    def test_non_positive_input_is_undefined(self):
        with pytest.raises(ValueError):
            framingham_ten_year(_profile(hdl=0), 140)

    @pytest.mark.parametrize("risk,expected", [
        (0, RiskCategory.LOW), (9.99, RiskCategory.LOW),
        (10, RiskCategory.INTERMEDIATE), (19.99, RiskCategory.INTERMEDIATE),
        (20, RiskCategory.HIGH),
    ])
    def test_categories(self, risk, expected):
        assert categorize_ten_year(risk) is expected


class TestThirtyYearModel:

    def test_baseline_male(self):
        profile = _profile(age=20, total_cholesterol=180, hdl=60, on_hypertension_treatment=False)
        result = framingham_thirty_year(profile, 110)
        assert result.risk_percent == pytest.approx(15.0 * math.exp(-1.0))
        assert result.category is RiskCategory.LOW

    def test_baseline_female(self):
        profile = _profile(sex=Sex.FEMALE, age=20, total_cholesterol=180, hdl=60,
                           on_hypertension_treatment=False)
        assert framingham_thirty_year(profile, 110).risk_percent == pytest.approx(10.0 * math.exp(-0.8))

    def test_band_steps(self):
        profile = _profile(age=40, total_cholesterol=210, hdl=45, on_hypertension_treatment=False)
        score = 20 * 0.04826 + 0.13579 + 0.19212 + 0.34821
        expected = 15.0 * math.exp(score - 1.0)
        assert framingham_thirty_year(profile, 145).risk_percent == pytest.approx(expected)

    def test_clamped_to_100(self):
        profile = _profile(age=79, total_cholesterol=300, hdl=30, is_smoker=True, has_diabetes=True)
        result = framingham_thirty_year(profile, 170)
        assert result.risk_percent == 100.0
        assert result.category is RiskCategory.HIGH

    @pytest.mark.parametrize("risk,expected", [
        (11.99, RiskCategory.LOW), (12, RiskCategory.INTERMEDIATE),
        (39.99, RiskCategory.INTERMEDIATE), (40, RiskCategory.HIGH),
    ])
    def test_categories(self, risk, expected):
        assert categorize_thirty_year(risk) is expected


class TestRiskProfile:

    @pytest.mark.parametrize("age,complete", [(29, False), (30, True), (79, True), (80, False)])
    def test_age_window(self, age, complete):
        assert _profile(age=age).is_complete is complete

    def test_requires_positive_cholesterol(self):
        assert not _profile(hdl=0).is_complete
        assert not _profile(total_cholesterol=0).is_complete

    def test_from_lipid_panel(self):
        panel = LipidPanel(total_cholesterol=210, hdl=48)
        profile = RiskProfile.from_lipid_panel(panel, age=60, sex='female', is_smoker=True)
        assert profile.sex is Sex.FEMALE
        assert profile.total_cholesterol == 210
        assert profile.hdl == 48
        assert profile.is_smoker

    def test_calculate_both_scores(self):
        ten_year, thirty_year = calculate_risk_scores(_profile(), 140)
        assert ten_year == framingham_ten_year(_profile(), 140)
        assert thirty_year == framingham_thirty_year(_profile(), 140)
        assert ten_year.to_dict()['label'] == ten_year.category.label
