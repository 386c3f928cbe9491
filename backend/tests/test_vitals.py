"""
Derived vitals, BP classification and fPP interpretation.
"""

import pytest

from cvrtracker.calculations.blood_pressure import BPCategory, classify_blood_pressure
from cvrtracker.calculations.colors import SeverityColor
from cvrtracker.calculations.fpp import FPPCategory, classify_fpp, interpret_fpp
from cvrtracker.calculations.vitals import (
    pulse_pressure, mean_arterial_pressure, fractional_pulse_pressure,
)
from cvrtracker.models import BloodPressureReading


class TestDerivedVitals:

    @pytest.mark.parametrize("systolic,diastolic", [(120, 80), (183, 70), (95, 60), (250, 149)])
    def test_pulse_pressure_and_map(self, systolic, diastolic):
        assert pulse_pressure(systolic, diastolic) == systolic - diastolic
        assert mean_arterial_pressure(systolic, diastolic) == pytest.approx(
            diastolic + 0.412 * (systolic - diastolic), abs=1e-9)

    def test_fpp_for_120_over_80(self):
        assert mean_arterial_pressure(120, 80) == pytest.approx(96.48)
        assert fractional_pulse_pressure(120, 80) == pytest.approx(40 / 96.48)

    def test_pulse_pressure_not_clamped(self):
        assert pulse_pressure(80, 90) == -10

    def test_fpp_zero_when_map_not_positive(self):
        assert fractional_pulse_pressure(0, 0) == 0.0
        assert fractional_pulse_pressure(-10, -20) == 0.0

    def test_repeated_calls_are_identical(self):
        assert fractional_pulse_pressure(137, 82) == fractional_pulse_pressure(137, 82)


class TestBPClassifier:

    @pytest.mark.parametrize("systolic,diastolic,expected", [
        (119, 79, BPCategory.NORMAL),
        (120, 79, BPCategory.ELEVATED),
        (129, 70, BPCategory.ELEVATED),
        (130, 70, BPCategory.HYPERTENSION_STAGE_1),
        (110, 85, BPCategory.HYPERTENSION_STAGE_1),
        (140, 70, BPCategory.HYPERTENSION_STAGE_2),
        (118, 90, BPCategory.HYPERTENSION_STAGE_2),
        (183, 70, BPCategory.HYPERTENSIVE_CRISIS),
        (180, 60, BPCategory.HYPERTENSIVE_CRISIS),
        (150, 120, BPCategory.HYPERTENSIVE_CRISIS),
    ])
    def test_more_severe_of_systolic_and_diastolic_wins(self, systolic, diastolic, expected):
        assert classify_blood_pressure(systolic, diastolic) is expected

    def test_flags(self):
        assert BPCategory.HYPERTENSIVE_CRISIS.is_urgent
        assert not BPCategory.HYPERTENSION_STAGE_2.is_urgent
        assert BPCategory.HYPERTENSIVE_CRISIS.overrides_fpp
        assert BPCategory.HYPERTENSION_STAGE_2.overrides_fpp
        assert not BPCategory.HYPERTENSION_STAGE_1.overrides_fpp
        assert not BPCategory.NORMAL.overrides_fpp

    def test_categories_are_ordered(self):
        severities = [c.severity for c in BPCategory]
        assert severities == sorted(severities)
        assert BPCategory.HYPERTENSIVE_CRISIS.color is SeverityColor.PURPLE
        assert BPCategory.NORMAL.label == 'Normal'


class TestFPPClassifier:

    @pytest.mark.parametrize("fpp,expected", [
        (0.0, FPPCategory.NORMAL),
        (0.399, FPPCategory.NORMAL),
        (0.40, FPPCategory.ELEVATED),
        (0.499, FPPCategory.ELEVATED),
        (0.50, FPPCategory.HIGH),
        (0.9, FPPCategory.HIGH),
    ])
    def test_thresholds(self, fpp, expected):
        assert classify_fpp(fpp) is expected

    def test_crisis_puts_blood_pressure_first(self):
        text = interpret_fpp(0.55, BPCategory.HYPERTENSIVE_CRISIS)
        assert 'priority' in text
        assert 'secondary' in text

    def test_stage_2_puts_blood_pressure_first(self):
        text = interpret_fpp(0.45, BPCategory.HYPERTENSION_STAGE_2)
        assert 'priority' in text
        assert '0.450' in text

    def test_stage_1_appends_note(self):
        text = interpret_fpp(0.45, BPCategory.HYPERTENSION_STAGE_1)
        assert text.startswith(FPPCategory.ELEVATED.description)
        assert 'Stage 1' in text

    @pytest.mark.parametrize("bp_category", [BPCategory.NORMAL, BPCategory.ELEVATED])
    def test_plain_description_otherwise(self, bp_category):
        assert interpret_fpp(0.3, bp_category) == FPPCategory.NORMAL.description


class TestBloodPressureReading:

    def test_derived_properties(self, make_readings):
        reading = make_readings([(183, 70)])[0]
        assert reading.pulse_pressure == 113
        assert reading.bp_category is BPCategory.HYPERTENSIVE_CRISIS
        assert reading.fpp_category is FPPCategory.HIGH
        assert 'priority' in reading.fpp_interpretation

    def test_inverted_pair_does_not_raise(self, make_readings):
        reading = make_readings([(80, 90)])[0]
        assert reading.pulse_pressure == -10
        assert reading.to_dict()['pulsePressure'] == -10

    def test_from_dict_assumes_utc_for_naive_timestamps(self):
        reading = BloodPressureReading.from_dict(
            {'systolic': '120', 'diastolic': 80, 'timestamp': '2025-03-01T09:30:00'})
        assert reading.systolic == 120
        assert reading.timestamp.tzinfo is not None

    def test_from_dict_accepts_zulu_suffix(self):
        reading = BloodPressureReading.from_dict(
            {'systolic': 120, 'diastolic': 80, 'timestamp': '2025-03-01T09:30:00Z'})
        assert reading.timestamp.utcoffset().total_seconds() == 0
