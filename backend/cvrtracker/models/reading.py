"""
Blood Pressure Reading value object.
"""
from dataclasses import dataclass
from datetime import datetime, timezone

from cvrtracker.calculations.blood_pressure import BPCategory, classify_blood_pressure
from cvrtracker.calculations.fpp import FPPCategory, classify_fpp, interpret_fpp
from cvrtracker.calculations import vitals


@dataclass(frozen=True)
class BloodPressureReading:
    """
    A single systolic/diastolic measurement.
    Derived values are recomputed on every access and never stored.
    Systolic <= diastolic is tolerated and yields degenerate derived values.
    """
    systolic: int
    diastolic: int
    timestamp: datetime

    @classmethod
    def from_dict(cls, data: dict):
        timestamp = datetime.fromisoformat(str(data['timestamp']).replace('Z', '+00:00'))
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return cls(
            systolic=int(data['systolic']),
            diastolic=int(data['diastolic']),
            timestamp=timestamp,
        )

    @property
    def pulse_pressure(self) -> int:
        return vitals.pulse_pressure(self.systolic, self.diastolic)

    @property
    def mean_arterial_pressure(self) -> float:
        return vitals.mean_arterial_pressure(self.systolic, self.diastolic)

    @property
    def fractional_pulse_pressure(self) -> float:
        return vitals.fractional_pulse_pressure(self.systolic, self.diastolic)

    @property
    def fpp_category(self) -> FPPCategory:
        return classify_fpp(self.fractional_pulse_pressure)

    @property
    def bp_category(self) -> BPCategory:
        return classify_blood_pressure(self.systolic, self.diastolic)

    @property
    def fpp_interpretation(self) -> str:
        return interpret_fpp(self.fractional_pulse_pressure, self.bp_category)

    def to_dict(self):
        bp_category = self.bp_category
        return {
            'systolic': self.systolic,
            'diastolic': self.diastolic,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'pulsePressure': self.pulse_pressure,
            'meanArterialPressure': round(self.mean_arterial_pressure, 2),
            'fractionalPulsePressure': round(self.fractional_pulse_pressure, 3),
            'fppCategory': self.fpp_category.value,
            'fppInterpretation': self.fpp_interpretation,
            'bpCategory': bp_category.value,
            'bpLabel': bp_category.label,
            'bpColor': bp_category.color.value,
            'isUrgent': bp_category.is_urgent,
            'overridesFPP': bp_category.overrides_fpp,
        }

    def __repr__(self):
        return f'<BloodPressureReading {self.systolic}/{self.diastolic}>'
