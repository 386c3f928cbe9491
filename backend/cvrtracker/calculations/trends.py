"""
Trend analysis over a window of blood pressure readings.

Readings are duck-typed: anything exposing `pulse_pressure`,
`mean_arterial_pressure` (and `timestamp` / `fractional_pulse_pressure` for
the window helpers) works, including BloodPressureReading.

The window is split into two equal halves of n // 2 readings, oldest half
first. For an odd count the middle reading belongs to neither half.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from .colors import SeverityColor

DEFAULT_MIN_READINGS = 2
DEFAULT_WINDOW_SIZE = 14
PULSE_PRESSURE_THRESHOLD = 2.0  # mmHg
MAP_THRESHOLD = 3.0  # mmHg


class TrendDirection(str, Enum):
    INCREASING = 'increasing'
    STABLE = 'stable'
    DECREASING = 'decreasing'
    INSUFFICIENT = 'insufficient'

    @property
    def symbol(self) -> str:
        return _DIRECTION_SYMBOLS[self]

    @property
    def color(self) -> SeverityColor:
        return _DIRECTION_COLORS[self]


_DIRECTION_SYMBOLS = {
    TrendDirection.INCREASING: '↑',
    TrendDirection.STABLE: '→',
    TrendDirection.DECREASING: '↓',
    TrendDirection.INSUFFICIENT: '—',
}

_DIRECTION_COLORS = {
    TrendDirection.INCREASING: SeverityColor.RED,
    TrendDirection.STABLE: SeverityColor.BLUE,
    TrendDirection.DECREASING: SeverityColor.GREEN,
    TrendDirection.INSUFFICIENT: SeverityColor.SECONDARY,
}


class TrendCategory(str, Enum):
    BEST_SCENARIO = 'bestScenario'
    GOOD = 'good'
    NEUTRAL = 'neutral'
    NEEDS_ATTENTION = 'needsAttention'
    CONCERNING = 'concerning'
    MOST_CONCERNING = 'mostConcerning'
    INSUFFICIENT = 'insufficient'


@dataclass(frozen=True)
class TrendInterpretation:
    category: TrendCategory
    title: str
    description: str
    color: SeverityColor

    def to_dict(self):
        return {
            'category': self.category.value,
            'title': self.title,
            'description': self.description,
            'color': self.color.value,
        }


INSUFFICIENT_INTERPRETATION = TrendInterpretation(
    category=TrendCategory.INSUFFICIENT,
    title='Not Enough Data',
    description='Continue tracking to see trend analysis.',
    color=SeverityColor.SECONDARY,
)

_D = TrendDirection.DECREASING
_S = TrendDirection.STABLE
_I = TrendDirection.INCREASING

# (pulse pressure direction, MAP direction) -> interpretation
INTERPRETATIONS = {
    (_D, _D): TrendInterpretation(
        TrendCategory.BEST_SCENARIO, 'Excellent Progress',
        'Both your arterial stiffness and overall blood pressure are improving. '
        'This is the ideal response to treatment or lifestyle changes.',
        SeverityColor.GREEN),
    (_D, _S): TrendInterpretation(
        TrendCategory.GOOD, 'Good Progress',
        'Your arterial flexibility is improving while blood pressure remains stable. '
        'Your arteries are becoming healthier.',
        SeverityColor.GREEN),
    (_D, _I): TrendInterpretation(
        TrendCategory.NEEDS_ATTENTION, 'Mixed Results',
        'Your arterial stiffness is improving, but overall blood pressure is rising. '
        'Discuss this pattern with your doctor.',
        SeverityColor.ORANGE),
    (_S, _D): TrendInterpretation(
        TrendCategory.GOOD, 'Blood Pressure Improving',
        'Your blood pressure is decreasing while arterial stiffness remains stable. '
        'Your small arteries are relaxing.',
        SeverityColor.GREEN),
    (_S, _S): TrendInterpretation(
        TrendCategory.NEUTRAL, 'Stable Readings',
        'Both metrics are stable. This is fine if your values are healthy, '
        'or may indicate a need for treatment adjustments.',
        SeverityColor.BLUE),
    (_S, _I): TrendInterpretation(
        TrendCategory.CONCERNING, 'Blood Pressure Rising',
        'Your blood pressure is increasing without improvement in arterial flexibility. '
        'Consider lifestyle changes or consult your doctor.',
        SeverityColor.ORANGE),
    (_I, _D): TrendInterpretation(
        TrendCategory.CONCERNING, 'Arterial Stiffening',
        'Despite lower overall pressure, your arteries are becoming stiffer. '
        'This paradoxical pattern may indicate progressive arterial disease.',
        SeverityColor.ORANGE),
    (_I, _S): TrendInterpretation(
        TrendCategory.CONCERNING, 'Increasing Arterial Stress',
        'Your pulse pressure is rising, meaning more pressure waves are reaching '
        'your organs without cushioning. Monitor closely.',
        SeverityColor.ORANGE),
    (_I, _I): TrendInterpretation(
        TrendCategory.MOST_CONCERNING, 'Worsening Trend',
        'Both arterial stiffness and blood pressure are increasing. This double '
        'burden requires attention. Consult your healthcare provider.',
        SeverityColor.RED),
}


@dataclass(frozen=True)
class TrendAnalysis:
    pulse_pressure_direction: TrendDirection
    map_direction: TrendDirection
    interpretation: TrendInterpretation
    reading_count: int

    def to_dict(self):
        return {
            'pulsePressure': {
                'direction': self.pulse_pressure_direction.value,
                'symbol': self.pulse_pressure_direction.symbol,
            },
            'meanArterialPressure': {
                'direction': self.map_direction.value,
                'symbol': self.map_direction.symbol,
            },
            'interpretation': self.interpretation.to_dict(),
            'readingCount': self.reading_count,
        }


def interpret_trends(pp_direction: TrendDirection, map_direction: TrendDirection) -> TrendInterpretation:
    """Map a (pulse pressure, MAP) direction pair to its clinical narrative."""
    return INTERPRETATIONS.get((pp_direction, map_direction), INSUFFICIENT_INTERPRETATION)


def direction_of_change(first_average: float, second_average: float, threshold: float) -> TrendDirection:
    change = second_average - first_average
    if change < -threshold:
        return TrendDirection.DECREASING
    if change > threshold:
        return TrendDirection.INCREASING
    return TrendDirection.STABLE


def _split_halves(readings):
    half = len(readings) // 2
    return readings[:half], readings[len(readings) - half:]


def _average(values):
    return sum(values) / len(values)


def _direction(readings, attribute, threshold, min_readings):
    if len(readings) < max(min_readings, 2):
        return TrendDirection.INSUFFICIENT
    first, second = _split_halves(readings)
    return direction_of_change(
        _average([float(getattr(r, attribute)) for r in first]),
        _average([float(getattr(r, attribute)) for r in second]),
        threshold,
    )


def pulse_pressure_trend(readings, min_readings: int = DEFAULT_MIN_READINGS) -> TrendDirection:
    """Direction of average pulse pressure across the window (+/- 2 mmHg)."""
    return _direction(list(readings), 'pulse_pressure', PULSE_PRESSURE_THRESHOLD, min_readings)


def map_trend(readings, min_readings: int = DEFAULT_MIN_READINGS) -> TrendDirection:
    """Direction of average MAP across the window (+/- 3 mmHg)."""
    return _direction(list(readings), 'mean_arterial_pressure', MAP_THRESHOLD, min_readings)


def analyze_trend(readings, min_readings: int = DEFAULT_MIN_READINGS) -> TrendAnalysis:
    """
    Classify the joint pulse pressure / MAP trend of an oldest-first window.

    Args:
        readings: Readings ordered oldest first
        min_readings: Fewer readings than this (never less than 2) yields
            an insufficient trend

    Returns:
        TrendAnalysis with both directions and the combined interpretation
    """
    readings = list(readings)
    pp_direction = pulse_pressure_trend(readings, min_readings)
    map_direction = map_trend(readings, min_readings)
    return TrendAnalysis(
        pulse_pressure_direction=pp_direction,
        map_direction=map_direction,
        interpretation=interpret_trends(pp_direction, map_direction),
        reading_count=len(readings),
    )


class TimeRange(str, Enum):
    WEEK = 'week'
    MONTH = 'month'
    YEAR = 'year'
    ALL = 'all'

    @property
    def days(self) -> Optional[int]:
        return {'week': 7, 'month': 30, 'year': 365}.get(self.value)


def filter_by_time_range(readings, time_range: TimeRange, now: Optional[datetime] = None):
    """Keep readings taken within the range ending at `now`, preserving order."""
    if time_range.days is None:
        return list(readings)
    if now is None:
        now = datetime.now(timezone.utc)
    cutoff = now - timedelta(days=time_range.days)
    return [r for r in readings if r.timestamp >= cutoff]


def latest_readings(readings, count: int = DEFAULT_WINDOW_SIZE):
    """The `count` most recent readings, oldest first."""
    ordered = sorted(readings, key=lambda r: r.timestamp)
    if count <= 0:
        return []
    return ordered[-count:]


FPP_TREND_THRESHOLD = 0.01


class FPPTrend(str, Enum):
    IMPROVING = 'improving'
    STABLE = 'stable'
    WORSENING = 'worsening'
    INSUFFICIENT = 'insufficient'

    @property
    def label(self) -> str:
        if self is FPPTrend.INSUFFICIENT:
            return 'Not enough data'
        return self.value.capitalize()

    @property
    def color(self) -> SeverityColor:
        return _FPP_TREND_COLORS[self]


_FPP_TREND_COLORS = {
    FPPTrend.IMPROVING: SeverityColor.GREEN,
    FPPTrend.STABLE: SeverityColor.ORANGE,
    FPPTrend.WORSENING: SeverityColor.RED,
    FPPTrend.INSUFFICIENT: SeverityColor.SECONDARY,
}


def fpp_trend(readings, min_readings: int = DEFAULT_MIN_READINGS) -> FPPTrend:
    """Compare average fPP of the older and newer halves (+/- 0.01). Lower is better."""
    direction = _direction(list(readings), 'fractional_pulse_pressure', FPP_TREND_THRESHOLD, min_readings)
    return {
        TrendDirection.DECREASING: FPPTrend.IMPROVING,
        TrendDirection.INCREASING: FPPTrend.WORSENING,
        TrendDirection.STABLE: FPPTrend.STABLE,
    }.get(direction, FPPTrend.INSUFFICIENT)


@dataclass(frozen=True)
class FPPSummary:
    average: float
    minimum: float
    maximum: float
    count: int

    def to_dict(self):
        return {
            'average': round(self.average, 3),
            'min': round(self.minimum, 3),
            'max': round(self.maximum, 3),
            'count': self.count,
        }


def summarize_fpp(readings) -> FPPSummary:
    """Average/min/max fPP over a window; all zero when the window is empty."""
    values = [r.fractional_pulse_pressure for r in readings]
    if not values:
        return FPPSummary(average=0.0, minimum=0.0, maximum=0.0, count=0)
    return FPPSummary(
        average=_average(values),
        minimum=min(values),
        maximum=max(values),
        count=len(values),
    )
