"""
Derived vitals from a systolic/diastolic pair.
"""

# Fraction of the cardiac cycle spent in diastole (empirical, fixed).
MAP_PULSE_PRESSURE_WEIGHT = 0.412


def pulse_pressure(systolic: int, diastolic: int) -> int:
    """Systolic minus diastolic. Not clamped."""
    return systolic - diastolic


def mean_arterial_pressure(systolic: int, diastolic: int) -> float:
    """MAP = diastolic + 0.412 * pulse pressure."""
    return diastolic + MAP_PULSE_PRESSURE_WEIGHT * pulse_pressure(systolic, diastolic)


def fractional_pulse_pressure(systolic: int, diastolic: int) -> float:
    """
    Pulse pressure divided by MAP.

    Returns 0 when MAP is zero or negative instead of raising.
    """
    map_value = mean_arterial_pressure(systolic, diastolic)
    if map_value <= 0:
        return 0.0
    return pulse_pressure(systolic, diastolic) / map_value
