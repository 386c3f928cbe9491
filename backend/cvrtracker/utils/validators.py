"""
Input validation for readings, lipid panels, risk profiles, and trend requests.
"""
import math
from datetime import datetime

from cvrtracker.calculations.risk import Sex
from cvrtracker.calculations.trends import TimeRange
from cvrtracker.calculations.units import CholesterolUnit, TriglycerideUnit

SYSTOLIC_RANGE = (70, 250)
DIASTOLIC_RANGE = (40, 150)
AGE_RANGE = (18, 120)
MAX_TREND_READINGS = 1000


def _parse_int(value):
    # bool is an int subclass; a JSON true is not a pressure
    if isinstance(value, bool):
        raise TypeError('boolean is not an integer')
    if isinstance(value, float):
        # 1e400 decodes to inf; 120.9 is not silently truncated
        if not math.isfinite(value) or not value.is_integer():
            raise ValueError(f'{value!r} is not an integer')
    return int(value)


def _parse_positive_float(value):
    if isinstance(value, bool):
        raise TypeError('boolean is not a number')
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f'{value!r} is not a finite number')
    return number


def _is_iso_timestamp(value) -> bool:
    try:
        datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        return True
    except ValueError:
        return False


def validate_reading(data: dict, require_timestamp: bool = False, prefix: str = '') -> list:
    """Validate blood pressure reading input. Returns list of error strings."""
    errors = []

    s = d = None
    systolic = data.get('systolic')
    if systolic is None:
        errors.append(f'{prefix}Systolic is required')
    else:
        try:
            s = _parse_int(systolic)
            if s < SYSTOLIC_RANGE[0] or s > SYSTOLIC_RANGE[1]:
                errors.append(f'{prefix}Systolic must be between {SYSTOLIC_RANGE[0]} and {SYSTOLIC_RANGE[1]}')
        except (ValueError, TypeError):
            errors.append(f'{prefix}Systolic must be an integer')

    diastolic = data.get('diastolic')
    if diastolic is None:
        errors.append(f'{prefix}Diastolic is required')
    else:
        try:
            d = _parse_int(diastolic)
            if d < DIASTOLIC_RANGE[0] or d > DIASTOLIC_RANGE[1]:
                errors.append(f'{prefix}Diastolic must be between {DIASTOLIC_RANGE[0]} and {DIASTOLIC_RANGE[1]}')
        except (ValueError, TypeError):
            errors.append(f'{prefix}Diastolic must be an integer')

    if s is not None and d is not None and s <= d:
        errors.append(f'{prefix}Systolic must be greater than diastolic')

    timestamp = data.get('timestamp')
    if timestamp is None or timestamp == '':
        if require_timestamp:
            errors.append(f'{prefix}Timestamp is required')
    elif not _is_iso_timestamp(timestamp):
        errors.append(f'{prefix}Timestamp must be an ISO-8601 date-time')

    return errors


def validate_lipid_panel(data: dict) -> list:
    """Validate lipid panel input (values in the units named in the payload)."""
    errors = []

    for field, label, required in (
        ('totalCholesterol', 'Total cholesterol', True),
        ('hdl', 'HDL', True),
        ('ldl', 'LDL', False),
        ('triglycerides', 'Triglycerides', False),
    ):
        value = data.get(field)
        if value is None or value == '':
            if required:
                errors.append(f'{label} is required')
            continue
        try:
            if _parse_positive_float(value) <= 0:
                errors.append(f'{label} must be greater than 0')
        except (ValueError, TypeError):
            errors.append(f'{label} must be a number')

    unit = data.get('unit')
    if unit is not None and unit not in [u.value for u in CholesterolUnit]:
        errors.append('Invalid cholesterol unit')

    triglyceride_unit = data.get('triglycerideUnit')
    if triglyceride_unit is not None and triglyceride_unit not in [u.value for u in TriglycerideUnit]:
        errors.append('Invalid triglyceride unit')

    return errors


def validate_risk_profile(data: dict) -> list:
    """Validate risk profile input. Lipid values are mg/dL."""
    errors = []

    age = data.get('age')
    if age is None:
        errors.append('Age is required')
    else:
        try:
            a = _parse_int(age)
            if a < AGE_RANGE[0] or a > AGE_RANGE[1]:
                errors.append(f'Age must be between {AGE_RANGE[0]} and {AGE_RANGE[1]}')
        except (ValueError, TypeError):
            errors.append('Age must be an integer')

    if data.get('sex') not in [s.value for s in Sex]:
        errors.append('Sex must be one of: male, female')

    for field, label in (('totalCholesterol', 'Total cholesterol'), ('hdl', 'HDL')):
        value = data.get(field)
        if value is None:
            errors.append(f'{label} is required')
            continue
        try:
            if _parse_positive_float(value) <= 0:
                errors.append(f'{label} must be greater than 0')
        except (ValueError, TypeError):
            errors.append(f'{label} must be a number')

    systolic = data.get('systolic')
    if systolic is None:
        errors.append('Systolic is required')
    else:
        try:
            s = _parse_int(systolic)
            if s < SYSTOLIC_RANGE[0] or s > SYSTOLIC_RANGE[1]:
                errors.append(f'Systolic must be between {SYSTOLIC_RANGE[0]} and {SYSTOLIC_RANGE[1]}')
        except (ValueError, TypeError):
            errors.append('Systolic must be an integer')

    for flag in ('onTreatment', 'smoker', 'diabetic'):
        if flag in data and not isinstance(data[flag], bool):
            errors.append(f'{flag} must be a boolean')

    return errors


def validate_trend_request(data: dict) -> list:
    """Validate a trend request: a list of timestamped readings plus options."""
    errors = []

    readings = data.get('readings')
    if not isinstance(readings, list):
        return ['Readings must be a list']
    if len(readings) > MAX_TREND_READINGS:
        errors.append(f'At most {MAX_TREND_READINGS} readings are accepted')

    for i, reading in enumerate(readings):
        if not isinstance(reading, dict):
            errors.append(f'Reading {i}: must be an object')
            continue
        errors.extend(validate_reading(reading, require_timestamp=True, prefix=f'Reading {i}: '))

    time_range = data.get('timeRange')
    if time_range is not None and time_range not in [t.value for t in TimeRange]:
        errors.append('Time range must be one of: week, month, year, all')

    min_readings = data.get('minReadings')
    if min_readings is not None:
        try:
            m = _parse_int(min_readings)
            if m < 2:
                errors.append('minReadings must be at least 2')
        except (ValueError, TypeError):
            errors.append('minReadings must be an integer')

    return errors
