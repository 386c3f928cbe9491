"""
Calculation API routes.
"""
import logging
from datetime import datetime, timezone
from flask import Blueprint, request, jsonify, current_app
from cvrtracker.calculations.risk import RiskProfile, Sex, calculate_risk_scores
from cvrtracker.calculations.trends import TimeRange, analyze_trend, filter_by_time_range, latest_readings, summarize_fpp, fpp_trend
from cvrtracker.calculations.units import CholesterolUnit, TriglycerideUnit, to_canonical
from cvrtracker.models import BloodPressureReading, LipidPanel
from cvrtracker.utils.audit_logger import audit_log
from cvrtracker.utils.validators import (
    validate_reading, validate_lipid_panel, validate_risk_profile, validate_trend_request,
)

logger = logging.getLogger(__name__)

calculator_bp = Blueprint('calculator', __name__)


def _optional_float(value):
    if value is None or value == '':
        return None
    return float(value)


def build_risk_profile(data: dict) -> RiskProfile:
    return RiskProfile(
        age=int(data['age']),
        sex=Sex(data['sex']),
        total_cholesterol=float(data['totalCholesterol']),
        hdl=float(data['hdl']),
        on_hypertension_treatment=bool(data.get('onTreatment', False)),
        is_smoker=bool(data.get('smoker', False)),
        has_diabetes=bool(data.get('diabetic', False)),
    )


def build_trend_window(data: dict):
    """Parse readings and narrow them to the configured analysis window.

    Returns:
        (window, min_readings): readings oldest first, and the minimum count
    """
    readings = [BloodPressureReading.from_dict(r) for r in data['readings']]
    time_range = TimeRange(data.get('timeRange') or TimeRange.ALL.value)
    window = filter_by_time_range(readings, time_range, now=datetime.now(timezone.utc))
    window = latest_readings(window, current_app.config['TREND_WINDOW_SIZE'])
    min_readings = int(data.get('minReadings') or current_app.config['TREND_MIN_READINGS'])
    return window, min_readings


@calculator_bp.route('/blood-pressure', methods=['POST'])
def blood_pressure():
    """Derived vitals, BP category and fPP interpretation for one reading."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    errors = validate_reading(data)
    if errors:
        return jsonify({'error': errors}), 400

    reading = BloodPressureReading(
        systolic=int(data['systolic']),
        diastolic=int(data['diastolic']),
        timestamp=datetime.now(timezone.utc),
    )
    result = reading.to_dict()
    result['bpDescription'] = reading.bp_category.description
    result['fppDescription'] = reading.fpp_category.description

    audit_log('CALCULATE', 'blood_pressure', details={
        'bp_category': reading.bp_category.value,
        'fpp_category': reading.fpp_category.value,
    })
    return jsonify(result), 200


@calculator_bp.route('/lipids', methods=['POST'])
def lipid_panel():
    """Derived lipid values and categories. Inputs may be mg/dL or mmol/L."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    errors = validate_lipid_panel(data)
    if errors:
        return jsonify({'error': errors}), 400

    unit = CholesterolUnit(data.get('unit') or CholesterolUnit.MGDL.value)
    triglyceride_unit = TriglycerideUnit(data.get('triglycerideUnit') or TriglycerideUnit.MGDL.value)

    ldl = _optional_float(data.get('ldl'))
    triglycerides = _optional_float(data.get('triglycerides'))
    panel = LipidPanel(
        total_cholesterol=to_canonical(float(data['totalCholesterol']), unit),
        hdl=to_canonical(float(data['hdl']), unit),
        ldl_measured=to_canonical(ldl, unit) if ldl is not None else None,
        triglycerides=to_canonical(triglycerides, triglyceride_unit) if triglycerides is not None else None,
    )

    audit_log('CALCULATE', 'lipids', details={
        'total_cholesterol_category': panel.total_cholesterol_category.value,
        'ldl_available': panel.calculated_ldl is not None,
    })
    return jsonify(panel.to_dict(unit, triglyceride_unit)), 200


@calculator_bp.route('/risk', methods=['POST'])
def risk():
    """10-year and 30-year cardiovascular risk for a complete profile."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    errors = validate_risk_profile(data)
    if errors:
        return jsonify({'error': errors}), 400

    profile = build_risk_profile(data)
    if not profile.is_complete:
        return jsonify({
            'error': 'Risk scores require age between 30 and 79 and cholesterol values',
            'isComplete': False,
        }), 422

    ten_year, thirty_year = calculate_risk_scores(profile, int(data['systolic']))

    audit_log('CALCULATE', 'risk', details={
        'ten_year_category': ten_year.category.value,
        'thirty_year_category': thirty_year.category.value,
    })
    return jsonify({
        'profile': profile.to_dict(),
        'tenYear': ten_year.to_dict(),
        'thirtyYear': thirty_year.to_dict(),
        'thirtyYearNote': 'Illustrative approximation; not clinically validated to the same degree as the 10-year model.',
    }), 200


@calculator_bp.route('/trend', methods=['POST'])
def trend():
    """Pulse pressure / MAP trend over the most recent readings."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    errors = validate_trend_request(data)
    if errors:
        return jsonify({'error': errors}), 400

    window, min_readings = build_trend_window(data)
    analysis = analyze_trend(window, min_readings=min_readings)
    summary = summarize_fpp(window)
    fpp_direction = fpp_trend(window, min_readings)

    logger.debug(f"Trend computed over {len(window)} reading(s)")
    audit_log('CALCULATE', 'trend', details={
        'reading_count': len(window),
        'category': analysis.interpretation.category.value,
    })
    result = analysis.to_dict()
    result['fppSummary'] = summary.to_dict()
    result['fppTrend'] = {
        'direction': fpp_direction.value,
        'label': fpp_direction.label,
        'color': fpp_direction.color.value,
    }
    result['minReadings'] = min_readings
    return jsonify(result), 200
