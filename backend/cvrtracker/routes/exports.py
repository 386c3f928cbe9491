"""Export routes: CSV of readings and a PDF summary report."""
import logging
from datetime import datetime, timezone
from flask import Blueprint, request, jsonify, Response
from cvrtracker.calculations.risk import calculate_risk_scores
from cvrtracker.calculations.trends import analyze_trend, fpp_trend, summarize_fpp
from cvrtracker.utils.audit_logger import audit_log
from cvrtracker.utils.export import generate_readings_csv, generate_report_pdf
from cvrtracker.utils.validators import validate_trend_request, validate_risk_profile
from .calculator import build_trend_window, build_risk_profile

logger = logging.getLogger(__name__)

exports_bp = Blueprint('exports', __name__)


def _timestamped(name, extension):
    return f"{name}_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.{extension}"


@exports_bp.route('/readings.csv', methods=['POST'])
def export_readings_csv():
    """Export readings with derived values as CSV."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    errors = validate_trend_request(data)
    if errors:
        return jsonify({'error': errors}), 400

    window, _ = build_trend_window(data)
    output = generate_readings_csv(window)

    audit_log('EXPORT', 'readings_csv', details={'reading_count': len(window)})

    return Response(
        output.getvalue(),
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={_timestamped("bp_readings", "csv")}'}
    )


@exports_bp.route('/report.pdf', methods=['POST'])
def export_report_pdf():
    """Export a PDF summary: readings, trend, and risk when a profile is given."""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400

    errors = validate_trend_request(data)
    profile_data = data.get('profile')
    if profile_data is not None:
        if not isinstance(profile_data, dict):
            errors.append('Profile must be an object')
        else:
            errors.extend(f'Profile: {e}' for e in validate_risk_profile(profile_data))
    if errors:
        return jsonify({'error': errors}), 400

    window, min_readings = build_trend_window(data)
    analysis = analyze_trend(window, min_readings=min_readings)

    risk_scores = None
    if profile_data is not None:
        profile = build_risk_profile(profile_data)
        if profile.is_complete:
            risk_scores = calculate_risk_scores(profile, int(profile_data['systolic']))
        else:
            logger.info("Profile incomplete; report generated without risk scores")

    try:
        output = generate_report_pdf(
            window, analysis, summarize_fpp(window), fpp_trend(window, min_readings), risk_scores)
    except Exception as e:
        logger.error(f"PDF generation failed: {e}")
        return jsonify({'error': 'Failed to generate report'}), 500

    audit_log('EXPORT', 'report_pdf', details={
        'reading_count': len(window),
        'includes_risk': risk_scores is not None,
    })

    return Response(
        output.getvalue(),
        mimetype='application/pdf',
        headers={'Content-Disposition': f'attachment; filename={_timestamped("cvr_report", "pdf")}'}
    )
