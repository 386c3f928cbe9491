from .audit_logger import audit_log
from .validators import validate_reading, validate_lipid_panel, validate_risk_profile, validate_trend_request
from .export import generate_readings_csv, generate_report_pdf
