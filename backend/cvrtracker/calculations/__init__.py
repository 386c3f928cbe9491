from .colors import SeverityColor
from .units import CholesterolUnit, TriglycerideUnit, to_canonical, from_canonical
from .vitals import pulse_pressure, mean_arterial_pressure, fractional_pulse_pressure
from .blood_pressure import BPCategory, classify_blood_pressure
from .fpp import FPPCategory, classify_fpp, interpret_fpp
from .lipids import (
    calculated_ldl, non_hdl, total_hdl_ratio,
    classify_total_cholesterol, classify_hdl, classify_ldl, classify_triglycerides,
    classify_total_hdl_ratio,
)
from .risk import (
    Sex, RiskCategory, RiskProfile, RiskResult,
    framingham_ten_year, framingham_thirty_year, calculate_risk_scores,
)
from .trends import (
    TrendDirection, TrendCategory, TrendInterpretation, TrendAnalysis, TimeRange,
    FPPTrend, analyze_trend, interpret_trends, filter_by_time_range, latest_readings,
    summarize_fpp, fpp_trend,
)
