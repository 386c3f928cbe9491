from .reading import BloodPressureReading
from .lipid_panel import LipidPanel
from cvrtracker.calculations.risk import RiskProfile, RiskResult, Sex
from cvrtracker.calculations.trends import TrendInterpretation
