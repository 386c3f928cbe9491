"""
Lipid panel value object. All values are canonical mg/dL.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from cvrtracker.calculations import lipids
from cvrtracker.calculations.units import CholesterolUnit, TriglycerideUnit


@dataclass(frozen=True)
class LipidPanel:
    total_cholesterol: float
    hdl: float
    ldl_measured: Optional[float] = None
    triglycerides: Optional[float] = None
    timestamp: Optional[datetime] = None

    @property
    def calculated_ldl(self) -> Optional[float]:
        return lipids.calculated_ldl(self.total_cholesterol, self.hdl,
                                     self.ldl_measured, self.triglycerides)

    @property
    def non_hdl(self) -> float:
        return lipids.non_hdl(self.total_cholesterol, self.hdl)

    @property
    def total_hdl_ratio(self) -> float:
        return lipids.total_hdl_ratio(self.total_cholesterol, self.hdl)

    @property
    def total_cholesterol_category(self):
        return lipids.classify_total_cholesterol(self.total_cholesterol)

    @property
    def hdl_category(self):
        return lipids.classify_hdl(self.hdl)

    @property
    def ldl_category(self):
        ldl = self.calculated_ldl
        return lipids.classify_ldl(ldl) if ldl is not None else None

    @property
    def triglycerides_category(self):
        if self.triglycerides is None:
            return None
        return lipids.classify_triglycerides(self.triglycerides)

    @property
    def total_hdl_ratio_category(self):
        return lipids.classify_total_hdl_ratio(self.total_hdl_ratio)

    # Display helpers never touch the stored mg/dL values.
    def display_total_cholesterol(self, unit: CholesterolUnit) -> float:
        return unit.from_mgdl(self.total_cholesterol)

    def display_hdl(self, unit: CholesterolUnit) -> float:
        return unit.from_mgdl(self.hdl)

    def display_ldl(self, unit: CholesterolUnit) -> Optional[float]:
        ldl = self.calculated_ldl
        if ldl is None:
            return None
        return unit.from_mgdl(ldl)

    def display_triglycerides(self, unit: TriglycerideUnit) -> Optional[float]:
        if self.triglycerides is None:
            return None
        return unit.from_mgdl(self.triglycerides)

    def to_dict(self, unit=CholesterolUnit.MGDL, triglyceride_unit=TriglycerideUnit.MGDL):
        ldl_category = self.ldl_category
        trig_category = self.triglycerides_category
        ratio_category = self.total_hdl_ratio_category
        display_ldl = self.display_ldl(unit)
        display_trig = self.display_triglycerides(triglyceride_unit)

        def _category(cat):
            if cat is None:
                return None
            return {'category': cat.value, 'label': cat.label, 'hint': cat.hint, 'color': cat.color.value}

        return {
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'canonical': {
                'totalCholesterol': self.total_cholesterol,
                'hdl': self.hdl,
                'ldl': self.calculated_ldl,
                'ldlMeasured': self.ldl_measured is not None,
                'triglycerides': self.triglycerides,
                'nonHdl': self.non_hdl,
            },
            'display': {
                'unit': unit.value,
                'triglycerideUnit': triglyceride_unit.value,
                'totalCholesterol': round(self.display_total_cholesterol(unit), 2),
                'hdl': round(self.display_hdl(unit), 2),
                'ldl': round(display_ldl, 2) if display_ldl is not None else None,
                'triglycerides': round(display_trig, 2) if display_trig is not None else None,
                'nonHdl': round(unit.from_mgdl(self.non_hdl), 2),
            },
            'totalHdlRatio': {
                'value': round(self.total_hdl_ratio, 2),
                'category': ratio_category.value,
                'description': ratio_category.description,
                'color': ratio_category.color.value,
            },
            'categories': {
                'totalCholesterol': _category(self.total_cholesterol_category),
                'hdl': _category(self.hdl_category),
                'ldl': _category(ldl_category),
                'triglycerides': _category(trig_category),
            },
        }

    def __repr__(self):
        return f'<LipidPanel TC {self.total_cholesterol} / HDL {self.hdl}>'
