"""
Severity colors attached to every category the engine produces.
"""
from enum import Enum


class SeverityColor(str, Enum):
    GREEN = 'green'
    BLUE = 'blue'
    YELLOW = 'yellow'
    ORANGE = 'orange'
    RED = 'red'
    PURPLE = 'purple'
    SECONDARY = 'secondary'
