"""
Analysis and forecast request builders.
"""

from .analysis import analyze
from .forecasting import forecast
from .timeouts import call_with_timeout

__all__ = ['analyze', 'forecast', 'call_with_timeout']
