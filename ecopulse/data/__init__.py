"""
Mock campus energy data.
"""

from .mock_data import generate, summarize, energy_balance, is_daylight

__all__ = ['generate', 'summarize', 'energy_balance', 'is_daylight']
