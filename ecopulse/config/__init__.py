"""
Configuration for the EcoPulse dashboard.
"""

from .settings import Settings, get_settings, get_api_key

__all__ = ['Settings', 'get_settings', 'get_api_key']
