"""
Dashboard state and refresh orchestration.
"""

from .controller import RefreshController

__all__ = ['RefreshController']
