"""
EcoPulse - AI sustainability analyst for campus energy data.
"""

__version__ = "0.1.0"
