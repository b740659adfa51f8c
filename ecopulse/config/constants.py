"""
Static constants for the campus energy dashboard.
"""

# Series shape
SERIES_LENGTH = 24
DAYLIGHT_START_HOUR = 6
DAYLIGHT_END_HOUR = 18

# Mock data ranges (kW / m/s)
SOLAR_RANDOM_RANGE_KW = 500
SOLAR_SINE_AMPLITUDE_KW = 200
WIND_RANDOM_RANGE_KW = 300
WIND_BASE_KW = 100
DEMAND_RANDOM_RANGE_KW = 400
DEMAND_BASE_KW = 400
DEMAND_SINE_AMPLITUDE_KW = 200
WIND_SPEED_RANDOM_RANGE = 20
WIND_SPEED_BASE = 5

# Dashboard
GRID_REDUCTION_TARGET_PERCENT = 35
GENERIC_ERROR_MESSAGE = "Failed to generate AI insights. Please check your connection."

ESG_POLICIES = [
    "SDG 7.2: Increase substantially the share of renewable energy in the global energy mix.",
    "SDG 7.3: Double the global rate of improvement in energy efficiency.",
    "ESG Reporting: Carbon Disclosure Project (CDP) alignment.",
    "ISO 50001: Energy Management Systems standards.",
]
