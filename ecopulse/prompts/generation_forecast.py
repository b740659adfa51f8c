"""
Prompt template and output schema for the next-day renewable generation forecast.
"""

GENERATION_FORECAST_PROMPT = """Based on today's sunlight and wind speeds, forecast next-day hourly solar and wind generation for the campus.

Data: {series_json}

Return an array of 24 objects, one per hour 0-23, with hour, solarForecast and windForecast (both in kW, never negative)."""

# Structured outputs need an object at the root, so the array travels under "forecast"
FORECAST_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "forecast": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "hour": {"type": "number"},
                    "solarForecast": {"type": "number"},
                    "windForecast": {"type": "number"},
                },
                "required": ["hour", "solarForecast", "windForecast"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["forecast"],
    "additionalProperties": False,
}
