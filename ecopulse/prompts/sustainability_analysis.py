"""
Prompt template and output schema for the daily sustainability analysis.
"""

SUSTAINABILITY_ANALYSIS_PROMPT = """
Analyze the following 24-hour energy data for a college campus.
Total Solar: {total_solar}kW
Total Wind: {total_wind}kW
Total Demand: {total_demand}kW

Data Details (Hourly): {series_json}

Based on this, provide a sustainability analysis aligned with SDG 7.
- Sustainability Score (0-100)
- Renewable energy wastage (kW)
- Grid dependency reduction (%)
- 2-3 specific time windows for load shifting (e.g., "1:00 PM - 3:00 PM")
- 3 specific daily AI recommendations for decision-makers (non-technical)
- 2-3 ESG/Policy insights
- A short summary
"""

ANALYSIS_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "sustainabilityScore": {"type": "number"},
        "wastageDetected": {"type": "number"},
        "gridReductionPercent": {"type": "number"},
        "loadShiftWindows": {"type": "array", "items": {"type": "string"}},
        "recommendations": {"type": "array", "items": {"type": "string"}},
        "esgInsights": {"type": "array", "items": {"type": "string"}},
        "summary": {"type": "string"},
    },
    "required": [
        "sustainabilityScore",
        "wastageDetected",
        "gridReductionPercent",
        "loadShiftWindows",
        "recommendations",
        "esgInsights",
        "summary",
    ],
    "additionalProperties": False,
}
