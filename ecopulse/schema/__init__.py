from .models import (
    AnalysisResult,
    DashboardState,
    EnergyBalancePoint,
    ForecastEnvelope,
    ForecastRecord,
    HourlyRecord,
    HourlySeriesResponse,
    RefreshStatus,
    SeriesRequest,
    SeriesTotals,
)

__all__ = [
    'AnalysisResult',
    'DashboardState',
    'EnergyBalancePoint',
    'ForecastEnvelope',
    'ForecastRecord',
    'HourlyRecord',
    'HourlySeriesResponse',
    'RefreshStatus',
    'SeriesRequest',
    'SeriesTotals',
]
