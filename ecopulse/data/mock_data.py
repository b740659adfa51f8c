"""
Synthetic hourly energy data for the campus dashboard.

Each call produces a new, unseeded 24-hour series. Pass a numpy Generator to
make the output reproducible.
"""
from typing import List, Optional, Sequence
import logging

import numpy as np

from ecopulse.config.constants import (
    DAYLIGHT_END_HOUR,
    DAYLIGHT_START_HOUR,
    DEMAND_BASE_KW,
    DEMAND_RANDOM_RANGE_KW,
    DEMAND_SINE_AMPLITUDE_KW,
    SERIES_LENGTH,
    SOLAR_RANDOM_RANGE_KW,
    SOLAR_SINE_AMPLITUDE_KW,
    WIND_BASE_KW,
    WIND_RANDOM_RANGE_KW,
    WIND_SPEED_BASE,
    WIND_SPEED_RANDOM_RANGE,
)
from ecopulse.schema.models import EnergyBalancePoint, HourlyRecord, SeriesTotals

logger = logging.getLogger(__name__)


def is_daylight(hour: int) -> bool:
    """Check if an hour falls inside the daylight window (inclusive)."""
    return DAYLIGHT_START_HOUR <= hour <= DAYLIGHT_END_HOUR


def generate(rng: Optional[np.random.Generator] = None) -> List[HourlyRecord]:
    """
    Generate a 24-entry series of hourly energy metrics.

    Solar follows a sine curve peaking at noon plus noise and is zero outside
    daylight. Demand follows a sine curve centred on hour 12 plus noise. Wind
    output and wind speed are uniform noise independent of the hour.

    Args:
        rng: Optional numpy random generator, a fresh unseeded one is used otherwise

    Returns:
        List of HourlyRecord ordered by hour 0-23
    """
    rng = rng if rng is not None else np.random.default_rng()

    hours = np.arange(SERIES_LENGTH)
    daylight = (hours >= DAYLIGHT_START_HOUR) & (hours <= DAYLIGHT_END_HOUR)

    solar = np.floor(
        rng.uniform(0, SOLAR_RANDOM_RANGE_KW, SERIES_LENGTH)
        + SOLAR_SINE_AMPLITUDE_KW * np.sin((hours - DAYLIGHT_START_HOUR) * np.pi / 12)
    )
    # Near sunrise and sunset the sine term can pull the draw below zero
    solar = np.where(daylight, np.clip(solar, 0, None), 0.0)

    wind = np.floor(rng.uniform(0, WIND_RANDOM_RANGE_KW, SERIES_LENGTH) + WIND_BASE_KW)
    demand = np.floor(
        rng.uniform(0, DEMAND_RANDOM_RANGE_KW, SERIES_LENGTH)
        + DEMAND_BASE_KW
        + DEMAND_SINE_AMPLITUDE_KW * np.sin((hours - 12) * np.pi / 12)
    )
    wind_speed = np.floor(rng.uniform(0, WIND_SPEED_RANDOM_RANGE, SERIES_LENGTH) + WIND_SPEED_BASE)

    series = [
        HourlyRecord(
            hour=int(hour),
            solar_output_kw=float(solar[hour]),
            wind_output_kw=float(wind[hour]),
            demand_kw=float(demand[hour]),
            sunlight_flag=bool(daylight[hour]),
            wind_speed=float(wind_speed[hour]),
        )
        for hour in hours
    ]
    logger.debug(
        f"Generated mock series: solar={solar.sum():.0f}kW wind={wind.sum():.0f}kW demand={demand.sum():.0f}kW"
    )
    return series


def summarize(series: Sequence[HourlyRecord]) -> SeriesTotals:
    """Sum solar, wind and demand over the series."""
    return SeriesTotals(
        total_solar_kw=sum(record.solar_output_kw for record in series),
        total_wind_kw=sum(record.wind_output_kw for record in series),
        total_demand_kw=sum(record.demand_kw for record in series),
    )


def energy_balance(series: Sequence[HourlyRecord]) -> List[EnergyBalancePoint]:
    """Pair renewable supply with demand for every hour of the series."""
    points = []
    for record in series:
        renewables = record.solar_output_kw + record.wind_output_kw
        points.append(EnergyBalancePoint(
            hour=record.hour,
            label=f"{record.hour}:00",
            solar_kw=record.solar_output_kw,
            wind_kw=record.wind_output_kw,
            renewables_kw=renewables,
            demand_kw=record.demand_kw,
            surplus_kw=renewables - record.demand_kw,
        ))
    return points
