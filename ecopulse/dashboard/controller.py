"""
Refresh controller for the campus dashboard.

Owns the single DashboardState snapshot and runs refresh cycles:
generate a series, then request the analysis and the forecast concurrently.
"""
from datetime import datetime, timezone
from functools import partial
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple
import asyncio
import logging

from ecopulse.config.constants import GENERIC_ERROR_MESSAGE
from ecopulse.config.settings import get_settings
from ecopulse.data.mock_data import energy_balance, generate
from ecopulse.generator.llm_generator import StructuredGenerator
from ecopulse.schema.models import (
    AnalysisResult,
    DashboardState,
    ForecastRecord,
    HourlyRecord,
    RefreshStatus,
)
from ecopulse.services.analysis import analyze
from ecopulse.services.forecasting import forecast
from ecopulse.services.timeouts import call_with_timeout

logger = logging.getLogger(__name__)

Analyzer = Callable[[Sequence[HourlyRecord]], Awaitable[AnalysisResult]]
Forecaster = Callable[[Sequence[HourlyRecord]], Awaitable[List[ForecastRecord]]]
CycleResult = Tuple[List[HourlyRecord], AnalysisResult, List[ForecastRecord]]


class RefreshController:
    """
    Runs the idle -> loading -> ready | failed cycle for the dashboard.

    A refresh either publishes series, analysis and forecast together or
    publishes nothing: on failure the previous data is kept and only the
    status and the generic error message change. Starting a new refresh
    cancels the one in flight.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        generator: Optional[StructuredGenerator] = None,
        data_source: Callable[[], List[HourlyRecord]] = generate,
        analyzer: Optional[Analyzer] = None,
        forecaster: Optional[Forecaster] = None,
    ):
        """
        Initialize the controller.

        Args:
            config: Configuration dictionary (request_timeout)
            generator: Structured generator shared by both requests
            data_source: Callable producing a fresh hourly series
            analyzer: Coroutine function series -> AnalysisResult
            forecaster: Coroutine function series -> list of ForecastRecord
        """
        self.config = config or {}
        self.request_timeout = self.config.get("request_timeout", get_settings().request_timeout)
        self.generator = generator
        self.data_source = data_source
        self.analyzer = analyzer or partial(analyze, generator=generator)
        self.forecaster = forecaster or partial(forecast, generator=generator)

        self._state = DashboardState()
        self._settled = self._state
        self._refresh_counter = 0
        self._current_task: Optional[asyncio.Task] = None

    @property
    def state(self) -> DashboardState:
        """Current immutable snapshot."""
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state.status == RefreshStatus.LOADING

    async def refresh(self) -> DashboardState:
        """
        Run one refresh cycle and return the resulting snapshot.

        If this refresh is superseded by a newer one before it completes, it
        returns the current (newer) snapshot without publishing anything.
        """
        if self._current_task is not None and not self._current_task.done():
            logger.info(f"Cancelling in-flight refresh {self._refresh_counter}")
            self._current_task.cancel()

        self._refresh_counter += 1
        refresh_id = self._refresh_counter
        self._state = self._state.model_copy(
            update={"status": RefreshStatus.LOADING, "error": None, "refresh_id": refresh_id}
        )
        logger.info(f"Refresh {refresh_id} started")

        task = asyncio.create_task(self._run_cycle(refresh_id))
        self._current_task = task
        try:
            series, analysis, forecast_records = await task
        except asyncio.CancelledError:
            if refresh_id != self._refresh_counter:
                logger.info(f"Refresh {refresh_id} superseded by refresh {self._refresh_counter}")
                return self._state
            logger.warning(f"Refresh {refresh_id} cancelled by caller")
            self._state = self._settled
            raise
        except Exception as e:
            if refresh_id != self._refresh_counter:
                return self._state
            logger.error(f"Refresh {refresh_id} failed: {e}", exc_info=True)
            self._state = self._settled = self._settled.model_copy(
                update={
                    "status": RefreshStatus.FAILED,
                    "error": GENERIC_ERROR_MESSAGE,
                    "refresh_id": refresh_id,
                }
            )
            return self._state

        if refresh_id != self._refresh_counter:
            logger.info(f"Discarding results of superseded refresh {refresh_id}")
            return self._state

        self._state = self._settled = DashboardState(
            status=RefreshStatus.READY,
            series=series,
            balance=energy_balance(series),
            analysis=analysis,
            forecast=forecast_records,
            error=None,
            refresh_id=refresh_id,
            updated_at=datetime.now(timezone.utc),
        )
        logger.info(f"Refresh {refresh_id} ready")
        return self._state

    async def _run_cycle(self, refresh_id: int) -> CycleResult:
        """Generate a series and run both requests concurrently, failing fast."""
        series = self.data_source()
        logger.debug(f"Refresh {refresh_id}: generated {len(series)} hourly records")

        analysis_task = asyncio.create_task(
            call_with_timeout(self.analyzer(series), self.request_timeout, "Analysis")
        )
        forecast_task = asyncio.create_task(
            call_with_timeout(self.forecaster(series), self.request_timeout, "Forecast")
        )
        tasks = [analysis_task, forecast_task]

        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        for task in (analysis_task, forecast_task):
            if task in done and task.exception() is not None:
                raise task.exception()

        return series, analysis_task.result(), forecast_task.result()
