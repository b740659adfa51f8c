"""
Timeout wrapper for calls to the generation service.
"""
from typing import Awaitable, Optional, TypeVar
import asyncio

from ecopulse.exceptions import RequestTimeoutError

T = TypeVar("T")


async def call_with_timeout(call: Awaitable[T], timeout: Optional[float], label: str) -> T:
    """Await a call, converting a timeout into RequestTimeoutError. None waits forever."""
    try:
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise RequestTimeoutError(f"{label} request timed out after {timeout}s") from e
