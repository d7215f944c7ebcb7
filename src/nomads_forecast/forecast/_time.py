import math
import numbers
from collections.abc import Sequence
from typing import TypeVar

from nomads_forecast.errors.request_errors import InvalidHorizonError

DEFAULT_SAMPLING_INTERVAL_HOURS = 3

T = TypeVar("T")


def _check_interval(sampling_interval_hours: float) -> None:
    if (
        isinstance(sampling_interval_hours, bool)
        or not isinstance(sampling_interval_hours, numbers.Real)
        or not math.isfinite(sampling_interval_hours)
        or sampling_interval_hours <= 0
    ):
        raise InvalidHorizonError(
            f"Invalid sampling interval: {sampling_interval_hours!r}",
            details="The sampling interval must be a positive number of hours.",
        )


def step_for_horizon(
    hours_ahead: float,
    sampling_interval_hours: float = DEFAULT_SAMPLING_INTERVAL_HOURS,
) -> int:
    """Convert a forecast horizon in hours into the provider's time index.

    Step 0 is the analysis ("now"); with a 3 hour interval, 24 hours ahead is
    step 8 and 348 hours ahead is step 116. Partial intervals are truncated.

    Raises:
        InvalidHorizonError: If the horizon is negative, not finite or not a
            number, or the interval is not positive.
    """
    if (
        isinstance(hours_ahead, bool)
        or not isinstance(hours_ahead, numbers.Real)
        or not math.isfinite(hours_ahead)
        or hours_ahead < 0
    ):
        raise InvalidHorizonError(
            f"Invalid forecast horizon: {hours_ahead!r}",
            details="The horizon must be a finite, non-negative number of hours.",
        )
    _check_interval(sampling_interval_hours)
    return int(math.floor(hours_ahead / sampling_interval_hours))


def horizon_for_step(
    step: int, sampling_interval_hours: float = DEFAULT_SAMPLING_INTERVAL_HOURS
) -> float:
    """Hours ahead covered by ``step``; the inverse of step_for_horizon."""
    if isinstance(step, bool) or not isinstance(step, numbers.Integral) or step < 0:
        raise InvalidHorizonError(f"Invalid forecast step: {step!r}")
    _check_interval(sampling_interval_hours)
    return step * sampling_interval_hours


def latest_available_step(provider_steps: Sequence[T]) -> T:
    """Last element of an ordered sequence of available steps.

    Also used to pick the most recent model date and model run from the
    ascending listings of the provider.
    """
    if len(provider_steps) == 0:
        raise InvalidHorizonError("No forecast steps are available")
    return provider_steps[-1]
