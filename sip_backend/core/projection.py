"""SIP projection engine: monthly contributions, lump sum and inflation."""

from __future__ import annotations

import math
from typing import Iterator, List, Tuple

from sip_backend.schemas.sip import GrowthSeries, SipInputs, SipResult


class InvalidInput(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


NUMERIC_FIELDS = ("sipAmount", "annualReturn", "years", "lumpSum", "stepUp", "inflationRate")


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large to convert to float
        return False


def validate_inputs(inputs: SipInputs) -> None:
    """Reject NaN and infinite values, which would otherwise leak into every output."""
    errors = [
        f"{name} must be a finite number"
        for name in NUMERIC_FIELDS
        if not _is_finite(getattr(inputs, name))
    ]
    if errors:
        raise InvalidInput(errors)


def _monthly_stream(inputs: SipInputs) -> Iterator[Tuple[int, float, float]]:
    """
    Yield (month, future_value, total_invested) after every month.

    Per month:
      1) At each new year (month 12, 24, ...) grow the contribution by stepUp.
      2) Add the contribution, then compound the whole balance for the month.
    """
    monthly_rate = inputs.annualReturn / 100 / 12
    yearly_increment = 1 + inputs.stepUp / 100
    months = inputs.years * 12

    future_value = 0.0
    total_invested = 0.0
    sip = inputs.sipAmount

    for i in range(months):
        if i % 12 == 0 and i != 0:
            sip *= yearly_increment
        future_value = (future_value + sip) * (1 + monthly_rate)
        total_invested += sip
        yield i + 1, future_value, total_invested


def calculate_sip(inputs: SipInputs) -> SipResult:
    """
    Project the SIP stream and the lump sum over ``inputs.years``.

    The lump sum compounds annually while the stream compounds monthly.
    Negative values are applied as given; only non-finite inputs, or inputs
    whose power terms blow up, raise InvalidInput.
    """
    validate_inputs(inputs)

    future_value = 0.0
    total_invested = 0.0
    for _, future_value, total_invested in _monthly_stream(inputs):
        pass

    try:
        lump_sum_future = inputs.lumpSum * (1 + inputs.annualReturn / 100) ** inputs.years
        adjusted_future_value = (future_value + lump_sum_future) / (
            (1 + inputs.inflationRate / 100) ** inputs.years
        )
    except (ZeroDivisionError, OverflowError) as exc:
        raise InvalidInput([f"projection is undefined for these inputs: {exc}"]) from exc

    total_interest = future_value + lump_sum_future - (total_invested + inputs.lumpSum)

    result = SipResult(
        futureValue=future_value,
        lumpSumFuture=lump_sum_future,
        adjustedFutureValue=adjusted_future_value,
        totalInvested=total_invested,
        totalInterest=total_interest,
    )

    overflowed = [name for name, value in result.model_dump().items() if not math.isfinite(value)]
    if overflowed:
        raise InvalidInput([f"{name} is not a finite number" for name in overflowed])

    return result


def yearly_trajectory(inputs: SipInputs) -> List[float]:
    """Future value of the contribution stream at the end of each year."""
    return [value for month, value, _ in _monthly_stream(inputs) if month % 12 == 0]


def growth_series(
    inputs: SipInputs,
    result: SipResult,
    mode: GrowthSeries = GrowthSeries.DIVIDED,
) -> List[float]:
    """
    One point per year for the growth chart.

    DIVIDED reproduces the widget chart: the final future value over the
    year number, which is a decreasing curve and not a real trajectory.
    TRAJECTORY re-runs the accumulation and records each year-end value.
    """
    if mode == GrowthSeries.TRAJECTORY:
        return yearly_trajectory(inputs)
    return [result.futureValue / (i + 1) for i in range(inputs.years)]


def invested_vs_interest(result: SipResult) -> Tuple[float, float]:
    return result.totalInvested, result.totalInterest


__all__ = [
    "InvalidInput",
    "validate_inputs",
    "calculate_sip",
    "yearly_trajectory",
    "growth_series",
    "invested_vs_interest",
]
