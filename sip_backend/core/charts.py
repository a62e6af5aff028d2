"""Chart payloads in the shape chart.js expects."""

from __future__ import annotations

from sip_backend.core.projection import growth_series, invested_vs_interest
from sip_backend.schemas.sip import (
    DoughnutChart,
    DoughnutDataset,
    GrowthSeries,
    LineChart,
    LineDataset,
    SipInputs,
    SipResult,
)

GROWTH_LABEL = "Investment Growth"
GROWTH_BORDER = "#4CAF50"
GROWTH_FILL = "rgba(76, 175, 80, 0.2)"

BREAKDOWN_LABELS = ["Total Invested", "Total Interest"]
BREAKDOWN_COLORS = ["#4CAF50", "#FF6384"]


def build_growth_chart(inputs: SipInputs, result: SipResult, mode: GrowthSeries) -> LineChart:
    """Line chart with one point per year, labelled 1..years."""
    return LineChart(
        labels=list(range(1, inputs.years + 1)),
        datasets=[
            LineDataset(
                label=GROWTH_LABEL,
                data=growth_series(inputs, result, mode),
                borderColor=GROWTH_BORDER,
                backgroundColor=GROWTH_FILL,
            )
        ],
    )


def build_breakdown_chart(result: SipResult) -> DoughnutChart:
    return DoughnutChart(
        labels=list(BREAKDOWN_LABELS),
        datasets=[
            DoughnutDataset(
                data=list(invested_vs_interest(result)),
                backgroundColor=list(BREAKDOWN_COLORS),
            )
        ],
    )
