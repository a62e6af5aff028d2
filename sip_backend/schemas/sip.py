"""Data contracts for SIP projections."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GrowthSeries(str, Enum):
    # final value divided by the year number, as the calculator widget plots it
    DIVIDED = "divided"
    # year-end value of the contribution stream
    TRAJECTORY = "trajectory"


class SipInputs(BaseModel):
    """The six calculator inputs. Rates are percentages (12 means 12%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sipAmount: float = Field(5000.0, description="Initial monthly contribution.")
    annualReturn: float = Field(12.0, description="Expected annual return, percent.")
    years: int = Field(10, description="Investment horizon in whole years.")
    lumpSum: float = Field(0.0, description="One-time contribution at month 0.")
    stepUp: float = Field(
        0.0,
        description="Yearly percentage increase of the monthly contribution.",
    )
    inflationRate: float = Field(0.0, description="Annual inflation, percent.")


class SipResult(BaseModel):
    """Projected values for one set of inputs."""

    futureValue: float
    lumpSumFuture: float
    adjustedFutureValue: float
    totalInvested: float
    totalInterest: float


class ProjectionRequest(SipInputs):
    series: Optional[GrowthSeries] = None


class LineDataset(BaseModel):
    label: str
    data: List[float]
    borderColor: str
    backgroundColor: str
    fill: bool = True


class LineChart(BaseModel):
    labels: List[int]
    datasets: List[LineDataset]


class DoughnutDataset(BaseModel):
    data: List[float]
    backgroundColor: List[str]


class DoughnutChart(BaseModel):
    labels: List[str]
    datasets: List[DoughnutDataset]


class ProjectionCharts(BaseModel):
    growth: LineChart
    breakdown: DoughnutChart


class ProjectionResponse(BaseModel):
    inputs: SipInputs
    series: GrowthSeries
    result: SipResult
    # same keys as SipResult, rendered as currency strings
    display: Dict[str, str]
    charts: ProjectionCharts


class FormulaTerm(BaseModel):
    symbol: str
    meaning: str


class Formula(BaseModel):
    name: str
    expression: str
    terms: List[FormulaTerm] = Field(default_factory=list)
