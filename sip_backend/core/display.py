"""Currency strings and the formula explanation shown next to the results."""

from __future__ import annotations

from typing import Dict, List

from sip_backend.schemas.sip import Formula, FormulaTerm, SipResult

DEFAULT_CURRENCY_SYMBOL = "₹"


def format_amount(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return f"{symbol}{value:.2f}"


def format_result(result: SipResult, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> Dict[str, str]:
    """Render every output field with the currency symbol and two decimals."""
    return {name: format_amount(value, symbol) for name, value in result.model_dump().items()}


def formulas() -> List[Formula]:
    return [
        Formula(
            name="SIP future value",
            expression="FV = P × [((1 + r)^n - 1) / r] × (1 + r)",
            terms=[
                FormulaTerm(symbol="FV", meaning="Future Value"),
                FormulaTerm(symbol="P", meaning="Monthly SIP Amount"),
                FormulaTerm(symbol="r", meaning="Monthly Rate of Return (Annual Return / 12 / 100)"),
                FormulaTerm(symbol="n", meaning="Number of Months"),
            ],
        ),
        Formula(
            name="Lump sum future value",
            expression="FV = P × (1 + r)^n",
            terms=[
                FormulaTerm(symbol="P", meaning="Initial Lump Sum"),
                FormulaTerm(symbol="r", meaning="Annual Rate of Return (Annual Return / 100)"),
                FormulaTerm(symbol="n", meaning="Number of Years"),
            ],
        ),
        Formula(
            name="Inflation adjusted value",
            expression="Inflation Adjusted Value = FV / (1 + Inflation Rate)^n",
        ),
    ]
