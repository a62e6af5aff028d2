"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from sip_backend.core.charts import build_breakdown_chart, build_growth_chart
from sip_backend.core.display import format_result, formulas
from sip_backend.core.projection import InvalidInput, calculate_sip
from sip_backend.schemas.ping import PingResponse
from sip_backend.schemas.sip import (
    GrowthSeries,
    ProjectionCharts,
    ProjectionRequest,
    ProjectionResponse,
    SipInputs,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected payload: %d validation error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    current_app.logger.warning("invalid SIP inputs: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse().model_dump())


@api_bp.get("/sip/defaults")
def defaults() -> Any:
    return jsonify(SipInputs().model_dump())


@api_bp.get("/sip/formula")
def formula() -> Any:
    """How the projection is calculated, for the explanation panel."""
    return jsonify([item.model_dump() for item in formulas()])


@api_bp.post("/sip/projection")
def projection() -> Any:
    """Project the SIP and return the results with both chart datasets."""
    raw_payload: Any = request.get_json(force=True, silent=False)
    if raw_payload is None:
        raw_payload = {}
    payload = ProjectionRequest.model_validate(raw_payload)

    max_years = current_app.config["SIP_MAX_YEARS"]
    if abs(payload.years) > max_years:
        raise InvalidInput([f"years must be between -{max_years} and {max_years}"])

    inputs = SipInputs(**payload.model_dump(exclude={"series"}))
    series = payload.series or current_app.config["SIP_GROWTH_SERIES"]

    result = calculate_sip(inputs)
    current_app.logger.debug(
        "projected %d years: future value %.2f", inputs.years, result.futureValue
    )

    response = ProjectionResponse(
        inputs=inputs,
        series=series,
        result=result,
        display=format_result(result, current_app.config["SIP_CURRENCY_SYMBOL"]),
        charts=ProjectionCharts(
            growth=build_growth_chart(inputs, result, series),
            breakdown=build_breakdown_chart(result),
        ),
    )
    return jsonify(response.model_dump(mode="json"))
