"""HTTP routes for the JSON API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from loancalc.core.amortization import compute_schedule
from loancalc.core.ping import get_ping_payload
from loancalc.core.presentation import schedule_view
from loancalc.core.validation import ScheduleInputError, build_schedule_request
from loancalc.schemas.ping import PingResponse
from loancalc.schemas.schedule import ScheduleFormInput

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(ScheduleInputError)
def _handle_schedule_input_error(exc: ScheduleInputError):
    logger.info("Rejected schedule request: %s", exc.kind)
    return jsonify({"error": exc.to_dict()}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse.model_validate(get_ping_payload())
    return jsonify(response.model_dump())


@api_bp.post("/calc/schedule")
def schedule() -> Any:
    """Compute a SAC or Price schedule from user-entered fields."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=True) or {}
    payload = ScheduleFormInput.model_validate(raw_payload)
    schedule_request = build_schedule_request(
        payload.principal, payload.rate, payload.periods, payload.system
    )
    result = compute_schedule(schedule_request)
    logger.debug(
        "Computed %s schedule with %d periods",
        result.system.label,
        schedule_request.period_count,
    )

    body = result.model_dump(mode="json")
    body["formatted"] = schedule_view(schedule_request, result).model_dump(
        include={"summary", "subtitle"}
    )
    return jsonify(body)
