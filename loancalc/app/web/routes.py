"""Server-rendered calculator page."""

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, render_template, request

from loancalc.core.amortization import compute_schedule
from loancalc.core.presentation import ScheduleView, placeholder_view, schedule_view
from loancalc.core.validation import ScheduleInputError, build_schedule_request
from loancalc.schemas.schedule import AmortizationSystem

logger = logging.getLogger(__name__)

web_bp = Blueprint("web", __name__)

FORM_FIELDS = ("pv", "rate", "periods", "system")


def _empty_form() -> Dict[str, str]:
    return {"pv": "", "rate": "", "periods": "", "system": AmortizationSystem.SAC.value}


def _render(form: Dict[str, str], view: ScheduleView) -> Any:
    return render_template(
        "index.html",
        form=form,
        view=view,
        systems=list(AmortizationSystem),
        locale=current_app.config["DISPLAY_LOCALE"],
    )


@web_bp.get("/")
def index() -> Any:
    """Calculator page in its empty state; ``?clear=1`` is the reset action."""
    return _render(_empty_form(), placeholder_view())


@web_bp.post("/")
def calculate() -> Any:
    """Handle a form submission and render the schedule or the field error."""
    form = _empty_form()
    form.update({name: request.form.get(name, form[name]) for name in FORM_FIELDS})

    try:
        system = AmortizationSystem(form["system"])
    except ValueError:
        system = AmortizationSystem.SAC
    form["system"] = system.value

    try:
        schedule_request = build_schedule_request(
            form["pv"], form["rate"], form["periods"], system
        )
    except ScheduleInputError as exc:
        logger.info("Rejected form submission: %s", exc.kind)
        return _render(form, placeholder_view(error=exc.message))

    result = compute_schedule(schedule_request)
    logger.debug(
        "Computed %s schedule with %d periods",
        system.label,
        schedule_request.period_count,
    )
    return _render(form, schedule_view(schedule_request, result))
