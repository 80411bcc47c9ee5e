"""Boundary checks that turn form fields into a ScheduleRequest."""

from __future__ import annotations

import math
from typing import Optional, Union

from loancalc.core.formatting import NumberInput, parse_number, parse_period_count
from loancalc.schemas.schedule import AmortizationSystem, ScheduleRequest


class ScheduleInputError(ValueError):
    """A calculator field failed validation; the engine must not run."""

    kind = "InvalidInput"
    field = ""
    message = "Dados inválidos."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "field": self.field, "message": self.message}


class InvalidPrincipal(ScheduleInputError):
    kind = "InvalidPrincipal"
    field = "principal"
    message = "Informe um valor financiado válido."


class InvalidRate(ScheduleInputError):
    kind = "InvalidRate"
    field = "rate"
    message = "Informe uma taxa de juros válida."


class InvalidPeriodCount(ScheduleInputError):
    kind = "InvalidPeriodCount"
    field = "periods"
    message = "Informe o número de períodos."


def build_schedule_request(
    principal: NumberInput,
    rate_percent: NumberInput,
    periods: NumberInput,
    system: Union[AmortizationSystem, str] = AmortizationSystem.SAC,
) -> ScheduleRequest:
    """Parse and validate raw fields; the first failing field wins.

    ``rate_percent`` is a percentage per period (``"1,5"`` means 1.5%).
    Raises a ScheduleInputError subclass, checking principal, then rate,
    then period count.
    """
    pv = parse_number(principal)
    if not math.isfinite(pv) or pv <= 0:
        raise InvalidPrincipal()

    rate = parse_number(rate_percent)
    if not math.isfinite(rate) or rate < 0:
        raise InvalidRate()

    count = parse_period_count(periods)
    if count is None or count <= 0:
        raise InvalidPeriodCount()

    return ScheduleRequest(
        principal=pv,
        periodic_rate=rate / 100,
        period_count=count,
        system=AmortizationSystem(system),
    )
