"""Amortization schedules for the SAC and Price repayment systems."""

from __future__ import annotations

from typing import List

from loancalc.schemas.schedule import (
    AmortizationSystem,
    ScheduleRequest,
    ScheduleResult,
    ScheduleRow,
)

EPSILON = 1e-10


def price_payment(principal: float, periodic_rate: float, period_count: int) -> float:
    """Constant payment that fully amortizes ``principal`` (closed-form annuity).

    Double precision limits the useful range: once ``(1 + rate) ** n`` is so
    large that ``factor / (factor - 1)`` rounds to 1 (e.g. 10% over 1000
    periods) the payment collapses to ``principal * rate``. Every period then
    pays interest only, amortization is zero up to rounding, and the
    final-period clamp is what brings the balance to zero.
    """
    if periodic_rate == 0:
        return principal / period_count
    try:
        factor = (1 + periodic_rate) ** period_count
    except OverflowError:
        # factor / (factor - 1) is 1 to double precision long before this point
        return principal * periodic_rate
    return principal * (periodic_rate * factor) / (factor - 1)


def _close(balance: float, amortization: float, is_last: bool) -> float:
    closing = balance - amortization
    if is_last or abs(closing) < EPSILON:
        return 0.0
    return closing


def compute_schedule(request: ScheduleRequest) -> ScheduleResult:
    """Build the period-by-period schedule for an already validated request.

    SAC keeps the amortization constant and lets the payment shrink with the
    balance; Price keeps the payment constant and lets the amortization grow.
    The closing balance is forced to exactly zero on the last period and
    whenever it lands within ``EPSILON`` of zero.
    """
    principal = request.principal
    rate = request.periodic_rate
    periods = request.period_count
    is_sac = request.system is AmortizationSystem.SAC

    if is_sac:
        base_value = principal / periods
    else:
        base_value = price_payment(principal, rate, periods)

    rows: List[ScheduleRow] = []
    balance = principal
    total_interest = 0.0
    total_payment = 0.0

    for period in range(1, periods + 1):
        interest = balance * rate
        if is_sac:
            amortization = base_value
            payment = amortization + interest
        else:
            payment = base_value
            amortization = payment - interest
        closing = _close(balance, amortization, period == periods)

        rows.append(
            ScheduleRow(
                period=period,
                opening_balance=balance,
                amortization=amortization,
                interest=interest,
                payment=payment,
                closing_balance=closing,
            )
        )
        total_interest += interest
        total_payment += payment
        balance = closing

    return ScheduleResult(
        system=request.system,
        rows=tuple(rows),
        base_value=base_value,
        total_interest=total_interest,
        total_payment=total_payment,
        final_balance=balance,
    )
