"""View model for the calculator page: formatted rows, summary and empty state."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from loancalc.core.formatting import format_currency, format_percent
from loancalc.schemas.schedule import ScheduleRequest, ScheduleResult

PLACEHOLDER_MESSAGE = "Preencha os dados acima e clique em “Calcular tabela”."
SUBTITLE_PLACEHOLDER = "Preencha os campos para gerar as parcelas."
EMPTY_VALUE = "—"


class FormattedRow(BaseModel):
    period: int
    opening_balance: str
    amortization: str
    interest: str
    payment: str
    closing_balance: str


class Summary(BaseModel):
    system: str = EMPTY_VALUE
    base_value: str = EMPTY_VALUE
    total_payment: str = EMPTY_VALUE
    total_interest: str = EMPTY_VALUE
    final_balance: str = EMPTY_VALUE


class ScheduleView(BaseModel):
    """Everything the calculator page shows below the form."""

    rows: List[FormattedRow] = Field(default_factory=list)
    summary: Summary = Field(default_factory=Summary)
    subtitle: str = SUBTITLE_PLACEHOLDER
    placeholder: Optional[str] = PLACEHOLDER_MESSAGE
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.rows


def placeholder_view(error: Optional[str] = None) -> ScheduleView:
    """Empty state shown before a calculation, after a reset or on bad input."""
    return ScheduleView(error=error)


def schedule_view(request: ScheduleRequest, result: ScheduleResult) -> ScheduleView:
    rows = [
        FormattedRow(
            period=row.period,
            opening_balance=format_currency(row.opening_balance),
            amortization=format_currency(row.amortization),
            interest=format_currency(row.interest),
            payment=format_currency(row.payment),
            closing_balance=format_currency(row.closing_balance),
        )
        for row in result.rows
    ]
    summary = Summary(
        system=result.system.label,
        base_value=f"{format_currency(result.base_value)} ({result.system.base_label})",
        total_payment=format_currency(result.total_payment),
        total_interest=format_currency(result.total_interest),
        final_balance=format_currency(result.final_balance),
    )
    subtitle = " · ".join(
        [
            f"Sistema {result.system.label}",
            f"PV {format_currency(request.principal)}",
            f"i {format_percent(request.periodic_rate)}",
            f"n {request.period_count}",
        ]
    )
    return ScheduleView(rows=rows, summary=summary, subtitle=subtitle, placeholder=None)
