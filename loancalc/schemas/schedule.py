"""Data contracts for amortization schedules."""

from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# booleans are not numbers, so no lax coercion of true/false into 1.0/0.0
RawNumber = Union[StrictStr, StrictInt, StrictFloat, None]

class AmortizationSystem(str, Enum):
    """Fixed-rate repayment systems supported by the engine."""

    SAC = "sac"
    PRICE = "price"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def label(self) -> str:
        return "SAC" if self is AmortizationSystem.SAC else "Price"

    @property
    def base_label(self) -> str:
        """Caption for the value that defines the system."""
        return "amortização" if self is AmortizationSystem.SAC else "prestação"


class ScheduleRequest(BaseModel):
    """Validated inputs for a single schedule calculation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: float = Field(..., gt=0, allow_inf_nan=False, description="Financed value (PV).")
    periodic_rate: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Interest rate per period expressed as a decimal (e.g. 0.01 for 1%).",
    )
    period_count: int = Field(..., ge=1, description="Number of periods in the schedule.")
    system: AmortizationSystem


class ScheduleRow(BaseModel):
    """Single period of an amortization schedule."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    period: int = Field(..., ge=1)
    opening_balance: float
    amortization: float
    interest: float
    payment: float
    closing_balance: float


class ScheduleResult(BaseModel):
    """Full schedule plus the aggregates shown in the summary."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    system: AmortizationSystem
    rows: Tuple[ScheduleRow, ...]
    base_value: float = Field(
        ..., description="Constant amortization for SAC, constant payment for Price."
    )
    total_interest: float
    total_payment: float
    final_balance: float


class ScheduleFormInput(BaseModel):
    """Raw calculator fields as typed by the user, before normalisation."""

    model_config = ConfigDict(extra="forbid")

    principal: RawNumber = None
    rate: RawNumber = None
    periods: RawNumber = None
    system: AmortizationSystem = AmortizationSystem.SAC
