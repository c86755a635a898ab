# contract_cost/config/models.py
"""
Pydantic models for validating calculation inputs, whether they arrive as
primitives from a UI shell or from a YAML scenario file.
"""

import logging
import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from contract_cost.exceptions import InvalidConfiguration
from contract_cost.utils.columns import DEFAULT_GROUP_NAME

logger = logging.getLogger(__name__)


def parse_raise_schedule(value: Any) -> List[float]:
    """
    Normalise a raise schedule into a list of yearly percentages.

    Accepts a single number (flat raise), a list of numbers, or a
    comma-separated string such as "3,2,2". Blank string entries are skipped.
    None or an empty string yields an empty schedule (0% every year).

    Raises:
        ValueError: If any entry is not a finite, non-negative number.
    """
    if value is None:
        return []
    if isinstance(value, bool):
        raise ValueError(f"Raise percentage must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        entries = [value]
    elif isinstance(value, str):
        entries = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple)):
        entries = list(value)
    else:
        raise ValueError(f"Unsupported raise schedule type: {type(value).__name__}")

    schedule = []
    for entry in entries:
        if isinstance(entry, bool):
            raise ValueError(f"Raise percentage must be a number, got {entry!r}")
        try:
            pct = float(str(entry).strip().rstrip("%")) if isinstance(entry, str) else float(entry)
        except (TypeError, ValueError):
            raise ValueError(f"Raise percentage is not a number: {entry!r}")
        if not math.isfinite(pct):
            raise ValueError(f"Raise percentage must be finite, got {entry!r}")
        if pct < 0:
            raise ValueError(f"Raise percentage cannot be negative, got {entry!r}")
        schedule.append(pct)
    return schedule


class ContractParameters(BaseModel):
    """Global parameters supplied once per calculation."""

    years: int = Field(..., ge=1, description="Number of contract years")
    last_raise: float = Field(
        ...,
        ge=0.0,
        allow_inf_nan=False,
        description="Last contract's flat raise percentage (e.g., 3 for 3%)",
    )

    @field_validator("years", mode="before")
    @classmethod
    def reject_boolean_years(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("years must be an integer")
        if isinstance(v, str):
            v = v.strip()
        return v


class ReportOptions(BaseModel):
    """Switches that change how inputs are read and reports are assembled."""

    include_grand_total: bool = False
    raise_first_year: bool = Field(
        False, description="Apply the first raise in year 1 instead of year 2"
    )
    step_column: bool = Field(
        False, description="Rows carry a leading step number column (4 fields)"
    )


class GroupInput(BaseModel):
    """One employee group as supplied by the caller."""

    name: str = DEFAULT_GROUP_NAME
    union_raise: List[float] = Field(default_factory=list)
    mgmt_raise: List[float] = Field(default_factory=list)
    steps: str = ""
    group_id: Optional[str] = Field(
        None, description="Opaque identifier assigned by the caller"
    )

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_GROUP_NAME
        return str(v).strip()

    @field_validator("union_raise", "mgmt_raise", mode="before")
    @classmethod
    def coerce_schedule(cls, v: Any) -> List[float]:
        return parse_raise_schedule(v)

    @field_validator("steps", mode="before")
    @classmethod
    def default_blank_steps(cls, v: Any) -> str:
        return "" if v is None else v


class CalculationRequest(BaseModel):
    """Everything one calculation needs: groups, contract parameters and options."""

    groups: List[GroupInput] = Field(default_factory=list)
    contract: ContractParameters
    options: ReportOptions = Field(default_factory=ReportOptions)

    @model_validator(mode="after")
    def log_summary(self) -> "CalculationRequest":
        logger.debug(
            f"Calculation request: {len(self.groups)} groups, "
            f"{self.contract.years} years, last raise {self.contract.last_raise}%"
        )
        return self


def format_validation_error(err: ValidationError) -> str:
    """Flatten pydantic errors into 'field: message' pairs."""
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "input"
        parts.append(f"{loc}: {item.get('msg')}")
    return "; ".join(parts)


def build_request(
    groups: List[Any],
    years: Any,
    last_raise: Any,
    include_grand_total: bool = False,
    raise_first_year: bool = False,
    step_column: bool = False,
) -> CalculationRequest:
    """
    Build a validated CalculationRequest from raw primitives.

    Args:
        groups: GroupInput instances or dicts with the same fields.
        years: Contract length; strings such as "3" are accepted.
        last_raise: Last contract raise percentage; strings accepted.
        include_grand_total: Emit the grand total block in the cost table.
        raise_first_year: Apply raises from year 1 rather than year 2.
        step_column: Step text carries a leading step number column.

    Returns:
        A validated CalculationRequest.

    Raises:
        InvalidConfiguration: If any parameter fails validation.
    """
    try:
        return CalculationRequest(
            groups=groups,
            contract={"years": years, "last_raise": last_raise},
            options={
                "include_grand_total": include_grand_total,
                "raise_first_year": raise_first_year,
                "step_column": step_column,
            },
        )
    except ValidationError as e:
        message = format_validation_error(e)
        logger.error(f"Invalid calculation input: {message}")
        raise InvalidConfiguration(message) from e
