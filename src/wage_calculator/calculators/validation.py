"""Parse untrusted tool arguments into a typed calculation request."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wage_calculator.calculators.tables import DEFAULT_TABLES, WageTables
from wage_calculator.calculators.types import CalculationModel, WageCalculationRequest
from wage_calculator.errors import InvalidArgumentsError

logger = logging.getLogger(__name__)


class WageArguments(BaseModel):
    """Raw tool arguments as sent by the caller.

    Numeric fields are strict: ints and floats pass, bools and numeric
    strings do not. NaN and infinities are rejected.
    """

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    base_salary: float = Field(gt=0, strict=True)
    overtime_hours: Optional[float] = Field(default=None, ge=0, strict=True)
    overtime_rate: Optional[float] = Field(default=None, ge=1, strict=True)
    bonus: Optional[float] = Field(default=None, ge=0, strict=True)
    tax_rate: Optional[float] = Field(default=None, ge=0, le=1, strict=True)
    deductions: Optional[float] = Field(default=None, ge=0, strict=True)
    model: Optional[CalculationModel] = None


def to_decimal(value: int | float) -> Decimal:
    """Convert a JSON number to Decimal without binary float artifacts."""
    return Decimal(str(value))


def parse_wage_request(
    payload: Any,
    tables: WageTables = DEFAULT_TABLES,
    default_model: CalculationModel = CalculationModel.ITEMIZED,
) -> WageCalculationRequest:
    """Validate raw arguments and fill in defaults.

    Args:
        payload: Untrusted arguments, normally a JSON object.
        tables: Source of default multipliers and rates.
        default_model: Model used when the payload does not name one.

    Returns:
        A fully defaulted request; downstream code does not re-check it.

    Raises:
        InvalidArgumentsError: On any missing, mistyped or out-of-range value.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        logger.info("Rejected wage arguments: payload is %s", type(payload).__name__)
        raise InvalidArgumentsError()

    try:
        args = WageArguments.model_validate(dict(payload))
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.info("Rejected wage arguments: %d validation error(s)", len(errors))
        raise InvalidArgumentsError(errors=errors) from exc

    return WageCalculationRequest(
        base_salary=to_decimal(args.base_salary),
        overtime_hours=(
            to_decimal(args.overtime_hours) if args.overtime_hours is not None else Decimal("0")
        ),
        overtime_rate=(
            to_decimal(args.overtime_rate)
            if args.overtime_rate is not None
            else tables.default_overtime_rate
        ),
        bonus=to_decimal(args.bonus) if args.bonus is not None else Decimal("0"),
        tax_rate=(
            to_decimal(args.tax_rate) if args.tax_rate is not None else tables.default_flat_tax_rate
        ),
        deductions=to_decimal(args.deductions) if args.deductions is not None else Decimal("0"),
        model=args.model or default_model,
    )
