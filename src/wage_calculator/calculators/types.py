"""Type definitions for the wage calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


class CalculationModel(str, Enum):
    """How gross pay, contributions and tax combine into net pay."""

    ITEMIZED = "itemized"  # progressive tax after contributions and allowance
    FLAT_RATE = "flat_rate"  # single rate on gross, then other deductions


@dataclass(frozen=True)
class TaxBracket:
    """Quick-deduction tax bracket.

    Applies to income strictly above ``threshold``; the tax for such income
    is ``income * rate - quick_deduction``.
    """

    threshold: Decimal
    rate: Decimal  # As decimal, e.g., 0.10 for 10%
    quick_deduction: Decimal = Decimal("0")

    def tax_on(self, income: Decimal) -> Decimal:
        return income * self.rate - self.quick_deduction


@dataclass(frozen=True)
class ContributionRate:
    """Personal and employer share of one social contribution category."""

    personal: Decimal
    employer: Decimal

    def __post_init__(self) -> None:
        """Validate rates."""
        for name in ("personal", "employer"):
            value = getattr(self, name)
            if not Decimal("0") <= value <= Decimal("1"):
                raise ValueError(f"{name} rate must be within [0, 1], got {value}")


@dataclass(frozen=True)
class WageCalculationRequest:
    """Validated, fully defaulted calculation input."""

    base_salary: Decimal
    overtime_hours: Decimal = Decimal("0")
    overtime_rate: Decimal = Decimal("1.5")
    bonus: Decimal = Decimal("0")
    tax_rate: Decimal = Decimal("0.2")  # flat_rate model only
    deductions: Decimal = Decimal("0")  # flat_rate model only
    model: CalculationModel = CalculationModel.ITEMIZED


@dataclass(frozen=True)
class ContributionBreakdown:
    """Social insurance and housing fund amounts for one contribution base."""

    base: Decimal
    personal: dict[str, Decimal] = field(default_factory=dict)
    employer: dict[str, Decimal] = field(default_factory=dict)
    personal_total: Decimal = Decimal("0")
    employer_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class WageCalculationResult:
    """Full breakdown of one wage calculation.

    Every field is derived from the request and the tables only, so two
    results computed from the same input are equal.
    """

    model: CalculationModel
    basic: Decimal
    hourly_rate: Decimal
    overtime_pay: Decimal
    bonus: Decimal
    gross_salary: Decimal
    contributions: ContributionBreakdown
    taxable_income: Decimal
    income_tax: Decimal
    net_salary: Decimal
    marginal_rate: Decimal | None = None  # itemized model only
    tax_rate: Decimal | None = None  # flat_rate model only
    other_deductions: Decimal = Decimal("0")

    def to_dict(self) -> dict[str, Any]:
        """Return the breakdown keyed the way the tool reports it.

        Amounts stay unrounded Decimals; rounding happens at serialization.
        """
        personal: dict[str, Any] = dict(self.contributions.personal)
        personal["total_personal"] = self.contributions.personal_total
        company: dict[str, Any] = dict(self.contributions.employer)
        company["total_company"] = self.contributions.employer_total

        data: dict[str, Any] = {
            "model": self.model.value,
            "basic": self.basic,
            "hourly_rate": self.hourly_rate,
            "overtime_pay": self.overtime_pay,
            "bonus": self.bonus,
            "total_monthly_salary": self.gross_salary,
            "pre_tax_salary": self.gross_salary,
            "insurance_base": self.contributions.base,
            "personal_insurance": personal,
            "company_insurance": company,
            "taxable_income": self.taxable_income,
            "individual_income_tax": self.income_tax,
            "marginal_rate": self.marginal_rate,
            "net_salary": self.net_salary,
        }
        if self.model is CalculationModel.FLAT_RATE:
            data["tax_rate"] = self.tax_rate
            data["other_deductions"] = self.other_deductions
        return data
