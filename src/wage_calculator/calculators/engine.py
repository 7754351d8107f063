"""Wage calculation engine - main orchestrator."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from wage_calculator.calculators.contributions import ContributionCalculator
from wage_calculator.calculators.tables import DEFAULT_TABLES, WageTables
from wage_calculator.calculators.tax_calculator import TaxCalculator
from wage_calculator.calculators.types import (
    CalculationModel,
    WageCalculationRequest,
    WageCalculationResult,
)
from wage_calculator.calculators.validation import parse_wage_request

logger = logging.getLogger(__name__)


class WageCalculator:
    """Computes a monthly wage breakdown from one validated request.

    Calculation pipeline (stable order):
    1) Hourly rate and overtime pay
    2) Gross salary = basic + overtime pay + bonus
    3) Contributions on the contribution base (itemized model)
    4) Taxable income and income tax
    5) Net salary

    Each request is computed under exactly one model:

    itemized
        taxable = basic + overtime - personal contributions - allowance
        tax     = progressive(taxable)
        net     = basic + overtime + bonus - personal contributions - tax

    flat_rate
        tax = gross * tax_rate
        net = gross - tax - deductions

    The calculator holds only immutable tables, so one instance serves any
    number of requests.
    """

    def __init__(self, tables: WageTables = DEFAULT_TABLES):
        self.tables = tables
        self.tax_calculator = TaxCalculator(tables.brackets)
        self.contribution_calculator = ContributionCalculator(
            tables.contribution_rates,
            floor=tables.contribution_base_floor,
            ceiling=tables.contribution_base_ceiling,
        )

    def hourly_rate(self, base_salary: Decimal) -> Decimal:
        return base_salary / self.tables.standard_monthly_hours

    def overtime_pay(self, request: WageCalculationRequest) -> Decimal:
        """Overtime hours paid at the hourly rate times the multiplier."""
        return (
            request.overtime_hours
            * self.hourly_rate(request.base_salary)
            * request.overtime_rate
        )

    def compute(self, request: WageCalculationRequest) -> WageCalculationResult:
        """Calculate the full breakdown for a request."""
        if request.model is CalculationModel.FLAT_RATE:
            result = self._compute_flat_rate(request)
        else:
            result = self._compute_itemized(request)

        logger.debug(
            "Computed %s wage: gross=%s net=%s",
            result.model.value,
            result.gross_salary,
            result.net_salary,
        )
        return result

    def _compute_itemized(self, request: WageCalculationRequest) -> WageCalculationResult:
        overtime_pay = self.overtime_pay(request)
        gross = request.base_salary + overtime_pay + request.bonus

        base = self.contribution_calculator.contribution_base(request.base_salary)
        contributions = self.contribution_calculator.calculate(base)

        # Bonus is outside the monthly tax base
        taxable_income = (
            request.base_salary
            + overtime_pay
            - contributions.personal_total
            - self.tables.tax_free_allowance
        )
        bracket = self.tax_calculator.bracket_for(taxable_income)
        income_tax = self.tax_calculator.progressive_tax(taxable_income)

        net_salary = gross - contributions.personal_total - income_tax

        return WageCalculationResult(
            model=CalculationModel.ITEMIZED,
            basic=request.base_salary,
            hourly_rate=self.hourly_rate(request.base_salary),
            overtime_pay=overtime_pay,
            bonus=request.bonus,
            gross_salary=gross,
            contributions=contributions,
            taxable_income=taxable_income,
            income_tax=income_tax,
            net_salary=net_salary,
            marginal_rate=bracket.rate if bracket else Decimal("0"),
        )

    def _compute_flat_rate(self, request: WageCalculationRequest) -> WageCalculationResult:
        overtime_pay = self.overtime_pay(request)
        gross = request.base_salary + overtime_pay + request.bonus

        income_tax = self.tax_calculator.flat_tax(gross, request.tax_rate)
        net_salary = gross - income_tax - request.deductions

        return WageCalculationResult(
            model=CalculationModel.FLAT_RATE,
            basic=request.base_salary,
            hourly_rate=self.hourly_rate(request.base_salary),
            overtime_pay=overtime_pay,
            bonus=request.bonus,
            gross_salary=gross,
            contributions=self.contribution_calculator.empty(),
            taxable_income=gross,
            income_tax=income_tax,
            net_salary=net_salary,
            tax_rate=request.tax_rate,
            other_deductions=request.deductions,
        )


def calculate_wage(
    arguments: Any,
    tables: WageTables = DEFAULT_TABLES,
    default_model: CalculationModel = CalculationModel.ITEMIZED,
) -> WageCalculationResult:
    """Validate raw arguments and compute the breakdown in one step.

    Raises:
        InvalidArgumentsError: If the arguments do not validate.
    """
    request = parse_wage_request(arguments, tables=tables, default_model=default_model)
    return WageCalculator(tables).compute(request)
