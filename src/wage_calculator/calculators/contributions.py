"""Social insurance and housing fund contributions."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from wage_calculator.calculators.types import ContributionBreakdown, ContributionRate


class ContributionCalculator:
    """Applies a contribution schedule to a contribution base.

    The base may be clamped to a jurisdiction minimum and maximum; with no
    bounds configured the salary is used as is. Amounts are not rounded.
    """

    def __init__(
        self,
        rates: Mapping[str, ContributionRate],
        floor: Decimal | None = None,
        ceiling: Decimal | None = None,
    ):
        if floor is not None and ceiling is not None and floor > ceiling:
            raise ValueError(f"Contribution base floor {floor} exceeds ceiling {ceiling}")
        self.rates = rates
        self.floor = floor
        self.ceiling = ceiling

    def contribution_base(self, salary: Decimal) -> Decimal:
        """Return the base contributions are levied on."""
        base = salary
        if self.floor is not None and base < self.floor:
            base = self.floor
        if self.ceiling is not None and base > self.ceiling:
            base = self.ceiling
        return base

    def calculate(self, base: Decimal) -> ContributionBreakdown:
        """Calculate per-category personal and employer amounts."""
        personal: dict[str, Decimal] = {}
        employer: dict[str, Decimal] = {}

        for category, rate in self.rates.items():
            personal[category] = base * rate.personal
            employer[category] = base * rate.employer

        return ContributionBreakdown(
            base=base,
            personal=personal,
            employer=employer,
            personal_total=sum(personal.values(), Decimal("0")),
            employer_total=sum(employer.values(), Decimal("0")),
        )

    def empty(self) -> ContributionBreakdown:
        """Breakdown with every category at zero."""
        zeros = {category: Decimal("0") for category in self.rates}
        return ContributionBreakdown(
            base=Decimal("0"),
            personal=dict(zeros),
            employer=dict(zeros),
        )
