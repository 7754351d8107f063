"""Tax brackets and contribution schedule for the supported jurisdiction.

Tables are plain immutable values. The calculator receives them at
construction, so tests can swap in alternative rates without touching
module state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

from wage_calculator.calculators.types import ContributionRate, TaxBracket


# PRC individual income tax, comprehensive income, monthly quick-deduction form
MONTHLY_TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("0.03"), Decimal("0")),
    TaxBracket(Decimal("3000"), Decimal("0.10"), Decimal("210")),
    TaxBracket(Decimal("12000"), Decimal("0.20"), Decimal("1410")),
    TaxBracket(Decimal("25000"), Decimal("0.25"), Decimal("2660")),
    TaxBracket(Decimal("35000"), Decimal("0.30"), Decimal("4410")),
    TaxBracket(Decimal("55000"), Decimal("0.35"), Decimal("7160")),
    TaxBracket(Decimal("80000"), Decimal("0.45"), Decimal("15160")),
)

# Shenzhen 2024 social insurance and housing fund rates (medical includes maternity)
SHENZHEN_CONTRIBUTION_RATES: Mapping[str, ContributionRate] = MappingProxyType(
    {
        "pension": ContributionRate(Decimal("0.08"), Decimal("0.16")),
        "unemployment": ContributionRate(Decimal("0.004"), Decimal("0.006")),
        "injury": ContributionRate(Decimal("0"), Decimal("0.0156")),
        "medical": ContributionRate(Decimal("0.02"), Decimal("0.07")),
        "housing_fund": ContributionRate(Decimal("0.06"), Decimal("0.06")),
    }
)


class TableConsistencyError(ValueError):
    """Raised when a bracket table is unordered or discontinuous."""


def check_brackets(brackets: tuple[TaxBracket, ...]) -> None:
    """Verify ordering and continuity of a quick-deduction bracket table.

    At each boundary the tax from the lower bracket must equal the tax from
    the upper one, otherwise the quick-deduction constants are wrong.
    """
    if not brackets:
        raise TableConsistencyError("At least one tax bracket is required")
    if brackets[0].threshold != 0:
        raise TableConsistencyError("First tax bracket must start at 0")

    for lower, upper in zip(brackets, brackets[1:]):
        if upper.threshold <= lower.threshold:
            raise TableConsistencyError(
                f"Bracket thresholds must increase: {lower.threshold} >= {upper.threshold}"
            )
        below = lower.tax_on(upper.threshold)
        above = upper.tax_on(upper.threshold)
        if below != above:
            raise TableConsistencyError(
                f"Tax jumps at {upper.threshold}: {below} below vs {above} above"
            )


@dataclass(frozen=True)
class WageTables:
    """Immutable rate configuration for one jurisdiction and year."""

    jurisdiction: str = "Shenzhen 2024"
    brackets: tuple[TaxBracket, ...] = MONTHLY_TAX_BRACKETS
    contribution_rates: Mapping[str, ContributionRate] = field(
        default_factory=lambda: SHENZHEN_CONTRIBUTION_RATES
    )
    tax_free_allowance: Decimal = Decimal("5000")
    standard_monthly_hours: Decimal = Decimal("160")  # 20 working days x 8 h
    default_overtime_rate: Decimal = Decimal("1.5")
    default_flat_tax_rate: Decimal = Decimal("0.2")

    # Contribution base clamp, as ratios of the prior-year average wage
    average_monthly_wage: Decimal = Decimal("59469")
    contribution_base_floor_ratio: Decimal = Decimal("0.6")
    contribution_base_ceiling_ratio: Decimal = Decimal("3")
    clamp_contribution_base: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        check_brackets(self.brackets)
        if self.standard_monthly_hours <= 0:
            raise ValueError("standard_monthly_hours must be positive")
        if self.tax_free_allowance < 0:
            raise ValueError("tax_free_allowance cannot be negative")
        if self.contribution_base_floor_ratio > self.contribution_base_ceiling_ratio:
            raise ValueError("contribution base floor exceeds ceiling")
        # Freeze caller-supplied dicts
        if not isinstance(self.contribution_rates, MappingProxyType):
            object.__setattr__(
                self, "contribution_rates", MappingProxyType(dict(self.contribution_rates))
            )

    @property
    def contribution_base_floor(self) -> Decimal | None:
        if not self.clamp_contribution_base:
            return None
        return self.average_monthly_wage * self.contribution_base_floor_ratio

    @property
    def contribution_base_ceiling(self) -> Decimal | None:
        if not self.clamp_contribution_base:
            return None
        return self.average_monthly_wage * self.contribution_base_ceiling_ratio

    def with_overrides(self, **changes: Any) -> WageTables:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def describe(self) -> dict[str, Any]:
        """Plain-data view of the tables for display."""
        return {
            "jurisdiction": self.jurisdiction,
            "tax_free_allowance": str(self.tax_free_allowance),
            "standard_monthly_hours": str(self.standard_monthly_hours),
            "brackets": [
                {
                    "threshold": str(b.threshold),
                    "rate": str(b.rate),
                    "quick_deduction": str(b.quick_deduction),
                }
                for b in self.brackets
            ],
            "contribution_rates": {
                name: {"personal": str(rate.personal), "employer": str(rate.employer)}
                for name, rate in self.contribution_rates.items()
            },
            "contribution_base_floor": (
                str(self.contribution_base_floor)
                if self.contribution_base_floor is not None
                else None
            ),
            "contribution_base_ceiling": (
                str(self.contribution_base_ceiling)
                if self.contribution_base_ceiling is not None
                else None
            ),
        }


DEFAULT_TABLES = WageTables()
