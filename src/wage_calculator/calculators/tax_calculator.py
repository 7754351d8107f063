"""Income tax calculation using quick-deduction brackets."""

from __future__ import annotations

from decimal import Decimal

from wage_calculator.calculators.tables import check_brackets
from wage_calculator.calculators.types import TaxBracket


class TaxCalculator:
    """Calculates income tax from a quick-deduction bracket table.

    A bracket ``(threshold, rate, quick_deduction)`` covers income strictly
    above its threshold up to the next threshold:

        tax = income * rate - quick_deduction

    The quick deduction reproduces the cumulative bracketed tax without
    summing the lower brackets, so the table must be continuous at every
    boundary. That is checked when the calculator is built.
    """

    def __init__(self, brackets: tuple[TaxBracket, ...]):
        check_brackets(brackets)
        self.brackets = brackets
        self._descending = tuple(sorted(brackets, key=lambda b: b.threshold, reverse=True))

    def bracket_for(self, income: Decimal) -> TaxBracket | None:
        """Return the bracket applying to income, or None for income <= 0."""
        if income <= 0:
            return None
        for bracket in self._descending:
            if income > bracket.threshold:
                return bracket
        return None

    def progressive_tax(self, income: Decimal) -> Decimal:
        """Calculate tax on taxable income. Non-positive income owes nothing."""
        bracket = self.bracket_for(income)
        if bracket is None:
            return Decimal("0")
        return bracket.tax_on(income)

    @staticmethod
    def flat_tax(amount: Decimal, rate: Decimal) -> Decimal:
        """Calculate flat-rate tax."""
        if amount <= 0:
            return Decimal("0")
        return amount * rate
