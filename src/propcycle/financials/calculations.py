# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for cost, receipt and margin figures. These functions
are pure (math-only) and independent of persistence; aggregation and summary
code delegates here so each figure has a single definition.
"""

from typing import Iterable

from ..utils.rounding import round_half_up
from .entries import (
    CostEntryLike,
    InstallmentLike,
    ReceiptLike,
    parse_cost_entries,
    parse_installments,
    parse_receipts,
)


class FinancialCalculations:
    """
    Pure mathematical functions for property financials.

    None of these floor at zero: negative balances and margins are meaningful
    (overpayment, cost overrun). Rows that fail validation are left out of
    totals and numbering.
    """

    @staticmethod
    def total_cost(entries: Iterable[CostEntryLike]) -> float:
        return sum((entry.amount for entry in parse_cost_entries(entries)), 0.0)

    @staticmethod
    def total_receipts(receipts: Iterable[ReceiptLike]) -> float:
        return sum((receipt.amount for receipt in parse_receipts(receipts)), 0.0)

    @staticmethod
    def total_installments(installments: Iterable[InstallmentLike]) -> float:
        return sum((item.amount for item in parse_installments(installments)), 0.0)

    @staticmethod
    def net_income(price: float, total_cost: float) -> float:
        return price - total_cost

    @staticmethod
    def remaining_balance(price: float, total_receipts: float) -> float:
        return price - total_receipts

    @staticmethod
    def payment_progress(total_receipts: float, price: float) -> float:
        """
        Percentage of the price received, rounded to two decimals.

        Args:
            total_receipts: Sum of received payments
            price: Agreed sale or purchase price

        Returns:
            Percentage, not capped at 100 (overpayment reads above 100).
            0 when price is not positive.

        Example:
            ```python
            FinancialCalculations.payment_progress(1_000_000, 3_000_000)  # 33.33
            ```
        """
        if price <= 0:
            return 0.0
        return round_half_up(100 * total_receipts / price, 2)

    @staticmethod
    def profit_margin(net_income: float, price: float) -> float:
        """Net income as a percentage of price, two decimals; 0 when price is not positive."""
        if price <= 0:
            return 0.0
        return round_half_up(100 * net_income / price, 2)

    @staticmethod
    def next_receipt_number(receipts: Iterable[ReceiptLike]) -> int:
        """One past the highest existing receipt number, or 1 for the first receipt."""
        numbers = [receipt.receipt_number for receipt in parse_receipts(receipts)]
        return max(numbers) + 1 if numbers else 1

    @staticmethod
    def next_installment_number(installments: Iterable[InstallmentLike]) -> int:
        numbers = [item.installment_number for item in parse_installments(installments)]
        return max(numbers) + 1 if numbers else 1
