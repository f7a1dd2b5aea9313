# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-workflow financial summaries.

Each summary is always complete: every figure is present and every category
key of the domain appears in the breakdown, even for empty inputs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..core.primitives.enums import CostPaymentStatus
from ..core.primitives.model import Model
from ..core.primitives.types import NonNegativeInt
from .aggregation import totals_by_category
from .calculations import FinancialCalculations
from .domains import (
    ACQUISITION_COST_DOMAIN,
    HANDOVER_COST_DOMAIN,
    SUBDIVISION_COST_DOMAIN,
    CostDomain,
)
from .entries import (
    CostEntry,
    CostEntryLike,
    InstallmentLike,
    ReceiptLike,
    parse_cost_entries,
    parse_installments,
    parse_receipts,
)


class HandoverFinancialSummary(Model):
    handover_price: float
    total_costs: float
    total_receipts: float
    net_income: float
    remaining_balance: float
    payment_progress: float
    profit_margin: float
    costs_by_category: Dict[str, float]
    receipt_count: NonNegativeInt
    next_receipt_number: int


class AcquisitionFinancialSummary(Model):
    purchase_price: float
    total_costs: float
    total_payments: float
    subdivision_costs: float
    total_acquisition_cost: float
    remaining_balance: float
    payment_progress: float
    costs_by_category: Dict[str, float]
    next_installment_number: int


class SubdivisionCostSummary(Model):
    """Subdivision spend split by settlement state. Partially paid counts as pending."""

    total_costs: float
    paid_costs: float
    pending_costs: float
    costs_by_category: Dict[str, float]
    costs_by_status: Dict[str, float]
    cost_count: NonNegativeInt
    paid_count: NonNegativeInt
    pending_count: NonNegativeInt


def summarize_handover(
    price: float,
    costs: Iterable[CostEntryLike],
    receipts: Iterable[ReceiptLike],
    domain: Optional[CostDomain] = None,
) -> HandoverFinancialSummary:
    costs = parse_cost_entries(costs)
    receipts = parse_receipts(receipts)
    domain = domain or HANDOVER_COST_DOMAIN
    calc = FinancialCalculations

    total_costs = calc.total_cost(costs)
    total_receipts = calc.total_receipts(receipts)
    net_income = calc.net_income(price, total_costs)

    return HandoverFinancialSummary(
        handover_price=price,
        total_costs=total_costs,
        total_receipts=total_receipts,
        net_income=net_income,
        remaining_balance=calc.remaining_balance(price, total_receipts),
        payment_progress=calc.payment_progress(total_receipts, price),
        profit_margin=calc.profit_margin(net_income, price),
        costs_by_category=totals_by_category(costs, domain),
        receipt_count=len(receipts),
        next_receipt_number=calc.next_receipt_number(receipts),
    )


def summarize_acquisition(
    price: float,
    costs: Iterable[CostEntryLike],
    installments: Iterable[InstallmentLike],
    subdivision_costs: Iterable[CostEntryLike] = (),
    domain: Optional[CostDomain] = None,
) -> AcquisitionFinancialSummary:
    """
    Purchase-side summary of a property.

    Total acquisition cost is price plus recorded acquisition costs plus any
    subdivision costs. Installments are tracked against the price; they are
    not added to the PAYMENTS category, so category totals always add up to
    the recorded costs.
    """
    costs = parse_cost_entries(costs)
    installments = parse_installments(installments)
    domain = domain or ACQUISITION_COST_DOMAIN
    calc = FinancialCalculations

    total_costs = calc.total_cost(costs)
    total_payments = calc.total_installments(installments)
    subdivision_total = calc.total_cost(subdivision_costs)

    return AcquisitionFinancialSummary(
        purchase_price=price,
        total_costs=total_costs,
        total_payments=total_payments,
        subdivision_costs=subdivision_total,
        total_acquisition_cost=price + total_costs + subdivision_total,
        remaining_balance=calc.remaining_balance(price, total_payments),
        payment_progress=calc.payment_progress(total_payments, price),
        costs_by_category=totals_by_category(costs, domain),
        next_installment_number=calc.next_installment_number(installments),
    )


def summarize_subdivision_costs(
    costs: Iterable[CostEntryLike], domain: Optional[CostDomain] = None
) -> SubdivisionCostSummary:
    domain = domain or SUBDIVISION_COST_DOMAIN
    # Entries without a payment status or category are not yet filed
    valid: List[CostEntry] = [
        entry
        for entry in parse_cost_entries(costs)
        if entry.payment_status is not None and entry.category
    ]

    by_status = {status.value: 0.0 for status in CostPaymentStatus}
    for entry in valid:
        by_status[entry.payment_status.value] += entry.amount

    pending_states = (CostPaymentStatus.PENDING, CostPaymentStatus.PARTIALLY_PAID)
    return SubdivisionCostSummary(
        total_costs=FinancialCalculations.total_cost(valid),
        paid_costs=by_status[CostPaymentStatus.PAID.value],
        pending_costs=sum(by_status[status.value] for status in pending_states),
        costs_by_category=totals_by_category(valid, domain),
        costs_by_status=by_status,
        cost_count=len(valid),
        paid_count=sum(1 for entry in valid if entry.payment_status is CostPaymentStatus.PAID),
        pending_count=sum(1 for entry in valid if entry.payment_status in pending_states),
    )
