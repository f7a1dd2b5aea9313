# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost entries, receipts and installments as read from persistence rows.

Rows carry amounts as `amount_kes` and categories as `cost_category`; those
column names are accepted alongside `amount` and `category`. Missing amounts
read as zero. The bulk parsers skip rows that fail validation and log them at WARNING.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, List, Mapping, Optional, TypeVar, Union

from pydantic import ValidationError, field_validator, model_validator

from ..core.primitives.enums import CostPaymentStatus, PaymentMethod
from ..core.primitives.model import BoundaryModel
from ..core.primitives.types import PositiveInt

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _rename_column(values: Any, column: str, field: str) -> Any:
    if isinstance(values, Mapping) and column in values and field not in values:
        values = {**values, field: values[column]}
    return values


class _AmountRow(BoundaryModel):
    amount: float = 0.0

    @model_validator(mode="before")
    def read_amount_column(cls, values):
        """Accept the `amount_kes` column as `amount`."""
        return _rename_column(values, "amount_kes", "amount")

    @field_validator("amount", mode="before")
    @classmethod
    def null_amount_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class CostEntry(_AmountRow):
    """
    One recorded cost.

    `category` is kept as a plain string: entries written under an older or
    foreign category vocabulary still parse and are dropped at aggregation.
    """

    id: Optional[str] = None
    cost_type_id: Optional[str] = None
    category: Optional[str] = None
    payment_status: Optional[CostPaymentStatus] = None
    payment_date: Optional[date] = None
    notes: Optional[str] = None

    @model_validator(mode="before")
    def read_category_column(cls, values):
        return _rename_column(values, "cost_category", "category")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return None if value is None else str(value)

    @field_validator("category", "cost_type_id", "payment_status", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PaymentReceipt(_AmountRow):
    """A buyer payment received during handover."""

    receipt_number: PositiveInt
    payment_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    payment_reference: Optional[str] = None
    notes: Optional[str] = None


class PaymentInstallment(_AmountRow):
    """A purchase price installment paid to a seller."""

    installment_number: PositiveInt
    payment_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    payment_reference: Optional[str] = None
    notes: Optional[str] = None


CostEntryLike = Union[CostEntry, Mapping[str, Any]]
ReceiptLike = Union[PaymentReceipt, Mapping[str, Any]]
InstallmentLike = Union[PaymentInstallment, Mapping[str, Any]]


def parse_cost_entry(entry: CostEntryLike) -> CostEntry:
    return entry if isinstance(entry, CostEntry) else CostEntry.model_validate(dict(entry))


def parse_receipt(receipt: ReceiptLike) -> PaymentReceipt:
    if isinstance(receipt, PaymentReceipt):
        return receipt
    return PaymentReceipt.model_validate(dict(receipt))


def parse_installment(installment: InstallmentLike) -> PaymentInstallment:
    if isinstance(installment, PaymentInstallment):
        return installment
    return PaymentInstallment.model_validate(dict(installment))


def _parse_rows(rows: Iterable[Any], parser: Callable[[Any], T], kind: str) -> List[T]:
    parsed = []
    for row in rows:
        try:
            parsed.append(parser(row))
        except ValidationError as e:
            problems = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
            logger.warning(f"Skipping malformed {kind}: {problems}")
    return parsed


def parse_cost_entries(entries: Iterable[CostEntryLike]) -> List[CostEntry]:
    return _parse_rows(entries, parse_cost_entry, "cost entry")


def parse_receipts(receipts: Iterable[ReceiptLike]) -> List[PaymentReceipt]:
    return _parse_rows(receipts, parse_receipt, "receipt")


def parse_installments(installments: Iterable[InstallmentLike]) -> List[PaymentInstallment]:
    return _parse_rows(installments, parse_installment, "installment")
