"""Hosted checkout transactions."""

from .models import (
    CheckoutUrl,
    Customer,
    InitializeResponse,
    Pagination,
    TransactionDetail,
    TransactionList,
    TransactionLog,
    TransactionLogsResponse,
    TransactionsResponse,
    TransactionSummary,
    VerifyTransactionResponse,
)
from .options import Customization, InitializeOptions, SplitType, Subaccount
from .reference import generate_tx_ref

__all__ = [
    "InitializeOptions",
    "Customization",
    "Subaccount",
    "SplitType",
    "CheckoutUrl",
    "TransactionDetail",
    "TransactionLog",
    "TransactionSummary",
    "TransactionList",
    "Customer",
    "Pagination",
    "InitializeResponse",
    "VerifyTransactionResponse",
    "TransactionsResponse",
    "TransactionLogsResponse",
    "generate_tx_ref",
]
