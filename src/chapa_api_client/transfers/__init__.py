"""Single and bulk payouts to bank accounts."""

from .models import (
    BulkTransferResponse,
    BulkTransferResult,
    TransferDetail,
    TransferEntry,
    TransferMeta,
    TransferResponse,
    TransfersResponse,
    VerifyTransferResponse,
)
from .options import BulkTransferEntry, BulkTransferOptions, TransferOptions

__all__ = [
    "TransferOptions",
    "BulkTransferEntry",
    "BulkTransferOptions",
    "TransferDetail",
    "TransferEntry",
    "TransferMeta",
    "BulkTransferResult",
    "TransferResponse",
    "VerifyTransferResponse",
    "BulkTransferResponse",
    "TransfersResponse",
]
