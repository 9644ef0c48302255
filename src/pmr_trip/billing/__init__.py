from .invoice import (
    FEE_SCHEDULE,
    InvoiceBreakdown,
    InvoiceCalculator,
    TripChargeRequest,
    compute_invoice,
)
from .records import (
    InvoiceRecord,
    InvoiceRecordBuilder,
    generate_invoice_number,
    should_issue_invoice,
)

__all__ = [
    "FEE_SCHEDULE",
    "TripChargeRequest",
    "InvoiceBreakdown",
    "InvoiceCalculator",
    "compute_invoice",
    "InvoiceRecord",
    "InvoiceRecordBuilder",
    "generate_invoice_number",
    "should_issue_invoice",
]
