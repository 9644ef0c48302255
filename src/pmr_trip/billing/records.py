"""Mapping of invoice breakdowns onto the stored invoice record."""

import logging
import random
import string
import time
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field

from pmr_trip.settings import BillingSettings

from .invoice import InvoiceBreakdown, TripChargeRequest

logger = logging.getLogger(__name__)

INVOICE_STATUS_PENDING = "en_attente"
_SUFFIX_ALPHABET = string.digits + string.ascii_uppercase


class InvoiceRecord(BaseModel):
    """Invoice row as written by the reservation workflow."""

    num_facture: str
    montant_ht: float = Field(ge=0)
    montant_tva: float = Field(ge=0)
    montant_ttc: float = Field(ge=0)
    statut: str = INVOICE_STATUS_PENDING
    date_echeance: datetime
    description: str
    details: dict[str, Any]


def should_issue_invoice(request: TripChargeRequest) -> bool:
    """Invoices are only issued for reservations that requested assistance."""
    return request.requires_assistance


def generate_invoice_number(
    prefix: str = "FACT",
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """Build FACT-<epoch ms>-<5 upper-case base-36 chars>."""
    rng = rng or random.Random()
    if now is None:
        millis = time.time_ns() // 1_000_000
    else:
        millis = int(now.timestamp() * 1000)
    suffix = "".join(rng.choice(_SUFFIX_ALPHABET) for _ in range(5))
    return f"{prefix}-{millis}-{suffix}"


def round_currency(amount: float) -> float:
    return round(amount, 2)


class InvoiceRecordBuilder:
    """Turns a breakdown into a persistable record.

    Amounts are rounded to cents here, at the presentation boundary, never
    inside the calculator.
    """

    def __init__(
        self,
        settings: BillingSettings | None = None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ):
        self._settings = settings or BillingSettings()
        self._clock = clock or (lambda: datetime.now(UTC))
        self._rng = rng or random.Random()

    def build(self, breakdown: InvoiceBreakdown) -> InvoiceRecord:
        issued_at = self._clock()
        number = generate_invoice_number(self._settings.invoice_prefix, issued_at, self._rng)

        record = InvoiceRecord(
            num_facture=number,
            montant_ht=round_currency(breakdown.subtotal),
            montant_tva=round_currency(breakdown.tax_amount),
            montant_ttc=round_currency(breakdown.total_amount),
            date_echeance=issued_at + timedelta(days=self._settings.payment_due_days),
            description=breakdown.description,
            details=breakdown.line_items(),
        )
        logger.info(f"Invoice {number} prepared: {record.montant_ttc:.2f} EUR TTC")
        return record
