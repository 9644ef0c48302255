from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pmr_trip.core.exceptions import InvalidArgumentError

# Single source of truth for PMR pricing; every invoice goes through this table.
FEE_SCHEDULE: dict[str, float] = {
    "base_assistance": 25.0,
    "per_extra_leg": 15.0,
    "special_assistance": 10.0,
    "tax_rate": 0.20,
}


class TripChargeRequest(BaseModel):
    """Reservation attributes that drive the invoice.

    is_multimodal is not cross-checked against leg_count; the surcharge simply
    requires both.
    """

    requires_assistance: bool
    leg_count: int = Field(ge=1)
    is_multimodal: bool
    origin_label: str = ""
    destination_label: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("leg_count", mode="before")
    @classmethod
    def validate_leg_count(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool) and v < 1:
            raise InvalidArgumentError(f"Leg count must be >= 1, got {v}")
        return v


class InvoiceBreakdown(BaseModel):
    """Detailed breakdown of invoice components, at full precision."""

    base_assistance_fee: float = Field(ge=0)
    multimodal_surcharge: float = Field(ge=0)
    special_assistance_fee: float = Field(ge=0)
    leg_count: int = Field(ge=1)
    subtotal: float = Field(ge=0)
    tax_amount: float = Field(ge=0)
    total_amount: float = Field(ge=0)
    tax_rate: float = Field(ge=0, le=1)
    description: str

    model_config = ConfigDict(frozen=True)

    def line_items(self) -> dict[str, Any]:
        """Invoice details as stored alongside the amounts.

        Only the fees that apply are listed.
        """
        details: dict[str, Any] = {}
        if self.base_assistance_fee:
            details["tarif_base"] = self.base_assistance_fee
        if self.multimodal_surcharge:
            details["nb_etapes"] = self.leg_count
            details["tarif_multimodal"] = self.multimodal_surcharge
        if self.special_assistance_fee:
            details["tarif_assistance_speciale"] = self.special_assistance_fee
        return details


class InvoiceCalculator:
    """Computes PMR assistance invoices from reservation attributes."""

    BASE_ASSISTANCE_FEE = FEE_SCHEDULE["base_assistance"]
    PER_EXTRA_LEG_FEE = FEE_SCHEDULE["per_extra_leg"]
    SPECIAL_ASSISTANCE_FEE = FEE_SCHEDULE["special_assistance"]
    TAX_RATE = FEE_SCHEDULE["tax_rate"]

    def calculate(self, request: TripChargeRequest) -> InvoiceBreakdown:
        """
        Calculate the invoice for a reservation.

        A request without assistance and without a multimodal itinerary yields
        an all-zero breakdown; deciding whether to persist it is up to the caller.
        """
        base_fee = self.BASE_ASSISTANCE_FEE if request.requires_assistance else 0.0

        if request.is_multimodal and request.leg_count > 1:
            surcharge = (request.leg_count - 1) * self.PER_EXTRA_LEG_FEE
        else:
            surcharge = 0.0

        special_fee = self.SPECIAL_ASSISTANCE_FEE if request.requires_assistance else 0.0

        subtotal = base_fee + surcharge + special_fee
        tax_amount = subtotal * self.TAX_RATE
        total_amount = subtotal + tax_amount

        return InvoiceBreakdown(
            base_assistance_fee=base_fee,
            multimodal_surcharge=surcharge,
            special_assistance_fee=special_fee,
            leg_count=request.leg_count,
            subtotal=subtotal,
            tax_amount=tax_amount,
            total_amount=total_amount,
            tax_rate=self.TAX_RATE,
            description=describe_trip(request.origin_label, request.destination_label),
        )


def describe_trip(origin_label: str, destination_label: str) -> str:
    return f"Assistance PMR - {origin_label} -> {destination_label}"


_calculator = InvoiceCalculator()


def compute_invoice(request: TripChargeRequest) -> InvoiceBreakdown:
    return _calculator.calculate(request)
