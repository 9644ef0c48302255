import pytest
from pydantic import ValidationError

from pmr_trip.billing import FEE_SCHEDULE, InvoiceCalculator, TripChargeRequest, compute_invoice
from pmr_trip.core.exceptions import InvalidArgumentError


def make_request(**overrides) -> TripChargeRequest:
    data = {
        "requires_assistance": True,
        "leg_count": 1,
        "is_multimodal": False,
        "origin_label": "Paris Gare de Lyon",
        "destination_label": "Marseille Saint-Charles",
    }
    data.update(overrides)
    return TripChargeRequest(**data)


@pytest.fixture
def calculator():
    return InvoiceCalculator()


class TestInvoiceCalculator:
    def test_no_assistance_single_leg_is_free(self, calculator):
        breakdown = calculator.calculate(make_request(requires_assistance=False))

        assert breakdown.base_assistance_fee == 0
        assert breakdown.multimodal_surcharge == 0
        assert breakdown.special_assistance_fee == 0
        assert breakdown.subtotal == 0
        assert breakdown.tax_amount == 0
        assert breakdown.total_amount == 0

    def test_assistance_single_leg(self, calculator):
        breakdown = calculator.calculate(make_request())

        assert breakdown.base_assistance_fee == 25
        assert breakdown.special_assistance_fee == 10
        assert breakdown.subtotal == 35
        assert breakdown.tax_amount == pytest.approx(7.0)
        assert breakdown.total_amount == pytest.approx(42.0)

    def test_multimodal_three_legs(self, calculator):
        breakdown = calculator.calculate(make_request(leg_count=3, is_multimodal=True))

        assert breakdown.multimodal_surcharge == 30
        assert breakdown.subtotal == 65
        assert breakdown.tax_amount == pytest.approx(13.0)
        assert breakdown.total_amount == pytest.approx(78.0)

    def test_multimodal_without_assistance_still_charges_surcharge(self, calculator):
        breakdown = calculator.calculate(
            make_request(requires_assistance=False, leg_count=2, is_multimodal=True)
        )

        assert breakdown.base_assistance_fee == 0
        assert breakdown.multimodal_surcharge == 15
        assert breakdown.subtotal == 15

    def test_multiple_legs_without_multimodal_flag(self, calculator):
        breakdown = calculator.calculate(make_request(leg_count=4, is_multimodal=False))

        assert breakdown.multimodal_surcharge == 0
        assert breakdown.subtotal == 35

    def test_multimodal_flag_with_single_leg(self, calculator):
        breakdown = calculator.calculate(make_request(leg_count=1, is_multimodal=True))

        assert breakdown.multimodal_surcharge == 0

    @pytest.mark.parametrize("assistance", [True, False])
    @pytest.mark.parametrize("legs", [1, 2, 3, 7])
    @pytest.mark.parametrize("multimodal", [True, False])
    def test_totals_are_consistent(self, calculator, assistance, legs, multimodal):
        breakdown = calculator.calculate(
            make_request(requires_assistance=assistance, leg_count=legs, is_multimodal=multimodal)
        )

        assert breakdown.subtotal == pytest.approx(
            breakdown.base_assistance_fee
            + breakdown.multimodal_surcharge
            + breakdown.special_assistance_fee,
            abs=1e-9,
        )
        assert breakdown.tax_amount == pytest.approx(breakdown.subtotal * 0.20, abs=1e-9)
        assert breakdown.total_amount == pytest.approx(
            breakdown.subtotal + breakdown.tax_amount, abs=1e-9
        )

    def test_tax_rate_is_fixed(self, calculator):
        breakdown = calculator.calculate(make_request())

        assert breakdown.tax_rate == 0.20
        assert FEE_SCHEDULE["tax_rate"] == 0.20

    def test_description(self, calculator):
        breakdown = calculator.calculate(make_request())

        assert breakdown.description == (
            "Assistance PMR - Paris Gare de Lyon -> Marseille Saint-Charles"
        )

    def test_same_input_same_output(self, calculator):
        request = make_request(leg_count=3, is_multimodal=True)

        assert calculator.calculate(request) == calculator.calculate(request)
        assert compute_invoice(request) == calculator.calculate(request)


class TestLineItems:
    def test_assistance_only(self):
        details = compute_invoice(make_request()).line_items()

        assert details == {"tarif_base": 25, "tarif_assistance_speciale": 10}

    def test_multimodal_details(self):
        details = compute_invoice(make_request(leg_count=3, is_multimodal=True)).line_items()

        assert details["nb_etapes"] == 3
        assert details["tarif_multimodal"] == 30

    def test_free_trip_has_no_details(self):
        details = compute_invoice(make_request(requires_assistance=False)).line_items()

        assert details == {}


class TestTripChargeRequest:
    def test_rejects_zero_legs(self):
        with pytest.raises(InvalidArgumentError):
            make_request(leg_count=0)

    def test_rejects_negative_legs(self):
        with pytest.raises(InvalidArgumentError):
            make_request(leg_count=-2)

    def test_is_immutable(self):
        request = make_request()

        with pytest.raises(ValidationError):
            request.leg_count = 5
