import pytest
from pydantic import ValidationError

from pmr_trip.settings import (
    BillingSettings,
    LoggingSettings,
    ProximitySettings,
    Settings,
    TaxiSettings,
    get_settings,
)


class TestTaxiSettings:
    def test_defaults(self):
        settings = TaxiSettings()
        assert settings.total_ticks == 100
        assert settings.animation_seconds == 30.0
        assert settings.persist_every == 10
        assert settings.default_eta_minutes == 25.0

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("TAXI_TOTAL_TICKS", "50")
        monkeypatch.setenv("TAXI_PERSIST_EVERY", "5")

        settings = TaxiSettings()
        assert settings.total_ticks == 50
        assert settings.persist_every == 5

    def test_validation(self):
        with pytest.raises(ValidationError):
            TaxiSettings(total_ticks=0)

        with pytest.raises(ValidationError):
            TaxiSettings(animation_seconds=0)

        with pytest.raises(ValidationError):
            TaxiSettings(persist_every=0)


class TestProximitySettings:
    def test_default_radius(self):
        assert ProximitySettings().radius_m == 100.0

    def test_rejects_non_positive_radius(self):
        with pytest.raises(ValidationError):
            ProximitySettings(radius_m=0)


class TestBillingSettings:
    def test_defaults(self):
        settings = BillingSettings()
        assert settings.payment_due_days == 30
        assert settings.invoice_prefix == "FACT"

    def test_prefix_is_upper_cased(self):
        assert BillingSettings(invoice_prefix="inv").invoice_prefix == "INV"

    def test_rejects_invalid_prefix(self):
        with pytest.raises(ValidationError):
            BillingSettings(invoice_prefix="FA-CT")


class TestLoggingSettings:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "json")

        settings = LoggingSettings()
        assert settings.level == "DEBUG"
        assert settings.format == "json"

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="TRACE")


class TestSettings:
    def test_get_settings_returns_all_groups(self):
        settings = get_settings()

        assert isinstance(settings, Settings)
        assert isinstance(settings.taxi, TaxiSettings)
        assert isinstance(settings.billing, BillingSettings)

    def test_nested_delimiter(self, monkeypatch):
        monkeypatch.setenv("TAXI__TOTAL_TICKS", "20")

        settings = Settings()
        assert settings.taxi.total_ticks == 20
