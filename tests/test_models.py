"""Tests for domain models."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from crm_lite.models import (
    DEFAULT_CATEGORY,
    EMAIL_NOT_AVAILABLE,
    SETTINGS_SECTIONS,
    Customer,
    ProductCounters,
    default_settings,
)


class TestCustomer:
    """Tests for Customer model."""

    def test_defaults(self) -> None:
        customer = Customer(
            customer_id="cust-001",
            name="Ann",
            phone="555-1",
            address="1 Rd",
            date_added=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )

        assert customer.email == EMAIL_NOT_AVAILABLE
        assert customer.category == DEFAULT_CATEGORY
        assert customer.notes == ""
        assert customer.last_modified is None


class TestProductCounters:
    """Tests for ProductCounters derived metrics."""

    def test_zero_defaults(self) -> None:
        counters = ProductCounters()

        assert counters.total == 0
        assert counters.revenue == 0
        assert counters.roi == 0

    def test_derived_metrics(self) -> None:
        counters = ProductCounters(total=100, sold=25, price=Decimal("29.99"), capital=Decimal("5000"))

        assert counters.revenue == Decimal("749.75")
        assert counters.remaining == 75
        assert counters.profit == Decimal("-4250.25")
        assert counters.roi == Decimal("-85.005")

    def test_remaining_never_negative(self) -> None:
        counters = ProductCounters(total=5, sold=8)

        assert counters.remaining == 0

    @pytest.mark.parametrize("sold,price", [(0, "0"), (10, "9.99"), (1000, "0.01")])
    def test_roi_zero_without_capital(self, sold: int, price: str) -> None:
        counters = ProductCounters(total=1000, sold=sold, price=Decimal(price))

        assert counters.roi == 0

    def test_frozen(self) -> None:
        counters = ProductCounters()

        with pytest.raises(AttributeError):
            counters.total = 5  # type: ignore[misc]


class TestDefaultSettings:
    """Tests for first-run settings."""

    def test_has_every_section(self) -> None:
        settings = default_settings()

        for section in SETTINGS_SECTIONS:
            assert isinstance(settings[section], dict)
        assert settings["categories"] == ["Regular", "VIP", "Premium", "Wholesale", "Corporate"]

    def test_localization(self) -> None:
        assert default_settings()["localization"] == {
            "language": "en",
            "currency": "USD",
            "timezone": "UTC",
        }

    def test_returns_fresh_copy(self) -> None:
        first = default_settings()
        first["categories"].append("Other")

        assert "Other" not in default_settings()["categories"]
