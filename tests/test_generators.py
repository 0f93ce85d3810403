"""Tests for the sample data generator."""

from datetime import datetime, timedelta

import pytest

from crm_lite.exceptions import StorageError
from crm_lite.generators import SAMPLE_PRODUCTS, SampleDataGenerator, load_sample_data
from crm_lite.models import Customer, ProductCounters
from crm_lite.models.settings import DEFAULT_CATEGORIES
from crm_lite.storage import CUSTOMERS_KEY, PRODUCTS_KEY, MemoryStore
from crm_lite.store import CustomerRepository, DomainState


class TestSampleDataGenerator:
    """Tests for SampleDataGenerator."""

    def test_generate_returns_complete_customer(self, seed: int, now: datetime) -> None:
        customer = SampleDataGenerator(seed=seed, clock=lambda: now).generate()

        assert isinstance(customer, Customer)
        assert customer.name and customer.phone and customer.address
        assert "\n" not in customer.address
        assert "@" in customer.email
        assert customer.category in DEFAULT_CATEGORIES
        assert customer.date_added == now
        assert customer.last_modified is None

    def test_reproducibility_with_seed(self, seed: int, now: datetime) -> None:
        first = list(SampleDataGenerator(seed=seed, clock=lambda: now).generate_batch(5))
        second = list(SampleDataGenerator(seed=seed, clock=lambda: now).generate_batch(5))

        assert [(c.name, c.phone, c.category) for c in first] == [(c.name, c.phone, c.category) for c in second]

    def test_batch_has_unique_ids_and_phones(self, seed: int) -> None:
        batch = list(SampleDataGenerator(seed=seed).generate_batch(50))

        assert len({c.customer_id for c in batch}) == 50
        assert len({c.phone for c in batch}) == 50

    def test_max_age_spreads_dates(self, seed: int, now: datetime) -> None:
        batch = list(SampleDataGenerator(seed=seed, clock=lambda: now, max_age_days=180).generate_batch(30))

        assert all(now - timedelta(days=180) <= c.date_added <= now for c in batch)
        assert len({c.date_added for c in batch}) > 1


class TestLoadSampleData:
    """Tests for load_sample_data."""

    def test_replaces_customers_and_products(
        self, state: DomainState, repo: CustomerRepository, ann: dict, seed: int, now: datetime
    ) -> None:
        repo.add(ann)

        customers = load_sample_data(state, seed=seed, clock=lambda: now)

        assert len(customers) == 3
        assert "Ann" not in [c.name for c in state.customers]
        assert state.products == SAMPLE_PRODUCTS

    def test_persists(self, state: DomainState, seed: int) -> None:
        load_sample_data(state, count=4, seed=seed)

        reloaded = DomainState.load(state.kv)
        assert len(state.kv.read_blob(CUSTOMERS_KEY)) == 4
        assert reloaded.customers == state.customers
        assert reloaded.products.revenue == SAMPLE_PRODUCTS.revenue

    def test_failed_products_write_keeps_stored_customers(self, ann: dict, seed: int, now: datetime) -> None:
        class ProductsWriteFails(MemoryStore):
            def set(self, key: str, value: str) -> None:
                if key == PRODUCTS_KEY:
                    raise StorageError(f"Cannot write {key}")
                super().set(key, value)

        kv = ProductsWriteFails()
        state = DomainState.load(kv)
        CustomerRepository(state, clock=lambda: now).add(ann)
        stored = kv.get(CUSTOMERS_KEY)

        with pytest.raises(StorageError):
            load_sample_data(state, seed=seed, clock=lambda: now)

        assert kv.get(CUSTOMERS_KEY) == stored
        assert [c.name for c in state.customers] == ["Ann"]
        assert state.products == ProductCounters()
