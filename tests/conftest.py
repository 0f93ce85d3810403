"""Pytest configuration and fixtures."""

import random
from datetime import datetime, timezone

import pytest

from crm_lite.reporting import ReportingEngine
from crm_lite.storage import MemoryStore
from crm_lite.store import CustomerRepository, DomainState, ProductCounterAggregator, SettingsStore

FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> datetime:
    """Fixed wall-clock time."""
    return FIXED_NOW


@pytest.fixture
def kv() -> MemoryStore:
    """Fresh in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def state(kv: MemoryStore) -> DomainState:
    """Session state over an empty store."""
    return DomainState.load(kv)


@pytest.fixture
def repo(state: DomainState, now: datetime) -> CustomerRepository:
    """Customer repository with a frozen clock and sequential ids."""
    counter = iter(range(1, 10_000))
    return CustomerRepository(state, clock=lambda: now, id_factory=lambda: f"cust-{next(counter):03d}")


@pytest.fixture
def products(state: DomainState) -> ProductCounterAggregator:
    return ProductCounterAggregator(state)


@pytest.fixture
def settings_store(state: DomainState) -> SettingsStore:
    return SettingsStore(state)


@pytest.fixture
def engine(state: DomainState, now: datetime, seed: int) -> ReportingEngine:
    """Reporting engine with a frozen clock and seeded randomness."""
    return ReportingEngine(state, clock=lambda: now, rng=random.Random(seed))


@pytest.fixture
def ann() -> dict:
    """Form input for a sample customer."""
    return {"name": "Ann", "phone": "555-1", "address": "1 Rd"}
