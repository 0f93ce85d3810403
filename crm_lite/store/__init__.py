"""Session state and the components that mutate it."""

from crm_lite.store.customers import CustomerRepository
from crm_lite.store.products import ProductCounterAggregator
from crm_lite.store.settings import SettingsStore
from crm_lite.store.state import DomainState

__all__ = ["CustomerRepository", "DomainState", "ProductCounterAggregator", "SettingsStore"]
