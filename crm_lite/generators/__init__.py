"""Sample data generators."""

from crm_lite.generators.customer import SAMPLE_PRODUCTS, SampleDataGenerator, load_sample_data

__all__ = ["SAMPLE_PRODUCTS", "SampleDataGenerator", "load_sample_data"]
