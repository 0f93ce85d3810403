"""Configuration management for crm-lite."""

from dataclasses import dataclass, field
from pathlib import Path

from crm_lite.exceptions import ConfigurationError


@dataclass
class StorageConfig:
    """Persistent store configuration."""

    data_dir: Path = field(default_factory=lambda: Path("crm_data"))
    pretty_json: bool = False


@dataclass
class ReportingConfig:
    """Reporting engine configuration."""

    window_days: int = 30
    series_months: int = 6
    jitter: float = 0.2


@dataclass
class CrmConfig:
    """Main configuration for crm-lite."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CrmConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            data_dir=Path(os.getenv("CRM_DATA_DIR", "crm_data")),
            pretty_json=os.getenv("CRM_PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("CRM_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"CRM_SEED must be an integer, got {seed_str!r}") from e

        log_format = os.getenv("CRM_LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"CRM_LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            storage=storage,
            seed=seed,
            log_level=os.getenv("CRM_LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
