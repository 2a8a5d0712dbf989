from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

from record_aggregator.core.exceptions import ConfigurationError
from record_aggregator.core.models import SourceDescriptor

logger = logging.getLogger(__name__)

SOURCE_KEYS: tuple[str, ...] = ("npr", "dms", "visa", "mcs", "abis", "hanis")

# Several document types are served by the same backend.
SOURCE_CATALOG: tuple[tuple[str, str], ...] = (
    ("Permanent Residence", "npr"),
    ("General Work Permit", "dms"),
    ("Relative's Permit", "visa"),
    ("Birth Certificate", "dms"),
    ("Naturalization Certificate", "dms"),
    ("Refugee Status (Section 24)", "mcs"),
    ("Work Visa", "visa"),
    ("Biometric Records", "abis"),
)


@dataclass(frozen=True)
class ModeSettings:
    use_production_apis: bool
    force_real_apis: bool
    verification_level: str

    @property
    def force_real_active(self) -> bool:
        return self.use_production_apis and self.force_real_apis


@dataclass(frozen=True)
class RetrySettings:
    max_retries: int
    retry_delay_seconds: float
    timeout_seconds: float


class AggregatorSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    SERVICE_NAME: str = "record-aggregator"
    USE_PRODUCTION_APIS: bool = False
    FORCE_REAL_APIS: bool = False
    VERIFICATION_LEVEL: str = "high"

    API_MAX_RETRIES: int = 2
    API_RETRY_DELAY_MS: int = 1000
    API_TIMEOUT_MS: int = 5000
    RECORD_CACHE_TTL_SECONDS: float = 300

    SOURCE_NPR_ENDPOINT: str | None = None
    SOURCE_NPR_API_KEY: str | None = None
    SOURCE_DMS_ENDPOINT: str | None = None
    SOURCE_DMS_API_KEY: str | None = None
    SOURCE_VISA_ENDPOINT: str | None = None
    SOURCE_VISA_API_KEY: str | None = None
    SOURCE_MCS_ENDPOINT: str | None = None
    SOURCE_MCS_API_KEY: str | None = None
    SOURCE_ABIS_ENDPOINT: str | None = None
    SOURCE_ABIS_API_KEY: str | None = None
    SOURCE_HANIS_ENDPOINT: str | None = None
    SOURCE_HANIS_API_KEY: str | None = None

    @property
    def mode(self) -> ModeSettings:
        return ModeSettings(
            use_production_apis=self.USE_PRODUCTION_APIS,
            force_real_apis=self.FORCE_REAL_APIS,
            verification_level=self.VERIFICATION_LEVEL,
        )

    @property
    def retry(self) -> RetrySettings:
        return RetrySettings(
            max_retries=self.API_MAX_RETRIES,
            retry_delay_seconds=self.API_RETRY_DELAY_MS / 1000.0,
            timeout_seconds=self.API_TIMEOUT_MS / 1000.0,
        )

    def source_endpoint(self, key: str) -> str | None:
        return getattr(self, f"SOURCE_{key.upper()}_ENDPOINT")

    def source_credential(self, key: str) -> str | None:
        return getattr(self, f"SOURCE_{key.upper()}_API_KEY")

    def source_descriptors(self) -> list[SourceDescriptor]:
        return [
            SourceDescriptor(
                type_label=type_label,
                endpoint=self.source_endpoint(key),
                credential=self.source_credential(key),
            )
            for type_label, key in SOURCE_CATALOG
        ]


def load_settings() -> AggregatorSettings:
    return AggregatorSettings()


def validate_settings(settings: AggregatorSettings) -> list[str]:
    """Raise on unusable tuning and return warnings for unset sources."""
    errors: list[str] = []
    if settings.API_MAX_RETRIES < 0:
        errors.append("API_MAX_RETRIES must be >= 0")
    if settings.API_RETRY_DELAY_MS < 0:
        errors.append("API_RETRY_DELAY_MS must be >= 0")
    if settings.API_TIMEOUT_MS <= 0:
        errors.append("API_TIMEOUT_MS must be > 0")
    if settings.RECORD_CACHE_TTL_SECONDS <= 0:
        errors.append("RECORD_CACHE_TTL_SECONDS must be > 0")
    if errors:
        raise ConfigurationError("configuration validation failed: " + ", ".join(errors))

    warnings: list[str] = []
    if settings.USE_PRODUCTION_APIS:
        for key in SOURCE_KEYS:
            if not settings.source_credential(key):
                warnings.append(f"SOURCE_{key.upper()}_API_KEY not configured")
            if not settings.source_endpoint(key):
                warnings.append(f"SOURCE_{key.upper()}_ENDPOINT not configured")
    return warnings


def log_settings_status(settings: AggregatorSettings) -> None:
    configured = [key for key in SOURCE_KEYS if settings.source_endpoint(key) and settings.source_credential(key)]
    logger.info(
        "settings_loaded",
        extra={
            "service": settings.SERVICE_NAME,
            "use_production_apis": settings.USE_PRODUCTION_APIS,
            "force_real_apis": settings.FORCE_REAL_APIS,
            "verification_level": settings.VERIFICATION_LEVEL,
            "configured_sources": configured,
            "configured_source_count": len(configured),
            "source_count": len(SOURCE_KEYS),
        },
    )
    for warning in validate_settings(settings):
        logger.warning("settings_warning", extra={"detail": warning})
