"""Wire schemas shared with rendering and health-check services."""

from record_aggregator.schemas.health import EndpointHealth, HealthReport
from record_aggregator.schemas.record import (
    DOCUMENT_TYPES,
    BaseRecord,
    BiometricRecord,
    BirthCertificateRecord,
    NaturalizationCertificateRecord,
    PermanentResidenceRecord,
    Record,
    RefugeeStatusRecord,
    RelativesPermitRecord,
    WorkPermitRecord,
    parse_record,
)

__all__ = [
    "BaseRecord",
    "BiometricRecord",
    "BirthCertificateRecord",
    "DOCUMENT_TYPES",
    "EndpointHealth",
    "HealthReport",
    "NaturalizationCertificateRecord",
    "PermanentResidenceRecord",
    "Record",
    "RefugeeStatusRecord",
    "RelativesPermitRecord",
    "WorkPermitRecord",
    "parse_record",
]
