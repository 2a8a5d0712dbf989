"""Document record schemas.

Providers return loosely shaped JSON. Each item is validated into one of the
variants below, selected by its ``type`` label. Field names on the wire are
camelCase and are consumed unchanged by rendering and validation services,
so every model dumps by alias. Unknown provider fields are kept.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from record_aggregator.core.exceptions import RecordValidationError


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="allow",
    )


class ParentDetails(WireModel):
    surname: str | None = None
    forename: str | None = None
    id_number: str | None = None


class ParentInfo(WireModel):
    mother: ParentDetails | None = None
    father: ParentDetails | None = None


class BaseRecord(WireModel):
    type: str
    permit_number: str | None = None
    reference_number: str | None = None
    file_number: str | None = None
    control_number: str | None = None
    name: str | None = None
    surname: str | None = None
    forename: str | None = None
    nationality: str | None = None
    date_of_birth: str | None = None
    gender: str | None = None
    passport: str | None = None
    id_number: str | None = None
    identity_number: str | None = None
    issue_date: str | None = None
    expiry_date: str | None = None
    status: str | None = None
    category: str | None = None
    officer_name: str | None = None
    officer_id: str | None = Field(default=None, alias="officerID")
    issuing_office: str | None = None
    conditions: tuple[str, ...] = ()
    barcode: str | None = None

    @field_validator("conditions", mode="before")
    @classmethod
    def _null_conditions_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @model_validator(mode="after")
    def _check_identity(self) -> BaseRecord:
        if not self.identifiers:
            raise ValueError("record requires permitNumber, referenceNumber or fileNumber")
        if not self.name and not (self.surname and self.forename):
            raise ValueError("record requires name or surname and forename")
        return self

    @property
    def identifiers(self) -> tuple[str, ...]:
        values = (self.permit_number, self.reference_number, self.file_number)
        return tuple(value for value in values if value)

    def matches_identifier(self, identifier: str) -> bool:
        return identifier in self.identifiers


class PermanentResidenceRecord(BaseRecord):
    type: Literal["Permanent Residence"]


class WorkPermitRecord(BaseRecord):
    type: Literal["General Work Permit", "Work Visa"]


class RelativesPermitRecord(BaseRecord):
    type: Literal["Relative's Permit"]


class BirthCertificateRecord(BaseRecord):
    type: Literal["Birth Certificate"]
    place_of_birth: str | None = None
    country_of_birth: str | None = None
    date_printed: str | None = None
    parent_info: ParentInfo | None = None


class NaturalizationCertificateRecord(BaseRecord):
    type: Literal["Naturalization Certificate"]
    certificate_number: str | None = None


class RefugeeStatusRecord(BaseRecord):
    type: Literal["Refugee Status (Section 24)"]
    country_of_birth: str | None = None
    education: str | None = None
    verification_email: str | None = None


class BiometricRecord(BaseRecord):
    type: Literal["Biometric Records"]
    biometric_reference: str | None = None
    enrolment_date: str | None = None


Record = Annotated[
    Union[
        PermanentResidenceRecord,
        WorkPermitRecord,
        RelativesPermitRecord,
        BirthCertificateRecord,
        NaturalizationCertificateRecord,
        RefugeeStatusRecord,
        BiometricRecord,
    ],
    Field(discriminator="type"),
]

DOCUMENT_TYPES: tuple[str, ...] = (
    "Permanent Residence",
    "General Work Permit",
    "Relative's Permit",
    "Birth Certificate",
    "Naturalization Certificate",
    "Refugee Status (Section 24)",
    "Work Visa",
    "Biometric Records",
)

_record_adapter: TypeAdapter[BaseRecord] = TypeAdapter(Record)


def parse_record(payload: Any) -> BaseRecord:
    try:
        return _record_adapter.validate_python(payload)
    except ValidationError as exc:
        raise RecordValidationError(str(exc)) from exc
