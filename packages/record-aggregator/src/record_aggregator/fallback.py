"""Built-in sample records served when no source yields data.

Every supported document type is represented at least once. All people,
numbers and officers below are fictitious.
"""

from __future__ import annotations

from typing import Any

from record_aggregator.schemas.record import BaseRecord, parse_record

_PERMANENT_RESIDENCE_CONDITIONS = [
    "This permit is issued once only and must be duly safeguarded.",
    "Permanent residents who are absent from the country for three years or longer may forfeit their right to permanent residence.",
]

_FALLBACK_PAYLOADS: tuple[dict[str, Any], ...] = (
    {
        "type": "Permanent Residence",
        "name": "Alex Sample",
        "surname": "SAMPLE",
        "forename": "ALEX",
        "passport": "XS0000001",
        "issueDate": "2025-09-12",
        "expiryDate": "Indefinite",
        "status": "Issued",
        "permitNumber": "PR/TST/2025/09/00001",
        "referenceNumber": "PRT0000001",
        "controlNumber": "T000001",
        "nationality": "EXAMPLIAN",
        "dateOfBirth": "23-06-1985",
        "gender": "MALE",
        "category": "Section 27(b)",
        "officerName": "J. Officer",
        "officerID": "TST-BO-001",
        "issuingOffice": "SAMPLE ISSUING OFFICE",
        "conditions": _PERMANENT_RESIDENCE_CONDITIONS,
    },
    {
        "type": "Permanent Residence",
        "name": "Blake Example",
        "passport": "XS0000002",
        "issueDate": "2025-10-13",
        "expiryDate": "Indefinite",
        "status": "Issued",
        "permitNumber": "PR/TST/2025/10/00002",
        "nationality": "Examplian",
        "category": "Family Reunification",
        "officerName": "J. Officer",
        "officerID": "TST-BO-001",
    },
    {
        "type": "Permanent Residence",
        "name": "Casey Placeholder",
        "passport": "XS0000003",
        "issueDate": "2025-10-16",
        "expiryDate": "Indefinite",
        "status": "Issued",
        "permitNumber": "PR/TST/2025/10/00003",
        "nationality": "Demonian",
        "category": "Skilled Professional",
        "officerName": "K. Officer",
        "officerID": "TST-BO-002",
    },
    {
        "type": "Permanent Residence",
        "name": "Devon Dummy",
        "passport": "XS0000004",
        "issueDate": "2025-10-16",
        "expiryDate": "Indefinite",
        "status": "Issued",
        "permitNumber": "PR/TST/2025/10/00004",
        "nationality": "Demonian",
        "category": "Business Investment",
        "officerName": "K. Officer",
        "officerID": "TST-BO-002",
    },
    {
        "type": "General Work Permit",
        "name": "ERIN MOCK",
        "surname": "MOCK",
        "forename": "ERIN",
        "passport": "XS0000005",
        "issueDate": "2025-09-10",
        "expiryDate": "2027-09-10",
        "status": "Issued",
        "permitNumber": "TST 00005/2025/WPVC",
        "referenceNumber": "WPT0000005",
        "controlNumber": "T000005",
        "nationality": "EXAMPLIAN",
        "dateOfBirth": "15-06-1985",
        "gender": "FEMALE",
        "category": "GENERAL WORK VISA SECTION 19(2)",
        "officerName": "Director-General",
        "officerID": "TST-1000",
        "issuingOffice": "HEAD OFFICE",
        "conditions": [
            "(1) To take up employment in the category mentioned above",
            "(2) The above permit holder does not become a permanent resident",
        ],
        "barcode": "TST0005",
    },
    {
        "type": "General Work Permit",
        "name": "Finley Test",
        "passport": "XS0000006",
        "issueDate": "2025-08-01",
        "expiryDate": "2028-08-01",
        "status": "Issued",
        "permitNumber": "TST 00006/2025/WPVC",
        "nationality": "Demonian",
        "category": "GENERAL WORK VISA SECTION 19(2)",
        "officerName": "Director-General",
        "officerID": "TST-1000",
    },
    {
        "type": "Work Visa",
        "name": "Gray Fixture",
        "passport": "XS0000007",
        "issueDate": "2025-07-21",
        "expiryDate": "2026-07-21",
        "status": "Issued",
        "permitNumber": "TST 00007/2025/WV",
        "referenceNumber": "WVT0000007",
        "nationality": "Examplian",
        "category": "CRITICAL SKILLS WORK VISA",
        "officerName": "L. Officer",
        "officerID": "TST-BO-003",
        "conditions": ["(1) Employment limited to the listed critical skill"],
    },
    {
        "type": "Relative's Permit",
        "name": "HARPER MOCK",
        "surname": "MOCK",
        "forename": "HARPER",
        "passport": "XS0000008",
        "issueDate": "2025-03-27",
        "expiryDate": "2027-03-26",
        "status": "Issued",
        "permitNumber": "TST 00008/2025/TRVC",
        "referenceNumber": "TST 00008/2025/TRVC",
        "controlNumber": "T000008",
        "nationality": "EXAMPLIAN",
        "dateOfBirth": "12-03-1988",
        "gender": "FEMALE",
        "category": "RELATIVE'S VISA (SPOUSE)",
        "officerName": "For Director-General",
        "officerID": "TST-1000",
        "issuingOffice": "HEAD OFFICE",
        "conditions": [
            "(1) To reside with citizen or permanent resident",
            "(2) May not conduct work",
        ],
        "barcode": "TST0008",
    },
    {
        "type": "Birth Certificate",
        "name": "INDIGO SAMPLE",
        "surname": "SAMPLE",
        "forename": "INDIGO",
        "issueDate": "2024-11-15",
        "expiryDate": "N/A",
        "status": "Issued",
        "referenceNumber": "BCT0000009",
        "identityNumber": "0000000000009",
        "gender": "FEMALE",
        "dateOfBirth": "20-03-2014",
        "placeOfBirth": "SAMPLE CITY",
        "countryOfBirth": "EXAMPLIA",
        "nationality": "Examplian",
        "category": "Birth Registration",
        "officerName": "DIRECTOR GENERAL",
        "officerID": "TST-BO-001",
        "issuingOffice": "SAMPLE ISSUING OFFICE",
        "datePrinted": "2024-11-15",
        "parentInfo": {
            "mother": {"surname": "SAMPLE", "forename": "JORDAN", "idNumber": "0000000000010"},
            "father": {"surname": "SAMPLE", "forename": "ALEX"},
        },
    },
    {
        "type": "Naturalization Certificate",
        "name": "Kai Example",
        "surname": "EXAMPLE",
        "forename": "KAI",
        "idNumber": "0000000000011",
        "issueDate": "2025-10-16",
        "expiryDate": "Permanent",
        "status": "Issued",
        "permitNumber": "NAT/TST/2025/10/00011",
        "referenceNumber": "NATT0000011",
        "controlNumber": "T000011",
        "nationality": "Examplian",
        "dateOfBirth": "25-08-1985",
        "gender": "FEMALE",
        "category": "Citizenship by Naturalization",
        "officerName": "Director-General",
        "officerID": "TST-1000",
        "issuingOffice": "SAMPLE ISSUING OFFICE",
        "certificateNumber": "0011",
    },
    {
        "type": "Refugee Status (Section 24)",
        "name": "LOGAN PLACEHOLDER",
        "surname": "PLACEHOLDER",
        "forename": "LOGAN",
        "passport": "N/A",
        "issueDate": "2025-10-13",
        "expiryDate": "2029-10-13",
        "status": "Issued",
        "permitNumber": "REF/TST/2025/10/00012",
        "fileNumber": "TSTREF000000012",
        "referenceNumber": "TSTREF000000012",
        "nationality": "DEMONIAN",
        "dateOfBirth": "15-05-1990",
        "gender": "FEMALE",
        "education": "HIGH SCHOOL",
        "countryOfBirth": "DEMONIA",
        "category": "FORMAL RECOGNITION OF REFUGEE STATUS",
        "officerName": "ISSUING OFFICE",
        "officerID": "TST-BO-004",
        "issuingOffice": "SAMPLE ISSUING OFFICE",
        "verificationEmail": "verifications@example.org",
        "conditions": [
            "This certificate recognizes refugee status",
            "Valid for 4 years from date of issue",
        ],
    },
    {
        "type": "Refugee Status (Section 24)",
        "name": "Morgan Fixture",
        "issueDate": "2025-06-02",
        "expiryDate": "2029-06-02",
        "status": "Issued",
        "fileNumber": "TSTREF000000013",
        "nationality": "Demonian",
        "category": "FORMAL RECOGNITION OF REFUGEE STATUS",
        "officerName": "ISSUING OFFICE",
        "officerID": "TST-BO-004",
    },
    {
        "type": "Biometric Records",
        "name": "Noel Test",
        "issueDate": "2025-05-05",
        "expiryDate": "N/A",
        "status": "Enrolled",
        "referenceNumber": "BIOT0000014",
        "nationality": "Examplian",
        "category": "Biometric Enrolment",
        "officerName": "M. Officer",
        "officerID": "TST-BO-005",
        "biometricReference": "BIO-TST-0014",
        "enrolmentDate": "2025-05-05",
    },
)

FALLBACK_RECORDS: tuple[BaseRecord, ...] = tuple(parse_record(payload) for payload in _FALLBACK_PAYLOADS)


def fallback_records() -> tuple[BaseRecord, ...]:
    return FALLBACK_RECORDS
