"""
Data objects for CV generation.

Everything here is request-scoped: records and images are built from the
incoming form, rendered once and dropped.
"""

import base64
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from web.errors import InvalidPayloadError


# 1x1 transparent PNG used for missing or rejected uploads
PLACEHOLDER_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mN88P/BfwAJhAPk3KFb2AAAAABJRU5ErkJggg=="
)

SKILL_KEYS = (
    "cleaning",
    "cooking",
    "arabicCooking",
    "washing",
    "ironing",
    "babysitting",
    "childrenCare",
    "tutoring",
    "disabledCare",
)

DEFAULT_SKILL_LEVEL = "Poor"
DEFAULT_CONTRACT_YEARS = "2"


def _text(value: Any) -> str:
    """Coerce a JSON scalar to display text. None and containers become ''."""
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class MedicalStatus(Enum):
    """Medical fitness: checked and fit, checked and unfit, or not yet checked."""

    FIT = "fit"
    UNFIT = "unfit"
    PENDING = "pending"

    @classmethod
    def parse(cls, value: Any) -> "MedicalStatus":
        if value is True:
            return cls.FIT
        if value is False:
            return cls.UNFIT
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("true", "yes", "fit"):
                return cls.FIT
            if normalized in ("false", "no", "unfit", "not fit"):
                return cls.UNFIT
        return cls.PENDING


@dataclass(frozen=True)
class ExperienceEntry:
    country: str = ""
    period: str = ""
    position: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ExperienceEntry":
        return cls(
            country=_text(data.get("country")),
            period=_text(data.get("period")),
            position=_text(data.get("position")),
        )


@dataclass
class CandidateRecord:
    """
    Biodata for one candidate.

    Every field is optional. Missing values render as empty strings, with
    three exceptions carried over from the agency's form defaults:
    children defaults to 0, contract period to 2 years and each skill
    to "Poor".
    """

    full_name: str = ""
    full_name_ar: str = ""
    date_of_birth: str = ""
    age: str = ""
    gender: str = ""
    nationality: str = ""
    religion: str = ""
    marital_status: str = ""
    number_of_children: str = "0"

    mobile_number: str = ""
    current_residence: str = ""

    profession: str = ""
    monthly_salary: str = ""
    contract_period: str = DEFAULT_CONTRACT_YEARS

    passport_number: str = ""
    passport_issue_date: str = ""
    passport_expiry_date: str = ""

    education_level: str = ""
    english_level: str = ""
    arabic_level: str = ""

    skills: dict = field(default_factory=lambda: {key: DEFAULT_SKILL_LEVEL for key in SKILL_KEYS})
    experience: list = field(default_factory=list)

    height_cm: str = ""
    weight_kg: str = ""
    medical: MedicalStatus = MedicalStatus.PENDING

    agency_name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "CandidateRecord":
        """
        Build a record from a decoded JSON payload.
        Anything that is not an object yields an empty record; unknown keys
        are ignored.
        """
        if not isinstance(data, dict):
            return cls()

        raw_skills = data.get("skills")
        if not isinstance(raw_skills, dict):
            raw_skills = {}
        skills = {key: (_text(raw_skills.get(key)) or DEFAULT_SKILL_LEVEL) for key in SKILL_KEYS}

        raw_experience = data.get("experienceAbroad")
        if not isinstance(raw_experience, list):
            raw_experience = []
        experience = [ExperienceEntry.from_dict(e) for e in raw_experience if isinstance(e, dict)]

        children = data.get("numberOfChildren")

        return cls(
            full_name=_text(data.get("fullName")),
            full_name_ar=_text(data.get("fullNameAr")),
            date_of_birth=_text(data.get("dateOfBirth")),
            age=_text(data.get("age")),
            gender=_text(data.get("gender")),
            nationality=_text(data.get("nationality")),
            religion=_text(data.get("religion")),
            marital_status=_text(data.get("maritalStatus")),
            number_of_children=_text(children) if children is not None else "0",
            mobile_number=_text(data.get("mobileNumber")),
            current_residence=_text(data.get("currentResidence")),
            profession=_text(data.get("profession")),
            monthly_salary=_text(data.get("monthlySalary")),
            contract_period=_text(data.get("contractPeriod")) or DEFAULT_CONTRACT_YEARS,
            passport_number=_text(data.get("passportNumber")),
            passport_issue_date=_text(data.get("passportIssueDate")),
            passport_expiry_date=_text(data.get("passportExpiryDate")),
            education_level=_text(data.get("educationLevel")),
            english_level=_text(data.get("englishLevel")),
            arabic_level=_text(data.get("arabicLevel")),
            skills=skills,
            experience=experience,
            height_cm=_text(data.get("heightCm")),
            weight_kg=_text(data.get("weightKg")),
            medical=MedicalStatus.parse(data.get("medicalFit")),
            agency_name=_text(data.get("agencyName")),
        )

    @classmethod
    def from_json(cls, payload: Optional[str]) -> "CandidateRecord":
        """
        Parse the `data` form field. Empty input is an empty record.

        Raises:
            InvalidPayloadError: If the payload is not valid JSON
        """
        if not payload or not payload.strip():
            return cls()
        try:
            decoded = json.loads(payload)
        except ValueError as e:
            raise InvalidPayloadError(f"Invalid JSON in 'data' field: {e}") from e
        return cls.from_dict(decoded)


@dataclass(frozen=True)
class ImageAsset:
    """An in-memory image destined to be embedded as a data URI."""

    data: bytes
    mime_type: str = "image/png"

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @property
    def is_placeholder(self) -> bool:
        return self == ImageAsset.placeholder()

    @classmethod
    def placeholder(cls) -> "ImageAsset":
        return cls(data=base64.b64decode(PLACEHOLDER_PNG_B64), mime_type="image/png")


@dataclass
class CandidateImages:
    """The three per-candidate photos; any missing slot is the placeholder."""

    profile: ImageAsset = field(default_factory=ImageAsset.placeholder)
    full_photo: ImageAsset = field(default_factory=ImageAsset.placeholder)
    passport: ImageAsset = field(default_factory=ImageAsset.placeholder)


@dataclass
class RenderedDocument:
    """
    Result of a CV generation.

    Contains the PDF bytes and metadata for HTTP responses.
    """

    pdf_bytes: bytes
    filename: str
    content_type: str = "application/pdf"

    def __len__(self) -> int:
        return len(self.pdf_bytes)
