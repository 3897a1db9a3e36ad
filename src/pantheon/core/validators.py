"""Enumerated-domain validation at the store boundary.

All enum-typed entity fields are checked here and nowhere else.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from src.pantheon.core.exceptions import DomainViolation
from src.pantheon.models.enums import (
    AgeRange,
    ClientSize,
    Ethnicity,
    FliStatus,
    Gender,
    ImpactCause,
    JobStatus,
    LgbtStatus,
    MentorExperienceLevel,
    MentorYearsExperience,
    NonprofitHearAbout,
    StudentStage,
    VolunteerHearAbout,
)

# field -> (value set, multi-valued?)
ENTITY_DOMAINS: dict[str, dict[str, tuple[type[Enum], bool]]] = {
    "volunteer": {
        "volunteer_gender": (Gender, False),
        "volunteer_ethnicity": (Ethnicity, True),
        "volunteer_age_range": (AgeRange, False),
        "lgbt": (LgbtStatus, False),
        "fli": (FliStatus, True),
        "student_stage": (StudentStage, False),
        "hear_about": (VolunteerHearAbout, True),
    },
    "mentor": {
        "years_experience": (MentorYearsExperience, False),
        "experience_level": (MentorExperienceLevel, False),
        "hear_about": (VolunteerHearAbout, True),
    },
    "nonprofit_client": {
        "size": (ClientSize, False),
        "impact_causes": (ImpactCause, True),
        "hear_about": (NonprofitHearAbout, True),
    },
    "job": {
        "status": (JobStatus, False),
    },
}

# Free-text list fields: set semantics, order irrelevant.
TEXT_SET_FIELDS = {"university", "majors", "minors"}


def validate_domain[E: Enum](field: str, value: Any, domain: type[E]) -> E:
    """Coerce a single value into its closed value set.

    Raises:
        DomainViolation: If the value is not a member of the domain
    """
    if isinstance(value, domain):
        return value
    try:
        return domain(value)
    except ValueError:
        raise DomainViolation(field, value, domain.__name__) from None


def _dedupe(values: Iterable[Any]) -> list[Any]:
    seen: list[Any] = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen


def validate_entity_fields(entity: str, values: Mapping[str, Any]) -> dict[str, Any]:
    """Validate and normalize every enumerated field present in `values`.

    Single-valued fields become their enum's string value; multi-valued fields
    become a de-duplicated list of string values. Fields without a declared
    domain pass through unchanged (text sets are de-duplicated).

    Args:
        entity: Key into ENTITY_DOMAINS (e.g. "volunteer")
        values: Field values about to be persisted

    Returns:
        A new dict safe to write to the model

    Raises:
        DomainViolation: On the first out-of-domain value
    """
    domains = ENTITY_DOMAINS.get(entity, {})
    normalized: dict[str, Any] = {}
    for field, value in values.items():
        if field in domains:
            domain, multi = domains[field]
            if multi:
                if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                    raise DomainViolation(field, value, domain.__name__)
                normalized[field] = _dedupe(
                    validate_domain(field, item, domain).value for item in value
                )
            else:
                normalized[field] = validate_domain(field, value, domain).value
        elif field in TEXT_SET_FIELDS and value is not None:
            normalized[field] = _dedupe(value)
        else:
            normalized[field] = value
    return normalized
