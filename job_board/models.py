"""Data models for the job board.

`Job` is the only shape allowed past the feed boundary. Field names are
snake_case in Python and keep the feed's camelCase names as aliases, so
`model_dump(by_alias=True)` gives back the wire shape.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


FormField = Literal["name", "email", "contact_number", "why_hire"]

FORM_FIELDS = ("name", "email", "contact_number", "why_hire")

# Presentation-side names for the form fields.
FIELD_ALIASES: Dict[str, str] = {
    "contactNumber": "contact_number",
    "whyHire": "why_hire",
}


class Job(BaseModel):
    """A normalized, immutable job record.

    Two jobs are the same job when their ids match; content is never compared.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Session-unique identifier assigned at fetch time.")

    title: str = ""
    company_name: str = Field(default="", alias="companyName")
    main_category: str = Field(default="", alias="mainCategory")
    job_type: str = Field(default="", alias="jobType")
    work_model: str = Field(default="", alias="workModel")
    seniority_level: str = Field(default="", alias="seniorityLevel")

    @field_validator(
        "title",
        "company_name",
        "main_category",
        "job_type",
        "work_model",
        "seniority_level",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Job):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class ApplicationDraft(BaseModel):
    """The in-progress application form for one selected job."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    email: str = ""
    contact_number: str = ""
    why_hire: str = ""


def resolve_field(field: str) -> str:
    """Map a form field name (snake_case or presentation camelCase) to a draft attribute."""
    key = FIELD_ALIASES.get(field, field)
    if key not in FORM_FIELDS:
        raise KeyError(f"Unknown form field: {field!r}")
    return key
