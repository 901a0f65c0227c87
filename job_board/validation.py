"""Application form validation.

`validate` is pure: it reads a draft and returns one message per field, with
an empty string meaning the field is valid.
"""

from __future__ import annotations

import re
from typing import Dict

from .models import FORM_FIELDS, ApplicationDraft

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
CONTACT_NUMBER_RE = re.compile(r"09[0-9]{9}")

NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Please enter a valid email address."
CONTACT_NUMBER_REQUIRED = "Contact number is required."
CONTACT_NUMBER_INVALID = "Please enter a valid contact number (11 digits starting with 09)."
WHY_HIRE_REQUIRED = "This field is required."


def empty_errors() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


def validate(draft: ApplicationDraft) -> Dict[str, str]:
    """Check every field of `draft` and return the per-field messages."""
    errors = empty_errors()

    if not draft.name.strip():
        errors["name"] = NAME_REQUIRED

    if not draft.email.strip():
        errors["email"] = EMAIL_REQUIRED
    elif not EMAIL_RE.fullmatch(draft.email):
        errors["email"] = EMAIL_INVALID

    if not draft.contact_number.strip():
        errors["contact_number"] = CONTACT_NUMBER_REQUIRED
    elif not CONTACT_NUMBER_RE.fullmatch(draft.contact_number):
        errors["contact_number"] = CONTACT_NUMBER_INVALID

    if not draft.why_hire.strip():
        errors["why_hire"] = WHY_HIRE_REQUIRED

    return errors


def is_valid(errors: Dict[str, str]) -> bool:
    """True when no field has a message."""
    return not any(errors.values())
