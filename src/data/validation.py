"""
Field validation for the member form.

Returns display strings keyed by field name; the form only shows them.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_PATTERN = re.compile(r"^0\d{9}$")
MIN_PASSWORD_LENGTH = 6

REQUIRED_MEMBER_FIELDS = {
    "email": "Email is required",
    "password": "Password is required",
    "name": "Full name is required",
    "gender": "Please select a gender",
    "phone": "Phone number is required",
}


def validate_member_form(values: Mapping[str, str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for field_name, message in REQUIRED_MEMBER_FIELDS.items():
        if not (values.get(field_name) or "").strip():
            errors[field_name] = message

    email = (values.get("email") or "").strip()
    if email and not EMAIL_PATTERN.match(email):
        errors["email"] = "Invalid email address"

    password = values.get("password") or ""
    if password and len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

    phone = (values.get("phone") or "").strip()
    if phone and not PHONE_PATTERN.match(phone):
        errors["phone"] = "Phone number must be 10 digits starting with 0"

    return errors
