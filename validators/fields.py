"""Reusable field rules shared by the request schemas."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator, StringConstraints

ALLOWED_EMAIL_TLDS = ("com", "net")

_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+-]+@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+([A-Za-z]{2,})$"
)


def _check_email(value: str) -> str:
    match = _EMAIL_PATTERN.match(value)
    if match is None or ".." in value:
        raise ValueError("Invalid email address")
    if match.group(1).lower() not in ALLOWED_EMAIL_TLDS:
        allowed = ", ".join(f".{tld}" for tld in ALLOWED_EMAIL_TLDS)
        raise ValueError(f"Email domain must end with one of: {allowed}")
    return value.lower()


Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]

Email = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=255),
    AfterValidator(_check_email),
]

Phone = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=10, max_length=15, pattern=r"^[0-9]+$"),
]

# Passwords are taken verbatim.
Password = Annotated[str, StringConstraints(min_length=6, max_length=255)]

ShortText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]
