"""Input validators. Each returns an error message, or None when valid."""

import os
import re
from urllib.parse import urlparse

from pfcli import TYPE_NAME_PATTERN
from pfcli.errors import ValidationError


def validate_url(text: str) -> str | None:
    try:
        parsed = urlparse(text.strip())
    except ValueError:
        return "Invalid URL, enter a full URL such as https://api.example.com/users"
    if not parsed.scheme or not parsed.netloc:
        return "Invalid URL, enter a full URL such as https://api.example.com/users"
    return None


def validate_type_name(text: str) -> str | None:
    if re.fullmatch(TYPE_NAME_PATTERN, text):
        return None
    return "Type name must start with a letter and contain only letters and digits"


def validate_directory(text: str) -> str | None:
    if text and os.path.isdir(os.path.expanduser(text)):
        return None
    return "Path does not exist, enter an existing directory"


def require_valid(validator, value: str) -> str:
    """Raise ValidationError when validator rejects value."""
    problem = validator(value)
    if problem is not None:
        raise ValidationError(f"{problem}: {value!r}")
    return value
