"""
Checks a candidate sister record before it is accepted for display or
saved back to the data source.

All checks run (no short-circuit) so an editing form can show every
problem at once. Input arrives straight from a form or a JSON body, so
nothing about its shape is assumed: a missing or non-text field simply
counts as missing, and the function never raises.
"""

from collections.abc import Mapping

from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

from greetings.models.schemas import ValidationResult

_url_adapter = TypeAdapter(AnyUrl)

REQUIRED_FIELDS = (
    ("name", "Name is required"),
    ("greeting", "Greeting is required"),
    ("message", "Message is required"),
)


def _is_blank(value) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def is_valid_url(url: str) -> bool:
    """True if url is absolute: a scheme plus a host, or an opaque scheme like data:."""
    try:
        _url_adapter.validate_python(url)
    except ValidationError:
        return False
    return True


def validate_sister_data(candidate) -> ValidationResult:
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump()
    if not isinstance(candidate, Mapping):
        candidate = {}

    errors: list[str] = []

    for field_name, message in REQUIRED_FIELDS:
        if _is_blank(candidate.get(field_name)):
            errors.append(message)

    images = candidate.get("images")
    if isinstance(images, list):
        for index, url in enumerate(images, start=1):
            if not url or (isinstance(url, str) and url.strip() == ""):
                continue  # blank slots are allowed
            if not isinstance(url, str) or not is_valid_url(url):
                errors.append(f"Image URL {index} is not valid")

    return ValidationResult(valid=not errors, errors=errors)
