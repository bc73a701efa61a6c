"""Validation of guestbook form submissions.

Checks run in a fixed order and the first failing one wins, so every kind of
malformed input maps to its own error message:

    content-type -> name present -> message present
    -> name length -> message length -> exact field set
"""

from typing import Any, Callable, List, Mapping, Optional, Tuple

from formhole.interfaces.validator import ISubmissionValidator, ValidationFailure

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
ALLOWED_FIELDS = ("name", "message")
MAX_NAME_LENGTH = 100
MAX_MESSAGE_LENGTH = 2000

Check = Callable[[Optional[str], Mapping[str, Any]], bool]


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def has_form_content_type(content_type: Optional[str], form: Mapping[str, Any]) -> bool:
    return bool(content_type) and FORM_CONTENT_TYPE in content_type


def has_name(content_type: Optional[str], form: Mapping[str, Any]) -> bool:
    return not _is_blank(form.get("name"))


def has_message(content_type: Optional[str], form: Mapping[str, Any]) -> bool:
    return not _is_blank(form.get("message"))


# Length limits apply to the value as received, before trimming
def name_within_limit(content_type: Optional[str], form: Mapping[str, Any]) -> bool:
    return len(form["name"]) <= MAX_NAME_LENGTH


def message_within_limit(content_type: Optional[str], form: Mapping[str, Any]) -> bool:
    return len(form["message"]) <= MAX_MESSAGE_LENGTH


def has_only_allowed_fields(content_type: Optional[str], form: Mapping[str, Any]) -> bool:
    fields = list(form.keys())
    return len(fields) == len(ALLOWED_FIELDS) and all(field in ALLOWED_FIELDS for field in fields)


CHECKS: List[Tuple[Check, ValidationFailure]] = [
    (
        has_form_content_type,
        ValidationFailure(
            message="Invalid request format. Expected URL-encoded data.",
            reason="Invalid Content-Type",
        ),
    ),
    (
        has_name,
        ValidationFailure(
            message="Validation Error: 'name' field is required and cannot be empty.",
            reason="Name is missing or empty",
        ),
    ),
    (
        has_message,
        ValidationFailure(
            message="Validation Error: 'message' field is required and cannot be empty.",
            reason="Message is missing or empty",
        ),
    ),
    (
        name_within_limit,
        ValidationFailure(
            message=f"Validation Error: 'name' field must be {MAX_NAME_LENGTH} characters or less.",
            reason="Name exceeds maximum length",
        ),
    ),
    (
        message_within_limit,
        ValidationFailure(
            message=f"Validation Error: 'message' field must be {MAX_MESSAGE_LENGTH} characters or less.",
            reason="Message exceeds maximum length",
        ),
    ),
    (
        has_only_allowed_fields,
        ValidationFailure(
            message="Validation Error: Only 'name' and 'message' fields are allowed.",
            reason="Unexpected fields received",
        ),
    ),
]


class SubmissionValidator(ISubmissionValidator):

    def __init__(self, checks: Optional[List[Tuple[Check, ValidationFailure]]] = None):
        self.checks = checks if checks is not None else CHECKS

    def validate(self, content_type: Optional[str], form: Mapping[str, Any]) -> Optional[ValidationFailure]:
        for check, failure in self.checks:
            if not check(content_type, form):
                return failure
        return None
