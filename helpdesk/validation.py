"""Request validation for support queries."""

from enum import Enum
from typing import Any

from pydantic import BaseModel

MIN_QUESTION_LENGTH = 3
MAX_QUESTION_LENGTH = 500


class ValidationErrorKind(str, Enum):
    MISSING = "missing"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"


ERROR_MESSAGES = {
    ValidationErrorKind.MISSING: "Question is required and must be a string",
    ValidationErrorKind.TOO_SHORT: "Question is too short. Please provide more details.",
    ValidationErrorKind.TOO_LONG: f"Question is too long. Please keep it under {MAX_QUESTION_LENGTH} characters.",
}


class QueryValidationError(ValueError):
    def __init__(self, kind: ValidationErrorKind):
        self.kind = kind
        self.message = ERROR_MESSAGES[kind]
        super().__init__(self.message)


class QueryRequest(BaseModel):
    question: str


def parse_query_request(payload: Any) -> QueryRequest:
    """
    Validate a raw query body into a QueryRequest.

    The minimum length applies to the trimmed question, the maximum to the
    question as submitted.
    """
    question = payload.get("question") if isinstance(payload, dict) else None

    if not question or not isinstance(question, str):
        raise QueryValidationError(ValidationErrorKind.MISSING)

    trimmed = question.strip()
    if len(trimmed) < MIN_QUESTION_LENGTH:
        raise QueryValidationError(ValidationErrorKind.TOO_SHORT)

    if len(question) > MAX_QUESTION_LENGTH:
        raise QueryValidationError(ValidationErrorKind.TOO_LONG)

    return QueryRequest(question=trimmed)
