"""Error kinds surfaced to API callers."""
from __future__ import annotations

INVALID_OPERANDS_MESSAGE = "Both a and b must be numbers"
MALFORMED_JSON_MESSAGE = "Malformed JSON body"
# Detail of the HTTPException FastAPI raises when reading the request body fails
BODY_PARSE_ERROR_DETAIL = "There was an error parsing the body"


class InvalidInputError(Exception):
    """Raised when a calculation body does not carry two numeric operands.

    Mapped to HTTP 400 with body {"error": message}.
    """

    status_code = 400

    def __init__(self, message: str = INVALID_OPERANDS_MESSAGE, details: list | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_response(self) -> dict:
        return {"error": self.message}
