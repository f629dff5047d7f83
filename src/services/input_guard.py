"""Input screening for free-text fields sent to the cover letter endpoints."""

MAX_REQUEST_BODY_LENGTH = 50_000
MAX_FIELD_LENGTH = 5_000
DEFAULT_MAX_LENGTH = 10_000

SUSPICIOUS_PATTERNS = (
    "<script",
    "javascript:",
    "data:",
    "vbscript:",
    "onload=",
    "onerror=",
    "eval(",
    "settimeout(",
    "setinterval(",
)


def is_valid_input(text: str | None, max_length: int = DEFAULT_MAX_LENGTH) -> bool:
    """Reject blank, over-long, or script-like text (case-insensitive)."""
    if text is None or not text.strip():
        return False
    if len(text) > max_length:
        return False
    lowered = text.lower()
    return not any(pattern in lowered for pattern in SUSPICIOUS_PATTERNS)


def generic_error_message(operation: str) -> str:
    return (
        f"An error occurred while {operation}. "
        "Please try again later or contact support if the issue persists."
    )
