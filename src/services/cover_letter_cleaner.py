"""Best-effort cleanup of LLM-written cover letters before they are emailed.

Small models often wrap the letter in a preamble, leave template
placeholders like ``[Company Name]``, or invent employers and places.
``clean_cover_letter`` strips what it can recognise and leaves the rest.
"""

import re

_BRACKETED = re.compile(r"\[.*?\]")
_LEADING_SALUTATION = re.compile(r"^\s*Dear\s+Hiring\s+Manager,?\s*\n?", re.IGNORECASE)

# Case-sensitive: the capitalised groups are what mark an invented proper noun
_INVENTED_DETAILS = [
    re.compile(r"NPL Construction \(S4\)"),
    re.compile(r"position at [A-Z][a-zA-Z\s&]+\s+in\s+[A-Z][a-zA-Z\s,]+"),
    re.compile(r"at [A-Z][a-zA-Z\s&]+ in [A-Z][a-zA-Z\s,]+"),
    re.compile(r"Berlin, Connecticut"),
    re.compile(r"Mr\.\s+Christopher\s+McGee"),
]
INVENTED_DETAIL_REPLACEMENT = "the position"

# Lines containing any of these are preamble or template instructions
_PREAMBLE_PHRASES = (
    "here's a draft of a cover letter",
    "draft of a cover letter tailored to",
    "incorporating his profile",
    "incorporating her profile",
    "aiming for a formal and professional tone",
    "---",
    "your address - optional",
    "mr./ms./mx. hiring manager",
    "if known, otherwise use",
    "as advertised",
    "where you saw the job posting",
    "platform where you saw",
    "e.g., linkedin",
    "e.g., matlab",
    "e.g., simul",
)

# Short template labels, dropped only when they are the whole line
_TEMPLATE_LABELS = {
    "date",
    "hiring manager name",
    "company name",
    "company address",
}


def _is_template_line(stripped: str) -> bool:
    lowered = stripped.lower()
    if any(phrase in lowered for phrase in _PREAMBLE_PHRASES):
        return True
    if lowered.rstrip(":").strip() in _TEMPLATE_LABELS:
        return True
    if stripped and all(c in "- " for c in stripped):
        return True
    return "[" in stripped or "]" in stripped


def clean_cover_letter(text: str) -> str:
    if not text:
        return text

    result = _BRACKETED.sub("", text)
    result = _LEADING_SALUTATION.sub("", result)
    for pattern in _INVENTED_DETAILS:
        result = pattern.sub(INVENTED_DETAIL_REPLACEMENT, result)

    kept: list[str] = []
    for line in result.split("\n"):
        stripped = line.strip()
        if not kept and not stripped:
            continue
        if _is_template_line(stripped):
            continue
        kept.append(line)

    result = "\n".join(kept)
    while "\n\n\n" in result:
        result = result.replace("\n\n\n", "\n\n")
    result = _BRACKETED.sub("", result)
    while "  " in result:
        result = result.replace("  ", " ")

    result = result.rstrip()
    if result and not result.endswith((".", "!")):
        result += "."
    return result.strip()
