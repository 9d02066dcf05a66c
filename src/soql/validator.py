"""Lexical safety checks for assembled SOQL.

The checks are textual only: required clauses, no data-modifying keywords, a bounded LIMIT. Clause
nesting, quoting and field existence are not checked here (the assembler already enforces them).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

MAX_LIMIT = 2000

FORBIDDEN_KEYWORDS: tuple[str, ...] = ("INSERT", "UPDATE", "DELETE", "DROP", "CREATE", "ALTER")

# A keyword only counts when it is not part of a longer identifier (`IsDeleted`, `CreatedDate`).
_FORBIDDEN_RES: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (kw, re.compile(rf"(?<![A-Za-z0-9_]){kw}(?![A-Za-z0-9_])", flags=re.IGNORECASE))
    for kw in FORBIDDEN_KEYWORDS
)
_LIMIT_VALUE_RE = re.compile(r"\bLIMIT\s+(\d+)", flags=re.IGNORECASE)


class ValidationError(ValueError):
    """Raised when an assembled query fails a lexical check."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: str | None = None


def _invalid(reason: str) -> ValidationResult:
    return ValidationResult(valid=False, reason=reason)


def validate(text: Any) -> ValidationResult:
    """Check `text` against the rule set; the first failing rule decides the reason."""

    if not isinstance(text, str) or not text.strip():
        return _invalid("missing query")

    upper = text.upper()
    if "SELECT " not in upper:
        return _invalid("missing SELECT clause")
    if " FROM " not in upper:
        return _invalid("missing FROM clause")

    for keyword, pattern in _FORBIDDEN_RES:
        if pattern.search(text):
            return _invalid(f"forbidden keyword: {keyword}")

    if " LIMIT " not in upper:
        return _invalid("missing LIMIT clause")

    match = _LIMIT_VALUE_RE.search(text)
    raw_limit = match.group(1) if match else ""
    if not raw_limit:
        return _invalid("invalid LIMIT value")
    if int(raw_limit) > MAX_LIMIT:
        return _invalid("limit exceeds maximum")

    return ValidationResult(valid=True)


def ensure_valid(text: str) -> str:
    """Return `text` unchanged if it passes validation.

    Raises:
        ValidationError: With the failing rule's reason.
    """

    result = validate(text)
    if not result.valid:
        raise ValidationError(result.reason or "invalid query")
    return text
