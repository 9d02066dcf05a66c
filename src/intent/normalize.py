"""Text normalization for deterministic phrase matching."""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^0-9a-z_\-\s]+", flags=re.IGNORECASE)
_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize user text for phrase scanning.

    Normalization is intentionally conservative:
        - Lowercase.
        - Replace punctuation with spaces.
        - Collapse whitespace.

    "High-value" and "high value" stay distinct; phrase tables list the spellings they accept.
    """

    value = (text or "").strip().lower()

    # Normalize common unicode dashes to ASCII hyphen.
    value = value.replace("—", "-").replace("–", "-")

    value = _NON_WORD_RE.sub(" ", value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    return value


def contains_phrase(text: str, phrase: str) -> bool:
    """Whether `phrase` occurs in normalized `text` as whole words ("active" not in "inactive")."""

    return f" {phrase} " in f" {text} "
