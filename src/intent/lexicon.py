"""Business term lexicon.

Maps informal phrases ("customers", "deals", "urgent") to canonical Salesforce tokens (object
names, status values, industries and priorities). The lexicon is advisory: phrases it does not know
are returned unchanged rather than rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class TermCategory(StrEnum):
    """Which synonym group a lexicon phrase belongs to."""

    object = "object"
    status = "status"
    industry = "industry"
    priority = "priority"


OBJECT_SYNONYMS: dict[str, tuple[str, ...]] = {
    "Account": ("account", "accounts", "customer", "customers", "companies", "organizations"),
    "Contact": ("contact", "contacts", "people", "individuals"),
    "Lead": ("lead", "leads", "prospects"),
    "Opportunity": ("opportunity", "opportunities", "deals", "sales"),
    "Case": ("case", "cases", "support", "tickets"),
    "Task": ("task", "tasks", "activities"),
    "Event": ("event", "events", "meetings", "appointments"),
}

STATUS_SYNONYMS: dict[str, tuple[str, ...]] = {
    "Active": ("active",),
    "Inactive": ("inactive",),
    "Open": ("open",),
    "Closed": ("closed",),
    "Won": ("won",),
    "Lost": ("lost",),
    "Pending": ("pending",),
    "Draft": ("draft",),
    "Submitted": ("submitted",),
    "Approved": ("approved",),
    "Rejected": ("rejected",),
}

INDUSTRY_SYNONYMS: dict[str, tuple[str, ...]] = {
    "Technology": ("technology", "tech", "software"),
    "Healthcare": ("healthcare", "medical"),
    "Financial Services": ("finance", "banking", "insurance"),
    "Manufacturing": ("manufacturing",),
    "Retail": ("retail",),
    "Education": ("education",),
    "Government": ("government",),
    "Non-Profit": ("nonprofit",),
}

PRIORITY_SYNONYMS: dict[str, tuple[str, ...]] = {
    "High": ("high", "urgent", "critical"),
    "Medium": ("medium", "normal"),
    "Low": ("low", "minor"),
}

_GROUPS: tuple[tuple[TermCategory, dict[str, tuple[str, ...]]], ...] = (
    (TermCategory.object, OBJECT_SYNONYMS),
    (TermCategory.status, STATUS_SYNONYMS),
    (TermCategory.industry, INDUSTRY_SYNONYMS),
    (TermCategory.priority, PRIORITY_SYNONYMS),
)


@dataclass(frozen=True)
class LexiconEntry:
    """One informal phrase mapped to its canonical token."""

    phrase: str
    token: str
    category: TermCategory


def _key(phrase: str) -> str:
    return " ".join((phrase or "").lower().split())


@dataclass(frozen=True)
class Lexicon:
    """Case-insensitive phrase → canonical token lookup."""

    entries: Mapping[str, LexiconEntry] = field(default_factory=dict)

    @classmethod
    def from_entries(cls, entries: list[LexiconEntry]) -> Lexicon:
        by_phrase: dict[str, LexiconEntry] = {}
        for entry in entries:
            key = _key(entry.phrase)
            if key in by_phrase:
                raise ValueError(f"duplicate lexicon phrase: {entry.phrase}")
            by_phrase[key] = entry
        return cls(entries=MappingProxyType(by_phrase))

    def lookup(self, phrase: str) -> LexiconEntry | None:
        return self.entries.get(_key(phrase))

    def resolve(self, phrase: str) -> str:
        """Return the canonical token for `phrase`, or `phrase` itself if it is unknown."""

        entry = self.lookup(phrase)
        return entry.token if entry is not None else phrase

    def category(self, phrase: str) -> TermCategory | None:
        entry = self.lookup(phrase)
        return entry.category if entry is not None else None


def default_lexicon() -> Lexicon:
    """Build the lexicon of built-in business terms."""

    return Lexicon.from_entries(
        [
            LexiconEntry(phrase=phrase, token=token, category=category)
            for category, synonyms in _GROUPS
            for token, phrases in synonyms.items()
            for phrase in phrases
        ]
    )
