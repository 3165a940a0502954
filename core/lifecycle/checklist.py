"""
Deal Checklist - Required Document Tracking

A deal's checklist is the set of borrower-supplied documents tracked per
deal. Required items without a received timestamp block underwriting.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Final, Iterable, Optional, Union


# Shown when a row has neither a title nor a checklist key
UNTITLED_DOCUMENT: Final = "Untitled document"

@dataclass(frozen=True)
class ChecklistItem:
    """
    A single checklist row for a deal.

    Mirrors the persisted checklist item: the key, an optional display
    title, whether it is required, and when it was received.
    """

    checklist_key: str
    title: Optional[str] = None
    required: bool = True
    received_at: Optional[Union[datetime, str]] = None

    @property
    def display_title(self) -> str:
        """Title shown to users, falling back to the checklist key."""
        return self.title or self.checklist_key or UNTITLED_DOCUMENT

    @property
    def is_received(self) -> bool:
        return bool(self.received_at)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChecklistItem":
        """
        Create an item from a database row.

        A null or absent required flag is treated as required.
        """
        required = data.get("required")
        return cls(
            checklist_key=str(data.get("checklist_key") or ""),
            title=data.get("title"),
            required=True if required is None else bool(required),
            received_at=data.get("received_at"),
        )

    def to_dict(self) -> dict:
        received_at = self.received_at
        if isinstance(received_at, datetime):
            received_at = received_at.isoformat()
        return {
            "checklist_key": self.checklist_key,
            "title": self.title,
            "required": self.required,
            "received_at": received_at,
        }


@dataclass(frozen=True)
class ChecklistProgress:
    """Received vs required counts for a deal checklist."""

    required: int
    received: int
    missing: tuple[str, ...]

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict:
        return {
            "required": self.required,
            "received": self.received,
            "missing": list(self.missing),
            "is_complete": self.is_complete,
        }


def missing_required_titles(items: Iterable[ChecklistItem]) -> tuple[str, ...]:
    """
    Get display titles of required items not yet received.

    Args:
        items: Checklist items for a deal

    Returns:
        Titles in input order
    """
    return tuple(
        item.display_title for item in items if item.required and not item.is_received
    )


def checklist_progress(items: Iterable[ChecklistItem]) -> ChecklistProgress:
    """Summarise how many required items have been received."""
    required_items = [item for item in items if item.required]
    received = sum(1 for item in required_items if item.is_received)
    return ChecklistProgress(
        required=len(required_items),
        received=received,
        missing=missing_required_titles(required_items),
    )
