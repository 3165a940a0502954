"""
Underwriting Gate - Pre-Underwriting Checks

Decides whether a deal may proceed to underwriting given its lifecycle
stage and the required documents still missing.

Rules are priority-ordered, first failure wins:
1. Lifecycle stage must be "collecting" or "ready"
2. No required documents may be missing

Only one category of blocker is reported per call. A deal at the wrong
stage is not also checked for missing documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Optional, Union

from core.lifecycle.checklist import ChecklistItem, missing_required_titles


logger = logging.getLogger(__name__)


# =============================================================================
# Enums
# =============================================================================


class DealLifecycleStage(Enum):
    """Coarse deal-level stage persisted on the deal record."""

    CREATED = "created"
    INTAKE = "intake"
    COLLECTING = "collecting"
    UNDERWRITING = "underwriting"
    READY = "ready"


# =============================================================================
# Constants
# =============================================================================

UNDERWRITING_ELIGIBLE_STAGES: Final[frozenset[str]] = frozenset(
    {DealLifecycleStage.COLLECTING.value, DealLifecycleStage.READY.value}
)

STAGE_NOT_READY_BLOCKER: Final = "Deal intake is not ready for underwriting yet."


# =============================================================================
# Gate Result
# =============================================================================


@dataclass(frozen=True)
class UnderwritingGate:
    """Outcome of the underwriting gate."""

    allowed: bool
    blockers: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "blockers": list(self.blockers),
        }


# =============================================================================
# Gate
# =============================================================================


def build_underwriting_gate(
    lifecycle_stage: Union[DealLifecycleStage, str, None],
    missing_required_titles: Optional[Iterable[str]] = None,
) -> UnderwritingGate:
    """
    Evaluate the underwriting gate for a deal.

    Args:
        lifecycle_stage: Persisted lifecycle stage (enum member or string)
        missing_required_titles: Titles of required documents not yet received

    Returns:
        UnderwritingGate with allowed flag and blockers
    """
    stage = lifecycle_stage.value if isinstance(lifecycle_stage, DealLifecycleStage) else lifecycle_stage

    if not isinstance(stage, str) or stage not in UNDERWRITING_ELIGIBLE_STAGES:
        logger.debug("Underwriting blocked at lifecycle stage %r", stage)
        return UnderwritingGate(allowed=False, blockers=(STAGE_NOT_READY_BLOCKER,))

    missing = tuple(missing_required_titles or ())
    if missing:
        logger.debug("Underwriting blocked by %d missing documents", len(missing))
        return UnderwritingGate(allowed=False, blockers=missing)

    return UnderwritingGate(allowed=True, blockers=())


def build_underwriting_gate_from_checklist(
    lifecycle_stage: Union[DealLifecycleStage, str, None],
    items: Iterable[ChecklistItem],
) -> UnderwritingGate:
    """Evaluate the gate with missing titles derived from checklist items."""
    return build_underwriting_gate(lifecycle_stage, missing_required_titles(items))
