"""
Submission Readiness - Final Package Readiness Verdict

Combines four independently produced results into one readiness verdict:
- Preflight result: {"passed": bool, "score": number}
- Forms validation: {"status": str}
- Credit narrative: any mapping, checked for emptiness only
- Document requirements: {"summary": {"required_missing": int}}

Unlike the underwriting gate, every failing condition is reported.
The score is the preflight score as given; it is not derived from the
other three results. Numeric strings (e.g. "92") are parsed; absent or
unparseable scores count as 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Mapping, Optional, Union


# =============================================================================
# Enums
# =============================================================================


class ReadinessLevel(Enum):
    """Readiness band derived from the preflight score."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


# =============================================================================
# Constants
# =============================================================================

# Lower bound (inclusive) for each band, highest first
READINESS_LEVEL_THRESHOLDS: Final[tuple[tuple[int, ReadinessLevel], ...]] = (
    (90, ReadinessLevel.EXCELLENT),
    (75, ReadinessLevel.GOOD),
    (50, ReadinessLevel.FAIR),
)

FORMS_READY_STATUS: Final = "READY"

PREFLIGHT_FAILED_BLOCKER: Final = "Preflight failed - resolve blocking issues"
FORMS_FAILED_BLOCKER: Final = "Forms validation failed - fix form errors"
NARRATIVE_MISSING_BLOCKER: Final = "Credit narrative not generated"


def missing_documents_blocker(count: Union[int, float]) -> str:
    if isinstance(count, float) and count.is_integer():
        count = int(count)
    return f"{count} required documents missing"


# =============================================================================
# Readiness Result
# =============================================================================


@dataclass(frozen=True)
class SubmissionReadiness:
    """Readiness verdict for final package assembly."""

    ready: bool
    blockers: tuple[str, ...]
    score: Union[int, float]
    readiness_level: ReadinessLevel

    def to_dict(self) -> dict:
        return {
            "ready": self.ready,
            "blockers": list(self.blockers),
            "score": self.score,
            "readiness_level": self.readiness_level.value,
        }


# =============================================================================
# Scoring
# =============================================================================


def readiness_level_for_score(score: Union[int, float]) -> ReadinessLevel:
    """Map a 0-100 score to its readiness band."""
    for threshold, level in READINESS_LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return ReadinessLevel.POOR


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _number(value: Any) -> Union[int, float]:
    """Numbers pass through; numeric strings are parsed; anything else is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0
        return parsed if math.isfinite(parsed) else 0
    return 0


def compute_submission_readiness(
    preflight: Optional[Mapping[str, Any]] = None,
    forms: Optional[Mapping[str, Any]] = None,
    narrative: Optional[Mapping[str, Any]] = None,
    requirements: Optional[Mapping[str, Any]] = None,
) -> SubmissionReadiness:
    """
    Compute submission readiness from the four sub-results.

    Missing sub-results count as not satisfied, except the document
    requirement count, which defaults to zero.

    Args:
        preflight: Preflight rule engine result
        forms: Forms validator result
        narrative: Generated credit narrative
        requirements: Requirement summariser result

    Returns:
        SubmissionReadiness with blockers in evaluation order
    """
    preflight_data = _as_mapping(preflight)
    forms_data = _as_mapping(forms)
    summary = _as_mapping(_as_mapping(requirements).get("summary"))

    blockers: list[str] = []

    if not preflight_data.get("passed"):
        blockers.append(PREFLIGHT_FAILED_BLOCKER)

    if forms_data.get("status") != FORMS_READY_STATUS:
        blockers.append(FORMS_FAILED_BLOCKER)

    required_missing = _number(summary.get("required_missing"))
    if required_missing > 0:
        blockers.append(missing_documents_blocker(required_missing))

    if not _as_mapping(narrative):
        blockers.append(NARRATIVE_MISSING_BLOCKER)

    score = _number(preflight_data.get("score"))

    return SubmissionReadiness(
        ready=not blockers,
        blockers=tuple(blockers),
        score=score,
        readiness_level=readiness_level_for_score(score),
    )
