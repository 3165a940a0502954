"""
Buddy Underwriter - Deal Lifecycle & Readiness

Intake state machine, underwriting gate, and submission readiness scorer.

All decisions are pure functions. Persisting the resulting state is the
caller's job, and must use an atomic check-and-set on the stored stage.
"""

from core.lifecycle.intake_state import (
    IntakeState,
    INTAKE_TRANSITIONS,
    allowed_intake_transitions,
    can_transition_intake_state,
    is_terminal_intake_state,
    next_intake_state,
)
from core.lifecycle.checklist import (
    ChecklistItem,
    ChecklistProgress,
    checklist_progress,
    missing_required_titles,
)
from core.lifecycle.underwriting_gate import (
    DealLifecycleStage,
    UnderwritingGate,
    STAGE_NOT_READY_BLOCKER,
    build_underwriting_gate,
    build_underwriting_gate_from_checklist,
)
from core.lifecycle.readiness import (
    ReadinessLevel,
    SubmissionReadiness,
    compute_submission_readiness,
    readiness_level_for_score,
)

__all__ = [
    # Intake state machine
    "IntakeState",
    "INTAKE_TRANSITIONS",
    "allowed_intake_transitions",
    "can_transition_intake_state",
    "is_terminal_intake_state",
    "next_intake_state",
    # Checklist
    "ChecklistItem",
    "ChecklistProgress",
    "checklist_progress",
    "missing_required_titles",
    # Underwriting gate
    "DealLifecycleStage",
    "UnderwritingGate",
    "STAGE_NOT_READY_BLOCKER",
    "build_underwriting_gate",
    "build_underwriting_gate_from_checklist",
    # Submission readiness
    "ReadinessLevel",
    "SubmissionReadiness",
    "compute_submission_readiness",
    "readiness_level_for_score",
]
