"""
Buddy Underwriter - Core Business Logic

Deal lifecycle decisions shared by the platform's route handlers:
1. Intake state machine (legal intake transitions)
2. Underwriting gate (stage first, then missing documents)
3. Submission readiness (aggregated blockers and readiness level)
"""

from .lifecycle import (
    IntakeState,
    INTAKE_TRANSITIONS,
    allowed_intake_transitions,
    can_transition_intake_state,
    is_terminal_intake_state,
    next_intake_state,
    ChecklistItem,
    ChecklistProgress,
    checklist_progress,
    missing_required_titles,
    DealLifecycleStage,
    UnderwritingGate,
    build_underwriting_gate,
    build_underwriting_gate_from_checklist,
    ReadinessLevel,
    SubmissionReadiness,
    compute_submission_readiness,
    readiness_level_for_score,
)

__all__ = [
    "IntakeState",
    "INTAKE_TRANSITIONS",
    "allowed_intake_transitions",
    "can_transition_intake_state",
    "is_terminal_intake_state",
    "next_intake_state",
    "ChecklistItem",
    "ChecklistProgress",
    "checklist_progress",
    "missing_required_titles",
    "DealLifecycleStage",
    "UnderwritingGate",
    "build_underwriting_gate",
    "build_underwriting_gate_from_checklist",
    "ReadinessLevel",
    "SubmissionReadiness",
    "compute_submission_readiness",
    "readiness_level_for_score",
]
