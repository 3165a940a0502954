"""
Deal Lifecycle Routes - JSON API for Lifecycle Decisions

Exposes the intake state machine, underwriting gate, and submission
readiness scorer to platform route handlers.

Negative verdicts are normal 200 responses. Only structurally invalid
request bodies are rejected (422).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from core.lifecycle import (
    ChecklistItem,
    IntakeState,
    INTAKE_TRANSITIONS,
    allowed_intake_transitions,
    build_underwriting_gate,
    build_underwriting_gate_from_checklist,
    can_transition_intake_state,
    compute_submission_readiness,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Router Setup
# =============================================================================

router = APIRouter(prefix="/lifecycle", tags=["lifecycle"])


# =============================================================================
# Request Models
# =============================================================================


class IntakeTransitionRequest(BaseModel):
    """Attempted intake transition."""
    from_state: Optional[str] = None
    to_state: Optional[str] = None


class ChecklistItemInput(BaseModel):
    """Checklist row as stored for a deal."""
    checklist_key: Optional[str] = None
    title: Optional[str] = None
    required: Optional[bool] = None
    received_at: Optional[str] = None


class UnderwritingGateRequest(BaseModel):
    """Inputs for the underwriting gate."""
    lifecycle_stage: Optional[str] = None
    missing_required_titles: List[str] = []
    checklist: Optional[List[ChecklistItemInput]] = None


class SubmissionReadinessRequest(BaseModel):
    """Sub-results for submission readiness."""
    preflight: Optional[Dict[str, Any]] = None
    forms: Optional[Dict[str, Any]] = None
    narrative: Optional[Dict[str, Any]] = None
    requirements: Optional[Dict[str, Any]] = None


# =============================================================================
# Intake State Machine
# =============================================================================


@router.get("/intake/states")
async def list_intake_states():
    """List intake states and the transition table."""
    return {
        "states": [state.value for state in IntakeState],
        "transitions": {
            state.value: [target.value for target in targets]
            for state, targets in INTAKE_TRANSITIONS.items()
        },
    }


@router.post("/intake/transition")
async def check_intake_transition(request_data: IntakeTransitionRequest):
    """Check whether an intake transition is legal."""
    allowed = can_transition_intake_state(request_data.from_state, request_data.to_state)
    if not allowed:
        logger.info(
            "Rejected intake transition %s -> %s",
            request_data.from_state,
            request_data.to_state,
        )
    return {
        "from_state": request_data.from_state,
        "to_state": request_data.to_state,
        "allowed": allowed,
        "allowed_next": [s.value for s in allowed_intake_transitions(request_data.from_state)],
    }


# =============================================================================
# Underwriting Gate
# =============================================================================


@router.post("/underwriting/gate")
async def underwriting_gate(request_data: UnderwritingGateRequest):
    """
    Evaluate the underwriting gate.

    When a checklist is supplied, missing titles are derived from it and
    missing_required_titles is ignored.
    """
    if request_data.checklist is not None:
        items = [ChecklistItem.from_dict(row.model_dump()) for row in request_data.checklist]
        gate = build_underwriting_gate_from_checklist(request_data.lifecycle_stage, items)
    else:
        gate = build_underwriting_gate(
            request_data.lifecycle_stage,
            request_data.missing_required_titles,
        )

    if not gate.allowed:
        logger.info(
            "Underwriting gate blocked at stage %s (%d blockers)",
            request_data.lifecycle_stage,
            len(gate.blockers),
        )
    return gate.to_dict()


# =============================================================================
# Submission Readiness
# =============================================================================


@router.post("/submission/readiness")
async def submission_readiness(request_data: SubmissionReadinessRequest):
    """Compute the submission readiness verdict."""
    readiness = compute_submission_readiness(
        preflight=request_data.preflight,
        forms=request_data.forms,
        narrative=request_data.narrative,
        requirements=request_data.requirements,
    )
    logger.info(
        "Submission readiness: ready=%s score=%s level=%s",
        readiness.ready,
        readiness.score,
        readiness.readiness_level.value,
    )
    return readiness.to_dict()
