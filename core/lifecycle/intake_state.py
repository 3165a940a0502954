"""
Intake State Machine - Deal Intake Lifecycle

Enumerates the intake states a deal moves through from creation to
underwriting, and the transitions allowed between them.

States:
- CREATED: Deal record exists, no upload session yet
- UPLOAD_SESSION_READY: Borrower upload session issued
- UPLOADING: Documents are being uploaded
- UPLOAD_COMPLETE: All uploads finished
- INTAKE_RUNNING: Classification and extraction in progress
- READY_FOR_UNDERWRITE: Intake finished (terminal)
- FAILED: Intake failed, recoverable via a new upload session

The deal record owns the persisted state. This module only answers
whether a transition is legal.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Union


logger = logging.getLogger(__name__)


# =============================================================================
# Enums
# =============================================================================


class IntakeState(Enum):
    """Intake lifecycle state for a deal."""

    CREATED = "CREATED"
    UPLOAD_SESSION_READY = "UPLOAD_SESSION_READY"
    UPLOADING = "UPLOADING"
    UPLOAD_COMPLETE = "UPLOAD_COMPLETE"
    INTAKE_RUNNING = "INTAKE_RUNNING"
    READY_FOR_UNDERWRITE = "READY_FOR_UNDERWRITE"
    FAILED = "FAILED"

    @classmethod
    def from_string(cls, value: str) -> Optional["IntakeState"]:
        """Convert string to IntakeState, case-insensitive."""
        if not isinstance(value, str):
            return None
        normalised = value.upper().strip()
        for member in cls:
            if member.value == normalised:
                return member
        return None


StateLike = Union[IntakeState, str, None]


# =============================================================================
# Transition Table
# =============================================================================

# Forward edge listed first; FAILED is reachable from every non-terminal state
INTAKE_TRANSITIONS: Final[Mapping[IntakeState, tuple[IntakeState, ...]]] = MappingProxyType(
    {
        IntakeState.CREATED: (IntakeState.UPLOAD_SESSION_READY, IntakeState.FAILED),
        IntakeState.UPLOAD_SESSION_READY: (IntakeState.UPLOADING, IntakeState.FAILED),
        IntakeState.UPLOADING: (IntakeState.UPLOAD_COMPLETE, IntakeState.FAILED),
        IntakeState.UPLOAD_COMPLETE: (IntakeState.INTAKE_RUNNING, IntakeState.FAILED),
        IntakeState.INTAKE_RUNNING: (IntakeState.READY_FOR_UNDERWRITE, IntakeState.FAILED),
        IntakeState.READY_FOR_UNDERWRITE: (),
        IntakeState.FAILED: (IntakeState.UPLOAD_SESSION_READY,),
    }
)


def _coerce(state: StateLike) -> Optional[IntakeState]:
    if isinstance(state, IntakeState):
        return state
    if isinstance(state, str):
        return IntakeState.from_string(state)
    return None


# =============================================================================
# Transition Queries
# =============================================================================


def allowed_intake_transitions(state: StateLike) -> tuple[IntakeState, ...]:
    """
    Get the states reachable in one step from the given state.

    Unknown states have no transitions.
    """
    current = _coerce(state)
    if current is None:
        return ()
    return INTAKE_TRANSITIONS.get(current, ())


def can_transition_intake_state(from_state: StateLike, to_state: StateLike) -> bool:
    """
    Check whether an intake transition is legal.

    Args:
        from_state: Current intake state (enum member or tag)
        to_state: Requested intake state (enum member or tag)

    Returns:
        True if to_state is in the transition set for from_state.
        Unknown states on either side return False.
    """
    target = _coerce(to_state)
    if target is None:
        logger.debug("Unknown target intake state: %r", to_state)
        return False

    allowed = target in allowed_intake_transitions(from_state)
    if not allowed:
        logger.debug("Illegal intake transition %r -> %r", from_state, to_state)
    return allowed


def next_intake_state(state: StateLike) -> Optional[IntakeState]:
    """Get the next state on the linear path, or None if there is none."""
    allowed = allowed_intake_transitions(state)
    if not allowed:
        return None
    return allowed[0]


def is_terminal_intake_state(state: StateLike) -> bool:
    """Check if a known state has no outgoing transitions."""
    current = _coerce(state)
    return current is not None and not INTAKE_TRANSITIONS[current]
