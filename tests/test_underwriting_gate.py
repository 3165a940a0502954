"""
Tests for the Underwriting Gate and Checklist helpers

Tests cover:
- Stage check precedence over missing documents
- Missing document blockers
- Checklist-derived titles and progress
"""

import pytest
from datetime import datetime

from core.lifecycle import (
    ChecklistItem,
    DealLifecycleStage,
    STAGE_NOT_READY_BLOCKER,
    UnderwritingGate,
    build_underwriting_gate,
    build_underwriting_gate_from_checklist,
    checklist_progress,
    missing_required_titles,
)
from core.lifecycle.checklist import UNTITLED_DOCUMENT


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def checklist():
    """Checklist with two missing required items and one optional item."""
    return [
        ChecklistItem(checklist_key="IRS_BUSINESS_3Y", title="Business Tax Returns (3 years)"),
        ChecklistItem(
            checklist_key="PFS_CURRENT",
            title="Personal Financial Statement",
            received_at=datetime(2026, 3, 1, 12, 0),
        ),
        ChecklistItem(checklist_key="RENT_ROLL"),
        ChecklistItem(checklist_key="BANK_STMT_12M", title="Bank Statements", required=False),
    ]


# =============================================================================
# Gate Rules
# =============================================================================


class TestStageRule:
    """Lifecycle stage is checked first."""

    def test_stage_blocker_wins_over_missing_documents(self):
        gate = build_underwriting_gate("submitted", ["Tax Return"])

        assert gate == UnderwritingGate(
            allowed=False,
            blockers=("Deal intake is not ready for underwriting yet.",),
        )

    @pytest.mark.parametrize("stage", ["created", "intake", "underwriting", "", "READY", None])
    def test_ineligible_stages_blocked(self, stage):
        gate = build_underwriting_gate(stage, [])

        assert not gate.allowed
        assert gate.blockers == (STAGE_NOT_READY_BLOCKER,)

    def test_non_string_stage_blocked(self):
        gate = build_underwriting_gate(["ready"], [])
        assert not gate.allowed


class TestMissingDocumentsRule:
    """Missing documents are checked once the stage is eligible."""

    @pytest.mark.parametrize("stage", ["collecting", "ready", DealLifecycleStage.READY])
    def test_missing_titles_reported_in_order(self, stage):
        gate = build_underwriting_gate(stage, ["Tax Return", "Rent Roll"])

        assert not gate.allowed
        assert gate.blockers == ("Tax Return", "Rent Roll")

    def test_ready_with_nothing_missing_is_allowed(self):
        gate = build_underwriting_gate("ready", [])

        assert gate.allowed
        assert gate.blockers == ()
        assert gate.to_dict() == {"allowed": True, "blockers": []}

    def test_none_titles_treated_as_empty(self):
        assert build_underwriting_gate("collecting", None).allowed

    def test_titles_from_generator(self):
        gate = build_underwriting_gate("collecting", (t for t in ["A"]))
        assert gate.blockers == ("A",)


# =============================================================================
# Checklist
# =============================================================================


class TestChecklist:
    """Tests for checklist-derived titles and progress."""

    def test_missing_required_titles(self, checklist):
        assert missing_required_titles(checklist) == (
            "Business Tax Returns (3 years)",
            "RENT_ROLL",
        )

    def test_progress(self, checklist):
        progress = checklist_progress(checklist)

        assert progress.required == 3
        assert progress.received == 1
        assert not progress.is_complete
        assert progress.to_dict()["missing"] == ["Business Tax Returns (3 years)", "RENT_ROLL"]

    def test_from_dict_row(self):
        item = ChecklistItem.from_dict(
            {"checklist_key": "PFS_CURRENT", "required": True, "received_at": "2026-03-01T12:00:00Z"}
        )

        assert item.display_title == "PFS_CURRENT"
        assert item.is_received

    @pytest.mark.parametrize("row", [
        {"checklist_key": "K", "required": None},
        {"checklist_key": "K"},
    ])
    def test_from_dict_unknown_required_flag_is_required(self, row):
        item = ChecklistItem.from_dict(row)

        assert item.required is True
        assert missing_required_titles([item]) == ("K",)
        assert not build_underwriting_gate_from_checklist("ready", [item]).allowed

    def test_from_dict_explicit_optional_flag(self):
        item = ChecklistItem.from_dict({"checklist_key": "K", "required": False})
        assert item.required is False
        assert missing_required_titles([item]) == ()

    def test_untitled_row_gets_placeholder_title(self):
        item = ChecklistItem.from_dict({"required": True})

        assert item.display_title == UNTITLED_DOCUMENT
        gate = build_underwriting_gate_from_checklist("collecting", [item])
        assert gate.blockers == (UNTITLED_DOCUMENT,)

    def test_to_dict_serialises_datetime(self):
        item = ChecklistItem(checklist_key="K", received_at=datetime(2026, 3, 1))
        assert item.to_dict()["received_at"] == "2026-03-01T00:00:00"

    def test_gate_from_checklist_matches_gate_from_titles(self, checklist):
        derived = build_underwriting_gate_from_checklist("ready", checklist)
        direct = build_underwriting_gate("ready", missing_required_titles(checklist))

        assert derived == direct
        assert not derived.allowed

    def test_gate_from_checklist_stage_still_wins(self, checklist):
        gate = build_underwriting_gate_from_checklist("intake", checklist)
        assert gate.blockers == (STAGE_NOT_READY_BLOCKER,)

    def test_gate_from_complete_checklist(self):
        items = [ChecklistItem(checklist_key="K", received_at="2026-01-01")]
        assert build_underwriting_gate_from_checklist("collecting", items).allowed
