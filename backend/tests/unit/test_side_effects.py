"""Unit tests for best-effort post-commit actions."""

from lectorflow.domain.side_effects import (
    SideEffectOutcome,
    WorkflowOutcome,
    run_best_effort,
)


class TestRunBestEffort:
    """Test failure capture."""

    def test_success(self):
        calls = []
        outcome = run_best_effort("record", lambda: calls.append(1))
        assert outcome == SideEffectOutcome(name="record", succeeded=True)
        assert calls == [1]

    def test_failure_is_captured(self):
        """Exceptions are returned, not raised."""
        def boom():
            raise RuntimeError("store unavailable")

        outcome = run_best_effort("notify", boom, context={"submission_id": "s-1"})
        assert outcome.succeeded is False
        assert outcome.error == "store unavailable"


class TestWorkflowOutcome:
    """Test outcome aggregation."""

    def test_no_side_effects(self):
        outcome = WorkflowOutcome(value=42)
        assert outcome.side_effects_ok is True
        assert outcome.failed_side_effects() == []

    def test_failed_side_effect(self):
        failed = SideEffectOutcome(name="notify", succeeded=False, error="x")
        outcome = WorkflowOutcome(
            value={"success": True},
            side_effects=[SideEffectOutcome(name="audit", succeeded=True), failed],
        )
        assert outcome.value == {"success": True}
        assert outcome.side_effects_ok is False
        assert outcome.failed_side_effects() == [failed]
